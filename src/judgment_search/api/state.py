import logging
from typing import Any

from prometheus_client import Counter

logger = logging.getLogger(__name__)

# HTTP metrics (assigned when the server module loads)
REQUEST_COUNT: Any = None
REQUEST_LATENCY: Any = None

# Pipeline metrics
SEARCH_RESULTS: Any = None
DOCUMENTS_OPENED: Any = None
STAMP_FAILURES: Any = None
PAGES_RENDERED: Any = None

try:
    SEARCH_RESULTS = Counter('judgment_search_search_results_total', 'Searches by extraction outcome', ['status'])
    DOCUMENTS_OPENED = Counter('judgment_search_documents_opened_total', 'Document opens by outcome', ['outcome'])
    STAMP_FAILURES = Counter('judgment_search_stamp_failures_total', 'Footer stamping fallbacks to the original PDF')
    PAGES_RENDERED = Counter('judgment_search_pages_rendered_total', 'Pages rasterized for display')
except ValueError:
    # Metrics might be already defined if reloaded
    pass


def inc(metric: Any, *labels: str) -> None:
    if metric is None:
        return
    try:
        (metric.labels(*labels) if labels else metric).inc()
    except Exception as e:
        logger.debug(f"[metrics] could not increment {getattr(metric, '_name', metric)} {labels}: {e}")
