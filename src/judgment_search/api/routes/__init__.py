from judgment_search.api.routes.search import search_bp
from judgment_search.api.routes.documents import documents_bp
from judgment_search.api.routes.relay import relay_bp
from judgment_search.api.routes.monitoring import monitoring_bp

__all__ = ['search_bp', 'documents_bp', 'relay_bp', 'monitoring_bp']
