import logging
from typing import Any, Dict, Optional
from flask import jsonify

from judgment_search.errors import MalformedDocument, NetworkError
from judgment_search.relay import UpstreamRelay

logger = logging.getLogger("api")

_relay: Optional[Any] = None


def get_relay():
    """Process-wide upstream relay (created lazily; tests swap it with ``set_relay``)."""
    global _relay
    if _relay is None:
        _relay = UpstreamRelay()
    return _relay


def set_relay(relay) -> None:
    global _relay
    _relay = relay


def validation_error(details: Any):
    return jsonify({"error": "validation_failed", "details": details}), 400


def pipeline_error(exc: Exception):
    """Map pipeline exceptions onto JSON error responses."""
    if isinstance(exc, MalformedDocument):
        logger.warning(f"[api] malformed document: {exc}")
        body: Dict[str, Any] = {"error": "malformed_document", "kind": exc.kind.value, "message": exc.user_message}
        return jsonify(body), 422
    if isinstance(exc, NetworkError):
        logger.warning(f"[api] upstream failure: {exc}")
        return jsonify({"error": "network_error", "detail": str(exc), "upstream_status": exc.status_code}), 502
    raise exc
