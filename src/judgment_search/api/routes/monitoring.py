import os
import platform
from urllib.parse import urlparse
from flask import Blueprint, jsonify, Response

from judgment_search.api import config

monitoring_bp = Blueprint('monitoring', __name__)


@monitoring_bp.route("/metrics", methods=["GET"])
def metrics():
    from prometheus_client import generate_latest, CONTENT_TYPE_LATEST
    return Response(generate_latest(), mimetype=CONTENT_TYPE_LATEST)


@monitoring_bp.route("/version", methods=["GET"])
def version():
    return jsonify({
        "version": config.APP_VERSION,
        "env": config.APP_ENV,
        "commit": os.getenv("GIT_COMMIT"),
        "python": platform.python_version(),
        "upstream": config.SEARCH_URL,
    })


@monitoring_bp.route("/api/version", methods=["GET"])
def api_version():
    return version()


@monitoring_bp.route("/api/health/ready", methods=["GET"])
def health_ready():
    """Readiness probe - checks the upstream configuration is usable."""
    checks = {
        'search_url': urlparse(config.SEARCH_URL).scheme in ('http', 'https'),
        'site_root': urlparse(config.SITE_ROOT).scheme in ('http', 'https'),
        'render_scale': 0 < config.RENDER_SCALE <= config.MAX_RENDER_SCALE,
    }
    all_ready = all(checks.values())
    return jsonify({
        "ready": all_ready,
        "checks": checks
    }), 200 if all_ready else 503


@monitoring_bp.route("/api/health/live", methods=["GET"])
def health_live():
    """Liveness probe - minimal check that service is running."""
    return jsonify({"alive": True}), 200
