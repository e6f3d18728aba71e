"""Raw pass-through endpoints for browser clients that parse results themselves."""
import logging
from flask import Blueprint, Response, request

from judgment_search.api import dependencies
from judgment_search.errors import NetworkError

logger = logging.getLogger("api")

relay_bp = Blueprint('relay', __name__)


@relay_bp.route("/proxy", methods=["GET"])
def proxy_search():
    try:
        html = dependencies.get_relay().search(request.args.to_dict())
    except NetworkError as e:
        logger.error(f"Proxy Error: {e}")
        return Response(f"Error fetching results: {e}", status=500, mimetype='text/plain')
    return Response(html, mimetype='text/html')


@relay_bp.route("/proxy-pdf", methods=["GET"])
def proxy_pdf():
    pdf_url = request.args.get('url')
    if not pdf_url:
        return Response('Missing URL parameter', status=400, mimetype='text/plain')
    try:
        upstream = dependencies.get_relay().fetch_document(pdf_url)
    except NetworkError as e:
        logger.error(f"PDF Proxy Error: {e}")
        return Response('Error fetching PDF', status=500, mimetype='text/plain')
    if not upstream.ok:
        logger.error(f"PDF Proxy Error: upstream HTTP {upstream.status_code}")
        return Response('Error fetching PDF', status=500, mimetype='text/plain')
    resp = Response(upstream.content, mimetype='application/pdf')
    resp.headers['Content-Disposition'] = 'inline'
    return resp
