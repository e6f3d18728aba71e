import base64
import json
import logging
from flask import Blueprint, Response, request
from flasgger import swag_from
from pydantic import ValidationError

from judgment_search.api import dependencies, models
from judgment_search.api.extensions import limiter
from judgment_search.documents.render import RENDER_ERROR_MESSAGE, iter_pages
from judgment_search.documents.session import DocumentSession, open_document
from judgment_search.errors import MalformedDocument, NetworkError, RenderFailure
from judgment_search.scraper.schemas import CaseRecord

logger = logging.getLogger("api")

documents_bp = Blueprint('documents', __name__)

_DOC_PARAMS = [
    {'name': 'url', 'in': 'query', 'type': 'string', 'required': True},
    {'name': 'title', 'in': 'query', 'type': 'string', 'required': False},
]


def _open():
    """Validate query args and open the document. Returns (session, request, error response)."""
    try:
        req = models.DocumentRequest(**request.args.to_dict())
    except ValidationError as ve:
        return None, None, dependencies.validation_error(ve.errors(include_context=False, include_url=False))
    record = CaseRecord(title=req.title or "Judgment", document_url=req.url)
    try:
        session = open_document(record, dependencies.get_relay())
    except (NetworkError, MalformedDocument) as e:
        return None, None, dependencies.pipeline_error(e)
    return session, req, None


@documents_bp.route("/api/document", methods=["GET"])
@limiter.limit("30/minute")
@swag_from({
    'tags': ['documents'],
    'parameters': _DOC_PARAMS + [
        {'name': 'disposition', 'in': 'query', 'type': 'string', 'enum': ['inline', 'attachment']},
    ],
    'produces': ['application/pdf'],
    'responses': {200: {'description': 'Stamped PDF'},
                  422: {'description': 'Upstream did not return a PDF'},
                  502: {'description': 'Upstream unavailable'}}
})
def get_document():
    session, req, err = _open()
    if err is not None:
        return err
    with session:
        if req.disposition == 'attachment':
            data, filename, disposition = session.download_payload()
        else:
            data, filename, disposition = session.print_payload()
    resp = Response(data, mimetype='application/pdf')
    resp.headers['Content-Disposition'] = f'{disposition}; filename="{filename}"'
    return resp


def _page_lines(session: DocumentSession, scale):
    count = 0
    try:
        for page in iter_pages(session.buffer, scale=scale):
            count += 1
            yield json.dumps({
                "index": page.index,
                "width": page.width,
                "height": page.height,
                "png_base64": base64.b64encode(page.png).decode('ascii'),
            }) + "\n"
    except RenderFailure as e:
        logger.error(f"[api] render failed after {count} pages: {e}")
        yield json.dumps({"error": "render_failed", "message": RENDER_ERROR_MESSAGE}) + "\n"
        return
    yield json.dumps({"done": True, "pages": count}) + "\n"


@documents_bp.route("/api/document/pages", methods=["GET"])
@limiter.limit("30/minute")
@swag_from({
    'tags': ['documents'],
    'parameters': _DOC_PARAMS + [{'name': 'scale', 'in': 'query', 'type': 'number'}],
    'produces': ['application/x-ndjson'],
    'responses': {200: {'description': 'One JSON line per rendered page, then a terminal line'}}
})
def get_document_pages():
    session, req, err = _open()
    if err is not None:
        return err
    resp = Response(_page_lines(session, req.scale), mimetype='application/x-ndjson')
    # Runs whether or not the body is ever iterated.
    resp.call_on_close(session.close)
    return resp
