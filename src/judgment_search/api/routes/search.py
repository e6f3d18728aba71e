from flask import Blueprint, request, jsonify
from flasgger import swag_from
from werkzeug.exceptions import BadRequest
from pydantic import ValidationError

from judgment_search.api import state, dependencies, models
from judgment_search.api.extensions import limiter
from judgment_search.errors import NetworkError
from judgment_search.scraper.extraction import extract

search_bp = Blueprint('search', __name__)


def _search_params():
    if request.method == "POST":
        raw = request.get_json(silent=True)
        if raw is None:
            raw = request.form.to_dict()
    else:
        raw = request.args.to_dict()
    if not isinstance(raw, dict):
        raise BadRequest("Body must be a JSON object")
    return raw


@search_bp.route("/api/search", methods=["GET", "POST"])
@limiter.limit("30/minute")
@swag_from({
    'tags': ['search'],
    'parameters': [{
        'name': 'body', 'in': 'body', 'required': False,
        'schema': {'type': 'object', 'additionalProperties': {'type': 'string'},
                   'properties': {'year': {'type': 'integer'}}}
    }],
    'responses': {200: {'description': 'Extracted case records'},
                  400: {'description': 'Invalid search form'},
                  502: {'description': 'Upstream unavailable'}}
})
def search_cases():
    raw = _search_params()
    try:
        models.SearchRequest(**raw)
    except ValidationError as ve:
        return dependencies.validation_error(ve.errors(include_context=False, include_url=False))

    try:
        markup = dependencies.get_relay().search(raw)
    except NetworkError as e:
        return dependencies.pipeline_error(e)

    result = extract(markup)
    state.inc(state.SEARCH_RESULTS, result.status.value)
    return jsonify({
        "status": result.status.value,
        "message": result.message,
        "count": len(result),
        "results": [r.model_dump() for r in result],
    })
