from flask_limiter import Limiter
from flask_limiter.util import get_remote_address
from judgment_search.api import config

limiter = Limiter(
    key_func=get_remote_address,
    default_limits=["120 per minute"],
    storage_uri=config.RATE_LIMIT_STORAGE_URI,
)
