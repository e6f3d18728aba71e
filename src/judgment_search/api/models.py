from typing import Any, Literal, Optional
from urllib.parse import urlparse
from pydantic import BaseModel, ConfigDict, Field, field_validator

from judgment_search.api import config

YEAR_MIN = 1900
YEAR_MAX = 2099
YEAR_MESSAGE = f"Please enter a valid year between {YEAR_MIN} and {YEAR_MAX}"


class SearchRequest(BaseModel):
    """Search form. Unknown fields are accepted and forwarded upstream verbatim."""
    model_config = ConfigDict(extra='allow')

    year: Optional[int] = None

    @field_validator('year', mode='before')
    @classmethod
    def _check_year(cls, v: Any) -> Optional[int]:
        if v is None or (isinstance(v, str) and not v.strip()):
            return None
        try:
            year = int(v)
        except (TypeError, ValueError):
            raise ValueError(YEAR_MESSAGE)
        if not YEAR_MIN <= year <= YEAR_MAX:
            raise ValueError(YEAR_MESSAGE)
        return year


class DocumentRequest(BaseModel):
    url: str = Field(min_length=1, max_length=2048)
    title: str = Field(default="Judgment", max_length=500)
    disposition: Literal['inline', 'attachment'] = 'inline'
    scale: Optional[float] = Field(default=None, gt=0, le=config.MAX_RENDER_SCALE)

    @field_validator('url')
    @classmethod
    def _absolute_url(cls, v: str) -> str:
        parsed = urlparse(v)
        if parsed.scheme not in ('http', 'https') or not parsed.netloc:
            raise ValueError("url must be an absolute http(s) URL")
        return v
