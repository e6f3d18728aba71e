"""Error taxonomy for the search and document pipeline.

Empty search outcomes (no results / no valid records) are not errors; see
``judgment_search.scraper.extraction.SearchStatus``.
"""
from __future__ import annotations

from enum import Enum
from typing import Optional


class JudgmentSearchError(Exception):
    """Base class for everything raised by the pipeline."""


class NetworkError(JudgmentSearchError):
    """Transport failure or non-2xx response from the upstream site."""

    def __init__(self, message: str, status_code: Optional[int] = None, url: Optional[str] = None) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.url = url


class DocumentKind(str, Enum):
    HTML_ERROR_PAGE = "html_error_page"
    NOT_PDF = "not_pdf"


USER_MESSAGES = {
    DocumentKind.HTML_ERROR_PAGE: "The requested document is not available properly (Source returned HTML error).",
    DocumentKind.NOT_PDF: "The source file is not a valid PDF.",
}


class MalformedDocument(JudgmentSearchError):
    """Fetched bytes do not carry the PDF signature."""

    def __init__(self, kind: DocumentKind, header: bytes = b"", url: Optional[str] = None) -> None:
        super().__init__(f"{kind.value}: leading bytes {header[:16]!r}")
        self.kind = kind
        self.header = header
        self.url = url

    @property
    def user_message(self) -> str:
        return USER_MESSAGES[self.kind]


class StampingFailure(JudgmentSearchError):
    """Footer annotation could not be applied. Never leaves the stamper."""


class RenderFailure(JudgmentSearchError):
    """PDF decode or rasterization failed."""


class OperationCancelled(JudgmentSearchError):
    """A cancellation token was triggered while work was in flight."""


class SessionClosed(JudgmentSearchError):
    """A document session was used after it was closed."""


__all__ = [
    'JudgmentSearchError', 'NetworkError', 'DocumentKind', 'MalformedDocument',
    'StampingFailure', 'RenderFailure', 'OperationCancelled', 'SessionClosed',
]
