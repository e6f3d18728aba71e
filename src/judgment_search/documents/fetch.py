"""Document retrieval and PDF signature validation.

Only the leading signature bytes are trusted; the advertised content type is
logged when suspicious but never used to accept or reject a document.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from judgment_search.documents.cancel import CancelToken, check
from judgment_search.errors import DocumentKind, MalformedDocument, NetworkError

logger = logging.getLogger(__name__)

PDF_SIGNATURE = b"%PDF-"
SNIFF_BYTES = 512
MARKUP_HEAD_BYTES = 16
_LEADING_JUNK = b" \t\r\n\x00\xef\xbb\xbf"


@dataclass(frozen=True)
class PdfBuffer:
    data: bytes
    source_url: str = ""
    content_type: Optional[str] = None

    def __len__(self) -> int:
        return len(self.data)


def has_pdf_signature(data: Optional[bytes]) -> bool:
    return bool(data) and data[:len(PDF_SIGNATURE)] == PDF_SIGNATURE


def classify_non_pdf(data: bytes) -> DocumentKind:
    head = data[:SNIFF_BYTES].lstrip(_LEADING_JUNK)[:MARKUP_HEAD_BYTES].lower()
    if head.startswith(b"<") or b"html" in head:
        return DocumentKind.HTML_ERROR_PAGE
    return DocumentKind.NOT_PDF


def validate_pdf(data: bytes, source_url: str = "", content_type: Optional[str] = None) -> PdfBuffer:
    if content_type:
        ct = content_type.lower()
        if "pdf" not in ct and "stream" not in ct:
            logger.warning(f"[fetch] document might not be a PDF: {content_type} ({source_url})")
    if not has_pdf_signature(data):
        kind = classify_non_pdf(data or b"")
        logger.error(f"[fetch] invalid PDF structure ({kind.value}); header={bytes(data[:5])!r} url={source_url}")
        raise MalformedDocument(kind, header=bytes(data[:SNIFF_BYTES]), url=source_url)
    return PdfBuffer(data=bytes(data), source_url=source_url, content_type=content_type)


def fetch_document(url: str, relay, cancel: Optional[CancelToken] = None) -> PdfBuffer:
    """Fetch ``url`` through the relay once and return a validated buffer."""
    check(cancel, "before fetch")
    response = relay.fetch_document(url)
    check(cancel, "after fetch")
    if not 200 <= response.status_code < 300:
        logger.error(f"[fetch] HTTP error {response.status_code} for {url}")
        raise NetworkError(f"HTTP error: {response.status_code}", status_code=response.status_code, url=url)
    buffer = validate_pdf(response.content, source_url=url, content_type=response.content_type)
    logger.info(f"[fetch] validated PDF ({len(buffer)} bytes) from {url}")
    return buffer


__all__ = ['PDF_SIGNATURE', 'PdfBuffer', 'has_pdf_signature', 'classify_non_pdf', 'validate_pdf', 'fetch_document']
