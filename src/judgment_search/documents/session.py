"""Open-document sessions.

``open_document`` drives fetch -> validate -> stamp for one chosen record and
returns a ``DocumentSession`` holding the stamped buffer. The session is the
single input for viewing, printing and downloading, so all three always see
the same bytes. Sessions are passed explicitly; there is no shared "current
document".
"""
from __future__ import annotations

import logging
import re
from datetime import datetime
from typing import Optional, Tuple

from judgment_search.api import config, state
from judgment_search.documents.cancel import CancelToken, check
from judgment_search.documents.fetch import PdfBuffer, fetch_document
from judgment_search.documents.render import RenderArea
from judgment_search.documents.stamp import stamp_footer
from judgment_search.errors import MalformedDocument, NetworkError, SessionClosed
from judgment_search.scraper.schemas import CaseRecord

logger = logging.getLogger(__name__)

_UNSAFE_NAME_RE = re.compile(r"[^a-zA-Z0-9]")
TITLE_FRAGMENT_LEN = 20

Payload = Tuple[bytes, str, str]


def download_filename(title: Optional[str], now: Optional[datetime] = None) -> str:
    now = now or datetime.now()
    name = config.DOWNLOAD_PREFIX
    fragment = _UNSAFE_NAME_RE.sub("", title or "")[:TITLE_FRAGMENT_LEN]
    if fragment:
        name += "_" + fragment
    return f"{name}_{int(now.timestamp() * 1000)}.pdf"


class DocumentSession:
    def __init__(self, title: str, url: str, buffer: PdfBuffer) -> None:
        self.title = title or "Judgment"
        self.url = url
        self._buffer: Optional[PdfBuffer] = buffer
        self.area = RenderArea()

    @property
    def closed(self) -> bool:
        return self._buffer is None

    @property
    def buffer(self) -> PdfBuffer:
        if self._buffer is None:
            raise SessionClosed(f"session for {self.url} is closed")
        return self._buffer

    def render(self, area: Optional[RenderArea] = None, scale: Optional[float] = None,
               on_page=None, cancel: Optional[CancelToken] = None) -> RenderArea:
        """Render the stamped buffer into ``area`` (the session's own area by default)."""
        area = self.area if area is None else area
        area.render(self.buffer, scale=scale, on_page=on_page, cancel=cancel)
        return area

    def download_filename(self, now: Optional[datetime] = None) -> str:
        return download_filename(self.title, now)

    def print_payload(self) -> Payload:
        return self.buffer.data, self.download_filename(), "inline"

    def download_payload(self, now: Optional[datetime] = None) -> Payload:
        return self.buffer.data, self.download_filename(now), "attachment"

    def close(self) -> None:
        self.area.clear()
        self._buffer = None

    def __enter__(self) -> "DocumentSession":
        return self

    def __exit__(self, *exc) -> None:
        self.close()


def open_document(
    record: CaseRecord,
    relay,
    cancel: Optional[CancelToken] = None,
    now: Optional[datetime] = None,
) -> DocumentSession:
    """Fetch, validate and stamp ``record``'s document.

    Raises ``NetworkError`` or ``MalformedDocument``; nothing is returned in
    that case, so there is never a half-open session.
    """
    try:
        original = fetch_document(record.document_url, relay, cancel=cancel)
    except NetworkError:
        state.inc(state.DOCUMENTS_OPENED, "network_error")
        raise
    except MalformedDocument as e:
        state.inc(state.DOCUMENTS_OPENED, e.kind.value)
        raise
    stamped = stamp_footer(original, now=now)
    check(cancel, "after stamp")
    state.inc(state.DOCUMENTS_OPENED, "ok")
    logger.info(f"[session] opened '{record.title}' ({len(stamped)} bytes)")
    return DocumentSession(title=record.title, url=record.document_url, buffer=stamped)


__all__ = ['CancelToken', 'DocumentSession', 'download_filename', 'open_document']
