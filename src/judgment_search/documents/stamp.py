"""Provenance footer stamping.

Every page gets one line of Helvetica text near the bottom-left corner:

    Printed on: 8 Sep 2025 3:07 PM | (C) Copyright to Sheikh Hamza

Stamping is best effort. Any failure (decode, font, serialization, or an output
that no longer starts with the PDF signature) is logged and the original
buffer is returned untouched, so print and download never depend on it.
"""
from __future__ import annotations

import logging
from datetime import datetime
from typing import Optional

import fitz  # PyMuPDF

from judgment_search.api import config, state
from judgment_search.documents.fetch import PdfBuffer, has_pdf_signature
from judgment_search.errors import StampingFailure

logger = logging.getLogger(__name__)

FOOTER_FONT = "helv"
FOOTER_COLOR = (0, 0, 0)


def footer_text(now: Optional[datetime] = None, attribution: Optional[str] = None) -> str:
    now = now or datetime.now()
    attribution = config.FOOTER_ATTRIBUTION if attribution is None else attribution
    hour = now.hour % 12 or 12
    meridiem = "AM" if now.hour < 12 else "PM"
    date_str = f"{now.day} {now:%b %Y}"
    time_str = f"{hour}:{now:%M} {meridiem}"
    return f"Printed on: {date_str} {time_str} | {attribution}"


def _draw_footer(data: bytes, text: str) -> bytes:
    with fitz.open(stream=data, filetype="pdf") as doc:
        if doc.page_count == 0:
            raise StampingFailure("document has no pages")
        for page in doc:
            origin = fitz.Point(config.FOOTER_X, page.rect.height - config.FOOTER_Y)
            page.insert_text(
                origin,
                text,
                fontsize=config.FOOTER_FONT_SIZE,
                fontname=FOOTER_FONT,
                color=FOOTER_COLOR,
            )
        return doc.tobytes(deflate=True)


def stamp_footer(
    buffer: PdfBuffer,
    now: Optional[datetime] = None,
    attribution: Optional[str] = None,
) -> PdfBuffer:
    """Return a stamped copy of ``buffer``, or ``buffer`` itself if stamping fails."""
    text = footer_text(now, attribution)
    try:
        stamped = _draw_footer(buffer.data, text)
    except Exception as e:
        logger.error(f"[stamp] footer failed, using original document: {e}")
        state.inc(state.STAMP_FAILURES)
        return buffer
    if not has_pdf_signature(stamped):
        logger.error(f"[stamp] stamped output lost PDF signature (header={stamped[:5]!r}); using original")
        state.inc(state.STAMP_FAILURES)
        return buffer
    logger.info(f"[stamp] footer applied ({len(buffer)} -> {len(stamped)} bytes)")
    return PdfBuffer(data=stamped, source_url=buffer.source_url, content_type="application/pdf")


__all__ = ['footer_text', 'stamp_footer']
