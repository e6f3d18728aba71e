"""Page-by-page rasterization of PDF buffers.

Pages are rendered strictly one after another (page i+1 starts only after
page i's pixmap is complete) so at most one raster buffer is live at a time.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Callable, Iterator, List, Optional

import fitz  # PyMuPDF

from judgment_search.api import config, state
from judgment_search.documents.cancel import CancelToken, check
from judgment_search.documents.fetch import PdfBuffer
from judgment_search.errors import OperationCancelled, RenderFailure

logger = logging.getLogger(__name__)

RENDER_ERROR_MESSAGE = "Error loading PDF. Please try again."


@dataclass(frozen=True)
class RenderedPage:
    index: int
    width: int
    height: int
    png: bytes


def iter_pages(
    buffer: PdfBuffer,
    scale: Optional[float] = None,
    cancel: Optional[CancelToken] = None,
) -> Iterator[RenderedPage]:
    """Yield rendered pages in index order; raises ``RenderFailure`` on decode/raster errors."""
    scale = config.RENDER_SCALE if scale is None else scale
    check(cancel, "before decode")
    try:
        doc = fitz.open(stream=buffer.data, filetype="pdf")
    except Exception as e:
        raise RenderFailure(f"could not decode document: {e}") from e
    try:
        if doc.page_count == 0:
            raise RenderFailure("document has no pages")
        matrix = fitz.Matrix(scale, scale)
        for index in range(doc.page_count):
            check(cancel, f"page {index}")
            try:
                pix = doc.load_page(index).get_pixmap(matrix=matrix, alpha=False)
                page = RenderedPage(index=index, width=pix.width, height=pix.height, png=pix.tobytes("png"))
            except Exception as e:
                raise RenderFailure(f"could not render page {index}: {e}") from e
            state.inc(state.PAGES_RENDERED)
            yield page
    finally:
        doc.close()


@dataclass
class RenderArea:
    """Display area holding the pages of the open document."""
    pages: List[RenderedPage] = field(default_factory=list)
    error: Optional[str] = None

    def clear(self) -> None:
        self.pages = []
        self.error = None

    def render(
        self,
        buffer: PdfBuffer,
        scale: Optional[float] = None,
        on_page: Optional[Callable[[RenderedPage], None]] = None,
        cancel: Optional[CancelToken] = None,
    ) -> bool:
        """Replace the area's content with ``buffer``'s pages, revealing each as it completes.

        Returns False (and shows only an error indicator) when rendering fails.
        """
        self.clear()
        try:
            for page in iter_pages(buffer, scale=scale, cancel=cancel):
                self.pages.append(page)
                if on_page is not None:
                    on_page(page)
        except RenderFailure as e:
            logger.error(f"[render] {e}")
            self.pages = []
            self.error = RENDER_ERROR_MESSAGE
            return False
        except OperationCancelled:
            self.pages = []
            raise
        logger.info(f"[render] {len(self.pages)} pages at scale {scale or config.RENDER_SCALE}")
        return True


__all__ = ['RenderedPage', 'RenderArea', 'iter_pages', 'RENDER_ERROR_MESSAGE']
