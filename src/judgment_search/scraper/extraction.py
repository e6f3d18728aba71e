"""Result extraction: search-response markup -> ordered ``CaseRecord`` list.

The upstream search page has no stable schema. Judgment links are recognised
by a ``.pdf`` reference in their raw ``href`` and interpreted through the
table row that owns them:

    cell 0: serial number
    cell 1: case number, title link, translation link, "Uploaded on", "From"
    cell 2: parties
    cell 3: short description

Rows with fewer than three cells and secondary translation links are dropped.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Iterator, List, Optional, Sequence
from urllib.parse import urlparse

from bs4 import BeautifulSoup
from pydantic import ValidationError

from judgment_search.api.config import DEFAULT_SITE, SiteConfig
from judgment_search.parsing.fields import collapse_whitespace, normalize, split_composite
from judgment_search.scraper.schemas import CaseRecord
from judgment_search.scraper.tree import child_elements, closest, has_attr, select_all, tag_is, text_of

logger = logging.getLogger(__name__)

PDF_MARKER = ".pdf"
PARENT_MARKER = "../"
BENGALI_TRANSLATION_MARKER = "অনুবাদ"
ENGLISH_TRANSLATION_MARKERS: Sequence[str] = ("translation", "google")
MIN_ROW_CELLS = 3
PARTIES_CELL = 2
CASE_INFO_CELL = 1

is_anchor = tag_is("a")
is_row = tag_is("tr")
is_cell = tag_is("td", "th")
references_pdf = has_attr("href", contains=PDF_MARKER)


class SearchStatus(str, Enum):
    OK = "ok"
    NO_RESULTS = "no_results"
    NO_VALID_RECORDS = "no_valid_records"


STATUS_MESSAGES = {
    SearchStatus.OK: "",
    SearchStatus.NO_RESULTS: "No judgments found matching your criteria.",
    SearchStatus.NO_VALID_RECORDS: "No valid records found after filtering.",
}


@dataclass
class ExtractionResult:
    records: List[CaseRecord] = field(default_factory=list)
    candidate_count: int = 0

    @property
    def status(self) -> SearchStatus:
        if self.candidate_count == 0:
            return SearchStatus.NO_RESULTS
        if not self.records:
            return SearchStatus.NO_VALID_RECORDS
        return SearchStatus.OK

    @property
    def message(self) -> str:
        return STATUS_MESSAGES[self.status]

    def __len__(self) -> int:
        return len(self.records)

    def __iter__(self) -> Iterator[CaseRecord]:
        return iter(self.records)


def is_translation_link(text: Optional[str]) -> bool:
    """Machine-translation links carry the Bengali marker, or both "translation" and "google"."""
    if not text:
        return False
    if BENGALI_TRANSLATION_MARKER in text:
        return True
    folded = text.casefold()
    return all(marker in folded for marker in ENGLISH_TRANSLATION_MARKERS)


def resolve_document_url(href: str, site: SiteConfig = DEFAULT_SITE) -> str:
    href = href.strip()
    # Any scheme-qualified href is absolute; CaseRecord rejects non-http schemes.
    if urlparse(href).scheme:
        return href
    if href.startswith("//"):
        return "https:" + href
    if href.startswith(PARENT_MARKER):
        return site.site_root.rstrip("/") + "/" + href[len(PARENT_MARKER):]
    return site.web_base.rstrip("/") + "/" + href.lstrip("/")


def _record_from_anchor(anchor, site: SiteConfig) -> Optional[CaseRecord]:
    href = anchor.get("href") or ""
    row = closest(anchor, is_row)
    cells = child_elements(row, is_cell) if row is not None else []
    if len(cells) < MIN_ROW_CELLS:
        logger.debug(f"[extract] drop {href!r}: no row or fewer than {MIN_ROW_CELLS} cells")
        return None

    raw_title = text_of(anchor).strip()
    if is_translation_link(raw_title):
        logger.debug(f"[extract] drop {href!r}: translation link")
        return None
    title = normalize(raw_title)
    if not title:
        logger.debug(f"[extract] drop {href!r}: empty title")
        return None

    parties = normalize(text_of(cells[PARTIES_CELL]))
    case_info = collapse_whitespace(text_of(cells[CASE_INFO_CELL]))
    uploaded_on, from_court = split_composite(case_info)

    try:
        return CaseRecord(
            title=title,
            parties=parties,
            uploaded_on=uploaded_on,
            from_court=from_court,
            document_url=resolve_document_url(href, site),
        )
    except ValidationError as ve:
        logger.debug(f"[extract] drop {href!r}: {ve.errors()}")
        return None


def extract(markup: Optional[str], site: SiteConfig = DEFAULT_SITE) -> ExtractionResult:
    """Parse a search response into case records, preserving source row order."""
    soup = BeautifulSoup(markup or "", "html.parser")
    candidates = [a for a in select_all(soup, is_anchor) if references_pdf(a)]
    result = ExtractionResult(candidate_count=len(candidates))
    for anchor in candidates:
        record = _record_from_anchor(anchor, site)
        if record is not None:
            result.records.append(record)
    logger.info(f"[extract] candidates={result.candidate_count} records={len(result.records)} status={result.status.value}")
    return result


__all__ = [
    'SearchStatus', 'ExtractionResult', 'extract', 'resolve_document_url', 'is_translation_link',
    'BENGALI_TRANSLATION_MARKER', 'ENGLISH_TRANSLATION_MARKERS',
]
