"""Text normalization and composite-field splitting for search result rows.

The case-number cell of a result row packs two values behind literal labels:

    Uploaded on : 08-SEP-25 From : High Court Division

Splitting is driven by an ordered label grammar (a sequence of ``FieldLabel``).
Each label is searched literally, after the previous label found; a field's
value runs up to the next found label or the end of the text. Labels that are
missing simply yield empty values, so a layout change upstream degrades to
blank fields instead of an exception.
"""
from __future__ import annotations
import re
from dataclasses import dataclass
from typing import Dict, List, Optional, Sequence, Tuple

NOISE_PATTERNS = [
    re.compile(r"[\"']?অনুবাদ\s*\(Google\)[\"']?", re.IGNORECASE),
    re.compile(r"[\"']?Translation\s*\(Google\)[\"']?", re.IGNORECASE),
]
MULTI_SPACE_RE = re.compile(r"\s{2,}")
ANY_SPACE_RE = re.compile(r"\s+")
LEADING_PUNCT_RE = re.compile(r"^[\s:\-]+")


@dataclass(frozen=True)
class FieldLabel:
    field: str
    label: str


DEFAULT_GRAMMAR: Tuple[FieldLabel, ...] = (
    FieldLabel("uploaded_on", "Uploaded on"),
    FieldLabel("from_court", "From"),
)


def normalize(text: Optional[str]) -> str:
    if not text:
        return ""
    for pat in NOISE_PATTERNS:
        text = pat.sub("", text)
    return MULTI_SPACE_RE.sub(" ", text).strip()


def collapse_whitespace(text: Optional[str]) -> str:
    if not text:
        return ""
    return ANY_SPACE_RE.sub(" ", text).strip()


def _locate(text: str, grammar: Sequence[FieldLabel]) -> List[Optional[int]]:
    positions: List[Optional[int]] = []
    cursor = 0
    for entry in grammar:
        idx = text.find(entry.label, cursor)
        if idx == -1:
            positions.append(None)
            continue
        positions.append(idx)
        cursor = idx + len(entry.label)
    return positions


def parse_fields(text: Optional[str], grammar: Sequence[FieldLabel] = DEFAULT_GRAMMAR) -> Dict[str, str]:
    """Split ``text`` into one value per grammar entry (empty when the label is absent)."""
    out = {entry.field: "" for entry in grammar}
    if not text:
        return out
    positions = _locate(text, grammar)
    for i, entry in enumerate(grammar):
        start = positions[i]
        if start is None:
            continue
        end = next((p for p in positions[i + 1:] if p is not None), len(text))
        segment = text[start + len(entry.label):end]
        out[entry.field] = normalize(LEADING_PUNCT_RE.sub("", segment))
    return out


def split_composite(text: Optional[str], grammar: Sequence[FieldLabel] = DEFAULT_GRAMMAR) -> Tuple[str, str]:
    """Return ``(uploaded_on, from_court)`` from a composite case-info blob."""
    fields = parse_fields(text, grammar)
    return fields.get("uploaded_on", ""), fields.get("from_court", "")


__all__ = [
    'FieldLabel', 'DEFAULT_GRAMMAR', 'normalize', 'collapse_whitespace', 'parse_fields', 'split_composite',
]

if __name__ == '__main__':
    sample = "Civil Appeal No. 12 of 2019 Uploaded on : 08-SEP-25 From : High Court Division"
    print(split_composite(sample))
