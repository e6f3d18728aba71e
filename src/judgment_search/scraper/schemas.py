"""Canonical record produced by result extraction."""
from __future__ import annotations
from urllib.parse import urlparse
from pydantic import BaseModel, Field, field_validator


class CaseRecord(BaseModel):
    title: str = Field(min_length=1)
    parties: str = ""
    uploaded_on: str = ""
    from_court: str = ""
    document_url: str

    @field_validator('document_url')
    @classmethod
    def _must_be_absolute(cls, v: str) -> str:
        parsed = urlparse(v)
        if parsed.scheme not in ('http', 'https') or not parsed.netloc:
            raise ValueError(f"document_url must be absolute, got {v!r}")
        return v


__all__ = ['CaseRecord']
