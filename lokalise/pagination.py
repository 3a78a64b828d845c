"""Paging headers and page options."""

from __future__ import annotations

import re
from collections.abc import Mapping
from dataclasses import dataclass, field

from .serialization import JsonModel, json_field, to_query

HEADER_TOTAL_COUNT = "X-Pagination-Total-Count"
HEADER_PAGE_COUNT = "X-Pagination-Page-Count"
HEADER_LIMIT = "X-Pagination-Limit"
HEADER_PAGE = "X-Pagination-Page"

_INT_RE = re.compile(r"[+-]?[0-9]+")
_INT64_MIN, _INT64_MAX = -(2**63), 2**63 - 1


def header_int(headers: Mapping[str, str], key: str) -> int:
    """Return the header as an integer, or -1 if it is missing or malformed."""
    value = headers.get(key)
    if not value or not _INT_RE.fullmatch(value):
        return -1
    number = int(value)
    return number if _INT64_MIN <= number <= _INT64_MAX else -1


@dataclass
class Paged(JsonModel):
    """Paging state reported by response headers."""

    total_count: int = field(default=0)
    page_count: int = field(default=0)
    limit: int = field(default=0)
    page: int = field(default=0)

    @property
    def number_of_pages(self) -> int:
        return self.page_count

    @property
    def current_page(self) -> int:
        return self.page

    @classmethod
    def from_headers(cls, headers):
        paged = cls()
        paged.apply_headers(headers)
        return paged

    def apply_headers(self, headers) -> None:
        self.total_count = header_int(headers, HEADER_TOTAL_COUNT)
        self.page_count = header_int(headers, HEADER_PAGE_COUNT)
        self.limit = header_int(headers, HEADER_LIMIT)
        self.page = header_int(headers, HEADER_PAGE)


@dataclass
class PageOptions(JsonModel):
    """Page size and page number of a list request."""

    limit: int = json_field("limit", omitempty=True, default=0)
    page: int = json_field("page", omitempty=True, default=0)

    def to_query(self) -> dict[str, str]:
        return to_query(self)