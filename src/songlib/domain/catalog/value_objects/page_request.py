"""Offset/limit paging with lenient input handling."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

DEFAULT_PAGE = 1
DEFAULT_LIST_LIMIT = 10
DEFAULT_VERSE_LIMIT = 1

# Largest value a signed 64-bit SQL integer column or OFFSET/LIMIT accepts
MAX_SQL_INTEGER = 2**63 - 1


def _coerce_positive(raw: Any, default: int) -> int:
    """Return raw as a positive int, or default when it is not one.

    Values beyond MAX_SQL_INTEGER count as invalid.
    """
    if raw is None or isinstance(raw, bool):
        return default
    if isinstance(raw, int):
        value = raw
    else:
        try:
            value = int(str(raw).strip())
        except ValueError:
            return default
    return value if 1 <= value <= MAX_SQL_INTEGER else default


@dataclass(frozen=True)
class PageRequest:
    """A 1-based page number and page size.

    Invalid values (non-numeric, zero, negative, out of range) are replaced with the
    defaults instead of being rejected.
    """

    page: int = DEFAULT_PAGE
    limit: int = DEFAULT_LIST_LIMIT

    @classmethod
    def from_raw(
        cls,
        page: Any = None,
        limit: Any = None,
        default_limit: int = DEFAULT_LIST_LIMIT,
    ) -> PageRequest:
        return cls(
            page=_coerce_positive(page, DEFAULT_PAGE),
            limit=_coerce_positive(limit, default_limit),
        )

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.limit
