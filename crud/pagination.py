"""Page/limit coercion and offset arithmetic for list endpoints."""
import math
import re
from typing import NamedTuple, Optional

DEFAULT_PAGE = 1
DEFAULT_LIMIT = 10
MAX_LIMIT = 100
# OFFSET is bound as a signed 64-bit integer by the store
MAX_OFFSET = 2**63 - 1

_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")


class PageRequest(NamedTuple):
    page: int
    limit: int

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.limit


def coerce_int(raw: Optional[str], default: int) -> int:
    """Read a lenient integer from query text.

    Leading digits are used ("3abc" -> 3). Missing, empty, non-numeric,
    zero and unparseably long values fall back to ``default``.
    """
    if raw is None:
        return default
    match = _LEADING_INT.match(raw)
    if match is None:
        return default
    try:
        value = int(match.group(1))
    except ValueError:
        return default
    return value or default


def resolve_page_request(raw_page: Optional[str], raw_limit: Optional[str]) -> PageRequest:
    limit = min(MAX_LIMIT, max(1, coerce_int(raw_limit, DEFAULT_LIMIT)))
    max_page = MAX_OFFSET // limit + 1
    page = min(max_page, max(1, coerce_int(raw_page, DEFAULT_PAGE)))
    return PageRequest(page=page, limit=limit)


def total_pages(total_count: int, limit: int) -> int:
    return math.ceil(total_count / limit)
