# Path: src/kosh_listing/pagination.py
import math
from dataclasses import dataclass
from typing import Any, List, Sequence

__all__ = ["DEFAULT_LIMIT", "PageRequest", "PageSlice", "paginate"]

DEFAULT_LIMIT = 10


def _to_int(value: Any) -> int | None:
    if isinstance(value, bool):
        return None
    try:
        return int(str(value).strip())
    except (TypeError, ValueError):
        return None


@dataclass(frozen=True)
class PageRequest:
    page: int = 1
    limit: int = DEFAULT_LIMIT

    @property
    def skip(self) -> int:
        return (self.page - 1) * self.limit

    @classmethod
    def from_raw(
        cls,
        page: Any = None,
        limit: Any = None,
        default_limit: int = DEFAULT_LIMIT,
    ) -> "PageRequest":
        parsed_page = _to_int(page)
        if parsed_page is None or parsed_page < 1:
            parsed_page = 1

        parsed_limit = _to_int(limit)
        if parsed_limit is None or parsed_limit < 1:
            parsed_limit = default_limit
        return cls(page=parsed_page, limit=parsed_limit)


@dataclass(frozen=True)
class PageSlice:
    items: List[Any]
    current_page: int
    total_pages: int
    total: int


def paginate(items: Sequence[Any], page_request: PageRequest) -> PageSlice:
    total = len(items)
    start = page_request.skip
    return PageSlice(
        items=list(items[start:start + page_request.limit]),
        current_page=page_request.page,
        total_pages=math.ceil(total / page_request.limit),
        total=total,
    )
