# Path: src/kosh_collation/special_index.py
from typing import Any, Iterable, List, Set

from .record_fields import FieldAccessor, get_field

__all__ = ["SEARCH_FIELD", "extract_special_index", "split_search_terms"]

SEARCH_FIELD = "search"


def split_search_terms(value: Any) -> List[str]:
    if not isinstance(value, str) or not value.strip():
        return []
    return [term.strip() for term in value.split(",") if term.strip()]


def extract_special_index(entries: Iterable[Any], field: FieldAccessor = SEARCH_FIELD) -> List[str]:
    """
    Tạo vishesh_suchi: các từ khóa duy nhất lấy từ trường `search` của mọi mục.

    Sắp xếp theo thứ tự code point thông thường, không dùng HindiCollator.
    """
    seen_terms: Set[str] = set()
    for entry in entries:
        seen_terms.update(split_search_terms(get_field(entry, field)))
    return sorted(seen_terms)
