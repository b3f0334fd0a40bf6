# Path: src/kosh_collation/record_fields.py
from collections.abc import Mapping
from typing import Any, Callable, Union

__all__ = ["FieldAccessor", "get_field"]

FieldAccessor = Union[str, Callable[[Any], Any]]


def get_field(entry: Any, field: FieldAccessor) -> Any:
    if callable(field):
        return field(entry)
    if isinstance(entry, Mapping):
        return entry.get(field)
    return getattr(entry, field, None)
