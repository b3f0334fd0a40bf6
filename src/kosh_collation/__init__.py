# Path: src/kosh_collation/__init__.py
from .hindi_alphabet import DEFAULT_LETTERS, UNKNOWN_RANK, HindiAlphabet
from .hindi_collator import HindiCollator, sort_by_hindi_word
from .record_fields import get_field
from .special_index import extract_special_index, split_search_terms

__all__ = [
    "DEFAULT_LETTERS",
    "UNKNOWN_RANK",
    "HindiAlphabet",
    "HindiCollator",
    "extract_special_index",
    "get_field",
    "sort_by_hindi_word",
    "split_search_terms",
]
