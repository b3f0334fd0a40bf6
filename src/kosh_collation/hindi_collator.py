# Path: src/kosh_collation/hindi_collator.py
from functools import cmp_to_key
from typing import Any, Callable, Iterable, List, Tuple

from pyuca import Collator

from .hindi_alphabet import HindiAlphabet
from .record_fields import FieldAccessor, get_field

__all__ = ["HindiCollator", "sort_by_hindi_word"]

HEADWORD_FIELD = "hindiWord"

_uca = Collator()


def _as_text(value: Any) -> str:
    if not value:
        return ""
    return str(value).strip()


def _lexical_compare(a: str, b: str) -> int:
    key_a, key_b = _uca.sort_key(a), _uca.sort_key(b)
    return (key_a > key_b) - (key_a < key_b)


class HindiCollator:
    """
    So sánh hai chuỗi theo thứ tự bảng chữ cái Hindi.

    Mỗi vòng lặp lấy grapheme dẫn đầu (anchor) của hai chuỗi, so thứ hạng,
    nếu bằng nhau thì bỏ phần đã dùng và tiếp tục với phần còn lại.
    Ký tự không thuộc Devanagari đứng trước anchor bị bỏ qua hoàn toàn.
    """

    def __init__(self, alphabet: HindiAlphabet | None = None):
        self.alphabet = alphabet or HindiAlphabet.default()

    def _find_anchor(self, text: str) -> int:
        for index, ch in enumerate(text):
            if self.alphabet.is_script_char(ch):
                return index
        return -1

    def _lead(self, text: str) -> Tuple[str, int] | None:
        anchor = self._find_anchor(text)
        if anchor < 0:
            return None
        grapheme = self.alphabet.lead_grapheme_at(text, anchor)
        return grapheme, anchor + len(grapheme)

    def compare(self, word1: Any, word2: Any) -> int:
        str1, str2 = _as_text(word1), _as_text(word2)

        if not str1 and not str2:
            return 0
        if not str1:
            return 1
        if not str2:
            return -1

        while True:
            lead1, lead2 = self._lead(str1), self._lead(str2)

            if lead1 is None and lead2 is None:
                return _lexical_compare(str1, str2)
            if lead1 is None:
                return 1
            if lead2 is None:
                return -1

            grapheme1, consumed1 = lead1
            grapheme2, consumed2 = lead2
            rank1 = self.alphabet.rank_of(grapheme1)
            rank2 = self.alphabet.rank_of(grapheme2)
            if rank1 != rank2:
                return rank1 - rank2

            str1 = str1[consumed1:].strip()
            str2 = str2[consumed2:].strip()
            if not str1 or not str2:
                # Chuỗi hết trước thì đứng trước
                return len(str1) - len(str2)

    def sort_key(self) -> Callable[[Any], Any]:
        return cmp_to_key(self.compare)

    def sort_by_key(self, entries: Iterable[Any], key: FieldAccessor = HEADWORD_FIELD) -> List[Any]:
        """Trả về danh sách mới đã sắp xếp; `sorted` ổn định nên thứ tự các mục bằng nhau được giữ nguyên."""

        def compare_entries(a, b) -> int:
            return self.compare(get_field(a, key) or "", get_field(b, key) or "")

        return sorted(entries, key=cmp_to_key(compare_entries))


def sort_by_hindi_word(entries: Iterable[Any], collator: HindiCollator | None = None) -> List[Any]:
    return (collator or HindiCollator()).sort_by_key(entries, HEADWORD_FIELD)
