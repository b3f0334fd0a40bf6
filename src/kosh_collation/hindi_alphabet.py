# Path: src/kosh_collation/hindi_alphabet.py
"""Bảng chữ cái Devanagari dùng làm thứ tự sắp xếp cho Kosh."""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Dict, Iterable, Mapping, Tuple

__all__ = ["DEFAULT_LETTERS", "UNKNOWN_RANK", "HindiAlphabet"]

UNKNOWN_RANK = 9999

DEVANAGARI_START = 0x0900
DEVANAGARI_END = 0x097F

VOWELS = ("अ", "आ", "इ", "ई", "उ", "ऊ", "ऋ", "ए", "ऐ", "ओ", "औ", "अं", "अः")
CONSONANTS = (
    "क", "ख", "ग", "घ", "ङ",
    "च", "छ", "ज", "झ", "ञ",
    "ट", "ठ", "ड", "ढ", "ण",
    "त", "थ", "द", "ध", "न",
    "प", "फ", "ब", "भ", "म",
    "य", "र", "ल", "व",
    "श", "ष", "स", "ह",
)
CONJUNCTS = ("क्ष", "त्र", "ज्ञ")

DEFAULT_LETTERS: Tuple[str, ...] = VOWELS + CONSONANTS + CONJUNCTS


@dataclass(frozen=True)
class HindiAlphabet:
    """
    Bảng thứ hạng bất biến: mỗi grapheme (một ký tự hoặc một cụm ghép như
    "क्ष") có thứ hạng duy nhất 0..N-1. Grapheme không có trong bảng nhận
    thứ hạng `unknown_rank`, luôn lớn hơn mọi thứ hạng thật.
    """

    letters: Tuple[str, ...] = DEFAULT_LETTERS
    unknown_rank: int = UNKNOWN_RANK
    _ranks: Mapping[str, int] = field(init=False, repr=False, compare=False)
    _compounds: Tuple[str, ...] = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        letters = tuple(self.letters)
        if not letters:
            raise ValueError("Bảng chữ cái không được rỗng.")

        ranks: Dict[str, int] = {}
        for index, letter in enumerate(letters):
            if not isinstance(letter, str) or not letter:
                raise ValueError(f"Mục thứ {index} trong bảng chữ cái không hợp lệ: {letter!r}")
            if letter in ranks:
                raise ValueError(f"Ký tự '{letter}' bị lặp lại trong bảng chữ cái.")
            ranks[letter] = index

        if not isinstance(self.unknown_rank, int) or self.unknown_rank <= len(letters) - 1:
            raise ValueError(
                f"unknown_rank ({self.unknown_rank}) phải lớn hơn thứ hạng lớn nhất ({len(letters) - 1})."
            )

        # Cụm dài nhất được thử trước
        compounds = sorted((letter for letter in letters if len(letter) > 1), key=len, reverse=True)

        object.__setattr__(self, "letters", letters)
        object.__setattr__(self, "_ranks", MappingProxyType(ranks))
        object.__setattr__(self, "_compounds", tuple(compounds))

    @classmethod
    def default(cls) -> "HindiAlphabet":
        return cls()

    @classmethod
    def from_config(cls, collation_config: Dict[str, Any] | None) -> "HindiAlphabet":
        """Tạo bảng từ mục `collation` của file cấu hình YAML."""
        collation_config = collation_config or {}
        letters: Iterable[str] = collation_config.get("alphabet") or DEFAULT_LETTERS
        unknown_rank = collation_config.get("unknown-rank", UNKNOWN_RANK)
        return cls(letters=tuple(letters), unknown_rank=unknown_rank)

    def __len__(self) -> int:
        return len(self.letters)

    def rank_of(self, grapheme: str) -> int:
        return self._ranks.get(grapheme, self.unknown_rank)

    def is_script_char(self, ch: str) -> bool:
        if not ch:
            return False
        if ch in self._ranks:
            return True
        return DEVANAGARI_START <= ord(ch[0]) <= DEVANAGARI_END

    def lead_grapheme_at(self, text: str, index: int) -> str:
        for compound in self._compounds:
            if text.startswith(compound, index):
                return compound
        return text[index]
