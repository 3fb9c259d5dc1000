from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

from .common.types import DigitKey

# Index in this tuple is the digit the letters encode to.
_KEYPAD_GROUPS = (
    "e",
    "jnq",
    "rwx",
    "dsy",
    "ft",
    "am",
    "civ",
    "bku",
    "lop",
    "ghz",
)

_DIGITS = frozenset("0123456789")


def _build_letter_map() -> Mapping[str, str]:
    mapping: dict[str, str] = {}
    for digit, letters in enumerate(_KEYPAD_GROUPS):
        for letter in letters:
            mapping[letter] = str(digit)
            mapping[letter.upper()] = str(digit)
    return MappingProxyType(mapping)


LETTER_TO_DIGIT: Mapping[str, str] = _build_letter_map()


def word_to_key(word: str) -> DigitKey:
    """Encode the ASCII letters of ``word`` as digits, ignoring everything else."""
    return "".join(LETTER_TO_DIGIT[ch] for ch in word if ch in LETTER_TO_DIGIT)


def number_to_digits(number: str) -> DigitKey:
    """Return the ASCII digits of ``number`` in order, dropping punctuation."""
    return "".join(ch for ch in number if ch in _DIGITS)
