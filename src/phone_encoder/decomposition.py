"""Depth-first search for the word decompositions of a phone number.

At every position the search tries each prefix length in ascending order,
and every word sharing that prefix's digit key in word-list order. A single
literal digit is used only at positions no dictionary word covers, and never
directly after another literal digit.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterator, List, Tuple

from .common.types import DigitKey
from .dictionary import PhoneDictionary
from .keypad import number_to_digits, word_to_key

LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class Token:
    """A dictionary word, or a literal digit when ``is_digit`` is set."""

    text: str
    is_digit: bool = False

    @property
    def key(self) -> DigitKey:
        return self.text if self.is_digit else word_to_key(self.text)


@dataclass(frozen=True)
class Decomposition:
    """One complete translation of ``number``.

    Parameters
    ----------
    number:
        The number exactly as read from input, punctuation included.
    tokens:
        Words and literal digits in left-to-right consumption order.
    """

    number: str
    tokens: Tuple[Token, ...]

    @property
    def digits(self) -> DigitKey:
        return "".join(token.key for token in self.tokens)

    def render(self) -> str:
        return self.number + ":" + "".join(" " + token.text for token in self.tokens)


class DecompositionEngine:
    """Enumerate decompositions against a read-only :class:`PhoneDictionary`."""

    def __init__(self, dictionary: PhoneDictionary) -> None:
        self.dictionary = dictionary

    def generate_decompositions(self, number: str) -> Iterator[Decomposition]:
        """Yield every decomposition of ``number`` in search order.

        A number without any digits yields exactly one decomposition with no
        tokens. The search keeps one pending-choice iterator per chosen token
        on an explicit stack, so number length is not bounded by the
        interpreter's recursion limit.
        """
        digits = number_to_digits(number)
        if not digits:
            yield Decomposition(number=number, tokens=())
            return

        path: List[Token] = []
        # Invariant: len(stack) == len(path) + 1.
        stack: List[Iterator[Tuple[Token, int, bool]]] = [
            self._choices(digits, 0, False)
        ]
        while stack:
            step = next(stack[-1], None)
            if step is None:
                stack.pop()
                if path:
                    path.pop()
                continue

            token, end, after_digit = step
            path.append(token)
            if end == len(digits):
                yield Decomposition(number=number, tokens=tuple(path))
                path.pop()
            else:
                stack.append(self._choices(digits, end, after_digit))

    def translate(self, number: str) -> List[str]:
        lines = [decomp.render() for decomp in self.generate_decompositions(number)]
        LOGGER.debug("Found %d decomposition(s) for %r", len(lines), number)
        return lines

    def count_decompositions(self, number: str) -> int:
        return sum(1 for _ in self.generate_decompositions(number))

    def _choices(
        self, digits: DigitKey, position: int, after_digit: bool
    ) -> Iterator[Tuple[Token, int, bool]]:
        """Yield ``(token, next_position, is_literal)`` for one position.

        Words come first, by ascending prefix length then bucket order. The
        literal digit is offered only after every prefix failed to match and
        when the previous token was not itself a literal.
        """
        # No stored key is longer than max_key_length, so longer prefixes
        # cannot match.
        limit = min(len(digits), position + self.dictionary.max_key_length)
        found_word = False
        for end in range(position + 1, limit + 1):
            for word in self.dictionary.lookup(digits[position:end]):
                found_word = True
                yield Token(word), end, False

        if not found_word and not after_digit:
            yield Token(digits[position], is_digit=True), position + 1, True
