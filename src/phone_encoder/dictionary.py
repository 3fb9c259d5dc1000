from __future__ import annotations

import logging
from pathlib import Path
from typing import Dict, Iterable, Iterator, List, Mapping, Sequence

from .common.files import read_lines
from .common.types import DigitKey, WordBucket
from .keypad import word_to_key

logger = logging.getLogger(__name__)


class PhoneDictionary(Mapping[DigitKey, WordBucket]):
    """Read-only mapping of digit key to the words that encode to it.

    Buckets keep the order in which words first appeared in the source list.
    Repeated words stay in the bucket once per occurrence.
    """

    def __init__(self, buckets: Mapping[DigitKey, Sequence[str]]) -> None:
        self._buckets: Dict[DigitKey, WordBucket] = {
            key: tuple(words) for key, words in buckets.items()
        }
        self.max_key_length = max((len(key) for key in self._buckets), default=0)

    def __getitem__(self, key: DigitKey) -> WordBucket:
        return self._buckets[key]

    def __iter__(self) -> Iterator[DigitKey]:
        return iter(self._buckets)

    def __len__(self) -> int:
        return len(self._buckets)

    def lookup(self, key: DigitKey) -> WordBucket:
        return self._buckets.get(key, ())

    @property
    def word_count(self) -> int:
        return sum(len(words) for words in self._buckets.values())


def build_dictionary(words: Iterable[str]) -> PhoneDictionary:
    """Group ``words`` by their digit key, preserving list order per bucket."""
    buckets: Dict[DigitKey, List[str]] = {}
    for word in words:
        buckets.setdefault(word_to_key(word), []).append(word)
    return PhoneDictionary(buckets)


def load_dictionary(path: str | Path) -> PhoneDictionary:
    """Load a one-word-per-line file into a :class:`PhoneDictionary`.

    Blank and undecodable lines are skipped. Any ``OSError`` raised while
    reading is propagated before a dictionary is constructed.
    """
    words = read_lines(path, skip_blank=True)
    dictionary = build_dictionary(words)
    logger.info(
        "Loaded %d words into %d keys from %s",
        dictionary.word_count,
        len(dictionary),
        path,
    )
    return dictionary
