from __future__ import annotations

import logging
from typing import Iterable, Iterator, List

from tqdm import tqdm

from .common.config import EncoderSettings
from .decomposition import DecompositionEngine
from .dictionary import PhoneDictionary, load_dictionary

logger = logging.getLogger(__name__)


class EncodingService:
    """Run the decomposition search over a sequence of numbers."""

    def __init__(self, *, dictionary: PhoneDictionary) -> None:
        self.dictionary = dictionary
        self.engine = DecompositionEngine(dictionary)

    @classmethod
    def from_settings(cls, settings: EncoderSettings) -> "EncodingService":
        return cls(dictionary=load_dictionary(settings.words_path))

    def encode_number(self, number: str) -> List[str]:
        return self.engine.translate(number)

    def encode_numbers(
        self, numbers: Iterable[str], *, progress: bool = False
    ) -> Iterator[str]:
        """Yield output lines for ``numbers`` in input order.

        Each number's search is completed before any of its lines are yielded,
        so every number contributes one contiguous block.
        """
        emitted = 0
        for number in self._iter_numbers(numbers, progress):
            lines = self.encode_number(number)
            emitted += len(lines)
            yield from lines
        logger.info("Emitted %d line(s)", emitted, extra={"lines": emitted})

    def count_solutions(self, numbers: Iterable[str], *, progress: bool = False) -> int:
        total = 0
        for number in self._iter_numbers(numbers, progress):
            total += self.engine.count_decompositions(number)
        logger.info("Counted %d solution(s)", total, extra={"solutions": total})
        return total

    @staticmethod
    def _iter_numbers(numbers: Iterable[str], progress: bool) -> Iterable[str]:
        return tqdm(numbers, desc="Encoding numbers", unit="number", disable=not progress)
