"""Translate phone numbers into phrases of dictionary words."""

from .decomposition import Decomposition, DecompositionEngine, Token
from .dictionary import PhoneDictionary, build_dictionary, load_dictionary
from .keypad import LETTER_TO_DIGIT, number_to_digits, word_to_key
from .service import EncodingService

__all__ = [
    "EncodingService",
    "DecompositionEngine",
    "Decomposition",
    "Token",
    "PhoneDictionary",
    "build_dictionary",
    "load_dictionary",
    "LETTER_TO_DIGIT",
    "word_to_key",
    "number_to_digits",
]
