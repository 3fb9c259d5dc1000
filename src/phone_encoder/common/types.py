"""Shared type aliases for the phone encoder.

A digit key is kept as a string of ASCII digits rather than an integer so
that words of any length map to a distinct, exact key and leading zeros are
preserved (``"0"`` and ``"00"`` are different keys).
"""
from __future__ import annotations

from typing import TypeAlias

DigitKey: TypeAlias = str

# Words sharing one digit key, in word-list order.
WordBucket: TypeAlias = tuple[str, ...]
