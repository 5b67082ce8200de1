"""Frequency table builder: count tokens, then freeze into a sorted table."""

from __future__ import annotations

import logging
from typing import Iterable

from ..types import FrequencyEntry, FrequencyTable

logger = logging.getLogger(__name__)


def count_frequency(words: Iterable[str]) -> dict[str, int]:
    """Return {word: occurrences}. Linear in the number of tokens."""
    freq: dict[str, int] = {}
    for word in words:
        freq[word] = freq.get(word, 0) + 1
    return freq


def build_frequency_table(words: Iterable[str]) -> FrequencyTable:
    """Count ``words`` and return one entry per distinct word, sorted by word.

    The counting dict is discarded once sorted; callers only ever see the
    immutable tuple.
    """
    freq = count_frequency(words)
    table = tuple(FrequencyEntry(word, count) for word, count in sorted(freq.items()))
    logger.debug("Built frequency table: %d distinct words", len(table))
    return table


def is_sorted_table(table: FrequencyTable) -> bool:
    """True if words are strictly ascending (sorted and free of duplicates)."""
    return all(a.word < b.word for a, b in zip(table, table[1:]))
