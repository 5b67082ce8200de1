"""Vector-angle distance between two frequency tables."""

from __future__ import annotations

import logging
import math

from ..types import DegenerateInputError, FrequencyTable

logger = logging.getLogger(__name__)


def inner_product(a: FrequencyTable, b: FrequencyTable) -> int:
    """Sum of count products over words present in both tables.

    Walks both tables once with a cursor each, so runs in O(len(a) + len(b)).
    Both tables must be sorted ascending by word with no duplicates; unsorted
    input undercounts silently.
    """
    total = 0
    i = j = 0
    while i < len(a) and j < len(b):
        word_a = a[i].word
        word_b = b[j].word
        if word_a == word_b:
            total += a[i].count * b[j].count
            i += 1
            j += 1
        elif word_a < word_b:
            i += 1
        else:
            j += 1
    return total


def inner_product_naive(a: FrequencyTable, b: FrequencyTable) -> int:
    """Quadratic pairwise inner product. Reference for ``inner_product``."""
    total = 0
    for entry_a in a:
        for entry_b in b:
            if entry_a.word == entry_b.word:
                total += entry_a.count * entry_b.count
    return total


def magnitude(table: FrequencyTable) -> float:
    """Euclidean length of the frequency vector."""
    return math.sqrt(inner_product(table, table))


def angle_from_products(numerator: int, self_a: int, self_b: int) -> float:
    """Angle in radians given ``a.b``, ``a.a`` and ``b.b``.

    Raises:
        DegenerateInputError: ``self_a`` or ``self_b`` is zero.
    """
    # Integer product under one sqrt: identical tables give exactly 1.0.
    squared = self_a * self_b
    if squared == 0:
        raise DegenerateInputError(
            "Cannot compute the angle of an empty document (zero-length frequency vector)"
        )
    ratio = numerator / math.sqrt(squared)
    if ratio > 1.0 or ratio < -1.0:
        logger.debug("Clamping cosine ratio %r into [-1, 1]", ratio)
        ratio = max(-1.0, min(1.0, ratio))
    angle = math.acos(ratio)
    logger.debug("inner_product=%d angle=%.6f", numerator, angle)
    return angle


def vector_angle(a: FrequencyTable, b: FrequencyTable) -> float:
    """Angle in radians between two frequency vectors, in [0, pi/2].

    Raises:
        DegenerateInputError: either table is empty (zero-length vector).
    """
    return angle_from_products(inner_product(a, b), inner_product(a, a), inner_product(b, b))
