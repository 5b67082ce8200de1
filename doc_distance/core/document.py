"""Per-document analysis: read lines, tokenize, build the frequency table."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable

from ..types import (
    DegenerateInputError,
    DistanceResult,
    DocDistanceConfig,
    DocumentReadError,
    DocumentStats,
)
from .frequency import build_frequency_table
from .similarity import angle_from_products, inner_product
from .tokenizer import get_words_from_line_list

logger = logging.getLogger(__name__)


def read_lines(path: str | Path, encoding: str = "utf-8") -> list[str]:
    """Read a text file as a list of lines without line terminators.

    Raises:
        DocumentReadError: file missing, unreadable, or not valid ``encoding``.
    """
    try:
        with open(path, encoding=encoding) as f:
            return [line.rstrip("\n") for line in f]
    except (OSError, UnicodeDecodeError) as e:
        raise DocumentReadError(str(path), str(e)) from e


def analyze_lines(
    lines: Iterable[str],
    source: str = "<memory>",
    policy: str = "alphanumeric",
) -> DocumentStats:
    lines = list(lines)
    words = get_words_from_line_list(lines, policy=policy)
    table = build_frequency_table(words)
    logger.debug(
        "Analyzed %s: %d lines, %d words, %d distinct",
        source, len(lines), len(words), len(table),
    )
    return DocumentStats(
        source=source,
        line_count=len(lines),
        word_count=len(words),
        table=table,
    )


def analyze_document(
    path: str | Path,
    encoding: str = "utf-8",
    policy: str = "alphanumeric",
) -> DocumentStats:
    """Read ``path`` and return its line/word counts and frequency table."""
    return analyze_lines(read_lines(path, encoding=encoding), source=str(path), policy=policy)


def analyze_pair(
    path1: str | Path,
    path2: str | Path,
    config: DocDistanceConfig | None = None,
) -> DistanceResult:
    """Analyze both documents and compute the angle between them.

    With ``config.parallel`` the two documents are analyzed on worker threads.
    The first error from either document propagates.
    """
    config = config or DocDistanceConfig()
    kwargs = {"encoding": config.encoding, "policy": config.tokenizer.policy}

    if config.parallel:
        from concurrent.futures import ThreadPoolExecutor

        with ThreadPoolExecutor(max_workers=2) as executor:
            future1 = executor.submit(analyze_document, path1, **kwargs)
            future2 = executor.submit(analyze_document, path2, **kwargs)
            first = future1.result()
            second = future2.result()
    else:
        first = analyze_document(path1, **kwargs)
        second = analyze_document(path2, **kwargs)

    numerator = inner_product(first.table, second.table)
    try:
        angle = angle_from_products(
            numerator,
            inner_product(first.table, first.table),
            inner_product(second.table, second.table),
        )
    except DegenerateInputError as e:
        empty = ", ".join(s.source for s in (first, second) if not s.table)
        raise DegenerateInputError(f"{e}: {empty}") from e

    return DistanceResult(
        first=first,
        second=second,
        inner_product=numerator,
        angle=angle,
    )
