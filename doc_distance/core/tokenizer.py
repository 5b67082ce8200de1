"""Split text lines into normalized word tokens."""

from __future__ import annotations

import re
from typing import Callable, Iterable

_WORD_RE = re.compile(r"[A-Za-z0-9]+")


def _alphanumeric_words(line: str) -> list[str]:
    return [m.lower() for m in _WORD_RE.findall(line)]


def _whitespace_words(line: str) -> list[str]:
    # Punctuation stays attached: "word." and "word" are distinct tokens.
    return [w.lower() for w in line.split()]


_POLICIES: dict[str, Callable[[str], list[str]]] = {
    "alphanumeric": _alphanumeric_words,
    "whitespace": _whitespace_words,
}


def get_tokenizer(policy: str = "alphanumeric") -> Callable[[str], list[str]]:
    """Return the line splitter for a tokenizer policy.

    Policies:
        "alphanumeric" - maximal runs of ASCII letters/digits, everything
                         else is a separator (default)
        "whitespace"   - split on whitespace only
    """
    try:
        return _POLICIES[policy]
    except KeyError:
        raise ValueError(
            f"Unknown tokenizer policy: {policy}. Expected one of: {', '.join(_POLICIES)}"
        ) from None


def get_words_from_string(line: str, policy: str = "alphanumeric") -> list[str]:
    """Lower-cased tokens of a single line, in order."""
    return get_tokenizer(policy)(line)


def get_words_from_line_list(lines: Iterable[str], policy: str = "alphanumeric") -> list[str]:
    """Flatten the tokens of every line, preserving document order."""
    split = get_tokenizer(policy)
    words: list[str] = []
    for line in lines:
        words.extend(split(line))
    return words
