"""All dataclasses and exception types for doc-distance."""

from __future__ import annotations

from dataclasses import dataclass, field


# ---------------------------------------------------------------------------
# Frequency table
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class FrequencyEntry:
    """One distinct word and its occurrence count within one document."""
    word: str
    count: int


# Sorted strictly ascending by word, one entry per word.
FrequencyTable = tuple[FrequencyEntry, ...]


# ---------------------------------------------------------------------------
# Documents
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class DocumentStats:
    """Diagnostic summary of one analyzed document."""
    source: str                    # file path, or "<memory>" for in-memory text
    line_count: int
    word_count: int                # total tokens, duplicates included
    table: FrequencyTable = ()

    @property
    def distinct_words(self) -> int:
        return len(self.table)


@dataclass
class DistanceResult:
    """Outcome of comparing two documents."""
    first: DocumentStats
    second: DocumentStats
    inner_product: int
    angle: float                   # radians, in [0, pi/2]


# ---------------------------------------------------------------------------
# Config
# ---------------------------------------------------------------------------

TOKENIZER_POLICIES = ("alphanumeric", "whitespace")
REPORT_FORMATS = ("text", "json")


@dataclass
class TokenizerConfig:
    policy: str = "alphanumeric"   # "alphanumeric" or "whitespace"


@dataclass
class ReportConfig:
    precision: int = 6             # decimal places for the printed angle
    format: str = "text"           # "text" or "json"


@dataclass
class DocDistanceConfig:
    version: str = "1.0"
    encoding: str = "utf-8"
    parallel: bool = False         # build both tables on worker threads
    tokenizer: TokenizerConfig = field(default_factory=TokenizerConfig)
    report: ReportConfig = field(default_factory=ReportConfig)


# ---------------------------------------------------------------------------
# Errors
# ---------------------------------------------------------------------------

class DocDistanceError(Exception):
    """Base class for every error raised by doc-distance."""


class DocumentReadError(DocDistanceError):
    def __init__(self, path: str, reason: str):
        super().__init__(f"Error opening or reading input file {path}: {reason}")
        self.path = path
        self.reason = reason


class DegenerateInputError(DocDistanceError, ZeroDivisionError):
    """Raised when a document has no words, so its vector has zero length."""
