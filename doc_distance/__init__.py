"""doc-distance: word-frequency vector angle between two text documents."""

from .config import load_config
from .core import analyze_document, analyze_pair, build_frequency_table, inner_product, vector_angle
from .types import (
    DegenerateInputError,
    DistanceResult,
    DocDistanceConfig,
    DocDistanceError,
    DocumentReadError,
    DocumentStats,
    FrequencyEntry,
)

__version__ = "0.1.0"

__all__ = [
    "analyze_document",
    "analyze_pair",
    "build_frequency_table",
    "inner_product",
    "vector_angle",
    "load_config",
    "DegenerateInputError",
    "DistanceResult",
    "DocDistanceConfig",
    "DocDistanceError",
    "DocumentReadError",
    "DocumentStats",
    "FrequencyEntry",
]
