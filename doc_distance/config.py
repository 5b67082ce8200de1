"""Configuration loading, validation, and defaults."""

from __future__ import annotations

import codecs
import json
from pathlib import Path
from typing import Any

import yaml

from .types import (
    REPORT_FORMATS,
    TOKENIZER_POLICIES,
    DocDistanceConfig,
    ReportConfig,
    TokenizerConfig,
)

CONFIG_FILENAMES = [
    "doc-distance.yaml",
    "doc-distance.yml",
    "doc-distance.json",
]

MAX_PRECISION = 15


def _discover_config() -> Path | None:
    """Search CWD then parent dirs up to home for a config file."""
    cwd = Path.cwd()
    home = Path.home()
    search = cwd
    while True:
        for name in CONFIG_FILENAMES:
            candidate = search / name
            if candidate.is_file():
                return candidate
        if search == home or search == search.parent:
            break
        search = search.parent
    return None


def _build_config(raw: dict[str, Any]) -> DocDistanceConfig:
    """Build a DocDistanceConfig from a raw dict."""
    tokenizer_raw = raw.get("tokenizer", {})
    tokenizer = TokenizerConfig(
        policy=tokenizer_raw.get("policy", "alphanumeric"),
    )

    report_raw = raw.get("report", {})
    report = ReportConfig(
        precision=report_raw.get("precision", 6),
        format=report_raw.get("format", "text"),
    )

    return DocDistanceConfig(
        version=str(raw.get("version", "1.0")),
        encoding=raw.get("encoding", "utf-8"),
        parallel=raw.get("parallel", False),
        tokenizer=tokenizer,
        report=report,
    )


def validate_config(config: DocDistanceConfig) -> list[str]:
    """Validate a config. Returns list of error strings (empty = valid)."""
    errors: list[str] = []

    if config.tokenizer.policy not in TOKENIZER_POLICIES:
        errors.append(
            f"Unknown tokenizer policy '{config.tokenizer.policy}' "
            f"(expected one of: {', '.join(TOKENIZER_POLICIES)})"
        )

    precision = config.report.precision
    if not isinstance(precision, int) or isinstance(precision, bool) or not 0 <= precision <= MAX_PRECISION:
        errors.append(f"report.precision must be an integer between 0 and {MAX_PRECISION}")

    if config.report.format not in REPORT_FORMATS:
        errors.append(
            f"Unknown report format '{config.report.format}' "
            f"(expected one of: {', '.join(REPORT_FORMATS)})"
        )

    if not isinstance(config.parallel, bool):
        errors.append(f"parallel must be true or false, got {config.parallel!r}")

    if not isinstance(config.encoding, str):
        errors.append(f"encoding must be a string, got {config.encoding!r}")
    elif not config.encoding:
        errors.append("encoding must not be empty")
    else:
        try:
            codecs.lookup(config.encoding)
        except LookupError:
            errors.append(f"Unknown encoding '{config.encoding}'")

    return errors


def load_config(
    config_path: str | Path | None = None,
    config_dict: dict | None = None,
) -> DocDistanceConfig:
    """Load config from dict, explicit path, or auto-discover."""
    if config_dict is not None:
        return _build_config(config_dict)

    if config_path is not None:
        path = Path(config_path)
    else:
        path = _discover_config()

    if path is None:
        # Return defaults
        return _build_config({})

    if not path.is_file():
        raise FileNotFoundError(f"Config file not found: {path}")

    text = path.read_text()
    if path.suffix == ".json":
        raw = json.loads(text)
    else:
        raw = yaml.safe_load(text) or {}

    return _build_config(raw)
