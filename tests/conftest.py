"""Shared fixtures for doc-distance tests."""

from __future__ import annotations

from pathlib import Path

import pytest

from doc_distance.core.frequency import build_frequency_table
from doc_distance.types import FrequencyTable

CAT_TEXT = "the cat sat on the mat\n"
DOG_TEXT = "the dog sat on the mat\n"


@pytest.fixture
def cat_table() -> FrequencyTable:
    return build_frequency_table("the cat sat on the mat".split())


@pytest.fixture
def dog_table() -> FrequencyTable:
    return build_frequency_table("the dog sat on the mat".split())


@pytest.fixture
def cat_file(tmp_path) -> Path:
    path = tmp_path / "cat.txt"
    path.write_text(CAT_TEXT)
    return path


@pytest.fixture
def dog_file(tmp_path) -> Path:
    path = tmp_path / "dog.txt"
    path.write_text(DOG_TEXT)
    return path


@pytest.fixture
def empty_file(tmp_path) -> Path:
    path = tmp_path / "empty.txt"
    path.write_text("--- ... !!!\n\n")
    return path


@pytest.fixture
def tmp_cwd(tmp_path, monkeypatch):
    """Run test in a clean temporary directory (no config discovered)."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("HOME", str(tmp_path))
    return tmp_path
