"""Shared fixtures for smell_audit tests."""

from __future__ import annotations

from pathlib import Path

import pytest

SOURCES = Path(__file__).resolve().parent / "fixtures" / "sources"


@pytest.fixture
def sources_dir() -> Path:
    return SOURCES


@pytest.fixture
def smelly_source() -> str:
    return (SOURCES / "smelly.ts").read_text(encoding="utf-8")


@pytest.fixture
def clean_source() -> str:
    return (SOURCES / "clean.ts").read_text(encoding="utf-8")
