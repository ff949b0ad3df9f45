"""Pytest configuration — ensures the project root is importable."""

import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).parent))


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    """Keep a developer's AMOUNT_CONVERTER_* variables out of the tests."""
    for name in ("AMOUNT_CONVERTER_RATE", "AMOUNT_CONVERTER_LARGE_UNITS", "AMOUNT_CONVERTER_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
