"""
tinyS Test Configuration
========================

Shared fixtures for the scanner and CLI tests.
"""

from pathlib import Path
from typing import Callable

import pytest


@pytest.fixture
def write_source(tmp_path: Path) -> Callable[..., Path]:
    """
    Fixture: write tinyS source text to a file under tmp_path.

    Returns a function taking the source text and an optional file name
    (default "program.s") and returning the written path.
    """
    def _write(text: str, name: str = "program.s") -> Path:
        path = tmp_path / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(text, encoding="utf-8")
        return path

    return _write
