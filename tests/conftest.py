"""Shared fixtures for maxgrep tests."""

from __future__ import annotations

import itertools
from typing import TYPE_CHECKING

import pytest

if TYPE_CHECKING:
    from collections.abc import Callable
    from pathlib import Path


@pytest.fixture
def make_file(tmp_path: Path) -> Callable[[str], str]:
    """Write *content* to a fresh file under ``tmp_path`` and return its path as str."""
    counter = itertools.count()

    def _make(content: str) -> str:
        path = tmp_path / f"input_{next(counter)}.txt"
        path.write_bytes(content.encode("utf-8"))
        return str(path)

    return _make
