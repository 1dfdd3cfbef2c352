"""Shared fixtures for poem_validator tests."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable

import pytest

from poem_validator.schema import clear_cache

DATA_DIR = Path(__file__).parent / "data"


@pytest.fixture
def data_dir() -> Path:
    return DATA_DIR


@pytest.fixture
def write_poem(tmp_path: Path) -> Callable[[str, str], Path]:
    def _write(content: str, name: str = "poem.poem") -> Path:
        path = tmp_path / name
        path.write_text(content, encoding="utf-8")
        return path

    return _write


@pytest.fixture(autouse=True)
def _isolate_environment(monkeypatch: pytest.MonkeyPatch):
    for name in (
        "POEM_VALIDATOR_LOG_LEVEL",
        "POEM_VALIDATOR_PRINT_LEVEL",
        "POEM_VALIDATOR_STRICT_LANGUAGE",
    ):
        monkeypatch.delenv(name, raising=False)

    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    clear_cache()
    yield
    clear_cache()
    root.handlers[:] = handlers
    root.setLevel(level)
