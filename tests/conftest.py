"""Shared pytest fixtures for chartcmd tests."""

from collections.abc import Callable
from pathlib import Path

import pytest


@pytest.fixture
def tokenize() -> Callable[[str], list[str]]:
    """Return a whitespace tokenizer standing in for the real front end."""

    def _tokenize(command: str) -> list[str]:
        return command.split()

    return _tokenize


@pytest.fixture
def config_file(tmp_path: Path) -> Path:
    """Return a chartcmd.toml overriding every default."""
    path = tmp_path / "chartcmd.toml"
    path.write_text(
        "[chart]\n"
        "default_grid = false\n"
        'default_field_kind = "nominal"\n'
        "normalize_colors = false\n"
    )
    return path
