"""
Interpreter configuration.

Parses the [chart] section from chartcmd.toml:

    [chart]
    default_grid = false
    default_field_kind = "nominal"
    normalize_colors = true
"""

from __future__ import annotations

import tomllib
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict

from .ir import FieldKind


class InterpreterConfig(BaseModel):
    """
    Defaults applied while interpreting chart commands.

    Attributes:
        default_grid: Axis grid state installed before any GRID command
        default_field_kind: Field kind assigned when a field is declared
        normalize_colors: Lower-case color names given to COLOR
    """

    default_grid: bool = True
    default_field_kind: FieldKind = FieldKind.QUANTITATIVE
    normalize_colors: bool = True

    model_config = ConfigDict(frozen=True, extra="forbid")


def load_interpreter_config(toml_path: Path) -> InterpreterConfig:
    """
    Load interpreter configuration from chartcmd.toml.

    Args:
        toml_path: Path to chartcmd.toml file

    Returns:
        InterpreterConfig with parsed values or defaults
    """
    if not toml_path.exists():
        return InterpreterConfig()

    with open(toml_path, "rb") as f:
        data = tomllib.load(f)

    chart_data: dict[str, Any] = data.get("chart", {})

    if not chart_data:
        return InterpreterConfig()

    return InterpreterConfig(**chart_data)
