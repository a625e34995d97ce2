"""
Top-level chart model.

A ChartSpec is created empty by the interpreter and populated in place by
the chart grammar. Rendering it to a wire-level visualization specification
is left to the caller.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from .fields import FieldEncoding
from .marks import Mark


class AxisConfig(BaseModel):
    """Axis display options shared by all axes."""

    grid: bool | None = None

    model_config = ConfigDict(extra="forbid")


class ChartConfig(BaseModel):
    """Chart-wide display configuration."""

    axis: AxisConfig | None = None

    model_config = ConfigDict(extra="forbid")


class Encodings(BaseModel):
    """Positional field encodings."""

    x: FieldEncoding | None = None
    y: FieldEncoding | None = None

    model_config = ConfigDict(extra="forbid")


class DataValues(BaseModel):
    """Inline tabular data, column name to column values."""

    values: dict[str, list[Any]] = Field(default_factory=dict)

    model_config = ConfigDict(extra="forbid")


class ChartSpec(BaseModel):
    """
    A chart under construction.

    Attributes:
        width: Chart width in pixels
        height: Chart height in pixels
        title: Chart title (not yet populated by the command grammar)
        encoding: Positional field encodings
        mark: The single mark shape currently held
        config: Display configuration
        data: Inline data supplied by the caller
    """

    width: int | None = None
    height: int | None = None
    title: str | None = None
    encoding: Encodings = Field(default_factory=Encodings)
    mark: Mark | None = None
    config: ChartConfig | None = None
    data: DataValues | None = None

    model_config = ConfigDict(extra="forbid")
