"""
Mark types for the chart IR.

A chart holds exactly one mark shape at a time. The shapes deliberately
share no base class; operations over "whichever mark is held" go through
chartcmd.core.grammar.dispatch.TypeDispatch.

Command syntax:

    MARK BAR COLOR steelblue
"""

from __future__ import annotations

from enum import StrEnum
from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field


class MarkKind(StrEnum):
    """Closed set of supported mark kinds."""

    ARC = "arc"
    AREA = "area"
    BAR = "bar"
    CIRCLE = "circle"
    LINE = "line"
    POINT = "point"
    RECT = "rect"
    RULE = "rule"
    SQUARE = "square"
    TICK = "tick"
    TRAIL = "trail"


class ArcMark(BaseModel):
    type: Literal["arc"] = "arc"
    color: str | None = None

    model_config = ConfigDict(extra="forbid")


class AreaMark(BaseModel):
    type: Literal["area"] = "area"
    color: str | None = None

    model_config = ConfigDict(extra="forbid")


class BarMark(BaseModel):
    type: Literal["bar"] = "bar"
    color: str | None = None

    model_config = ConfigDict(extra="forbid")


class CircleMark(BaseModel):
    type: Literal["circle"] = "circle"
    color: str | None = None

    model_config = ConfigDict(extra="forbid")


class LineMark(BaseModel):
    type: Literal["line"] = "line"
    color: str | None = None

    model_config = ConfigDict(extra="forbid")


class PointMark(BaseModel):
    type: Literal["point"] = "point"
    color: str | None = None

    model_config = ConfigDict(extra="forbid")


class RectMark(BaseModel):
    type: Literal["rect"] = "rect"
    color: str | None = None

    model_config = ConfigDict(extra="forbid")


class RuleMark(BaseModel):
    type: Literal["rule"] = "rule"
    color: str | None = None

    model_config = ConfigDict(extra="forbid")


class SquareMark(BaseModel):
    type: Literal["square"] = "square"
    color: str | None = None

    model_config = ConfigDict(extra="forbid")


class TickMark(BaseModel):
    type: Literal["tick"] = "tick"
    color: str | None = None

    model_config = ConfigDict(extra="forbid")


class TrailMark(BaseModel):
    type: Literal["trail"] = "trail"
    color: str | None = None

    model_config = ConfigDict(extra="forbid")


Mark = Annotated[
    ArcMark
    | AreaMark
    | BarMark
    | CircleMark
    | LineMark
    | PointMark
    | RectMark
    | RuleMark
    | SquareMark
    | TickMark
    | TrailMark,
    Field(discriminator="type"),
]

MARK_SHAPES: dict[MarkKind, type[BaseModel]] = {
    MarkKind.ARC: ArcMark,
    MarkKind.AREA: AreaMark,
    MarkKind.BAR: BarMark,
    MarkKind.CIRCLE: CircleMark,
    MarkKind.LINE: LineMark,
    MarkKind.POINT: PointMark,
    MarkKind.RECT: RectMark,
    MarkKind.RULE: RuleMark,
    MarkKind.SQUARE: SquareMark,
    MarkKind.TICK: TickMark,
    MarkKind.TRAIL: TrailMark,
}


def make_mark(kind: MarkKind) -> BaseModel:
    """Create a fresh mark shape for the given kind."""
    return MARK_SHAPES[kind]()
