"""
Chart Intermediate Representation (IR) types.

All types are re-exported from this package.
"""

from .bins import BinSpec
from .chart import AxisConfig, ChartConfig, ChartSpec, DataValues, Encodings
from .fields import AggregateOp, FieldEncoding, FieldKind, TimeUnit
from .marks import (
    MARK_SHAPES,
    ArcMark,
    AreaMark,
    BarMark,
    CircleMark,
    LineMark,
    Mark,
    MarkKind,
    PointMark,
    RectMark,
    RuleMark,
    SquareMark,
    TickMark,
    TrailMark,
    make_mark,
)

__all__ = [
    # Binning
    "BinSpec",
    # Fields
    "AggregateOp",
    "FieldEncoding",
    "FieldKind",
    "TimeUnit",
    # Marks
    "MARK_SHAPES",
    "ArcMark",
    "AreaMark",
    "BarMark",
    "CircleMark",
    "LineMark",
    "Mark",
    "MarkKind",
    "PointMark",
    "RectMark",
    "RuleMark",
    "SquareMark",
    "TickMark",
    "TrailMark",
    "make_mark",
    # Chart
    "AxisConfig",
    "ChartConfig",
    "ChartSpec",
    "DataValues",
    "Encodings",
]
