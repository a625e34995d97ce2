"""
Mark grammar.

Command syntax (after MARK):

    <kind> [COLOR <color>]

The mark kind is mandatory and always comes first. COLOR applies to
whichever mark shape the kind installed.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from ..errors import make_semantic_error
from ..grammar import (
    CommandTable,
    GrammarBase,
    TypeDispatch,
    build_table,
    enum_cases,
    point,
    resolve_switch,
)
from ..ir import (
    ArcMark,
    AreaMark,
    BarMark,
    ChartSpec,
    CircleMark,
    LineMark,
    MarkKind,
    PointMark,
    RectMark,
    RuleMark,
    SquareMark,
    TickMark,
    TrailMark,
    make_mark,
)


def _paint(mark: Any, color: str) -> None:
    mark.color = color


def color_dispatch() -> TypeDispatch[str]:
    """Per-shape COLOR handlers, one for each mark shape."""
    dispatch = TypeDispatch[str]("color")
    for shape in (
        ArcMark,
        AreaMark,
        BarMark,
        CircleMark,
        LineMark,
        PointMark,
        RectMark,
        RuleMark,
        SquareMark,
        TickMark,
        TrailMark,
    ):
        dispatch.register(shape, _paint)
    return dispatch


class MarkGrammar(GrammarBase):
    """Grammar installing and configuring the chart's mark."""

    def __init__(self, tokens: Sequence[str], chart: ChartSpec, normalize_colors: bool = True):
        self.chart = chart
        self.normalize_colors = normalize_colors
        self.colors = color_dispatch()
        super().__init__(tokens)

    def build_table(self) -> CommandTable:
        return build_table(
            [
                point("COLOR", MarkGrammar.parse_color),
            ]
        )

    def init(self, cursor: int, end: int) -> int:
        """Consume the mark kind."""
        token = self.tokens[cursor] if cursor < end else ""
        found = resolve_switch(token, enum_cases(MarkKind, self._install))
        if not found:
            raise make_semantic_error("Missing or invalid MARK type", "MARK", self.tokens, cursor)
        return cursor + 1

    def _install(self, kind: MarkKind) -> None:
        self.chart.mark = make_mark(kind)

    def parse_color(self, cursor: int) -> None:
        color = self.tokens[cursor]
        if self.normalize_colors:
            color = color.lower()
        if self.colors.visit(self.chart.mark, color):
            self.applied += 1
