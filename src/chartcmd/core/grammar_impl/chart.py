"""
Top-level chart grammar.

Command syntax:

    [WIDTH <int>] [HEIGHT <int>]
    [X_FIELD <field grammar>] [Y_FIELD <field grammar>]
    [MARK <mark grammar>] [GRID <TRUE|FALSE>] [TITLE <text>]

Attributes may appear in any order.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from ..config import InterpreterConfig
from ..errors import make_semantic_error
from ..grammar import (
    CommandTable,
    GrammarBase,
    build_table,
    loop,
    point,
    resolve_switch,
    span,
    toggle_cases,
)
from ..ir import AxisConfig, ChartConfig, ChartSpec, FieldEncoding
from .field import FieldGrammar
from .mark import MarkGrammar

logger = logging.getLogger(__name__)


class ChartGrammar(GrammarBase):
    """Grammar populating a ChartSpec."""

    def __init__(
        self,
        tokens: Sequence[str],
        chart: ChartSpec,
        config: InterpreterConfig | None = None,
    ):
        self.chart = chart
        self.config = config or InterpreterConfig()
        super().__init__(tokens)

    def build_table(self) -> CommandTable:
        return build_table(
            [
                point("WIDTH", ChartGrammar.parse_width),
                point("HEIGHT", ChartGrammar.parse_height),
                span("X_FIELD", ChartGrammar.parse_x_field),
                span("Y_FIELD", ChartGrammar.parse_y_field),
                span("MARK", ChartGrammar.parse_mark),
                point("GRID", ChartGrammar.parse_grid),
                point("TITLE", ChartGrammar.parse_title),
            ]
        )

    def init(self, cursor: int, end: int) -> int:
        """Install default display configuration."""
        self.chart.config = ChartConfig(axis=AxisConfig(grid=self.config.default_grid))
        return cursor

    def _integer(self, cursor: int, keyword: str) -> int:
        token = self.tokens[cursor]
        try:
            return int(token)
        except ValueError:
            raise make_semantic_error(
                f"Invalid {keyword} value {token!r}: expected an integer",
                keyword,
                self.tokens,
                cursor,
            ) from None

    def parse_width(self, cursor: int) -> None:
        self.chart.width = self._integer(cursor, "WIDTH")
        self.applied += 1

    def parse_height(self, cursor: int) -> None:
        self.chart.height = self._integer(cursor, "HEIGHT")
        self.applied += 1

    def _parse_field(self, encoding: FieldEncoding, cursor: int, end: int) -> int:
        parser = FieldGrammar(self.tokens, encoding, self.config.default_field_kind)
        resumed = loop(parser, cursor, end)
        self.applied += 1
        return resumed

    def parse_x_field(self, cursor: int, end: int) -> int:
        self.chart.encoding.x = FieldEncoding()
        return self._parse_field(self.chart.encoding.x, cursor, end)

    def parse_y_field(self, cursor: int, end: int) -> int:
        self.chart.encoding.y = FieldEncoding()
        return self._parse_field(self.chart.encoding.y, cursor, end)

    def parse_mark(self, cursor: int, end: int) -> int:
        parser = MarkGrammar(self.tokens, self.chart, self.config.normalize_colors)
        resumed = loop(parser, cursor, end)
        self.applied += 1
        return resumed

    def parse_grid(self, cursor: int) -> None:
        found = resolve_switch(self.tokens[cursor], toggle_cases(self._set_grid))
        if not found:
            raise make_semantic_error("Missing or invalid GRID type", "GRID", self.tokens, cursor)

    def _set_grid(self, enabled: bool) -> None:
        if self.chart.config is None:
            self.chart.config = ChartConfig()
        if self.chart.config.axis is None:
            self.chart.config.axis = AxisConfig()
        self.chart.config.axis.grid = enabled
        self.applied += 1

    def parse_title(self, cursor: int) -> None:
        # TODO: multi-word titles need quoted-string tokens from the tokenizer;
        # until then TITLE consumes its value without applying it.
        logger.debug(f"TITLE {self.tokens[cursor]!r} not applied")
