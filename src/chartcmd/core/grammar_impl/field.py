"""
Field grammar.

Command syntax (after X_FIELD / Y_FIELD):

    <name> [TYPE <kind>] [AGGREGATE <op>] [TIME_UNIT <unit>] [BIN <TRUE|FALSE|bin attributes>]

The field name is mandatory and always comes first.
"""

from __future__ import annotations

from collections.abc import Sequence

from ..errors import make_semantic_error, make_structural_error
from ..grammar import (
    CommandTable,
    GrammarBase,
    build_table,
    enum_cases,
    loop,
    point,
    resolve_switch,
    span,
    toggle_cases,
)
from ..ir import AggregateOp, BinSpec, FieldEncoding, FieldKind, TimeUnit
from .bin import BinGrammar


class FieldGrammar(GrammarBase):
    """Grammar populating one positional FieldEncoding."""

    def __init__(
        self,
        tokens: Sequence[str],
        encoding: FieldEncoding,
        default_kind: FieldKind = FieldKind.QUANTITATIVE,
    ):
        self.encoding = encoding
        self.default_kind = default_kind
        super().__init__(tokens)

    def build_table(self) -> CommandTable:
        return build_table(
            [
                point("TYPE", FieldGrammar.parse_type),
                # BIN may legitimately end the input; the nested grammar
                # reports it as a semantic failure instead.
                span("BIN", FieldGrammar.parse_bin, min_args=0),
                span("AGGREGATE", FieldGrammar.parse_aggregate),
                point("TIME_UNIT", FieldGrammar.parse_time_unit),
            ]
        )

    def init(self, cursor: int, end: int) -> int:
        """Consume the field name."""
        if cursor >= end:
            raise make_structural_error("FIELD", 1, 0, self.tokens, cursor)
        self.encoding.field = self.tokens[cursor]
        self.encoding.type = self.default_kind
        return cursor + 1

    def _set(self, name: str, value: object) -> None:
        setattr(self.encoding, name, value)
        self.applied += 1

    def parse_type(self, cursor: int) -> None:
        found = resolve_switch(
            self.tokens[cursor], enum_cases(FieldKind, lambda v: self._set("type", v))
        )
        if not found:
            raise make_semantic_error("Missing or invalid TYPE type", "TYPE", self.tokens, cursor)

    def parse_aggregate(self, cursor: int, end: int) -> int:
        found = resolve_switch(
            self.tokens[cursor], enum_cases(AggregateOp, lambda v: self._set("aggregate", v))
        )
        if not found:
            raise make_semantic_error(
                "Missing or invalid AGGREGATE type", "AGGREGATE", self.tokens, cursor
            )
        return cursor + 1

    def parse_time_unit(self, cursor: int) -> None:
        found = resolve_switch(
            self.tokens[cursor], enum_cases(TimeUnit, lambda v: self._set("time_unit", v))
        )
        if not found:
            raise make_semantic_error(
                "Missing or invalid TIME_UNIT type", "TIME_UNIT", self.tokens, cursor
            )

    def parse_bin(self, cursor: int, end: int) -> int:
        """BIN TRUE | BIN FALSE | BIN <bin attributes>"""
        if cursor < end and resolve_switch(
            self.tokens[cursor], toggle_cases(lambda v: self._set("bin", v))
        ):
            return cursor + 1

        bin_spec = BinSpec()
        parser = BinGrammar(self.tokens, bin_spec)
        resumed = loop(parser, cursor, end)

        if parser.applied == 0:
            raise make_semantic_error(
                "Missing or invalid binning specification", "BIN", self.tokens, cursor
            )

        self._set("bin", bin_spec)
        return resumed
