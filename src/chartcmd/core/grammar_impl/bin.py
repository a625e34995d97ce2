"""
Bin grammar.

Command syntax (after BIN):

    MAXBINS 20 NICE TRUE STEP 5

Every attribute consumes exactly one value token.
"""

from __future__ import annotations

from collections.abc import Sequence

from ..errors import make_semantic_error
from ..grammar import CommandTable, GrammarBase, build_table, point, resolve_switch, toggle_cases
from ..ir import BinSpec


class BinGrammar(GrammarBase):
    """Grammar populating a BinSpec. Counts applied attributes."""

    def __init__(self, tokens: Sequence[str], bin_spec: BinSpec):
        self.bin = bin_spec
        super().__init__(tokens)

    def build_table(self) -> CommandTable:
        # TODO: DIVIDE, EXTENT and STEPS take list values; add once the
        # tokenizer can deliver bracketed lists as single tokens.
        return build_table(
            [
                point("ANCHOR", BinGrammar.parse_anchor),
                point("BASE", BinGrammar.parse_base),
                point("BINNED", BinGrammar.parse_binned),
                point("MAXBINS", BinGrammar.parse_maxbins),
                point("MINSTEP", BinGrammar.parse_minstep),
                point("NICE", BinGrammar.parse_nice),
                point("STEP", BinGrammar.parse_step),
            ]
        )

    def _number(self, cursor: int, keyword: str) -> float:
        token = self.tokens[cursor]
        try:
            return float(token)
        except ValueError:
            raise make_semantic_error(
                f"Invalid {keyword} value {token!r}: expected a number",
                keyword,
                self.tokens,
                cursor,
            ) from None

    def _set(self, name: str, value: object) -> None:
        setattr(self.bin, name, value)
        self.applied += 1

    def parse_anchor(self, cursor: int) -> None:
        self._set("anchor", self._number(cursor, "ANCHOR"))

    def parse_base(self, cursor: int) -> None:
        self._set("base", self._number(cursor, "BASE"))

    def parse_binned(self, cursor: int) -> None:
        resolve_switch(self.tokens[cursor], toggle_cases(lambda v: self._set("binned", v)))

    def parse_maxbins(self, cursor: int) -> None:
        self._set("maxbins", self._number(cursor, "MAXBINS"))

    def parse_minstep(self, cursor: int) -> None:
        self._set("minstep", self._number(cursor, "MINSTEP"))

    def parse_nice(self, cursor: int) -> None:
        resolve_switch(self.tokens[cursor], toggle_cases(lambda v: self._set("nice", v)))

    def parse_step(self, cursor: int) -> None:
        self._set("step", self._number(cursor, "STEP"))
