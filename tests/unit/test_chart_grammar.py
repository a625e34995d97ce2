"""Tests for the chart command grammars and interpreter entry points.

Covers:
- Top-level attributes: WIDTH, HEIGHT, GRID, TITLE
- Field grammar: TYPE, AGGREGATE, TIME_UNIT, BIN (toggle and nested)
- Mark grammar: mark kinds, COLOR dispatch
- Error taxonomy and result values
"""

from __future__ import annotations

import logging
from collections.abc import Callable

import pytest

from chartcmd import interpret, parse_chart
from chartcmd.core import ir
from chartcmd.core.config import InterpreterConfig
from chartcmd.core.errors import SemanticError, StructuralError, UnrecognizedInputError
from chartcmd.core.grammar import TypeDispatch, loop
from chartcmd.core.grammar_impl import ChartGrammar, FieldGrammar, mark as mark_grammar

Tokenize = Callable[[str], list[str]]


# ============================================================================
# Scenarios
# ============================================================================


class TestScenarios:
    """End-to-end commands."""

    def test_full_command(self, tokenize: Tokenize) -> None:
        chart = parse_chart(
            tokenize(
                "X_FIELD price TYPE QUANTITATIVE Y_FIELD qty TYPE ORDINAL "
                "MARK BAR COLOR RED GRID TRUE"
            )
        )

        assert chart.encoding.x is not None
        assert chart.encoding.x.field == "price"
        assert chart.encoding.x.type == ir.FieldKind.QUANTITATIVE
        assert chart.encoding.y is not None
        assert chart.encoding.y.field == "qty"
        assert chart.encoding.y.type == ir.FieldKind.ORDINAL
        assert isinstance(chart.mark, ir.BarMark)
        assert chart.mark.color == "red"
        assert chart.config is not None and chart.config.axis is not None
        assert chart.config.axis.grid is True

    def test_mark_color_only_touches_held_shape(self, tokenize: Tokenize) -> None:
        chart = parse_chart(tokenize("MARK BAR COLOR RED"))
        assert chart.mark == ir.BarMark(color="red")

    def test_trailing_garbage_is_rejected_once(self, tokenize: Tokenize) -> None:
        with pytest.raises(UnrecognizedInputError) as exc_info:
            parse_chart(tokenize("WIDTH 400 FOO"))
        assert exc_info.value.remaining == ["FOO"]
        assert "FOO" in exc_info.value.message

    def test_bare_bin_is_semantic_error(self, tokenize: Tokenize) -> None:
        with pytest.raises(SemanticError, match="Missing or invalid binning specification"):
            parse_chart(tokenize("X_FIELD price BIN"))

    def test_empty_command_gives_default_chart(self) -> None:
        chart = parse_chart([])
        assert chart.width is None
        assert chart.mark is None
        assert chart.config == ir.ChartConfig(axis=ir.AxisConfig(grid=True))

    def test_parsing_is_idempotent(self, tokenize: Tokenize) -> None:
        tokens = tokenize(
            "WIDTH 300 HEIGHT 200 X_FIELD day TYPE TEMPORAL TIME_UNIT MONTH "
            "Y_FIELD sales AGGREGATE SUM MARK LINE COLOR Green GRID FALSE"
        )
        assert parse_chart(tokens) == parse_chart(tokens)


# ============================================================================
# Top-level attributes
# ============================================================================


class TestChartAttributes:
    """WIDTH, HEIGHT, GRID and TITLE."""

    def test_dimensions(self, tokenize: Tokenize) -> None:
        chart = parse_chart(tokenize("WIDTH 640 HEIGHT 480"))
        assert (chart.width, chart.height) == (640, 480)

    def test_non_integer_width(self, tokenize: Tokenize) -> None:
        with pytest.raises(SemanticError, match="WIDTH") as exc_info:
            parse_chart(tokenize("WIDTH wide"))
        assert exc_info.value.keyword == "WIDTH"

    @pytest.mark.parametrize("keyword", ["grid", "Grid", "GRID"])
    def test_grid_keyword_case(self, tokenize: Tokenize, keyword: str) -> None:
        chart = parse_chart(tokenize(f"{keyword} false"))
        assert chart.config is not None and chart.config.axis is not None
        assert chart.config.axis.grid is False

    def test_invalid_grid_value(self, tokenize: Tokenize) -> None:
        with pytest.raises(SemanticError, match="Missing or invalid GRID type"):
            parse_chart(tokenize("GRID maybe"))

    def test_title_is_consumed_but_not_applied(self, tokenize: Tokenize) -> None:
        chart = parse_chart(tokenize("TITLE Sales WIDTH 100"))
        assert chart.title is None
        assert chart.width == 100

    def test_keyword_without_value(self, tokenize: Tokenize) -> None:
        with pytest.raises(StructuralError) as exc_info:
            parse_chart(tokenize("HEIGHT 10 WIDTH"))
        assert exc_info.value.keyword == "WIDTH"

    def test_failure_keeps_earlier_attributes(self, tokenize: Tokenize) -> None:
        tokens = tokenize("WIDTH 400 HEIGHT")
        chart = ir.ChartSpec()
        with pytest.raises(StructuralError):
            loop(ChartGrammar(tokens, chart), 0, len(tokens))
        assert chart.width == 400
        assert chart.height is None

    def test_data_is_attached(self, tokenize: Tokenize) -> None:
        chart = parse_chart(
            tokenize("X_FIELD a"), data={"a": (1, 2, 3), "b": ["x", "y", "z"]}
        )
        assert chart.data == ir.DataValues(values={"a": [1, 2, 3], "b": ["x", "y", "z"]})


# ============================================================================
# Field grammar
# ============================================================================


class TestFieldGrammar:
    """X_FIELD / Y_FIELD sub-grammar."""

    def test_name_is_kept_verbatim(self, tokenize: Tokenize) -> None:
        chart = parse_chart(tokenize("X_FIELD Unit_Price"))
        assert chart.encoding.x == ir.FieldEncoding(
            field="Unit_Price", type=ir.FieldKind.QUANTITATIVE
        )

    def test_field_name_that_looks_like_keyword(self, tokenize: Tokenize) -> None:
        chart = parse_chart(tokenize("X_FIELD type TYPE NOMINAL"))
        assert chart.encoding.x is not None
        assert chart.encoding.x.field == "type"
        assert chart.encoding.x.type == ir.FieldKind.NOMINAL

    def test_missing_field_name(self, tokenize: Tokenize) -> None:
        with pytest.raises(StructuralError) as exc_info:
            parse_chart(tokenize("X_FIELD"))
        assert exc_info.value.keyword == "X_FIELD"

    def test_invalid_type(self, tokenize: Tokenize) -> None:
        with pytest.raises(SemanticError, match="Missing or invalid TYPE type"):
            parse_chart(tokenize("X_FIELD price TYPE money"))

    def test_aggregate(self, tokenize: Tokenize) -> None:
        chart = parse_chart(tokenize("Y_FIELD amount AGGREGATE stdevp"))
        assert chart.encoding.y is not None
        assert chart.encoding.y.aggregate == ir.AggregateOp.STDEVP

    def test_invalid_aggregate(self, tokenize: Tokenize) -> None:
        with pytest.raises(SemanticError, match="AGGREGATE"):
            parse_chart(tokenize("Y_FIELD amount AGGREGATE total"))

    def test_time_unit(self, tokenize: Tokenize) -> None:
        chart = parse_chart(tokenize("X_FIELD ts TYPE TEMPORAL TIME_UNIT milliseconds"))
        assert chart.encoding.x is not None
        assert chart.encoding.x.time_unit == ir.TimeUnit.MILLISECONDS

    def test_invalid_time_unit(self, tokenize: Tokenize) -> None:
        with pytest.raises(SemanticError, match="TIME_UNIT"):
            parse_chart(tokenize("X_FIELD ts TIME_UNIT fortnight"))

    @pytest.mark.parametrize(("token", "expected"), [("TRUE", True), ("false", False)])
    def test_bin_toggle(self, tokenize: Tokenize, token: str, expected: bool) -> None:
        chart = parse_chart(tokenize(f"X_FIELD price BIN {token} WIDTH 50"))
        assert chart.encoding.x is not None
        assert chart.encoding.x.bin is expected
        assert chart.width == 50

    def test_nested_bin_grammar(self, tokenize: Tokenize) -> None:
        chart = parse_chart(
            tokenize("X_FIELD price BIN MAXBINS 10 NICE TRUE STEP 2.5 WIDTH 300")
        )
        assert chart.encoding.x is not None
        assert chart.encoding.x.bin == ir.BinSpec(maxbins=10.0, nice=True, step=2.5)
        assert chart.width == 300

    def test_all_bin_attributes(self, tokenize: Tokenize) -> None:
        chart = parse_chart(
            tokenize(
                "X_FIELD v BIN ANCHOR 0 BASE 10 BINNED false MAXBINS 5 MINSTEP 1 NICE false STEP 3"
            )
        )
        assert chart.encoding.x is not None
        assert chart.encoding.x.bin == ir.BinSpec(
            anchor=0.0, base=10.0, binned=False, maxbins=5.0, minstep=1.0, nice=False, step=3.0
        )

    def test_bin_followed_by_unknown_attribute(self, tokenize: Tokenize) -> None:
        with pytest.raises(SemanticError, match="binning specification"):
            parse_chart(tokenize("X_FIELD price BIN DIVIDE 2"))

    def test_bin_with_only_invalid_toggle(self, tokenize: Tokenize) -> None:
        with pytest.raises(SemanticError, match="binning specification"):
            parse_chart(tokenize("X_FIELD price BIN NICE maybe"))

    def test_bin_non_numeric_value(self, tokenize: Tokenize) -> None:
        with pytest.raises(SemanticError, match="MAXBINS"):
            parse_chart(tokenize("X_FIELD price BIN MAXBINS lots"))

    def test_bin_keyword_without_value(self, tokenize: Tokenize) -> None:
        with pytest.raises(StructuralError) as exc_info:
            parse_chart(tokenize("X_FIELD price BIN MAXBINS"))
        assert exc_info.value.keyword == "MAXBINS"

    def test_field_grammar_stops_at_parent_keyword(self, tokenize: Tokenize) -> None:
        tokens = tokenize("X_FIELD price TYPE ORDINAL BIN TRUE MARK BAR")
        encoding = ir.FieldEncoding()
        grammar = FieldGrammar(tokens, encoding)
        assert loop(grammar, 1, len(tokens)) == 6
        assert grammar.applied == 2

    def test_configured_default_kind(self, tokenize: Tokenize) -> None:
        config = InterpreterConfig(default_field_kind=ir.FieldKind.NOMINAL)
        chart = parse_chart(tokenize("X_FIELD city"), config=config)
        assert chart.encoding.x is not None
        assert chart.encoding.x.type == ir.FieldKind.NOMINAL


# ============================================================================
# Mark grammar
# ============================================================================


class TestMarkGrammar:
    """MARK sub-grammar."""

    @pytest.mark.parametrize("token", ["bar", "Bar", "BAR"])
    def test_mark_kind_case_insensitive(self, tokenize: Tokenize, token: str) -> None:
        chart = parse_chart(tokenize(f"MARK {token}"))
        assert isinstance(chart.mark, ir.BarMark)

    def test_unknown_mark_kind(self, tokenize: Tokenize) -> None:
        with pytest.raises(SemanticError, match="Missing or invalid MARK type"):
            parse_chart(tokenize("MARK barr"))

    def test_missing_mark_kind(self, tokenize: Tokenize) -> None:
        with pytest.raises(StructuralError):
            parse_chart(tokenize("MARK"))

    @pytest.mark.parametrize("kind", list(ir.MarkKind))
    def test_every_kind_installs_its_shape(self, tokenize: Tokenize, kind: ir.MarkKind) -> None:
        chart = parse_chart(tokenize(f"MARK {kind.name} COLOR Teal"))
        assert type(chart.mark) is ir.MARK_SHAPES[kind]
        assert chart.mark is not None and chart.mark.type == kind.value
        assert chart.mark.color == "teal"

    def test_color_case_preserved_when_not_normalised(self, tokenize: Tokenize) -> None:
        config = InterpreterConfig(normalize_colors=False)
        chart = parse_chart(tokenize("MARK POINT COLOR SteelBlue"), config=config)
        assert chart.mark == ir.PointMark(color="SteelBlue")

    def test_second_mark_replaces_first(self, tokenize: Tokenize) -> None:
        chart = parse_chart(tokenize("MARK BAR COLOR red MARK LINE"))
        assert chart.mark == ir.LineMark()

    def test_color_without_handler_is_not_fatal(
        self,
        tokenize: Tokenize,
        monkeypatch: pytest.MonkeyPatch,
        caplog: pytest.LogCaptureFixture,
    ) -> None:
        def bar_only() -> TypeDispatch[str]:
            dispatch = TypeDispatch[str]("color")
            dispatch.register(ir.BarMark, lambda mark, color: setattr(mark, "color", color))
            return dispatch

        monkeypatch.setattr(mark_grammar, "color_dispatch", bar_only)

        with caplog.at_level(logging.WARNING):
            chart = parse_chart(tokenize("MARK LINE COLOR red WIDTH 10"))

        assert chart.mark == ir.LineMark()
        assert chart.width == 10
        assert "LineMark" in caplog.text


# ============================================================================
# Result values
# ============================================================================


class TestInterpret:
    """interpret returns a result instead of raising."""

    def test_success(self, tokenize: Tokenize) -> None:
        result = interpret(tokenize("MARK BAR"))
        assert result.ok
        assert result.error is None
        assert isinstance(result.unwrap().mark, ir.BarMark)

    @pytest.mark.parametrize(
        ("command", "error_type"),
        [
            ("WIDTH", StructuralError),
            ("MARK nope", SemanticError),
            ("X_FIELD price BIN", SemanticError),
            ("WIDTH 400 FOO", UnrecognizedInputError),
        ],
    )
    def test_failure_kinds(self, tokenize: Tokenize, command: str, error_type: type) -> None:
        result = interpret(tokenize(command))
        assert not result.ok
        assert result.chart is None
        assert isinstance(result.error, error_type)
        with pytest.raises(error_type):
            result.unwrap()
