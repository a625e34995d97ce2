"""
Public entry points for interpreting chart commands.

``parse_chart`` raises on failure; ``interpret`` returns an InterpretResult
carrying either the chart or the error.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Any

from .config import InterpreterConfig
from .errors import ChartCommandError, make_unrecognized_input_error
from .grammar import loop
from .grammar_impl import ChartGrammar
from .ir import ChartSpec, DataValues, Encodings

logger = logging.getLogger(__name__)


def parse_chart(
    tokens: Sequence[str],
    data: Mapping[str, Sequence[Any]] | None = None,
    config: InterpreterConfig | None = None,
) -> ChartSpec:
    """
    Interpret a token sequence into a new ChartSpec.

    Args:
        tokens: Already-tokenized command, e.g. ``["MARK", "BAR"]``
        data: Optional columnar data attached to the chart as-is
        config: Interpreter defaults

    Returns:
        The populated chart

    Raises:
        StructuralError: A keyword lacked its trailing arguments
        SemanticError: A value was not valid for its attribute
        UnrecognizedInputError: Tokens were left over after parsing
    """
    tokens = list(tokens)
    chart = ChartSpec(encoding=Encodings())
    if data is not None:
        chart.data = DataValues(values={name: list(column) for name, column in data.items()})

    parser = ChartGrammar(tokens, chart, config)
    last_parsed = loop(parser, 0, len(tokens))
    if last_parsed != len(tokens):
        raise make_unrecognized_input_error(tokens, last_parsed)

    logger.debug(f"Parsed chart command with {parser.applied} attributes")
    return chart


@dataclass
class InterpretResult:
    """
    Outcome of interpreting a chart command.

    Exactly one of ``chart`` and ``error`` is set.
    """

    chart: ChartSpec | None = None
    error: ChartCommandError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> ChartSpec:
        """Return the chart or raise the recorded error."""
        if self.error is not None:
            raise self.error
        assert self.chart is not None
        return self.chart


def interpret(
    tokens: Sequence[str],
    data: Mapping[str, Sequence[Any]] | None = None,
    config: InterpreterConfig | None = None,
) -> InterpretResult:
    """Interpret a token sequence without raising chart command errors."""
    try:
        return InterpretResult(chart=parse_chart(tokens, data, config))
    except ChartCommandError as e:
        logger.info(f"Chart command rejected: {e.message}")
        return InterpretResult(error=e)
