"""
Generic parse engine shared by every grammar.

The engine is written once against the Grammar protocol: a token sequence,
a command table and an ``init`` step. ``step`` dispatches a single keyword;
``loop`` runs ``init`` then steps until the input ends or nothing more is
recognised. Nested grammars are run from RANGE handlers by constructing a
fresh grammar over the same tokens and returning its ``loop`` result, so
every level terminates by the same rule.

Cursors are plain indices into the token sequence.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Protocol, runtime_checkable

from ..errors import StructuralError, TokenContext, make_structural_error
from .table import CommandTable, Lookahead, normalize_keyword

logger = logging.getLogger(__name__)


@runtime_checkable
class Grammar(Protocol):
    """Capabilities the engine needs from a grammar instance."""

    tokens: Sequence[str]
    table: CommandTable

    def build_table(self) -> CommandTable: ...
    def init(self, cursor: int, end: int) -> int: ...


class GrammarBase:
    """
    Base class for concrete grammars.

    Builds the command table once, provides the identity ``init`` step and
    counts how many attributes the grammar applied to its target.
    """

    def __init__(self, tokens: Sequence[str]):
        """
        Initialize grammar.

        Args:
            tokens: Full token sequence; cursors index into it
        """
        self.tokens = tokens
        self.applied = 0
        self.table = self.build_table()

    def build_table(self) -> CommandTable:
        raise NotImplementedError

    def init(self, cursor: int, end: int) -> int:
        """Consume leading tokens before table dispatch starts."""
        return cursor

    def run(self, cursor: int = 0, end: int | None = None) -> int:
        """Run this grammar over ``[cursor, end)``."""
        return loop(self, cursor, len(self.tokens) if end is None else end)


def step(grammar: Grammar, cursor: int, end: int) -> int:
    """
    Dispatch the keyword at ``cursor``.

    Returns:
        Position after everything the matched handler consumed, or
        ``cursor`` unchanged if the token is not a keyword of this grammar

    Raises:
        StructuralError: If fewer than ``min_args`` tokens follow the keyword,
            or a handler moved the cursor backwards
    """
    token = grammar.tokens[cursor]
    keyword = normalize_keyword(token)
    logger.debug(f"{type(grammar).__name__}: parsing {token!r} at {cursor}")

    descriptor = grammar.table.get(keyword)
    if descriptor is None:
        return cursor

    available = end - cursor - 1
    if available < descriptor.min_args:
        raise make_structural_error(
            keyword, descriptor.min_args, available, grammar.tokens, cursor
        )

    after_keyword = cursor + 1
    if descriptor.kind is Lookahead.POINT:
        descriptor.handler(grammar, after_keyword)
        return after_keyword + 1

    resumed = descriptor.handler(grammar, after_keyword, end)
    if resumed < after_keyword:
        raise StructuralError(
            f"Handler for {keyword} moved the cursor backwards to {resumed}",
            TokenContext(tuple(grammar.tokens), cursor),
            keyword=keyword,
        )
    return resumed


def loop(grammar: Grammar, cursor: int, end: int) -> int:
    """
    Parse as many tokens in ``[cursor, end)`` as the grammar recognises.

    Returns:
        Position after the last token consumed. Unrecognised trailing
        tokens are left for the caller to judge.
    """
    cursor = grammar.init(cursor, end)

    while cursor < end:
        following = step(grammar, cursor, end)
        if following == cursor:
            break
        cursor = following

    return cursor
