"""
Keyword-dispatch grammar engine.

Re-exports the pieces concrete grammars are built from.
"""

from .dispatch import TypeDispatch
from .engine import Grammar, GrammarBase, loop, step
from .switch import enum_cases, resolve_switch, toggle_cases
from .table import (
    CommandDescriptor,
    CommandTable,
    Lookahead,
    build_table,
    normalize_keyword,
    point,
    span,
)

__all__ = [
    "CommandDescriptor",
    "CommandTable",
    "Grammar",
    "GrammarBase",
    "Lookahead",
    "TypeDispatch",
    "build_table",
    "enum_cases",
    "loop",
    "normalize_keyword",
    "point",
    "resolve_switch",
    "span",
    "step",
    "toggle_cases",
]
