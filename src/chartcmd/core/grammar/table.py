"""
Command tables for keyword-driven grammars.

A command table maps a normalised keyword to a CommandDescriptor telling the
engine how many tokens must follow the keyword and how to hand them to the
grammar's handler.

Handlers come in two shapes:

- POINT: ``handler(grammar, cursor) -> None``. Looks at the single token at
  ``cursor`` (the one right after the keyword). The engine always advances
  one position past it afterwards.
- RANGE: ``handler(grammar, cursor, end) -> int``. May look at any number of
  tokens in ``[cursor, end)`` and returns the position where parsing should
  continue.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Any


class Lookahead(Enum):
    """How a handler consumes the tokens following its keyword."""

    POINT = "point"
    RANGE = "range"


PointHandler = Callable[[Any, int], None]
RangeHandler = Callable[[Any, int, int], int]


@dataclass(frozen=True)
class CommandDescriptor:
    """
    Dispatch entry for one keyword.

    Attributes:
        keyword: Normalised keyword
        min_args: Minimum number of tokens that must follow the keyword
        kind: Handler shape
        handler: Function called with the grammar instance as first argument
    """

    keyword: str
    min_args: int
    kind: Lookahead
    handler: PointHandler | RangeHandler


CommandTable = Mapping[str, CommandDescriptor]


def normalize_keyword(token: str) -> str:
    """Normalise a token for keyword lookup."""
    return token.upper()


def point(keyword: str, handler: PointHandler, min_args: int = 1) -> CommandDescriptor:
    """Describe a keyword whose handler consumes exactly one following token."""
    return CommandDescriptor(normalize_keyword(keyword), min_args, Lookahead.POINT, handler)


def span(keyword: str, handler: RangeHandler, min_args: int = 1) -> CommandDescriptor:
    """Describe a keyword whose handler consumes a variable number of tokens."""
    return CommandDescriptor(normalize_keyword(keyword), min_args, Lookahead.RANGE, handler)


def build_table(descriptors: Iterable[CommandDescriptor]) -> CommandTable:
    """
    Build a read-only command table.

    Raises:
        ValueError: If two descriptors share a keyword or an arity is invalid
    """
    table: dict[str, CommandDescriptor] = {}
    for descriptor in descriptors:
        if descriptor.min_args < 0:
            raise ValueError(f"Negative arity for {descriptor.keyword}")
        if descriptor.kind is Lookahead.POINT and descriptor.min_args < 1:
            raise ValueError(f"POINT handler for {descriptor.keyword} needs at least one argument")
        if descriptor.keyword in table:
            raise ValueError(f"Duplicate keyword in command table: {descriptor.keyword}")
        table[descriptor.keyword] = descriptor
    return MappingProxyType(table)
