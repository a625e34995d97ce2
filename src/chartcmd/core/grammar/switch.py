"""
Keyword switch: match one token against an enumerated keyword set.

The resolver does not decide whether a miss is fatal; callers do.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from enum import Enum
from typing import Any, TypeVar

from .table import normalize_keyword

E = TypeVar("E", bound=Enum)

Effect = Callable[[], Any]


def resolve_switch(token: str, cases: Mapping[str, Effect]) -> bool:
    """
    Run the effect registered for ``token``.

    Args:
        token: Token to resolve (matched case-insensitively)
        cases: Normalised keyword to zero-argument effect

    Returns:
        True if a case matched and its effect ran, False otherwise
    """
    effect = cases.get(normalize_keyword(token))
    if effect is None:
        return False
    effect()
    return True


def toggle_cases(setter: Callable[[bool], Any]) -> dict[str, Effect]:
    """Cases for a TRUE/FALSE toggle."""
    return {
        "TRUE": lambda: setter(True),
        "FALSE": lambda: setter(False),
    }


def enum_cases(enum_cls: type[E], setter: Callable[[E], Any]) -> dict[str, Effect]:
    """
    Cases for every member of an enum, keyed by member name.

    Each keyword maps to its own member, so the mapping is injective.
    """
    return {
        normalize_keyword(member.name): (lambda member=member: setter(member))
        for member in enum_cls
    }
