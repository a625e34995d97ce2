"""
Type-indexed dispatch over a closed set of unrelated payload shapes.

Some model fields hold exactly one of several shapes that share no common
interface (a chart's mark, for instance). A TypeDispatch maps each concrete
shape class to a handler so one logical operation can be applied to
whichever shape is currently held.

Lookup is by exact class. A payload whose class has no handler is a
dispatch gap: it is logged and left untouched, and the surrounding parse
carries on.

Example:

    set_color = TypeDispatch[str]("color")
    set_color.register(BarMark, lambda mark, color: setattr(mark, "color", color))
    set_color.visit(chart.mark, "red")
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterator
from typing import Any, Generic, TypeVar

logger = logging.getLogger(__name__)

A = TypeVar("A")

ShapeHandler = Callable[[Any, A], None]


class TypeDispatch(Generic[A]):
    """Registry of per-shape handlers for one operation."""

    def __init__(self, name: str):
        """
        Initialize an empty registry.

        Args:
            name: Operation name used in diagnostics
        """
        self.name = name
        self._handlers: dict[type, ShapeHandler[A]] = {}

    def register(
        self, shape: type, handler: ShapeHandler[A] | None = None
    ) -> Any:
        """
        Register ``handler`` for ``shape``.

        Can be used as a decorator when ``handler`` is omitted.

        Raises:
            ValueError: If ``shape`` already has a handler
        """
        if handler is None:

            def decorator(func: ShapeHandler[A]) -> ShapeHandler[A]:
                self.register(shape, func)
                return func

            return decorator

        if shape in self._handlers:
            raise ValueError(f"{self.name}: handler already registered for {shape.__name__}")
        logger.debug(f"{self.name}: registered handler for {shape.__name__}")
        self._handlers[shape] = handler
        return handler

    def handles(self, shape: type) -> bool:
        return shape in self._handlers

    def __iter__(self) -> Iterator[type]:
        return iter(self._handlers)

    def __len__(self) -> int:
        return len(self._handlers)

    def visit(self, payload: Any, arg: A) -> bool:
        """
        Apply the handler registered for the payload's class.

        Returns:
            True if a handler ran, False on a dispatch gap
        """
        handler = self._handlers.get(type(payload))
        if handler is None:
            logger.warning(
                f"{self.name}: unregistered shape {type(payload).__qualname__!r}, ignoring"
            )
            return False
        handler(payload, arg)
        return True
