"""
chartcmd - keyword command grammar for building chart specifications.

Turns an already-tokenized command such as

    X_FIELD price TYPE QUANTITATIVE MARK BAR COLOR RED

into a populated chart model.
"""

from __future__ import annotations

# Re-export commonly used types for convenience
from ._version import get_version
from .core import ir
from .core.config import InterpreterConfig, load_interpreter_config
from .core.errors import (
    ChartCommandError,
    SemanticError,
    StructuralError,
    UnrecognizedInputError,
)
from .core.interpreter import InterpretResult, interpret, parse_chart

__version__ = get_version()

__all__ = [
    "__version__",
    "ir",
    "ChartCommandError",
    "InterpretResult",
    "InterpreterConfig",
    "SemanticError",
    "StructuralError",
    "UnrecognizedInputError",
    "interpret",
    "load_interpreter_config",
    "parse_chart",
]
