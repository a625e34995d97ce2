"""
Error types for chart command interpretation.

All failures raised while interpreting a token sequence derive from
ChartCommandError. Dispatch gaps are not errors; they are logged.
"""

from collections.abc import Sequence
from dataclasses import dataclass


class ChartCommandError(Exception):
    """Base exception for all chart command errors."""

    def __init__(
        self,
        message: str,
        context: "TokenContext | None" = None,
        keyword: str | None = None,
    ):
        self.message = message
        self.context = context
        self.keyword = keyword
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format error message with context if available."""
        if self.context:
            return f"{self.message}\n{self.context.format()}"
        return self.message


class StructuralError(ChartCommandError):
    """
    Raised when a matched keyword is not followed by enough tokens.

    Examples:
    - WIDTH as the last token
    - X_FIELD with no field name
    """

    pass


class SemanticError(ChartCommandError):
    """
    Raised when a value is not acceptable for its attribute.

    Examples:
    - MARK followed by an unknown mark kind
    - TYPE followed by an unknown field kind
    - BIN followed by neither a toggle nor a bin attribute
    - WIDTH followed by a non-numeric token
    """

    pass


class UnrecognizedInputError(ChartCommandError):
    """
    Raised when the top-level grammar stops before the end of the input.

    Reported once for the whole remaining input.
    """

    def __init__(
        self,
        message: str,
        remaining: Sequence[str],
        context: "TokenContext | None" = None,
    ):
        self.remaining = list(remaining)
        super().__init__(message, context)


@dataclass(frozen=True)
class TokenContext:
    """
    Position information for an error.

    Attributes:
        tokens: The token sequence being interpreted
        position: Index of the offending token (may equal len(tokens))
    """

    tokens: tuple[str, ...]
    position: int

    def format(self) -> str:
        """
        Format the token sequence with a marker under the offending token.

        Returns:
            Two lines: the joined tokens and a caret line
        """
        line = " ".join(self.tokens)
        column = sum(len(token) + 1 for token in self.tokens[: self.position])
        if self.position >= len(self.tokens):
            column = len(line) + 1 if line else 0
            width = 1
        else:
            width = max(1, len(self.tokens[self.position]))
        return f"  {line}\n  {' ' * column}{'^' * width}"


def _context(tokens: Sequence[str] | None, position: int | None) -> TokenContext | None:
    if tokens is None or position is None:
        return None
    return TokenContext(tokens=tuple(tokens), position=position)


def make_structural_error(
    keyword: str,
    required: int,
    available: int,
    tokens: Sequence[str] | None = None,
    position: int | None = None,
) -> StructuralError:
    """
    Helper to create a StructuralError for an arity shortfall.

    Args:
        keyword: Normalised keyword that matched
        required: Minimum number of trailing tokens the keyword declares
        available: Number of tokens actually following the keyword
        tokens: Optional token sequence for context
        position: Optional index of the keyword

    Returns:
        StructuralError with context attached when available
    """
    return StructuralError(
        f"Arguments missing for {keyword}: expected at least {required}, got {available}",
        _context(tokens, position),
        keyword=keyword,
    )


def make_semantic_error(
    message: str,
    keyword: str | None = None,
    tokens: Sequence[str] | None = None,
    position: int | None = None,
) -> SemanticError:
    """
    Helper to create a SemanticError.

    Args:
        message: Error description, naming the offending attribute
        keyword: Optional attribute keyword
        tokens: Optional token sequence for context
        position: Optional index of the offending value

    Returns:
        SemanticError with context attached when available
    """
    return SemanticError(message, _context(tokens, position), keyword=keyword)


def make_unrecognized_input_error(
    tokens: Sequence[str],
    position: int,
) -> UnrecognizedInputError:
    """
    Helper to create an UnrecognizedInputError for leftover tokens.

    Args:
        tokens: The full token sequence
        position: Index where the top-level grammar stopped

    Returns:
        UnrecognizedInputError citing everything from position onward
    """
    remaining = list(tokens[position:])
    return UnrecognizedInputError(
        f"Not a valid chart command: unrecognized input {' '.join(remaining)!r}",
        remaining,
        _context(tokens, position),
    )
