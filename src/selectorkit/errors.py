"""Error hierarchy for selectorkit."""
from __future__ import annotations

from typing import Any


class SelectorkitError(Exception):
    """Base error for all selectorkit errors."""


# ---------------------------------------------------------------------------
# Selector builder errors
# ---------------------------------------------------------------------------


class SelectorError(SelectorkitError, ValueError):
    """A fragment could not be appended to a selector."""

    def __init__(self, message: str, *, kind: Any = None) -> None:
        super().__init__(message)
        self.kind = kind


class OrderingViolation(SelectorError):
    """Fragment appended out of the canonical order."""

    MESSAGE = (
        "Selector parts should be arranged in the following order: "
        "element, id, class, attribute, pseudo-class, pseudo-element"
    )

    def __init__(self, *, kind: Any = None) -> None:
        super().__init__(self.MESSAGE, kind=kind)


class DuplicateFragment(SelectorError):
    """Second element, id or pseudo-element appended to a selector."""

    MESSAGE = (
        "Element, id and pseudo-element should not occur more then one time "
        "inside the selector"
    )

    def __init__(self, *, kind: Any = None) -> None:
        super().__init__(self.MESSAGE, kind=kind)


# ---------------------------------------------------------------------------
# Other errors
# ---------------------------------------------------------------------------


class ShapeBindingError(SelectorkitError, TypeError):
    """Parsed JSON could not be bound to the requested type."""

    def __init__(self, message: str, *, shape: type | None = None) -> None:
        super().__init__(message)
        self.shape = shape


class ExpressionSyntaxError(SelectorkitError):
    """Raised when a builder expression cannot be parsed."""

    def __init__(
        self, message: str, line: int | None = None, column: int | None = None
    ):
        self.line = line
        self.column = column
        super().__init__(message)


class ConfigurationError(SelectorkitError):
    """Configuration is missing or invalid."""
