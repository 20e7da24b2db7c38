"""selectorkit: CSS-like selector builder plus small object-model helpers."""
from __future__ import annotations

__version__ = "0.1.0"

from selectorkit.errors import (  # noqa: E402
    ConfigurationError,
    DuplicateFragment,
    ExpressionSyntaxError,
    OrderingViolation,
    SelectorError,
    SelectorkitError,
    ShapeBindingError,
)
from selectorkit.model import Rectangle  # noqa: E402
from selectorkit.selector import (  # noqa: E402
    FragmentKind,
    Selector,
    combine,
    css_selector_builder,
)
from selectorkit.serde import ParseError, from_json, to_json  # noqa: E402

__all__ = [
    "__version__",
    # selector
    "css_selector_builder",
    "combine",
    "FragmentKind",
    "Selector",
    # model
    "Rectangle",
    # serde
    "to_json",
    "from_json",
    "ParseError",
    # errors
    "SelectorkitError",
    "SelectorError",
    "OrderingViolation",
    "DuplicateFragment",
    "ShapeBindingError",
    "ExpressionSyntaxError",
    "ConfigurationError",
]
