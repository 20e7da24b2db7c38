"""Fragment kinds and their canonical order inside a compound selector."""

from __future__ import annotations

from enum import Enum


class FragmentKind(Enum):
    """Kind of the most recently appended selector fragment.

    Members are declared in canonical order; ``NONE`` marks an empty or
    combined selector and ranks below every real fragment.
    """

    NONE = "none"
    ELEMENT = "element"
    ID = "id"
    CLASS = "class"
    ATTRIBUTE = "attribute"
    PSEUDO_CLASS = "pseudo-class"
    PSEUDO_ELEMENT = "pseudo-element"

    @property
    def rank(self) -> int:
        """Position of this kind in the canonical order."""
        return _ORDER.index(self)

    @property
    def unique(self) -> bool:
        """True if the kind may not be appended twice in a row."""
        return self in _UNIQUE

    def format(self, name: str) -> str:
        """Render *name* as a fragment of this kind, e.g. ``#main``."""
        if self is FragmentKind.NONE:
            raise ValueError("Cannot format a fragment of kind 'none'")
        return _TEMPLATES[self].format(name)


_ORDER = list(FragmentKind)

_UNIQUE = frozenset(
    {FragmentKind.ELEMENT, FragmentKind.ID, FragmentKind.PSEUDO_ELEMENT}
)

_TEMPLATES = {
    FragmentKind.ELEMENT: "{}",
    FragmentKind.ID: "#{}",
    FragmentKind.CLASS: ".{}",
    FragmentKind.ATTRIBUTE: "[{}]",
    FragmentKind.PSEUDO_CLASS: ":{}",
    FragmentKind.PSEUDO_ELEMENT: "::{}",
}
