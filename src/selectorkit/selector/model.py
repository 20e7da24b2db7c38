"""Selector model: an immutable (text, last kind) pair with builder methods."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from selectorkit.errors import DuplicateFragment, OrderingViolation
from selectorkit.selector.kinds import FragmentKind

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Selector:
    """A CSS-like selector built one fragment at a time.

    Each builder method returns a new Selector; the receiver is never
    modified, so several chains can branch from one shared base::

        base = Selector().element("a")
        base.class_("x").stringify()   # 'a.x'
        base.attr("href").stringify()  # 'a[href]'
    """

    text: str = ""
    kind: FragmentKind = FragmentKind.NONE

    # --- fragments ------------------------------------------------------------

    def element(self, name: str) -> Selector:
        return self._append(FragmentKind.ELEMENT, name)

    def id(self, name: str) -> Selector:
        return self._append(FragmentKind.ID, name)

    def class_(self, name: str) -> Selector:
        return self._append(FragmentKind.CLASS, name)

    def attr(self, name: str) -> Selector:
        return self._append(FragmentKind.ATTRIBUTE, name)

    def pseudo_class(self, name: str) -> Selector:
        return self._append(FragmentKind.PSEUDO_CLASS, name)

    def pseudo_element(self, name: str) -> Selector:
        return self._append(FragmentKind.PSEUDO_ELEMENT, name)

    # --- composition ----------------------------------------------------------

    @staticmethod
    def combine(left: Selector, combinator: str, right: Selector) -> Selector:
        """Join two selectors with *combinator* (copied verbatim).

        The result has kind NONE, so further fragments start fresh.
        """
        return Selector(text=f"{left.text} {combinator} {right.text}")

    def stringify(self) -> str:
        """Return the accumulated selector text."""
        return self.text

    def __str__(self) -> str:
        return self.text

    # --- internals ------------------------------------------------------------

    def _append(self, kind: FragmentKind, name: str) -> Selector:
        # Ordering is checked against the receiver before duplicates.
        if kind.rank < self.kind.rank:
            logger.debug(
                "Rejected %s after %s in %r", kind.value, self.kind.value, self.text
            )
            raise OrderingViolation(kind=kind)
        if kind.unique and kind is self.kind:
            logger.debug("Rejected repeated %s in %r", kind.value, self.text)
            raise DuplicateFragment(kind=kind)
        return Selector(text=self.text + kind.format(name), kind=kind)
