"""Builder facade: an empty selector every chain starts from."""

from __future__ import annotations

from selectorkit.selector.model import Selector

__all__ = ["css_selector_builder", "combine"]

css_selector_builder = Selector()

combine = Selector.combine
