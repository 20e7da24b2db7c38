from selectorkit.selector.builder import combine, css_selector_builder
from selectorkit.selector.kinds import FragmentKind
from selectorkit.selector.model import Selector

__all__ = ["css_selector_builder", "combine", "FragmentKind", "Selector"]
