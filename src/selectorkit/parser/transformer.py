"""Lark Transformer that evaluates builder-call expressions into Selectors."""

from __future__ import annotations

import re
from functools import lru_cache
from pathlib import Path

from lark import Lark, Token, Transformer
from lark.exceptions import LarkError, VisitError

from selectorkit.errors import ExpressionSyntaxError
from selectorkit.selector import Selector, css_selector_builder

GRAMMAR_PATH = Path(__file__).parent / "grammar.lark"

# Expression names (camelCase and snake_case) -> Selector method names.
_FRAGMENT_METHODS: dict[str, str] = {
    "element": "element",
    "id": "id",
    "class": "class_",
    "class_": "class_",
    "attr": "attr",
    "pseudoClass": "pseudo_class",
    "pseudo_class": "pseudo_class",
    "pseudoElement": "pseudo_element",
    "pseudo_element": "pseudo_element",
}

_ESCAPE_RE = re.compile(r"\\(.)", re.DOTALL)


def _unquote(token: Token) -> str:
    """Strip surrounding quotes and resolve backslash escapes."""
    return _ESCAPE_RE.sub(r"\1", str(token)[1:-1])


def _apply(selector: Selector, call: tuple[str, str]) -> Selector:
    method, value = call
    return getattr(selector, method)(value)


class ExpressionTransformer(Transformer):  # type: ignore[type-arg]
    """Evaluate each call against the builder as the tree is reduced."""

    def call(self, items: list[Token]) -> tuple[str, str]:
        return (_FRAGMENT_METHODS[str(items[0])], _unquote(items[1]))

    def combination(self, items: list[object]) -> Selector:
        left, combinator, right = items
        return Selector.combine(left, _unquote(combinator), right)  # type: ignore[arg-type]

    def expr(self, items: list[object]) -> Selector:
        head, *calls = items
        if isinstance(head, Selector):
            selector = head
        else:
            selector = _apply(css_selector_builder, head)  # type: ignore[arg-type]
        for call in calls:
            selector = _apply(selector, call)  # type: ignore[arg-type]
        return selector

    def start(self, items: list[object]) -> Selector:
        return items[0]  # type: ignore[return-value]


@lru_cache(maxsize=1)
def _parser() -> Lark:
    return Lark(GRAMMAR_PATH.read_text(), parser="lalr", start="start")


def parse_selector_expression(source: str) -> Selector:
    """Parse and evaluate a builder-call expression into a Selector.

    Builder errors (OrderingViolation, DuplicateFragment) propagate unchanged.
    """
    try:
        tree = _parser().parse(source)
    except LarkError as e:
        line = getattr(e, "line", None)
        column = getattr(e, "column", None)
        raise ExpressionSyntaxError(str(e), line=line, column=column) from e
    try:
        return ExpressionTransformer().transform(tree)
    except VisitError as e:
        raise e.orig_exc from None
