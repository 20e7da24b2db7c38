from selectorkit.errors import ExpressionSyntaxError
from selectorkit.parser.transformer import parse_selector_expression

__all__ = ["ExpressionSyntaxError", "parse_selector_expression"]
