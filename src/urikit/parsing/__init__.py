"""Public API surface for urikit.parsing."""
from .parser import ExpressionSyntaxError, TemplateParser, parse_expression, parse_template

__all__ = ["ExpressionSyntaxError", "TemplateParser", "parse_expression", "parse_template"]
