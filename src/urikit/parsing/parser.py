# urikit/parsing/parser.py
from __future__ import annotations

"""
TemplateParser – turns RFC 6570 template text into Literal / Expression items.

Parsing is total: an expression that does not match the grammar is kept as
a Literal holding its original ``{...}`` text, braces included, and an
unterminated ``{`` swallows the rest of the input as one Literal.

Grammar accepted for an expression body:

    expression  = [ operator ] varspec *( "," varspec )
    varspec     = varname [ ":" max-length / "*" ]
    varname     = 1*( ALPHA / DIGIT / "_" / "." / pct-encoded )
    max-length  = %x31-39 0*3DIGIT     ; 1..9999
"""

import logging
from typing import List, Optional, Tuple

from urikit.constants import (
    DIGIT,
    EXPLODE_MARKER,
    EXPRESSION_CLOSE,
    EXPRESSION_OPEN,
    MAX_PREFIX_LENGTH,
    PREFIX_MARKER,
    VARCHAR,
    VARSPEC_SEPARATOR,
)
from urikit.core.models import EXPLODE, Expression, Item, Literal, Operator, Prefix, Varspec
from urikit.logging.helpers import get_logger
from urikit.processing.encoding import is_pct_triplet


class ExpressionSyntaxError(ValueError):
    """Raised inside the parser when an expression body is malformed.

    Never escapes :class:`TemplateParser.parse`; it is turned into a Literal.
    """


def parse_varname(text: str) -> str:
    i, n = 0, len(text)
    if n == 0:
        raise ExpressionSyntaxError('empty varname')
    while i < n:
        ch = text[i]
        if ch == '%':
            if not is_pct_triplet(text, i):
                raise ExpressionSyntaxError(f'bad pct-encoded octet at {i}')
            i += 3
            continue
        if ch not in VARCHAR:
            raise ExpressionSyntaxError(f'invalid varname character {ch!r}')
        i += 1
    return text


def _parse_prefix_size(text: str) -> int:
    if text.startswith('+'):
        text = text[1:]
    if not text or text[0] == '0':
        raise ExpressionSyntaxError('prefix must start with 1-9')
    if any(ch not in DIGIT for ch in text):
        raise ExpressionSyntaxError(f'prefix is not a number: {text!r}')
    size = int(text)
    if size >= MAX_PREFIX_LENGTH:
        raise ExpressionSyntaxError(f'prefix {size} out of range')
    return size


def parse_varspec(text: str) -> Varspec:
    if not text:
        raise ExpressionSyntaxError('empty varspec')

    star = text.find(EXPLODE_MARKER)
    colon = text.find(PREFIX_MARKER)

    if star < 0 and colon < 0:
        return Varspec(parse_varname(text))
    if star >= 0 and colon >= 0:
        raise ExpressionSyntaxError('prefix and explode are mutually exclusive')
    if colon >= 0:
        varname = parse_varname(text[:colon])
        return Varspec(varname, Prefix(_parse_prefix_size(text[colon + 1:])))
    if star != len(text) - 1:
        raise ExpressionSyntaxError('explode marker must be last')
    return Varspec(parse_varname(text[:star]), EXPLODE)


def parse_expression(body: str) -> Expression:
    """Parse the text between braces into an :class:`Expression`.

    Raises:
        ExpressionSyntaxError: if any varspec is invalid (no partial lists).
    """
    if not body:
        raise ExpressionSyntaxError('empty expression')
    operator = Operator.from_sigil(body[0])
    if operator is not None:
        body = body[1:]
    variables = tuple(parse_varspec(part) for part in body.split(VARSPEC_SEPARATOR))
    return Expression(operator, variables)


def _split_once(text: str, sep: str) -> Optional[Tuple[str, str]]:
    idx = text.find(sep)
    if idx < 0:
        return None
    return text[:idx], text[idx + 1:]


class TemplateParser:
    """Parser for RFC 6570 template strings."""

    def __init__(self, *, logger: Optional[logging.Logger] = None, log_degraded: bool = True) -> None:
        self._log = logger or get_logger('parsing')
        self._log_degraded = log_degraded

    def _degrade(self, text: str, reason: str) -> Literal:
        if self._log_degraded:
            self._log.debug('expression kept as literal: %r (%s)', text, reason)
        return Literal(text)

    def parse(self, template: str) -> List[Item]:
        """Split *template* into an ordered list of items.

        Args:
            template: Template text.

        Returns:
            Items in expansion order. Never raises for malformed input.
        """
        items: List[Item] = []
        rest = template
        while rest:
            head = _split_once(rest, EXPRESSION_OPEN)
            if head is None:
                items.append(Literal(rest))
                break
            literal, rest = head
            if literal:
                items.append(Literal(literal))

            tail = _split_once(rest, EXPRESSION_CLOSE)
            if tail is None:
                items.append(self._degrade(EXPRESSION_OPEN + rest, 'unterminated'))
                break
            body, rest = tail
            try:
                items.append(parse_expression(body))
            except ExpressionSyntaxError as exc:
                items.append(self._degrade(EXPRESSION_OPEN + body + EXPRESSION_CLOSE, str(exc)))
        return items


def parse_template(template: str, *, log_degraded: bool = True) -> List[Item]:
    """Module-level shortcut for ``TemplateParser().parse(template)``."""
    return TemplateParser(log_degraded=log_degraded).parse(template)
