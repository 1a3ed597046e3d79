"""
expansion – Render parsed template items against a variable lookup.

The engine only sees items and a :class:`VariablesProtocol`; it never looks
at raw template text. Undefined variables and empty lists / associative
arrays are skipped without consuming a separator.
"""

from __future__ import annotations

import logging
from typing import Iterable, List, Optional

from urikit.core.config import DEFAULT_CONFIG, ExpansionConfig
from urikit.core.errors import ValueCoercionError
from urikit.core.interfaces.variables import VariablesProtocol
from urikit.core.models import AssocValue, Expression, Item, ListValue, Literal, StringValue, Value, Varspec
from urikit.logging.helpers import get_logger, trace
from urikit.processing.encoding import RESERVED_ENCODER, UNRESERVED_ENCODER
from urikit.rendering.operators import OperatorRules, SeparatorEmitter, rules_for


def _name(varspec: Varspec) -> str:
    return UNRESERVED_ENCODER.encode(varspec.varname)


def _render_string(out: List[str], rules: OperatorRules, varspec: Varspec, text: str) -> None:
    size = varspec.prefix
    if size is not None:
        text = text[:size]
    if rules.named:
        out.append(_name(varspec))
        out.append('=' if text else rules.ifemp)
    out.append(rules.escape(text))


def _render_list(out: List[str], rules: OperatorRules, varspec: Varspec, value: ListValue) -> None:
    if rules.named:
        out.append(_name(varspec))
        out.append('=')
    emit = SeparatorEmitter('', ',')
    for item in value.items:
        emit(out)
        out.append(rules.escape(item))


def _render_assoc(out: List[str], rules: OperatorRules, varspec: Varspec, value: AssocValue) -> None:
    if rules.named:
        out.append(_name(varspec))
        out.append('=')
    emit = SeparatorEmitter('', ',')
    for key, item in value.pairs:
        emit(out)
        out.append(rules.escape(key))
        out.append(',')
        out.append(rules.escape(item))


def _explode_list(out: List[str], rules: OperatorRules, varspec: Varspec, value: ListValue) -> None:
    emit = SeparatorEmitter('', rules.sep)
    for item in value.items:
        emit(out)
        if not rules.named:
            out.append(rules.escape(item))
            continue
        out.append(_name(varspec))
        if item:
            out.append('=')
            out.append(rules.escape(item))
        else:
            out.append(rules.ifemp)


def _explode_assoc(out: List[str], rules: OperatorRules, value: AssocValue) -> None:
    emit = SeparatorEmitter('', rules.sep)
    for key, item in value.pairs:
        emit(out)
        if not rules.named:
            out.append(rules.escape(key))
            out.append('=')
            out.append(rules.escape(item))
            continue
        out.append(rules.escape(key))
        if item:
            out.append('=')
            out.append(rules.escape(item))
        else:
            out.append(rules.ifemp)


class ExpansionEngine:
    """Expands parsed items into URI text.

    Instances are immutable after construction and can be shared between
    threads; every call builds its own output buffer.
    """

    def __init__(
        self,
        *,
        config: Optional[ExpansionConfig] = None,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self._cfg = config or DEFAULT_CONFIG
        self._log = logger or get_logger('expansion')

    @property
    def config(self) -> ExpansionConfig:
        return self._cfg

    def expand(self, items: Iterable[Item], variables: VariablesProtocol) -> str:
        """Render *items* in order and return the concatenated text."""
        out: List[str] = []
        for item in items:
            if isinstance(item, Literal):
                self._expand_literal(out, item)
            else:
                self._expand_expression(out, item, variables)
        return ''.join(out)

    def expand_expression(self, expression: Expression, variables: VariablesProtocol) -> str:
        out: List[str] = []
        self._expand_expression(out, expression, variables)
        return ''.join(out)

    def _expand_literal(self, out: List[str], literal: Literal) -> None:
        if self._cfg.encode_literals:
            out.append(RESERVED_ENCODER.encode(literal.text))
        else:
            out.append(literal.text)

    def _expand_expression(self, out: List[str], expression: Expression, variables: VariablesProtocol) -> None:
        rules = rules_for(expression.operator)
        emit = SeparatorEmitter(rules.first, rules.sep)
        for varspec in expression.variables:
            value = variables.get(varspec.varname)
            if value is None:
                trace(self._log, 'undefined variable skipped', varname=varspec.varname)
                continue
            self._expand_value(out, rules, emit, varspec, value)

    def _expand_value(
        self,
        out: List[str],
        rules: OperatorRules,
        emit: SeparatorEmitter,
        varspec: Varspec,
        value: Value,
    ) -> None:
        if isinstance(value, StringValue):
            emit(out)
            _render_string(out, rules, varspec, value.text)
            return
        if not isinstance(value, (ListValue, AssocValue)):
            raise ValueCoercionError(varspec.varname, value)
        if value.is_empty():
            trace(self._log, 'empty composite value skipped', varname=varspec.varname)
            return

        # A prefix modifier on a composite value is ignored.
        emit(out)
        if isinstance(value, ListValue):
            if varspec.explode:
                _explode_list(out, rules, varspec, value)
            else:
                _render_list(out, rules, varspec, value)
        elif varspec.explode:
            _explode_assoc(out, rules, value)
        else:
            _render_assoc(out, rules, varspec, value)


def expand_items(items: Iterable[Item], variables: VariablesProtocol, *, encode_literals: bool = False) -> str:
    """Shortcut for ``ExpansionEngine(...).expand(items, variables)``."""
    return ExpansionEngine(config=ExpansionConfig(encode_literals=encode_literals)).expand(items, variables)
