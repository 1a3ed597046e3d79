from __future__ import annotations

"""Operator rule table (RFC 6570 Appendix A).

Each operator maps to one immutable :class:`OperatorRules` record. The table
is closed: the seven sigils plus the default (``None``) operator.
"""

from dataclasses import dataclass
from typing import Dict, List, Optional

from urikit.core.models import Operator
from urikit.processing.encoding import RESERVED_ENCODER, UNRESERVED_ENCODER, PercentEncoder, Predicate


@dataclass(frozen=True)
class OperatorRules:
    first: str
    sep: str
    named: bool
    ifemp: str
    encoder: PercentEncoder
    # Reserved-set operators keep well-formed %XX triplets found in values.
    keep_triplets: bool = False

    @property
    def allowed(self) -> Predicate:
        return self.encoder.allowed

    def escape(self, text: str) -> str:
        if self.keep_triplets:
            return self.encoder.encode(text)
        return self.encoder.quote(text)


_SIMPLE = OperatorRules(first='', sep=',', named=False, ifemp='', encoder=UNRESERVED_ENCODER)

_RULES: Dict[Optional[Operator], OperatorRules] = {
    None: _SIMPLE,
    Operator.RESERVED: OperatorRules(
        first='', sep=',', named=False, ifemp='', encoder=RESERVED_ENCODER, keep_triplets=True
    ),
    Operator.FRAGMENT: OperatorRules(
        first='#', sep=',', named=False, ifemp='', encoder=RESERVED_ENCODER, keep_triplets=True
    ),
    Operator.LABEL: OperatorRules(first='.', sep='.', named=False, ifemp='', encoder=UNRESERVED_ENCODER),
    Operator.PATH_SEGMENT: OperatorRules(first='/', sep='/', named=False, ifemp='', encoder=UNRESERVED_ENCODER),
    Operator.PATH_PARAMETER: OperatorRules(first=';', sep=';', named=True, ifemp='', encoder=UNRESERVED_ENCODER),
    Operator.FORM_QUERY: OperatorRules(first='?', sep='&', named=True, ifemp='=', encoder=UNRESERVED_ENCODER),
    Operator.FORM_CONTINUATION: OperatorRules(
        first='&', sep='&', named=True, ifemp='=', encoder=UNRESERVED_ENCODER
    ),
}


def rules_for(operator: Optional[Operator]) -> OperatorRules:
    """Return the rule record of *operator* (``None`` is the default operator)."""
    return _RULES[operator]


class SeparatorEmitter:
    """Writes ``first`` on the first call and ``sep`` on every later call."""

    __slots__ = ('_next', '_sep')

    def __init__(self, first: str, sep: str) -> None:
        self._next = first
        self._sep = sep

    def __call__(self, out: List[str]) -> None:
        out.append(self._next)
        self._next = self._sep
