"""
adapters.variables – Lookup adapters for common Python containers.

The expansion engine only needs :class:`VariablesProtocol`. This module
bridges plain dictionaries, ordered pair sequences and keyword arguments to
that Protocol, converting native Python objects on lookup:

    str                       → StringValue
    int / float / Decimal     → StringValue of ``str(obj)``
    bool                      → StringValue ``'true'`` / ``'false'``
    Mapping                   → AssocValue (iteration order)
    list / tuple              → ListValue (elements stringified)
    StringValue / ListValue / AssocValue → unchanged
    None                      → undefined
"""

from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal
from typing import Any, Dict, Iterable, Mapping, Optional, Sequence, Tuple, TYPE_CHECKING

from urikit.core.errors import ValueCoercionError
from urikit.core.interfaces.variables import VariablesProtocol
from urikit.core.models import AssocValue, ListValue, StringValue, Value, assoc_value, list_value, string_value

if TYPE_CHECKING:
    from urikit.template import UriTemplate

_VALUE_TYPES = (StringValue, ListValue, AssocValue)


def _scalar_text(obj: Any) -> Optional[str]:
    if isinstance(obj, str):
        return obj
    if isinstance(obj, bool):
        return 'true' if obj else 'false'
    if isinstance(obj, (int, float, Decimal)):
        return str(obj)
    return None


def coerce_value(obj: Any, *, name: Optional[str] = None) -> Optional[Value]:
    """Convert *obj* into a template value (None stays undefined).

    Raises:
        ValueCoercionError: for objects with no URI template representation.
    """
    if obj is None or isinstance(obj, _VALUE_TYPES):
        return obj
    text = _scalar_text(obj)
    if text is not None:
        return StringValue(text)
    if isinstance(obj, Mapping):
        pairs = []
        for k, v in obj.items():
            kt, vt = _scalar_text(k), _scalar_text(v)
            if kt is None or vt is None:
                raise ValueCoercionError(name, obj)
            pairs.append((kt, vt))
        return AssocValue(tuple(pairs))
    if isinstance(obj, (list, tuple)):
        items = []
        for v in obj:
            vt = _scalar_text(v)
            if vt is None:
                raise ValueCoercionError(name, obj)
            items.append(vt)
        return ListValue(tuple(items))
    raise ValueCoercionError(name, obj)


@dataclass(frozen=True)
class MappingVariables(VariablesProtocol):
    """Adapter that fulfills VariablesProtocol over any ``Mapping``."""

    mapping: Mapping[str, Any]

    def get(self, name: str) -> Optional[Value]:  # type: ignore[override]
        return coerce_value(self.mapping.get(name), name=name)


@dataclass(frozen=True)
class PairVariables(VariablesProtocol):
    """Adapter over an ordered sequence of ``(name, value)`` pairs.

    The first pair whose name matches wins.
    """

    pairs: Sequence[Tuple[str, Any]]

    def get(self, name: str) -> Optional[Value]:  # type: ignore[override]
        for key, obj in self.pairs:
            if key == name:
                return coerce_value(obj, name=name)
        return None


class ChainVariables(VariablesProtocol):
    """Look names up in several sources, first defined value wins."""

    def __init__(self, *sources: VariablesProtocol) -> None:
        self._sources = sources

    def get(self, name: str) -> Optional[Value]:  # type: ignore[override]
        for src in self._sources:
            value = src.get(name)
            if value is not None:
                return value
        return None


def as_variables(variables: Any = None, overrides: Optional[Mapping[str, Any]] = None) -> VariablesProtocol:
    """Normalize *variables* (+ keyword *overrides*) into a VariablesProtocol.

    Accepts None, an object already implementing the Protocol, a Mapping, or
    a sequence of ``(name, value)`` pairs.
    """
    if variables is None:
        base: VariablesProtocol = MappingVariables({})
    elif isinstance(variables, Mapping):
        base = MappingVariables(variables)
    elif isinstance(variables, VariablesProtocol):
        base = variables
    elif isinstance(variables, (list, tuple)):
        base = PairVariables(tuple(variables))
    else:
        raise ValueCoercionError(None, variables)
    if overrides:
        return ChainVariables(MappingVariables(dict(overrides)), base)
    return base


@dataclass
class Expander:
    """Chainable binding builder tied to one parsed template.

    >>> UriTemplate.parse('{?q,tags}').expander().set_string('q', 'x').set_list('tags', ['a']).expand()
    '?q=x&tags=a'
    """

    template: 'UriTemplate'
    variables: Dict[str, Value] = field(default_factory=dict)

    def set_string(self, name: str, text: str) -> 'Expander':
        self.variables[name] = string_value(text)
        return self

    def set_list(self, name: str, items: Iterable[str]) -> 'Expander':
        self.variables[name] = list_value(items)
        return self

    def set_assoc(self, name: str, pairs: Mapping[str, str] | Iterable[Tuple[str, str]]) -> 'Expander':
        self.variables[name] = assoc_value(pairs)
        return self

    def unset(self, name: str) -> 'Expander':
        self.variables.pop(name, None)
        return self

    def expand(self) -> str:
        return self.template.expand(MappingVariables(self.variables))
