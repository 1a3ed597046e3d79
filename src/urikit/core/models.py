from __future__ import annotations

"""Parsed-template and variable-value data model.

Items:
    - Literal: raw text emitted verbatim.
    - Expression: one ``{...}`` construct (operator + ordered varspecs).

Values:
    - StringValue, ListValue, AssocValue: the three RFC 6570 §2.3 shapes.

All classes are frozen dataclasses; a parsed template can be shared and
expanded concurrently without copying.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Mapping, Optional, Tuple, Union


class Operator(Enum):
    """Expression operators keyed by their sigil."""

    RESERVED = '+'
    FRAGMENT = '#'
    LABEL = '.'
    PATH_SEGMENT = '/'
    PATH_PARAMETER = ';'
    FORM_QUERY = '?'
    FORM_CONTINUATION = '&'

    @classmethod
    def from_sigil(cls, ch: str) -> Optional['Operator']:
        try:
            return cls(ch)
        except ValueError:
            return None


@dataclass(frozen=True)
class Prefix:
    """``:N`` modifier, keeps the first N code points of a string value."""

    size: int

    def to_template(self) -> str:
        return f':{self.size}'


class _ExplodeType:
    """Singleton type for the ``*`` modifier."""

    _instance: Optional['_ExplodeType'] = None

    def __new__(cls) -> '_ExplodeType':
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return 'EXPLODE'

    def __reduce__(self) -> str:
        return 'EXPLODE'

    def to_template(self) -> str:
        return '*'


EXPLODE = _ExplodeType()

Modifier = Union[Prefix, _ExplodeType]


@dataclass(frozen=True)
class Varspec:
    varname: str
    modifier: Optional[Modifier] = None

    @property
    def explode(self) -> bool:
        return self.modifier is EXPLODE

    @property
    def prefix(self) -> Optional[int]:
        if isinstance(self.modifier, Prefix):
            return self.modifier.size
        return None

    def to_template(self) -> str:
        if self.modifier is None:
            return self.varname
        return self.varname + self.modifier.to_template()


@dataclass(frozen=True)
class Literal:
    text: str

    def to_template(self) -> str:
        return self.text


@dataclass(frozen=True)
class Expression:
    operator: Optional[Operator]
    variables: Tuple[Varspec, ...]

    @property
    def varnames(self) -> Tuple[str, ...]:
        return tuple(v.varname for v in self.variables)

    def to_template(self) -> str:
        sigil = self.operator.value if self.operator is not None else ''
        body = ','.join(v.to_template() for v in self.variables)
        return '{' + sigil + body + '}'


Item = Union[Literal, Expression]


@dataclass(frozen=True)
class StringValue:
    text: str

    def is_empty(self) -> bool:
        return not self.text


@dataclass(frozen=True)
class ListValue:
    items: Tuple[str, ...] = ()

    def is_empty(self) -> bool:
        return not self.items


@dataclass(frozen=True)
class AssocValue:
    """Ordered key/value pairs; keys may repeat and order is significant."""

    pairs: Tuple[Tuple[str, str], ...] = ()

    def is_empty(self) -> bool:
        return not self.pairs

    def keys(self) -> Tuple[str, ...]:
        return tuple(k for k, _ in self.pairs)


Value = Union[StringValue, ListValue, AssocValue]


def string_value(text: str) -> StringValue:
    return StringValue(str(text))


def list_value(items: Iterable[str]) -> ListValue:
    return ListValue(tuple(str(v) for v in items))


def assoc_value(pairs: Union[Mapping[str, str], Iterable[Tuple[str, str]]]) -> AssocValue:
    """Build an AssocValue from a mapping (insertion order) or pair iterable."""
    if isinstance(pairs, Mapping):
        pairs = pairs.items()
    return AssocValue(tuple((str(k), str(v)) for k, v in pairs))
