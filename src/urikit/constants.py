from __future__ import annotations

"""Character classes and grammar limits shared across urikit modules.

Everything here is plain ASCII data taken from RFC 3986 / RFC 6570 so the
parser and the codec agree on the exact same sets.
"""

from typing import FrozenSet

ALPHA: FrozenSet[str] = frozenset(
    'ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz'
)
DIGIT: FrozenSet[str] = frozenset('0123456789')
HEXDIG: FrozenSet[str] = DIGIT | frozenset('ABCDEFabcdef')

UNRESERVED: FrozenSet[str] = ALPHA | DIGIT | frozenset('-._~')
GEN_DELIMS: FrozenSet[str] = frozenset(':/?#[]@')
SUB_DELIMS: FrozenSet[str] = frozenset("!$&'()*+,;=")
RESERVED: FrozenSet[str] = GEN_DELIMS | SUB_DELIMS

# Characters allowed in a varname besides pct-encoded triplets.
VARCHAR: FrozenSet[str] = ALPHA | DIGIT | frozenset('_.')

EXPRESSION_OPEN: str = '{'
EXPRESSION_CLOSE: str = '}'
VARSPEC_SEPARATOR: str = ','
PREFIX_MARKER: str = ':'
EXPLODE_MARKER: str = '*'

# Prefix sizes must be strictly lower than this bound.
MAX_PREFIX_LENGTH: int = 10000

HEX_UPPER: str = '0123456789ABCDEF'
