"""
encoding – Percent-encoding codec used by the parser and the expander.

Two entry points:

  • :func:`pct_encode` walks the input with a three-state machine so that
    well-formed ``%XX`` triplets survive untouched while a stray ``%`` is
    itself escaped as ``%25``.
  • :func:`quote_chars` escapes character by character with no triplet
    passthrough (every ``%`` becomes ``%25``).

Both take an *allowed* predicate; characters that fail it are replaced by
their UTF-8 bytes, each written as ``%XX`` with uppercase hex digits.
"""

from __future__ import annotations

from enum import Enum
from typing import Callable, List, Optional

from urikit.constants import ALPHA, DIGIT, HEX_UPPER, HEXDIG, RESERVED, UNRESERVED

Predicate = Callable[[str], bool]


def is_alpha(ch: str) -> bool:
    return ch in ALPHA


def is_digit(ch: str) -> bool:
    return ch in DIGIT


def is_hexdig(ch: str) -> bool:
    return ch in HEXDIG


def is_unreserved(ch: str) -> bool:
    return ch in UNRESERVED


def is_reserved(ch: str) -> bool:
    return ch in RESERVED


def is_unreserved_or_reserved(ch: str) -> bool:
    return ch in UNRESERVED or ch in RESERVED


def allow_all(ch: str) -> bool:
    """Predicate that lets every character through (only ``%`` handling applies)."""
    return True


def hex_escape(ch: str) -> str:
    """Return the ``%XX`` escape sequence of *ch* encoded as UTF-8."""
    out: List[str] = []
    for b in ch.encode('utf-8', 'surrogatepass'):
        out.append('%')
        out.append(HEX_UPPER[b >> 4])
        out.append(HEX_UPPER[b & 0x0F])
    return ''.join(out)


def _push_char(allowed: Predicate, out: List[str], ch: str) -> None:
    if allowed(ch):
        out.append(ch)
    else:
        out.append(hex_escape(ch))


class _State(Enum):
    NORMAL = 0
    SAW_PERCENT = 1
    SAW_PERCENT_HEX = 2


class PercentEncoder:
    """Streaming percent-encoder bound to one *allowed* predicate.

    The encoder holds no state between calls to :meth:`encode`; instances are
    safe to share across threads.
    """

    def __init__(self, allowed: Predicate) -> None:
        self._allowed = allowed

    @property
    def allowed(self) -> Predicate:
        return self._allowed

    def _flush(self, out: List[str], state: _State, pending: Optional[str]) -> None:
        if state is _State.SAW_PERCENT:
            out.append('%25')
        elif state is _State.SAW_PERCENT_HEX:
            out.append('%25')
            _push_char(self._allowed, out, pending or '')

    def encode(self, text: str) -> str:
        """Encode *text*, keeping valid ``%XX`` triplets verbatim.

        Args:
            text: Arbitrary Unicode input.

        Returns:
            The escaped string.
        """
        out: List[str] = []
        state = _State.NORMAL
        pending: Optional[str] = None

        for ch in text:
            if state is _State.SAW_PERCENT and is_hexdig(ch):
                state, pending = _State.SAW_PERCENT_HEX, ch
                continue
            if state is _State.SAW_PERCENT_HEX and is_hexdig(ch):
                out.append('%')
                out.append(pending or '')
                out.append(ch)
                state, pending = _State.NORMAL, None
                continue

            # Anything else: flush the incomplete escape, then reprocess ch.
            self._flush(out, state, pending)
            pending = None
            if ch == '%':
                state = _State.SAW_PERCENT
            else:
                _push_char(self._allowed, out, ch)
                state = _State.NORMAL

        self._flush(out, state, pending)
        return ''.join(out)

    def quote(self, text: str) -> str:
        """Escape *text* one character at a time (``%`` is always escaped
        unless the predicate allows it)."""
        out: List[str] = []
        for ch in text:
            _push_char(self._allowed, out, ch)
        return ''.join(out)


UNRESERVED_ENCODER = PercentEncoder(is_unreserved)
RESERVED_ENCODER = PercentEncoder(is_unreserved_or_reserved)


def pct_encode(allowed: Predicate, text: str) -> str:
    """Encode *text* under *allowed*, passing ``%XX`` triplets through."""
    return PercentEncoder(allowed).encode(text)


def quote_chars(allowed: Predicate, text: str) -> str:
    """Escape every character of *text* that fails *allowed*."""
    return PercentEncoder(allowed).quote(text)


def is_pct_triplet(text: str, index: int) -> bool:
    """Return True when ``text[index:index + 3]`` is a well-formed ``%XX``."""
    return (
        index + 2 < len(text)
        and text[index] == '%'
        and is_hexdig(text[index + 1])
        and is_hexdig(text[index + 2])
    )
