from __future__ import annotations

"""Expansion configuration.

``ExpansionConfig`` is an immutable blob handed to the parser, the expander
and the template engine. ``from_env`` reads the ``URIKIT_*`` flags:

    URIKIT_ENCODE_LITERALS   1/true/yes/on → escape literal spans
    URIKIT_PARSE_CACHE_SIZE  integer ≥ 0   → template engine LRU size
    URIKIT_LOG_DEGRADED      1/true/yes/on → DEBUG record per degraded expression
"""

import os
from dataclasses import dataclass
from typing import Mapping, Optional

from urikit.logging.helpers import get_logger

logger = get_logger('config')

_TRUTHY = frozenset({'1', 'true', 'yes', 'on'})
_FALSY = frozenset({'0', 'false', 'no', 'off', ''})


def _env_flag(env: Mapping[str, str], key: str, default: bool) -> bool:
    raw = env.get(key)
    if raw is None:
        return default
    token = raw.strip().lower()
    if token in _TRUTHY:
        return True
    if token in _FALSY:
        return False
    logger.warning('⚠  ignoring %s=%r (expected a boolean flag)', key, raw)
    return default


def _env_int(env: Mapping[str, str], key: str, default: int) -> int:
    raw = env.get(key)
    if raw is None or not raw.strip():
        return default
    try:
        value = int(raw.strip())
    except ValueError:
        logger.warning('⚠  ignoring %s=%r (expected an integer)', key, raw)
        return default
    if value < 0:
        logger.warning('⚠  ignoring %s=%r (must not be negative)', key, raw)
        return default
    return value


@dataclass(frozen=True)
class ExpansionConfig:
    """Immutable settings shared by parsing, expansion and the engine."""

    encode_literals: bool = False
    parse_cache_size: int = 128
    log_degraded: bool = True

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> 'ExpansionConfig':
        """Build a config from ``URIKIT_*`` variables (``os.environ`` by default)."""
        env = os.environ if environ is None else environ
        base = cls()
        return cls(
            encode_literals=_env_flag(env, 'URIKIT_ENCODE_LITERALS', base.encode_literals),
            parse_cache_size=_env_int(env, 'URIKIT_PARSE_CACHE_SIZE', base.parse_cache_size),
            log_degraded=_env_flag(env, 'URIKIT_LOG_DEGRADED', base.log_degraded),
        )


DEFAULT_CONFIG = ExpansionConfig()
