from __future__ import annotations

import logging
import os
from typing import Mapping, Optional, TextIO

from urikit.logging.helpers import get_logger, setup_base_logger


class DefaultLoggerFactory:
    """Hands out 'urikit.*' loggers, configuring the base logger on first use.

    Nothing is configured at construction time, so building a factory in a
    library context has no side effects until a logger is requested.
    """

    def __init__(self, *, json_logs: bool = False, level: int = logging.INFO, stream: Optional[TextIO] = None) -> None:
        self._json = bool(json_logs)
        self._level = int(level)
        self._stream: Optional[TextIO] = stream
        self._configured = False

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None, *, stream: Optional[TextIO] = None) -> 'DefaultLoggerFactory':
        """Build a factory from URIKIT_LOG_JSON (=1) and URIKIT_LOG_LEVEL (name or number)."""
        env = os.environ if environ is None else environ
        raw_level = (env.get('URIKIT_LOG_LEVEL') or '').strip()
        level = logging.INFO
        if raw_level.isdigit():
            level = int(raw_level)
        elif raw_level:
            resolved = logging.getLevelName(raw_level.upper())
            if isinstance(resolved, int):
                level = resolved
        return cls(json_logs=env.get('URIKIT_LOG_JSON') == '1', level=level, stream=stream)

    @property
    def level(self) -> int:
        return self._level

    @property
    def json_logs(self) -> bool:
        return self._json

    def _ensure_config(self) -> None:
        if self._configured:
            return
        setup_base_logger(json_logs=self._json, level=self._level, stream=self._stream)
        self._configured = True

    def get_logger(self, name: str) -> logging.Logger:
        self._ensure_config()
        return get_logger(name)
