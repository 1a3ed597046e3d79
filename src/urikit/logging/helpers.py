from __future__ import annotations

"""Logger naming, opt-in handler setup and env-gated tracing for urikit.

Library modules only ever call :func:`get_logger` and :func:`trace`. Handlers
are attached by :func:`setup_base_logger`, which is reached through
``DefaultLoggerFactory`` (for instance via ``Rfc6570TemplateEngine.from_env``)
or called directly by an application.
"""

import json
import logging
import os
import sys
from datetime import datetime, timezone
from typing import Optional, TextIO

BASE_LOGGER_NAME = 'urikit'
TRACE_ENV = 'URIKIT_TRACE'


class JsonLogFormatter(logging.Formatter):
    """One JSON object per record: ts, level, module, msg, version and ctx.

    ``ts`` is UTC with millisecond precision and a ``Z`` suffix; ``ctx`` is
    present only when the record carries a non-empty ``context`` dict, which
    is what :func:`trace` attaches.
    """

    def __init__(self) -> None:
        super().__init__()
        self._version = _package_version()

    def format(self, record: logging.LogRecord) -> str:
        stamp = datetime.fromtimestamp(record.created, tz=timezone.utc)
        payload = {
            'ts': stamp.isoformat(timespec='milliseconds').replace('+00:00', 'Z'),
            'level': record.levelname,
            'module': record.name,
            'msg': record.getMessage(),
            'version': self._version,
        }
        context = getattr(record, 'context', None)
        if isinstance(context, dict) and context:
            payload['ctx'] = context
        return json.dumps(payload, ensure_ascii=False)


def _package_version() -> str:
    # urikit/__init__ imports modules that import this one.
    try:
        from urikit import __version__
    except ImportError:
        return os.getenv('URIKIT_VERSION', 'unknown')
    return str(__version__)


def setup_base_logger(
    *, json_logs: bool = False, level: int = logging.INFO, stream: Optional[TextIO] = None
) -> logging.Logger:
    """Attach a single stream handler to the 'urikit' logger.

    A second call only updates the level; the handler and its format stay
    as first configured. Propagation to the root logger is switched off.
    """
    base = logging.getLogger(BASE_LOGGER_NAME)
    base.setLevel(level)
    if base.handlers:
        return base

    base.propagate = False
    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setFormatter(JsonLogFormatter() if json_logs else logging.Formatter('%(levelname)s: %(message)s'))
    base.addHandler(handler)
    return base


def get_logger(name: str | None = None) -> logging.Logger:
    """Map ``'parsing'`` to ``urikit.parsing``; qualified names pass through."""
    if not name or name == BASE_LOGGER_NAME:
        return logging.getLogger(BASE_LOGGER_NAME)
    if name.startswith(BASE_LOGGER_NAME + '.'):
        return logging.getLogger(name)
    return logging.getLogger(f'{BASE_LOGGER_NAME}.{name}')


def is_trace_enabled() -> bool:
    return os.getenv(TRACE_ENV) == '1'


def trace(logger: logging.Logger, message: str, **ctx) -> None:
    """Log *message* at DEBUG when ``URIKIT_TRACE=1``; *ctx* rides along as ``context``."""
    if not is_trace_enabled():
        return
    if ctx:
        logger.debug('%s | ctx=%r', message, ctx, extra={'context': ctx})
    else:
        logger.debug('%s', message)
