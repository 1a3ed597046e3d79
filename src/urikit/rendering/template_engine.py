"""
template_engine – Concrete TemplateEngineProtocol implementation for urikit.

Wraps parsing and expansion behind ``render(template, variables)`` and keeps
an LRU cache of parsed templates so repeated renders of the same text parse
once.
"""

import logging
from functools import lru_cache
from typing import Any, Callable, Mapping, Optional

from urikit.adapters.variables import MappingVariables
from urikit.core.config import ExpansionConfig
from urikit.core.errors import UrikitError
from urikit.core.interfaces.templating import TemplateEngineProtocol
from urikit.logging.factory import DefaultLoggerFactory
from urikit.logging.helpers import get_logger, trace
from urikit.template import UriTemplate


class Rfc6570TemplateEngine(TemplateEngineProtocol):
    """RFC 6570 engine with a per-instance parse cache.

    Behaviour:
      • malformed expressions render as their original ``{...}`` text
      • undefined variables render as nothing
      • a binding that cannot be converted is logged and the raw template
        is returned
    """

    def __init__(
        self,
        *,
        config: Optional[ExpansionConfig] = None,
        logger: Optional[logging.Logger] = None,
        logger_factory: Optional[DefaultLoggerFactory] = None,
    ) -> None:
        self._cfg = config or ExpansionConfig.from_env()
        if logger is None and logger_factory is not None:
            logger = logger_factory.get_logger('templates')
        self._log = logger or get_logger('templates')
        self._parse: Callable[[str], UriTemplate] = lru_cache(maxsize=self._cfg.parse_cache_size)(
            self._parse_uncached
        )

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> 'Rfc6570TemplateEngine':
        """Build an engine whose config and logging both come from ``URIKIT_*`` variables."""
        return cls(
            config=ExpansionConfig.from_env(environ),
            logger_factory=DefaultLoggerFactory.from_env(environ),
        )

    @property
    def config(self) -> ExpansionConfig:
        return self._cfg

    def _parse_uncached(self, template: str) -> UriTemplate:
        trace(self._log, 'parse cache miss', template=template)
        return UriTemplate.parse(template, config=self._cfg)

    def parse(self, template: str) -> UriTemplate:
        """Return the (possibly cached) parsed form of *template*."""
        return self._parse(template)

    def cache_info(self):
        return self._parse.cache_info()  # type: ignore[attr-defined]

    def render(self, template: str, variables: Mapping[str, Any]) -> str:  # type: ignore[override]
        """Render *template* with *variables*."""
        try:
            return self.parse(template).expand(MappingVariables(dict(variables)))
        except UrikitError as exc:
            self._log.error('template rendering failed: %s', exc)
            return template
