from __future__ import annotations

from typing import Any, Optional, Union

from urikit.adapters.variables import (
    ChainVariables,
    Expander,
    MappingVariables,
    PairVariables,
    coerce_value,
)
from urikit.core.config import ExpansionConfig
from urikit.core.errors import UrikitError, ValueCoercionError
from urikit.core.interfaces import TemplateEngineProtocol, VariablesProtocol
from urikit.core.models import (
    AssocValue,
    ListValue,
    Operator,
    StringValue,
    Value,
    assoc_value,
    list_value,
    string_value,
)
from urikit.logging.helpers import get_logger
from urikit.rendering.template_engine import Rfc6570TemplateEngine
from urikit.template import UriTemplate

__version__ = '0.3.1'


def parse(template: str, *, config: Optional[ExpansionConfig] = None) -> UriTemplate:
    """Parse *template* into a reusable :class:`UriTemplate`."""
    return UriTemplate.parse(template, config=config)


def expand(template: Union[str, UriTemplate], variables: Any = None, /, **kwargs: Any) -> str:
    """Expand *template* (text or parsed) with *variables* and keyword bindings."""
    if not isinstance(template, UriTemplate):
        template = UriTemplate.parse(template)
    return template.expand(variables, **kwargs)


__all__ = [
    'UriTemplate',
    'parse',
    'expand',
    'Expander',
    'ExpansionConfig',
    'Rfc6570TemplateEngine',
    'TemplateEngineProtocol',
    'VariablesProtocol',
    'MappingVariables',
    'PairVariables',
    'ChainVariables',
    'coerce_value',
    'Operator',
    'Value',
    'StringValue',
    'ListValue',
    'AssocValue',
    'string_value',
    'list_value',
    'assoc_value',
    'UrikitError',
    'ValueCoercionError',
    'get_logger',
    '__version__',
]
