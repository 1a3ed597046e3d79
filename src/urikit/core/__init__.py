from __future__ import annotations

"""Public surface for urikit.core: data model, protocols, config and errors."""

from urikit.core.config import DEFAULT_CONFIG, ExpansionConfig
from urikit.core.errors import UrikitError, ValueCoercionError
from urikit.core.interfaces import (
    TemplateEngineProtocol,
    VariablesProtocol,
)
from urikit.core.models import (
    EXPLODE,
    AssocValue,
    Expression,
    Item,
    ListValue,
    Literal,
    Modifier,
    Operator,
    Prefix,
    StringValue,
    Value,
    Varspec,
    assoc_value,
    list_value,
    string_value,
)

__all__ = [
    # Data model
    "EXPLODE",
    "AssocValue",
    "Expression",
    "Item",
    "ListValue",
    "Literal",
    "Modifier",
    "Operator",
    "Prefix",
    "StringValue",
    "Value",
    "Varspec",
    "assoc_value",
    "list_value",
    "string_value",
    # Protocols
    "TemplateEngineProtocol",
    "VariablesProtocol",
    # Config / errors
    "DEFAULT_CONFIG",
    "ExpansionConfig",
    "UrikitError",
    "ValueCoercionError",
]
