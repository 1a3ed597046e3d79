"""
urikit.adapters – Adapters that bridge Python containers to VariablesProtocol.

These are convenience layers around the expansion engine, not part of it.

Modules
-------
variables.py → MappingVariables, PairVariables, ChainVariables, Expander
"""

from .variables import (
    ChainVariables,
    Expander,
    MappingVariables,
    PairVariables,
    as_variables,
    coerce_value,
)

__all__ = [
    "ChainVariables",
    "Expander",
    "MappingVariables",
    "PairVariables",
    "as_variables",
    "coerce_value",
]
