from __future__ import annotations
from typing import Optional, Protocol, runtime_checkable

from urikit.core.models import Value


@runtime_checkable
class VariablesProtocol(Protocol):
    """Read-only lookup of variable values by name."""

    def get(self, name: str) -> Optional[Value]:
        """Return the value bound to `name`, or None when undefined."""
        ...
