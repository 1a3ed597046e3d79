from __future__ import annotations
from typing import Any, Mapping, Protocol, runtime_checkable


@runtime_checkable
class TemplateEngineProtocol(Protocol):
    """Protocol for engines that turn a template string plus bindings into text."""

    def render(self, template: str, variables: Mapping[str, Any]) -> str:
        ...
