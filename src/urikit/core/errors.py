from __future__ import annotations

"""Exceptions raised by urikit.

Template text never produces an exception: malformed expressions degrade to
literal text. The only error surface is the adapter layer, when a native
Python object cannot be mapped onto a URI template value.
"""


class UrikitError(Exception):
    """Base class for urikit exceptions."""


class ValueCoercionError(UrikitError, TypeError):
    """Raised when an object cannot be converted into a template value."""

    def __init__(self, name: str | None, obj: object) -> None:
        self.name = name
        self.obj = obj
        where = f' for variable {name!r}' if name else ''
        super().__init__(f'cannot use {type(obj).__name__} as a URI template value{where}')
