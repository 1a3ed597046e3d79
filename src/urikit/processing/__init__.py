"""Public API surface for urikit.processing."""
from .encoding import (
    RESERVED_ENCODER,
    UNRESERVED_ENCODER,
    PercentEncoder,
    is_unreserved,
    is_unreserved_or_reserved,
    pct_encode,
    quote_chars,
)

__all__ = [
    "RESERVED_ENCODER",
    "UNRESERVED_ENCODER",
    "PercentEncoder",
    "is_unreserved",
    "is_unreserved_or_reserved",
    "pct_encode",
    "quote_chars",
]
