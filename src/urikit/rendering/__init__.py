"""Public API surface for urikit.rendering."""
__all__ = [
    "expansion",
    "operators",
    "template_engine",
]
