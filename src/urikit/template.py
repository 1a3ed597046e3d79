from __future__ import annotations

"""UriTemplate – parsed, immutable, reusable RFC 6570 template.

Usage::

    tpl = UriTemplate.parse('/repos{/owner,repo}/issues{?state,labels*}')
    tpl.expand(owner='octo', repo='kit', state='open')
    tpl.expand({'owner': 'octo', 'labels': ['bug', 'ui']})
    tpl.expander().set_string('owner', 'octo').expand()
"""

from typing import Any, Iterator, Optional, Tuple

from urikit.adapters.variables import Expander, as_variables
from urikit.core.config import DEFAULT_CONFIG, ExpansionConfig
from urikit.core.models import Expression, Item
from urikit.parsing.parser import TemplateParser
from urikit.rendering.expansion import ExpansionEngine


class UriTemplate:
    """A parsed template: an ordered tuple of Literal / Expression items."""

    __slots__ = ('_items', '_engine')

    def __init__(self, items: Tuple[Item, ...], *, config: Optional[ExpansionConfig] = None) -> None:
        self._items = tuple(items)
        self._engine = ExpansionEngine(config=config or DEFAULT_CONFIG)

    @classmethod
    def parse(cls, template: str, *, config: Optional[ExpansionConfig] = None) -> 'UriTemplate':
        """Parse *template*; malformed expressions are kept as literal text."""
        cfg = config or DEFAULT_CONFIG
        items = TemplateParser(log_degraded=cfg.log_degraded).parse(template)
        return cls(tuple(items), config=cfg)

    @property
    def items(self) -> Tuple[Item, ...]:
        return self._items

    @property
    def config(self) -> ExpansionConfig:
        return self._engine.config

    @property
    def expressions(self) -> Tuple[Expression, ...]:
        return tuple(item for item in self._items if isinstance(item, Expression))

    @property
    def variable_names(self) -> Tuple[str, ...]:
        """Names referenced by the template, in first-use order, without duplicates."""
        seen: dict[str, None] = {}
        for expression in self.expressions:
            for name in expression.varnames:
                seen.setdefault(name, None)
        return tuple(seen)

    def expand(self, variables: Any = None, /, **kwargs: Any) -> str:
        """Expand the template.

        Args:
            variables: A VariablesProtocol, a Mapping, or ``(name, value)`` pairs.
            **kwargs: Extra bindings; they take precedence over *variables*.

        Returns:
            The expanded URI text.
        """
        return self._engine.expand(self._items, as_variables(variables, kwargs))

    def expander(self) -> Expander:
        return Expander(self)

    def __iter__(self) -> Iterator[Item]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, UriTemplate):
            return NotImplemented
        return self._items == other._items

    def __hash__(self) -> int:
        return hash(self._items)

    def __str__(self) -> str:
        return ''.join(item.to_template() for item in self._items)

    def __repr__(self) -> str:
        return f'UriTemplate({str(self)!r})'
