"""Selector builder facade: one entry point per fragment kind plus combine."""

from __future__ import annotations

import logging
from typing import Callable

from cssbuilder.config import BuilderConfig
from cssbuilder.selector.errors import UnknownCombinator
from cssbuilder.selector.model import Selector

log = logging.getLogger(__name__)

COMBINATORS = frozenset({" ", "+", "~", ">"})


class SelectorBuilder:
    """Facade creating a fresh :class:`Selector` per fragment entry point.

    The builder keeps no selector state; every call except :meth:`combine`
    returns a new instance seeded with one fragment.
    """

    def __init__(self, config: BuilderConfig | None = None) -> None:
        self.config = config or BuilderConfig()

    @staticmethod
    def _seed(add: Callable[[Selector, str], Selector], value: str) -> Selector:
        return add(Selector(), value)

    def element(self, value: str) -> Selector:
        return self._seed(Selector.element, value)

    def id(self, value: str) -> Selector:
        return self._seed(Selector.id, value)

    def class_(self, value: str) -> Selector:
        return self._seed(Selector.class_, value)

    def attr(self, value: str) -> Selector:
        return self._seed(Selector.attr, value)

    def pseudo_class(self, value: str) -> Selector:
        return self._seed(Selector.pseudo_class, value)

    def pseudo_element(self, value: str) -> Selector:
        return self._seed(Selector.pseudo_element, value)

    def combine(self, left: Selector, combinator: str, right: Selector) -> Selector:
        """Join *right* onto *left* with *combinator*; returns *left*."""
        if self.config.strict_combinators and combinator not in COMBINATORS:
            raise UnknownCombinator(combinator)
        log.debug("Combining selectors with %r", combinator)
        return left.combine_with(combinator, right)


css_selector_builder = SelectorBuilder()
