from cssbuilder.selector.builder import COMBINATORS, SelectorBuilder, css_selector_builder
from cssbuilder.selector.errors import (
    DuplicateSingletonFragment,
    OutOfOrderFragment,
    SelectorError,
    UnknownCombinator,
)
from cssbuilder.selector.model import FragmentKind, Selector

__all__ = [
    "COMBINATORS",
    "SelectorBuilder",
    "css_selector_builder",
    "Selector",
    "FragmentKind",
    "SelectorError",
    "DuplicateSingletonFragment",
    "OutOfOrderFragment",
    "UnknownCombinator",
]
