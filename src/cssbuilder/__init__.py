"""cssbuilder -- fluent CSS selector builder and small object helpers."""

from cssbuilder.config import BuilderConfig
from cssbuilder.model import Rectangle, from_json, to_json
from cssbuilder.selector import (
    DuplicateSingletonFragment,
    FragmentKind,
    OutOfOrderFragment,
    Selector,
    SelectorBuilder,
    SelectorError,
    UnknownCombinator,
    css_selector_builder,
)

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "BuilderConfig",
    # selector
    "Selector",
    "FragmentKind",
    "SelectorBuilder",
    "css_selector_builder",
    # errors
    "SelectorError",
    "DuplicateSingletonFragment",
    "OutOfOrderFragment",
    "UnknownCombinator",
    # model
    "Rectangle",
    "to_json",
    "from_json",
]
