"""Selector error types."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from cssbuilder.selector.model import FragmentKind


class SelectorError(Exception):
    """Base class for errors raised while building a selector."""

    def __init__(self, message: str, kind: FragmentKind | None = None):
        self.kind = kind
        super().__init__(message)


class DuplicateSingletonFragment(SelectorError):
    """Raised when element, id or pseudo-element is added a second time."""

    def __init__(self, kind: FragmentKind):
        super().__init__(
            "Element, id and pseudo-element should not occur more then one time "
            "inside the selector",
            kind=kind,
        )


class OutOfOrderFragment(SelectorError):
    """Raised when a fragment precedes, in canonical order, one already present."""

    def __init__(self, kind: FragmentKind):
        super().__init__(
            "Selector parts should be arranged in the following order: "
            "element, id, class, attribute, pseudo-class, pseudo-element",
            kind=kind,
        )


class UnknownCombinator(SelectorError):
    """Raised by a strict builder for a combinator outside ' ', '+', '~', '>'."""

    def __init__(self, combinator: str):
        self.combinator = combinator
        super().__init__(f"Unknown combinator: {combinator!r}")
