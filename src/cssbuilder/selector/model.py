"""Selector model: an accumulator for compound CSS selectors and their combinations."""

from __future__ import annotations

from enum import IntEnum

from cssbuilder.selector.errors import DuplicateSingletonFragment, OutOfOrderFragment


class FragmentKind(IntEnum):
    """Kinds of compound-selector fragment, valued in canonical order."""

    ELEMENT = 1
    ID = 2
    CLASS = 3
    ATTRIBUTE = 4
    PSEUDO_CLASS = 5
    PSEUDO_ELEMENT = 6

    @property
    def is_singleton(self) -> bool:
        return self in _SINGLETONS


_SINGLETONS = frozenset(
    {FragmentKind.ELEMENT, FragmentKind.ID, FragmentKind.PSEUDO_ELEMENT}
)


class Selector:
    """A compound selector, optionally followed by combined selectors.

    Fragment methods mutate the instance and return it so calls can be
    chained::

        Selector().element("a").id("x").class_("y").stringify()  # 'a#x.y'

    Fragments must arrive in canonical order (element, id, class, attribute,
    pseudo-class, pseudo-element) and element, id and pseudo-element may each
    be set once.  Combinations are unconstrained.
    """

    def __init__(self) -> None:
        self.tag: str | None = None
        self.id_value: str | None = None
        self.classes: list[str] = []
        self.attributes: list[str] = []
        self.pseudo_classes: list[str] = []
        self.pseudo_element_value: str | None = None
        self.combined: list[tuple[str, Selector]] = []
        self._state: FragmentKind | None = None
        self._seen: set[FragmentKind] = set()

    @property
    def state(self) -> FragmentKind | None:
        """The most specific fragment kind recorded so far."""
        return self._state

    # --- fragments ------------------------------------------------------------

    def element(self, value: str) -> Selector:
        self._advance(FragmentKind.ELEMENT)
        self.tag = value
        return self

    def id(self, value: str) -> Selector:
        self._advance(FragmentKind.ID)
        self.id_value = f"#{value}"
        return self

    def class_(self, value: str) -> Selector:
        self._advance(FragmentKind.CLASS)
        self.classes.append(f".{value}")
        return self

    def attr(self, value: str) -> Selector:
        self._advance(FragmentKind.ATTRIBUTE)
        self.attributes.append(f"[{value}]")
        return self

    def pseudo_class(self, value: str) -> Selector:
        self._advance(FragmentKind.PSEUDO_CLASS)
        self.pseudo_classes.append(f":{value}")
        return self

    def pseudo_element(self, value: str) -> Selector:
        self._advance(FragmentKind.PSEUDO_ELEMENT)
        self.pseudo_element_value = f"::{value}"
        return self

    def _advance(self, kind: FragmentKind) -> None:
        """Check *kind* against the singleton and ordering rules, then record it."""
        if kind.is_singleton and kind in self._seen:
            raise DuplicateSingletonFragment(kind)
        if self._state is not None and self._state > kind:
            raise OutOfOrderFragment(kind)
        self._seen.add(kind)
        self._state = kind

    # --- combination ----------------------------------------------------------

    def combine_with(self, combinator: str, other: Selector) -> Selector:
        """Append *other*, joined by *combinator*, after this selector's fragments."""
        self.combined.append((combinator, other))
        return self

    # --- rendering ------------------------------------------------------------

    def stringify(self) -> str:
        parts = [self.tag or "", self.id_value or ""]
        parts.extend(self.classes)
        parts.extend(self.attributes)
        parts.extend(self.pseudo_classes)
        # Padding is applied even around the " " combinator.
        for combinator, other in self.combined:
            parts.append(f" {combinator} {other.stringify()}")
        parts.append(self.pseudo_element_value or "")
        return "".join(parts)

    def __str__(self) -> str:
        return self.stringify()

    def __repr__(self) -> str:
        return f"Selector({self.stringify()!r})"
