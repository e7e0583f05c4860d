"""Selector model: fragment kinds and combination results."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class FragmentKind(Enum):
    """A selector fragment kind, declared in canonical CSS order."""

    ELEMENT = "element"
    ID = "id"
    CLASS = "class"
    ATTRIBUTE = "attr"
    PSEUDO_CLASS = "pseudo_class"
    PSEUDO_ELEMENT = "pseudo_element"

    @property
    def rank(self) -> int:
        """Position of this kind in the canonical ordering, starting at 1."""
        return list(FragmentKind).index(self) + 1

    @property
    def is_unique(self) -> bool:
        return self in _UNIQUE_KINDS

    @property
    def is_repeatable(self) -> bool:
        return self in (FragmentKind.CLASS, FragmentKind.PSEUDO_CLASS)


_UNIQUE_KINDS = frozenset(
    {FragmentKind.ELEMENT, FragmentKind.ID, FragmentKind.PSEUDO_ELEMENT}
)


@dataclass(frozen=True)
class Combination:
    """Two rendered selectors joined by a combinator symbol."""

    left: str
    combinator: str
    right: str

    def __str__(self) -> str:
        # The combinator is always padded with one space on each side, so a
        # descendant (" ") combinator renders as three spaces.
        return f"{self.left} {self.combinator} {self.right}"
