"""Selector builder error types."""

from __future__ import annotations

from cssbuild.selector.model import FragmentKind

UNIQUE_ERROR_TEXT = (
    "Element, id and pseudo-element should not occur more then one time "
    "inside the selector"
)
ORDER_ERROR_TEXT = (
    "Selector parts should be arranged in the following order: element, id, "
    "class, attribute, pseudo-class, pseudo-element"
)


class SelectorError(Exception):
    """Base error for all selector construction failures."""

    def __init__(self, message: str, *, kind: FragmentKind | None = None) -> None:
        super().__init__(message)
        self.kind = kind


class DuplicateFragmentError(SelectorError):
    """A unique fragment (element, id, pseudo-element) was appended twice."""

    def __init__(self, kind: FragmentKind) -> None:
        super().__init__(UNIQUE_ERROR_TEXT, kind=kind)


class OrderViolationError(SelectorError):
    """A fragment was appended after a fragment of strictly higher rank."""

    def __init__(self, kind: FragmentKind, previous: int) -> None:
        super().__init__(ORDER_ERROR_TEXT, kind=kind)
        self.previous = previous


class InvalidCombinatorError(SelectorError):
    """Raised by strict builders for an unknown combinator symbol."""

    def __init__(self, combinator: str, allowed: tuple[str, ...]) -> None:
        choices = ", ".join(repr(c) for c in allowed)
        super().__init__(
            f"Unknown combinator {combinator!r}; expected one of {choices}"
        )
        self.combinator = combinator
        self.allowed = allowed
