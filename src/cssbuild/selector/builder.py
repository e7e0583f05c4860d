"""SelectorBuilder: accumulates one compound selector and renders CSS text."""

from __future__ import annotations

import logging
from typing import Any, Callable

from cssbuild.config import BuilderConfig
from cssbuild.selector.errors import (
    DuplicateFragmentError,
    InvalidCombinatorError,
    OrderViolationError,
)
from cssbuild.selector.model import Combination, FragmentKind

logger = logging.getLogger(__name__)

# (attribute, renderer) pairs in canonical output order.
_RENDERERS: tuple[tuple[str, Callable[[Any], str]], ...] = (
    ("element_tag", lambda tag: tag),
    ("id_value", lambda value: f"#{value}"),
    ("class_names", lambda names: "".join(f".{n}" for n in names)),
    ("attribute", lambda content: f"[{content}]"),
    ("pseudo_classes", lambda names: "".join(f":{n}" for n in names)),
    ("pseudo_element_value", lambda name: f"::{name}"),
)


class SelectorBuilder:
    """Mutable builder for a single CSS selector.

    Fragment methods validate before mutating and return ``self`` so calls
    can be chained::

        SelectorBuilder().element("a").attr('href$=".png"').pseudo_class("focus")

    A builder that went through :meth:`combine` renders from its stored
    combination only; its fragment fields are still writable but ignored.
    """

    def __init__(self, config: BuilderConfig | None = None) -> None:
        self.config = config or BuilderConfig()
        self.element_tag: str | None = None
        self.id_value: str | None = None
        self.class_names: list[str] = []
        self.attribute: str | None = None
        self.pseudo_classes: list[str] = []
        self.pseudo_element_value: str | None = None
        self.combined_parts: Combination | None = None
        self.last_rank = 0  # 0 = nothing appended yet

    # --- fragments ------------------------------------------------------------

    def element(self, tag: str) -> SelectorBuilder:
        self._check(FragmentKind.ELEMENT, already_set=self.element_tag is not None)
        self.element_tag = tag
        return self._advance(FragmentKind.ELEMENT)

    def id(self, value: str) -> SelectorBuilder:
        self._check(FragmentKind.ID, already_set=self.id_value is not None)
        self.id_value = value
        return self._advance(FragmentKind.ID)

    def class_(self, name: str) -> SelectorBuilder:
        self._check(FragmentKind.CLASS)
        self.class_names.append(name)
        return self._advance(FragmentKind.CLASS)

    def attr(self, content: str) -> SelectorBuilder:
        """Set the attribute selector; a second call replaces the first."""
        self._check(FragmentKind.ATTRIBUTE)
        self.attribute = content
        return self._advance(FragmentKind.ATTRIBUTE)

    def pseudo_class(self, name: str) -> SelectorBuilder:
        self._check(FragmentKind.PSEUDO_CLASS)
        self.pseudo_classes.append(name)
        return self._advance(FragmentKind.PSEUDO_CLASS)

    def pseudo_element(self, name: str) -> SelectorBuilder:
        self._check(
            FragmentKind.PSEUDO_ELEMENT,
            already_set=self.pseudo_element_value is not None,
        )
        self.pseudo_element_value = name
        return self._advance(FragmentKind.PSEUDO_ELEMENT)

    # --- combination ----------------------------------------------------------

    def combine(
        self, left: SelectorBuilder, combinator: str, right: SelectorBuilder
    ) -> SelectorBuilder:
        """Store ``left`` and ``right`` rendered now, joined by ``combinator``."""
        if self.config.strict_combinators and combinator not in self.config.combinators:
            raise InvalidCombinatorError(combinator, self.config.combinators)
        self.combined_parts = Combination(
            left=left.stringify(),
            combinator=combinator,
            right=right.stringify(),
        )
        logger.debug("Combined selector: %r", self.combined_parts)
        return self

    # --- output ---------------------------------------------------------------

    def stringify(self) -> str:
        if self.combined_parts is not None:
            return str(self.combined_parts)
        parts: list[str] = []
        for attr_name, render in _RENDERERS:
            value = getattr(self, attr_name)
            if value is None or value == []:
                continue
            parts.append(render(value))
        return "".join(parts)

    @property
    def is_combined(self) -> bool:
        return self.combined_parts is not None

    def __str__(self) -> str:
        return self.stringify()

    def __repr__(self) -> str:
        return f"SelectorBuilder({self.stringify()!r})"

    # --- validation -----------------------------------------------------------

    def _check(self, kind: FragmentKind, *, already_set: bool = False) -> None:
        if already_set:
            raise DuplicateFragmentError(kind)
        if self.last_rank > kind.rank:
            raise OrderViolationError(kind, previous=self.last_rank)

    def _advance(self, kind: FragmentKind) -> SelectorBuilder:
        self.last_rank = kind.rank
        return self
