"""BuilderFacade: entry points that start each chain on a fresh builder."""

from __future__ import annotations

import logging

from cssbuild.config import BuilderConfig
from cssbuild.selector.builder import SelectorBuilder

logger = logging.getLogger(__name__)


class BuilderFacade:
    """Stateless entry points, one per fragment kind plus ``combine``.

    Every call creates a new :class:`SelectorBuilder` (sharing only the
    facade's frozen config) and forwards the first operation to it.
    """

    def __init__(self, config: BuilderConfig | None = None) -> None:
        self.config = config or BuilderConfig()

    def new(self) -> SelectorBuilder:
        """Return an empty builder."""
        logger.debug("Creating selector builder")
        return SelectorBuilder(self.config)

    def element(self, tag: str) -> SelectorBuilder:
        return self.new().element(tag)

    def id(self, value: str) -> SelectorBuilder:
        return self.new().id(value)

    def class_(self, name: str) -> SelectorBuilder:
        return self.new().class_(name)

    def attr(self, content: str) -> SelectorBuilder:
        return self.new().attr(content)

    def pseudo_class(self, name: str) -> SelectorBuilder:
        return self.new().pseudo_class(name)

    def pseudo_element(self, name: str) -> SelectorBuilder:
        return self.new().pseudo_element(name)

    def combine(
        self, left: SelectorBuilder, combinator: str, right: SelectorBuilder
    ) -> SelectorBuilder:
        return self.new().combine(left, combinator, right)


css_selector_builder = BuilderFacade()
