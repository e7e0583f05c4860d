"""Tests for BuilderFacade entry points."""

from __future__ import annotations

import pytest

from cssbuild import BuilderConfig, css_selector_builder
from cssbuild.selector import (
    BuilderFacade,
    DuplicateFragmentError,
    InvalidCombinatorError,
    OrderViolationError,
    SelectorBuilder,
)

builder = css_selector_builder


class TestEntryPoints:
    def test_element(self):
        assert builder.element("a").stringify() == "a"

    def test_id(self):
        assert builder.id("main").stringify() == "#main"

    def test_class(self):
        assert builder.class_("container").stringify() == ".container"

    def test_attr(self):
        assert builder.attr("disabled").stringify() == "[disabled]"

    def test_pseudo_class(self):
        assert builder.pseudo_class("hover").stringify() == ":hover"

    def test_pseudo_element(self):
        assert builder.pseudo_element("before").stringify() == "::before"

    def test_new_is_empty(self):
        sel = builder.new()
        assert isinstance(sel, SelectorBuilder)
        assert sel.stringify() == ""


class TestFreshBuilders:
    def test_each_call_returns_new_builder(self):
        assert builder.element("a") is not builder.element("a")

    def test_chains_do_not_share_state(self):
        first = builder.element("a").class_("one")
        second = builder.element("b")
        assert first.stringify() == "a.one"
        assert second.stringify() == "b"

    def test_failed_chain_does_not_affect_next(self):
        with pytest.raises(DuplicateFragmentError):
            builder.element("p").element("span")
        assert builder.element("span").stringify() == "span"


class TestScenarios:
    def test_id_with_classes(self):
        sel = builder.id("main").class_("container").class_("editable")
        assert sel.stringify() == "#main.container.editable"

    def test_element_attr_pseudo_class(self):
        sel = builder.element("a").attr('href$=".png"').pseudo_class("focus")
        assert sel.stringify() == 'a[href$=".png"]:focus'

    def test_nested_combination(self):
        sel = builder.combine(
            builder.element("div").id("main").class_("container").class_("draggable"),
            "+",
            builder.combine(
                builder.element("table").id("data"),
                "~",
                builder.combine(
                    builder.element("tr").pseudo_class("nth-of-type(even)"),
                    " ",
                    builder.element("td").pseudo_class("nth-of-type(even)"),
                ),
            ),
        )
        assert sel.stringify() == (
            "div#main.container.draggable + table#data ~ "
            "tr:nth-of-type(even)   td:nth-of-type(even)"
        )

    def test_attr_overwrite(self):
        assert builder.attr("a").attr("b").stringify() == "[b]"

    def test_order_violation_through_facade(self):
        with pytest.raises(OrderViolationError):
            builder.class_("y").id("x")


class TestConfiguredFacade:
    def test_default_config(self):
        assert BuilderFacade().config == BuilderConfig()

    def test_config_passed_to_builders(self):
        config = BuilderConfig(strict_combinators=True)
        facade = BuilderFacade(config)
        assert facade.element("a").config is config

    def test_strict_facade_rejects_unknown_combinator(self):
        facade = BuilderFacade(BuilderConfig(strict_combinators=True))
        with pytest.raises(InvalidCombinatorError):
            facade.combine(facade.element("a"), "/", facade.element("b"))
