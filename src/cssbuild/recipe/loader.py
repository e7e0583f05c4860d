"""Build selectors from JSON recipe documents.

Recipe syntax example:
    {"combine": [
        {"element": "div", "id": "main", "class": ["container", "draggable"]},
        "+",
        {"element": "table", "id": "data"}
    ]}
"""

from __future__ import annotations

import json
import logging
from typing import Any

from cssbuild.recipe.errors import RecipeError
from cssbuild.selector.builder import SelectorBuilder
from cssbuild.selector.facade import BuilderFacade, css_selector_builder
from cssbuild.selector.model import FragmentKind

__all__ = ["build_from_recipe", "load_recipe", "to_recipe"]

logger = logging.getLogger(__name__)

COMBINE_KEY = "combine"

# Builder method for each fragment kind; recipe keys are the kind values.
_METHODS: dict[FragmentKind, str] = {
    FragmentKind.ELEMENT: "element",
    FragmentKind.ID: "id",
    FragmentKind.CLASS: "class_",
    FragmentKind.ATTRIBUTE: "attr",
    FragmentKind.PSEUDO_CLASS: "pseudo_class",
    FragmentKind.PSEUDO_ELEMENT: "pseudo_element",
}

_FIELDS: dict[FragmentKind, str] = {
    FragmentKind.ELEMENT: "element_tag",
    FragmentKind.ID: "id_value",
    FragmentKind.CLASS: "class_names",
    FragmentKind.ATTRIBUTE: "attribute",
    FragmentKind.PSEUDO_CLASS: "pseudo_classes",
    FragmentKind.PSEUDO_ELEMENT: "pseudo_element_value",
}


def _values(kind: FragmentKind, raw: Any, path: str) -> list[str]:
    """Normalise a recipe value to the list of strings to append."""
    if isinstance(raw, str):
        return [raw]
    if kind.is_repeatable and isinstance(raw, list):
        for index, item in enumerate(raw):
            if not isinstance(item, str):
                raise RecipeError("expected a string", f"{path}[{index}]")
        return list(raw)
    expected = "a string or a list of strings" if kind.is_repeatable else "a string"
    raise RecipeError(f"expected {expected}, got {type(raw).__name__}", path)


def _build_compound(
    data: dict[str, Any], facade: BuilderFacade, path: str
) -> SelectorBuilder:
    known = {kind.value for kind in FragmentKind}
    unknown = sorted(set(data) - known)
    if unknown:
        raise RecipeError(f"unknown key(s): {', '.join(unknown)}", path)

    builder = facade.new()
    for kind in FragmentKind:
        if kind.value not in data:
            continue
        append = getattr(builder, _METHODS[kind])
        for value in _values(kind, data[kind.value], f"{path}.{kind.value}"):
            append(value)
    return builder


def _build_combination(
    data: dict[str, Any], facade: BuilderFacade, path: str
) -> SelectorBuilder:
    if len(data) != 1:
        raise RecipeError(f"{COMBINE_KEY!r} cannot be mixed with fragment keys", path)
    parts = data[COMBINE_KEY]
    path = f"{path}.{COMBINE_KEY}"
    if not isinstance(parts, list) or len(parts) != 3:
        raise RecipeError("expected [left, combinator, right]", path)
    left, combinator, right = parts
    if not isinstance(combinator, str):
        raise RecipeError("combinator must be a string", f"{path}[1]")
    return facade.combine(
        _build(left, facade, f"{path}[0]"),
        combinator,
        _build(right, facade, f"{path}[2]"),
    )


def _build(data: Any, facade: BuilderFacade, path: str) -> SelectorBuilder:
    if not isinstance(data, dict):
        raise RecipeError(f"expected an object, got {type(data).__name__}", path)
    if COMBINE_KEY in data:
        return _build_combination(data, facade, path)
    return _build_compound(data, facade, path)


def build_from_recipe(
    data: Any, facade: BuilderFacade | None = None
) -> SelectorBuilder:
    """Build a selector from an already-decoded recipe.

    Fragments of a compound recipe are applied in canonical order, so only
    unique-fragment and combinator checks can fail here.
    """
    builder = _build(data, facade or css_selector_builder, "$")
    logger.debug("Rendered recipe: %r", builder.stringify())
    return builder


def load_recipe(text: str, facade: BuilderFacade | None = None) -> SelectorBuilder:
    """Parse JSON recipe text and build the selector it describes."""
    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise RecipeError(f"invalid JSON: {exc.msg} (line {exc.lineno})") from exc
    return build_from_recipe(data, facade)


def to_recipe(builder: SelectorBuilder) -> dict[str, Any]:
    """Describe a compound builder as a recipe dict.

    Combined builders only keep the rendered strings of their operands, so
    they cannot be described and raise :class:`RecipeError`.
    """
    if builder.is_combined:
        raise RecipeError("combined selectors cannot be converted to a recipe")
    recipe: dict[str, Any] = {}
    for kind in FragmentKind:
        value = getattr(builder, _FIELDS[kind])
        if value is None or value == []:
            continue
        recipe[kind.value] = list(value) if kind.is_repeatable else value
    return recipe
