"""CLI command: cssbuild build -- assemble a compound selector from options."""

from __future__ import annotations

import click

from cssbuild.selector import css_selector_builder


@click.command()
@click.option("--element", "element", default=None, help="Type selector")
@click.option("--id", "id_value", default=None, help="Id selector (without '#')")
@click.option("--class", "classes", multiple=True, help="Class name (repeatable)")
@click.option("--attr", "attribute", default=None, help="Attribute selector content")
@click.option(
    "--pseudo-class", "pseudo_classes", multiple=True, help="Pseudo-class (repeatable)"
)
@click.option("--pseudo-element", "pseudo_element", default=None, help="Pseudo-element")
def build(
    element: str | None,
    id_value: str | None,
    classes: tuple[str, ...],
    attribute: str | None,
    pseudo_classes: tuple[str, ...],
    pseudo_element: str | None,
) -> None:
    """Build a compound selector and print it.

    Fragments are applied in canonical order regardless of option order,
    so this command cannot produce an ordering error.
    """
    selector = css_selector_builder.new()
    if element is not None:
        selector.element(element)
    if id_value is not None:
        selector.id(id_value)
    for name in classes:
        selector.class_(name)
    if attribute is not None:
        selector.attr(attribute)
    for name in pseudo_classes:
        selector.pseudo_class(name)
    if pseudo_element is not None:
        selector.pseudo_element(pseudo_element)

    click.echo(selector.stringify())
