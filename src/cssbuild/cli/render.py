"""CLI command: cssbuild render -- build a selector from a JSON recipe file."""

from __future__ import annotations

import sys
from pathlib import Path

import click

from cssbuild.config import BuilderConfig
from cssbuild.recipe import RecipeError, load_recipe
from cssbuild.selector import BuilderFacade, SelectorError


@click.command()
@click.argument("recipe_file", type=click.Path(exists=True))
@click.option(
    "--strict/--no-strict",
    default=False,
    help="Reject combinators other than ' ', '+', '~' and '>'",
)
def render(recipe_file: str, strict: bool) -> None:
    """Render the selector described by a JSON recipe file.

    Exits with code 1 if the recipe is malformed or describes an invalid
    selector.
    """
    recipe_path = Path(recipe_file)
    facade = BuilderFacade(BuilderConfig(strict_combinators=strict))

    try:
        source = recipe_path.read_text(encoding="utf-8")
        selector = load_recipe(source, facade)
    except RecipeError as exc:
        click.echo(f"Recipe error: {exc}", err=True)
        sys.exit(1)
    except SelectorError as exc:
        click.echo(f"Selector error: {exc}", err=True)
        sys.exit(1)

    click.echo(selector.stringify())
