from cssbuild.recipe.errors import RecipeError
from cssbuild.recipe.loader import build_from_recipe, load_recipe, to_recipe

__all__ = ["RecipeError", "build_from_recipe", "load_recipe", "to_recipe"]
