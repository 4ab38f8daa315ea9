from typing import Iterable, List

from recipe_models import Ingredient, Recipe

INGREDIENTS_HEADING = "Ingredienser"
INSTRUCTIONS_HEADING = "Instruktioner"


def format_ingredient_line(ingredient: Ingredient) -> str:
    parts = [ingredient.amount, ingredient.measure, ingredient.name]
    return " ".join(p for p in parts if p)


def render_markdown(recipe: Recipe) -> str:
    md = [f"# {recipe.name}", ""]
    if recipe.ingredients:
        md.append(f"## {INGREDIENTS_HEADING}")
        for ing in recipe.ingredients:
            md.append(f"- {format_ingredient_line(ing)}")
        md.append("")
    if recipe.instructions:
        md.append(f"## {INSTRUCTIONS_HEADING}")
        for i, step in enumerate(recipe.instructions, 1):
            md.append(f"{i}. {step}")
        md.append("")
    return "\n".join(md).strip() + "\n"


def render_listing(recipes: Iterable[Recipe]) -> List[str]:
    """One line per recipe, numbered with the index used by get_at/delete_at."""
    return [
        f"{i}. {recipe.name} ({len(recipe.ingredients)} ingr., {len(recipe.instructions)} steps)"
        for i, recipe in enumerate(recipes)
    ]


def markdown_filename(recipe: Recipe) -> str:
    return recipe.name.replace("/", "-")[:80] + ".md"
