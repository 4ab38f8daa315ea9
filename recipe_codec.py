from enum import Enum
from typing import Iterable, List, Optional

from constants import (
    SECTION_RECIPE,
    SECTION_INGREDIENTS,
    SECTION_INSTRUCTIONS,
    INGREDIENT_SEPARATOR,
    INGREDIENT_FIELD_COUNT,
)
from recipe_models import Ingredient, Recipe, sort_recipes


class ReadStatus(Enum):
    """How the next content line read from a recipe file is interpreted."""

    INDEFINITE = "indefinite"
    NEW = "new"
    INGREDIENT = "ingredient"
    INSTRUCTION = "instruction"


SECTION_STATUS = {
    SECTION_RECIPE: ReadStatus.NEW,
    SECTION_INGREDIENTS: ReadStatus.INGREDIENT,
    SECTION_INSTRUCTIONS: ReadStatus.INSTRUCTION,
}


class FileFormatError(ValueError):
    """Raised when a recipe file breaks the section grammar."""

    def __init__(self, message: str, line_number: Optional[int] = None, line: Optional[str] = None):
        self.line_number = line_number
        self.line = line
        if line_number is not None:
            message = f"line {line_number}: {message} ({line!r})"
        super().__init__(message)


def parse_ingredient(line: str) -> Ingredient:
    parts = line.split(INGREDIENT_SEPARATOR)
    if len(parts) != INGREDIENT_FIELD_COUNT or not parts[2]:
        raise ValueError(
            f"expected {INGREDIENT_FIELD_COUNT} '{INGREDIENT_SEPARATOR}'-separated fields "
            "with a non-empty name"
        )
    amount, measure, name = parts
    return Ingredient(amount=amount, measure=measure, name=name)


def parse_lines(lines: Iterable[str]) -> List[Recipe]:
    """Parse recipe file lines into recipes sorted by name.

    Blank lines are skipped. The first malformed line aborts parsing with a
    FileFormatError; nothing is returned for a partially read file.
    """
    recipes: List[Recipe] = []
    status = ReadStatus.INDEFINITE
    name_read = False

    for number, raw in enumerate(lines, 1):
        row = raw.strip()
        if not row:
            continue

        if row in SECTION_STATUS:
            status = SECTION_STATUS[row]
            name_read = False
            continue

        if status is ReadStatus.INDEFINITE:
            raise FileFormatError(f"content before the first {SECTION_RECIPE}", number, row)

        if status is ReadStatus.NEW:
            if name_read:
                raise FileFormatError("a recipe block has exactly one name line", number, row)
            recipes.append(Recipe(name=row))
            name_read = True
            continue

        if not recipes:
            raise FileFormatError("content with no recipe to attach it to", number, row)

        if status is ReadStatus.INGREDIENT:
            try:
                ingredient = parse_ingredient(row)
            except ValueError as exc:
                raise FileFormatError(str(exc), number, row) from exc
            recipes[-1].add_ingredient(ingredient)
        else:
            recipes[-1].add_instruction(row)

    return sort_recipes(recipes)


def parse_text(text: str) -> List[Recipe]:
    # Only CR and LF end a line.
    return parse_lines(text.replace("\r\n", "\n").replace("\r", "\n").split("\n"))


def format_ingredient(ingredient: Ingredient) -> str:
    return INGREDIENT_SEPARATOR.join([ingredient.amount, ingredient.measure, ingredient.name])


def serialize_lines(recipes: Iterable[Recipe]) -> List[str]:
    """Render recipes in the order given; saving never re-sorts."""
    lines: List[str] = []
    for recipe in recipes:
        lines.append(SECTION_RECIPE)
        lines.append(recipe.name)
        lines.append(SECTION_INGREDIENTS)
        lines.extend(format_ingredient(ing) for ing in recipe.ingredients)
        lines.append(SECTION_INSTRUCTIONS)
        lines.extend(recipe.instructions)
    return lines


def serialize_text(recipes: Iterable[Recipe]) -> str:
    lines = serialize_lines(recipes)
    if not lines:
        return ""
    return "\n".join(lines) + "\n"
