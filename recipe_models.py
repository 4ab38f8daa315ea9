from dataclasses import dataclass, field
from typing import Iterable, List

from constants import (
    SECTION_RECIPE,
    SECTION_INGREDIENTS,
    SECTION_INSTRUCTIONS,
    INGREDIENT_SEPARATOR,
)

SECTION_MARKERS = {SECTION_RECIPE, SECTION_INGREDIENTS, SECTION_INSTRUCTIONS}


def _check_single_line(value: str, what: str) -> None:
    if "\n" in value or "\r" in value:
        raise ValueError(f"{what} must not contain line breaks: {value!r}")


def _check_line(value: str, what: str) -> None:
    """A value written as a whole line of the recipe file."""
    if not value or not value.strip():
        raise ValueError(f"{what} must not be empty")
    _check_single_line(value, what)
    if value.strip() in SECTION_MARKERS:
        raise ValueError(f"{what} must not be a section marker: {value!r}")


@dataclass(frozen=True)
class Ingredient:
    """One `amount;measure;name` entry of a recipe."""

    amount: str
    measure: str
    name: str

    def __post_init__(self):
        if not self.name or not self.name.strip():
            raise ValueError("Ingredient name must not be empty")
        for what, value in (("amount", self.amount), ("measure", self.measure), ("name", self.name)):
            _check_single_line(value, f"Ingredient {what}")
            if INGREDIENT_SEPARATOR in value:
                raise ValueError(f"Ingredient {what} must not contain {INGREDIENT_SEPARATOR!r}: {value!r}")


@dataclass
class Recipe:
    """Structured representation of a recipe."""

    name: str
    ingredients: List[Ingredient] = field(default_factory=list)
    instructions: List[str] = field(default_factory=list)

    def __post_init__(self):
        _check_line(self.name, "Recipe name")
        for instruction in self.instructions:
            _check_line(instruction, "Instruction")

    @property
    def sort_key(self) -> str:
        return self.name.lower()

    def __lt__(self, other: "Recipe") -> bool:
        if not isinstance(other, Recipe):
            return NotImplemented
        return self.sort_key < other.sort_key

    def add_ingredient(self, ingredient: Ingredient) -> None:
        self.ingredients.append(ingredient)

    def add_instruction(self, instruction: str) -> None:
        _check_line(instruction, "Instruction")
        self.instructions.append(instruction)

    def clone(self) -> "Recipe":
        # Ingredients are frozen, copying the lists is enough.
        return Recipe(
            name=self.name,
            ingredients=list(self.ingredients),
            instructions=list(self.instructions),
        )


def sort_recipes(recipes: Iterable[Recipe]) -> List[Recipe]:
    return sorted(recipes, key=lambda r: r.sort_key)
