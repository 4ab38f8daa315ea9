SECTION_RECIPE = "[Recept]"
SECTION_INGREDIENTS = "[Ingredienser]"
SECTION_INSTRUCTIONS = "[Instruktioner]"

INGREDIENT_SEPARATOR = ";"
INGREDIENT_FIELD_COUNT = 3

DEFAULT_RECIPES_PATH = "recipes.txt"
DEFAULT_LOG_LEVEL = "WARNING"

ENV_RECIPES_PATH = "RECIPES_PATH"
ENV_LOG_LEVEL = "RECIPES_LOG_LEVEL"
