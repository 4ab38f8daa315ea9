import logging
from pathlib import Path
from typing import Callable, List, Optional, Union

from recipe_codec import FileFormatError, parse_text, serialize_text
from recipe_models import Recipe

logger = logging.getLogger(__name__)

ChangeObserver = Callable[[], None]


class InvalidLocationError(ValueError):
    """Raised when the recipe file path cannot be used as a backing store."""


def resolve_location(path: Union[str, Path]) -> Path:
    if path is None or not str(path).strip():
        raise InvalidLocationError("Recipe file path must not be empty")
    if "\0" in str(path):
        raise InvalidLocationError(f"Recipe file path {path!r} contains a NUL byte")
    try:
        resolved = Path(path).expanduser().resolve()
    except (TypeError, ValueError, OSError, RuntimeError) as exc:
        raise InvalidLocationError(f"Invalid recipe file path {path!r}: {exc}") from exc
    if resolved.is_dir():
        raise InvalidLocationError(f"Recipe file path {resolved} is a directory")
    return resolved


class RecipeRepository:
    """Holds the canonical recipe collection backed by a recipe file.

    Callers only ever receive clones of the stored recipes. Every successful
    load, save and delete notifies the registered observers.
    """

    def __init__(self, path: Union[str, Path]):
        self._path = resolve_location(path)
        self._recipes: List[Recipe] = []
        self._observers: List[ChangeObserver] = []
        self._modified = False

    @property
    def path(self) -> Path:
        return self._path

    @property
    def is_modified(self) -> bool:
        return self._modified

    def __len__(self) -> int:
        return len(self._recipes)

    def subscribe(self, observer: ChangeObserver) -> ChangeObserver:
        self._observers.append(observer)
        return observer

    def unsubscribe(self, observer: ChangeObserver) -> None:
        if observer in self._observers:
            self._observers.remove(observer)

    def _notify_changed(self) -> None:
        # Snapshot so observers may unsubscribe while being notified.
        for observer in list(self._observers):
            observer()

    def _check_index(self, index: int) -> None:
        if not 0 <= index < len(self._recipes):
            raise IndexError(f"Recipe index {index} out of range (0..{len(self._recipes) - 1})")

    def get_all(self) -> List[Recipe]:
        return [recipe.clone() for recipe in self._recipes]

    def get_at(self, index: int) -> Recipe:
        self._check_index(index)
        return self._recipes[index].clone()

    def _find_stored(self, recipe: Recipe) -> Optional[int]:
        for i, stored in enumerate(self._recipes):
            if stored is recipe:
                return i
        for i, stored in enumerate(self._recipes):
            if stored == recipe:
                return i
        return None

    def delete(self, recipe: Optional[Recipe]) -> None:
        """Remove a recipe, or the first stored recipe equal to a copy of it."""
        if recipe is None:
            return
        index = self._find_stored(recipe)
        if index is None:
            logger.debug("No stored recipe matches %r, nothing deleted", recipe.name)
            return
        removed = self._recipes.pop(index)
        logger.debug("Deleted recipe %r", removed.name)
        self._modified = True
        self._notify_changed()

    def delete_at(self, index: int) -> None:
        self._check_index(index)
        self.delete(self._recipes[index])

    def save(self) -> None:
        content = serialize_text(self._recipes)
        try:
            with open(self._path, "w", encoding="utf-8") as f:
                f.write(content)
        except OSError as exc:
            logger.error("Could not save recipes to %s: %s", self._path, exc)
            raise
        logger.info("Saved %d recipes to %s", len(self._recipes), self._path)
        self._modified = False
        self._notify_changed()

    def load(self) -> None:
        try:
            with open(self._path, "r", encoding="utf-8") as f:
                content = f.read()
        except UnicodeDecodeError as exc:
            raise FileFormatError(f"{self._path} is not valid UTF-8") from exc
        except OSError as exc:
            logger.error("Could not load recipes from %s: %s", self._path, exc)
            raise
        recipes = parse_text(content)
        self._recipes = recipes
        logger.info("Loaded %d recipes from %s", len(recipes), self._path)
        self._modified = False
        self._notify_changed()
