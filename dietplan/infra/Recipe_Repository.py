"""Recipe repository: loads the recipe catalog from a JSON file.

The catalog is read once and cached for the process lifetime; it is never
written back.
"""
import json
import logging
from functools import lru_cache
from pathlib import Path
from typing import List, Optional, Union
from pydantic import ValidationError
from dietplan.domain.Recipe import Recipe
from dietplan.infra.paths import RECIPES_FILE
from dietplan.logic.catalog.recipe_catalog import RecipeCatalog
from dietplan.utilities.validators import RecipeInput

logger = logging.getLogger(__name__)


def reading_from_recipes(path: Optional[Union[str, Path]] = None) -> List[Recipe]:
    """Read recipes from JSON file with proper error handling.

    Entries failing validation are skipped with a warning; an unreadable file
    yields an empty list.
    """
    json_path = Path(path) if path else RECIPES_FILE
    try:
        with open(json_path, 'r', encoding='utf-8') as f:
            recipes_data = json.load(f)
    except FileNotFoundError:
        logger.warning("Recipes file not found: %s. Returning empty list.", json_path)
        return []
    except json.JSONDecodeError as e:
        logger.error("Invalid JSON in recipes file %s: %s", json_path, e)
        return []

    if not isinstance(recipes_data, list):
        logger.error("Recipes file %s must contain a JSON list, got %s", json_path, type(recipes_data).__name__)
        return []

    recipes: List[Recipe] = []
    for idx, entry in enumerate(recipes_data):
        try:
            recipes.append(RecipeInput.model_validate(entry).to_domain())
        except ValidationError as e:
            name = entry.get('name') if isinstance(entry, dict) else None
            logger.warning("Skipping recipe #%d (%s): %s", idx, name or '?', e.errors()[0].get('msg'))
    return recipes


def load_catalog(path: Optional[Union[str, Path]] = None) -> RecipeCatalog:
    """Build a RecipeCatalog from the given (or configured) file."""
    catalog = RecipeCatalog(reading_from_recipes(path))
    logger.info("Loaded %d recipes into catalog", len(catalog))
    missing = catalog.slots_missing()
    if missing:
        logger.warning("Catalog has no recipe for slot(s): %s", ", ".join(s.value for s in missing))
    return catalog


@lru_cache(maxsize=1)
def get_catalog() -> RecipeCatalog:
    """Process-wide catalog, loaded on first use."""
    return load_catalog()


__all__ = ['reading_from_recipes', 'load_catalog', 'get_catalog']
