from pathlib import Path
from dietplan.utilities.config import RECIPES_FILE as _CONFIGURED_RECIPES_FILE

# Centralized paths for data files (single source of truth)
DATA_DIR = (Path(__file__).parent.parent / 'data').resolve()
BUNDLED_RECIPES_FILE = DATA_DIR / 'recipes.json'
RECIPES_FILE = Path(_CONFIGURED_RECIPES_FILE).resolve()

__all__ = ['DATA_DIR', 'BUNDLED_RECIPES_FILE', 'RECIPES_FILE']
