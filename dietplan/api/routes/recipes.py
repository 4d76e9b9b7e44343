from typing import Optional
from fastapi import APIRouter, Depends, Query
from dietplan.domain.DietaryPreference import DietaryPreference
from dietplan.domain.MealSlot import MealSlot
from dietplan.infra.Recipe_Repository import get_catalog
from dietplan.logic.catalog.recipe_catalog import RecipeCatalog

router = APIRouter(prefix="/api/recipes", tags=["recipes"])


@router.get("")
@router.get("/")
def list_recipes(slot: Optional[MealSlot] = Query(default=None),
                 preference: Optional[DietaryPreference] = Query(default=None),
                 catalog: RecipeCatalog = Depends(get_catalog)):
    """Return catalog recipes.

    With both slot and preference the eligible set (including the balanced
    fallback) is returned; otherwise the given filter is applied as-is.
    """
    if slot is not None and preference is not None:
        recipes = catalog.recipes_for(slot, preference)
    else:
        recipes = catalog.all_recipes()
        if slot is not None:
            recipes = [r for r in recipes if r.slot == slot]
        if preference is not None:
            recipes = [r for r in recipes if r.satisfies(preference)]
    return {
        'count': len(recipes),
        'recipes': [r.to_dict() for r in recipes],
    }
