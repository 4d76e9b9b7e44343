"""Planning facade: one call returning a fresh plan and its shopping list."""
from datetime import date as _date
from typing import Optional, Tuple
from dietplan.domain.DietaryPreference import DietaryPreference
from dietplan.domain.Plan import WeeklyMealPlan
from dietplan.domain.ShoppingList import ShoppingList
from dietplan.logic.catalog.recipe_catalog import RecipeCatalog
from dietplan.logic.planning.generator import generate_weekly_plan
from dietplan.logic.shopping.list_builder import build_shopping_list


def generate_plan_and_list(preference: DietaryPreference, catalog: RecipeCatalog,
                           start_date: Optional[_date] = None,
                           offset: int = 0) -> Tuple[WeeklyMealPlan, ShoppingList]:
    plan = generate_weekly_plan(start_date, preference, catalog, offset=offset)
    return plan, build_shopping_list(plan)


__all__ = ["generate_plan_and_list"]
