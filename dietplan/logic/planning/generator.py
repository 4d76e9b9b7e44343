"""Weekly meal plan generator.

Provides generate_weekly_plan(start_date, preference, catalog, offset=0).
Selection is a rotation over the eligible recipes so the same inputs always
give the same plan while the choice still varies from day to day.
"""
import logging
from datetime import date as _date, timedelta
from typing import List, Optional
from dietplan.domain.DietaryPreference import DietaryPreference
from dietplan.domain.MealSlot import MealSlot
from dietplan.domain.Plan import DayMealPlan, PlannedMeal, WeeklyMealPlan
from dietplan.domain.Recipe import Recipe
from dietplan.logic.catalog.recipe_catalog import RecipeCatalog
from dietplan.logic.planning.errors import CatalogGap
from dietplan.utilities.constants import DAYS_IN_PLAN

logger = logging.getLogger(__name__)


def _eligible(catalog: RecipeCatalog, slot: MealSlot, preference: DietaryPreference) -> List[Recipe]:
    recipes = catalog.recipes_for(slot, preference)
    if not recipes and preference != DietaryPreference.BALANCED:
        recipes = catalog.recipes_for(slot, DietaryPreference.BALANCED)
    return recipes


def _pick(eligible: List[Recipe], day_index: int, slot: MealSlot, offset: int) -> Recipe:
    return eligible[(day_index + slot.ordinal + offset) % len(eligible)]


def generate_weekly_plan(start_date: Optional[_date], preference: DietaryPreference,
                         catalog: RecipeCatalog, *, offset: int = 0) -> WeeklyMealPlan:
    """Build a seven-day plan with one recipe per meal slot per day.

    Args:
        start_date: First day of the plan; None means today.
        preference: Dietary preference used to filter recipes.
        catalog: Recipe catalog to draw from (never modified).
        offset: Extra rotation applied to every pick; 0 keeps the default plan.

    Raises:
        CatalogGap: a (day, slot) has no eligible recipe. No partial plan is returned.
    """
    if start_date is None:
        start_date = _date.today()
    preference = DietaryPreference(preference)

    days: List[DayMealPlan] = []
    for day_index in range(DAYS_IN_PLAN):
        meals: List[PlannedMeal] = []
        for slot in MealSlot.ordered():
            eligible = _eligible(catalog, slot, preference)
            if not eligible:
                raise CatalogGap(day_index, slot, preference)
            meals.append(PlannedMeal(slot, _pick(eligible, day_index, slot, offset)))
        days.append(DayMealPlan(start_date + timedelta(days=day_index), tuple(meals)))

    logger.debug("Generated %s plan starting %s (offset %s)", preference.value, start_date, offset)
    return WeeklyMealPlan(start_date=start_date, days=tuple(days), preference=preference)


__all__ = ["generate_weekly_plan"]
