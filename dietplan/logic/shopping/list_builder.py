"""Shopping list builder.

Provides build_shopping_list(plan): merges every ingredient of every planned
meal into one ShoppingItem per case-insensitive (name, unit) key.
"""
import math
from typing import Dict, List, Tuple
from dietplan.domain.Plan import WeeklyMealPlan
from dietplan.domain.ShoppingList import ShoppingItem, ShoppingList


def build_shopping_list(plan: WeeklyMealPlan) -> ShoppingList:
    """Aggregate ingredient quantities for a weekly plan.

    Display name and unit come from the first occurrence of each key; items
    keep first-seen order. Quantities are summed with math.fsum so totals are
    exact-rounded and do not depend on traversal order. No unit conversion.
    """
    if not plan or not plan.days:
        return ShoppingList()

    display: Dict[Tuple[str, str], Tuple[str, str]] = {}
    contributions: Dict[Tuple[str, str], List[float]] = {}

    for meal in plan.meals():
        for ing in meal.recipe.ingredients:
            k = ing.key
            if k not in display:
                display[k] = (ing.name, ing.unit)
                contributions[k] = []
            contributions[k].append(ing.quantity)

    items = []
    for k, (name, unit) in display.items():
        items.append(ShoppingItem(name=name, unit=unit, total_quantity=math.fsum(contributions[k])))
    return ShoppingList(tuple(items))


__all__ = ["build_shopping_list"]
