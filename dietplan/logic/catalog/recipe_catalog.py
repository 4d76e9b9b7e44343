"""Recipe catalog.

Read-only collection of recipes answering slot/preference queries. Population
is done by the caller (see dietplan.infra.Recipe_Repository for the bundled one).
"""
from typing import Iterable, List
from dietplan.domain.DietaryPreference import DietaryPreference
from dietplan.domain.MealSlot import MealSlot
from dietplan.domain.Recipe import Recipe


class RecipeCatalog:
    def __init__(self, recipes: Iterable[Recipe] = ()):
        self._recipes = tuple(recipes)

    def __len__(self) -> int:
        return len(self._recipes)

    def __iter__(self):
        return iter(self._recipes)

    def all_recipes(self) -> List[Recipe]:
        return list(self._recipes)

    def recipes_in_slot(self, slot: MealSlot) -> List[Recipe]:
        return [r for r in self._recipes if r.slot == slot]

    def recipes_for(self, slot: MealSlot, preference: DietaryPreference) -> List[Recipe]:
        """Recipes for `slot` tagged with `preference`.

        When no recipe in the slot carries the preference, the balanced recipes
        of that slot are returned instead. An empty result means the slot has
        nothing eligible even after that fallback.
        """
        in_slot = self.recipes_in_slot(slot)
        exact = [r for r in in_slot if r.satisfies(preference)]
        if exact:
            return exact
        return [r for r in in_slot if r.satisfies(DietaryPreference.BALANCED)]

    def slots_missing(self) -> List[MealSlot]:
        '''Slots with no recipe at all (a content defect in the catalog).'''
        present = {r.slot for r in self._recipes}
        return [s for s in MealSlot if s not in present]

    def __repr__(self) -> str:
        return f"RecipeCatalog({len(self._recipes)} recipes)"


__all__ = ["RecipeCatalog"]
