"""Recipe domain value: name, meal slot, ingredients, calories and preference tags."""
from dataclasses import dataclass, field
from typing import FrozenSet, Tuple
from dietplan.domain.DietaryPreference import DietaryPreference
from dietplan.domain.Ingredient import Ingredient
from dietplan.domain.MealSlot import MealSlot


@dataclass(frozen=True)
class Recipe:
    name: str
    slot: MealSlot
    ingredients: Tuple[Ingredient, ...] = ()
    calories: int = 0
    tags: FrozenSet[DietaryPreference] = field(default_factory=frozenset)

    def __post_init__(self):
        # Accept lists/sets from callers but store immutable containers
        object.__setattr__(self, "ingredients", tuple(self.ingredients))
        object.__setattr__(self, "tags", frozenset(self.tags))
        if self.calories < 0:
            raise ValueError(f"Recipe calories cannot be negative: {self.name} {self.calories}")

    def satisfies(self, preference: DietaryPreference) -> bool:
        return preference in self.tags

    def __str__(self) -> str:
        tags = ", ".join(sorted(t.value for t in self.tags))
        return f"{self.name} - {self.slot.value} - {self.calories} kcal - Tags: {tags}"

    @staticmethod
    def from_dict(data):
        '''Creates a Recipe from a dictionary; unknown slot or tag values raise ValueError.'''
        d = dict(data)
        return Recipe(
            name=d.get("name", ""),
            slot=MealSlot(d.get("slot")),
            ingredients=tuple(Ingredient.from_dict(ing) for ing in d.get("ingredients", [])),
            calories=int(d.get("calories", 0)),
            tags=frozenset(DietaryPreference(t) for t in d.get("tags", [])),
        )

    def to_dict(self):
        return {
            "name": self.name,
            "slot": self.slot.value,
            "ingredients": [ing.to_dict() for ing in self.ingredients],
            "calories": self.calories,
            # tags are a set; sort for stable output
            "tags": sorted(t.value for t in self.tags),
        }
