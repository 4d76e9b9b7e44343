import random
import unittest
from collections import defaultdict
from datetime import date, timedelta
from dietplan.domain.DietaryPreference import DietaryPreference
from dietplan.domain.Ingredient import Ingredient
from dietplan.domain.MealSlot import MealSlot
from dietplan.domain.Plan import DayMealPlan, PlannedMeal, WeeklyMealPlan
from dietplan.domain.Recipe import Recipe
from dietplan.infra.Recipe_Repository import load_catalog
from dietplan.infra.paths import BUNDLED_RECIPES_FILE
from dietplan.logic.catalog.recipe_catalog import RecipeCatalog
from dietplan.logic.planning.generator import generate_weekly_plan
from dietplan.logic.shopping.list_builder import build_shopping_list

BAL = DietaryPreference.BALANCED
START = date(2026, 10, 19)


def _recipe(name, slot, ingredients, tags=(BAL,)):
    return Recipe(name=name, slot=slot, ingredients=ingredients, calories=200, tags=set(tags))


def _plan_from_days(meals_per_day):
    days = [DayMealPlan(START + timedelta(days=i), tuple(meals)) for i, meals in enumerate(meals_per_day)]
    return WeeklyMealPlan(START, tuple(days))


class TestShoppingListBuilder(unittest.TestCase):

    def _filler(self):
        return [
            _recipe("Soup", MealSlot.LUNCH, [Ingredient("Carrot", "piece", 2)]),
            _recipe("Stew", MealSlot.DINNER, [Ingredient("Beef", "g", 150)]),
            _recipe("Fruit", MealSlot.SNACK, [Ingredient("Apple", "piece", 1)]),
        ]

    def test_oatmeal_week_totals(self):
        oatmeal = _recipe("Oatmeal", MealSlot.BREAKFAST, [Ingredient("oats", "cup", 0.5)])
        catalog = RecipeCatalog([oatmeal] + self._filler())
        plan = generate_weekly_plan(START, DietaryPreference.VEGAN, catalog)
        shopping = build_shopping_list(plan)
        oats = shopping.get("oats", "cup")
        self.assertIsNotNone(oats)
        self.assertEqual(oats.name, "oats")
        self.assertEqual(oats.unit, "cup")
        self.assertEqual(oats.total_quantity, 3.5)
        self.assertEqual(shopping.get("beef", "g").total_quantity, 1050)

    def test_case_insensitive_merge_keeps_first_casing(self):
        smoothie = _recipe("Smoothie", MealSlot.BREAKFAST, [Ingredient("Banana", "pc", 1)])
        bread = _recipe("Banana Bread", MealSlot.SNACK, [Ingredient("banana", "PC", 2)])
        plan = _plan_from_days([[PlannedMeal(MealSlot.BREAKFAST, smoothie),
                                 PlannedMeal(MealSlot.SNACK, bread)]])
        items = build_shopping_list(plan).get_items()
        self.assertEqual(len(items), 1)
        self.assertEqual((items[0].name, items[0].unit), ("Banana", "pc"))
        self.assertEqual(items[0].total_quantity, 3)

    def test_different_units_not_merged(self):
        latte = _recipe("Latte", MealSlot.BREAKFAST, [Ingredient("Milk", "ml", 200)])
        cereal = _recipe("Cereal", MealSlot.SNACK, [Ingredient("Milk", "cup", 1)])
        plan = _plan_from_days([[PlannedMeal(MealSlot.BREAKFAST, latte),
                                 PlannedMeal(MealSlot.SNACK, cereal)]])
        shopping = build_shopping_list(plan)
        self.assertEqual(len(shopping), 2)
        self.assertEqual(shopping.get("milk", "ML").total_quantity, 200)
        self.assertEqual(shopping.get("MILK", "cup").total_quantity, 1)

    def test_first_seen_order(self):
        a = _recipe("A", MealSlot.BREAKFAST, [Ingredient("Zucchini", "g", 1), Ingredient("Apple", "piece", 1)])
        b = _recipe("B", MealSlot.LUNCH, [Ingredient("Mango", "piece", 1), Ingredient("zucchini", "G", 1)])
        plan = _plan_from_days([[PlannedMeal(MealSlot.BREAKFAST, a), PlannedMeal(MealSlot.LUNCH, b)]])
        names = [i.name for i in build_shopping_list(plan)]
        self.assertEqual(names, ["Zucchini", "Apple", "Mango"])

    def test_empty_plan_yields_empty_list(self):
        self.assertEqual(len(build_shopping_list(WeeklyMealPlan(START, ()))), 0)
        empty_days = _plan_from_days([[] for _ in range(7)])
        self.assertEqual(build_shopping_list(empty_days).get_items(), [])

    def test_sum_law_on_bundled_catalog(self):
        catalog = load_catalog(BUNDLED_RECIPES_FILE)
        for pref in DietaryPreference:
            plan = generate_weekly_plan(START, pref, catalog)
            expected = defaultdict(float)
            for meal in plan.meals():
                for ing in meal.recipe.ingredients:
                    expected[ing.key] += ing.quantity
            shopping = build_shopping_list(plan)
            keys = [item.key for item in shopping]
            self.assertEqual(len(keys), len(set(keys)))
            self.assertEqual(set(keys), set(expected))
            for item in shopping:
                self.assertAlmostEqual(item.total_quantity, expected[item.key])

    def test_totals_independent_of_traversal_order(self):
        pieces = [0.1, 0.2, 0.3, 0.7, 1.1, 2.25, 0.05]
        meals = []
        for i, qty in enumerate(pieces):
            recipe = _recipe(f"Mix {i}", MealSlot.SNACK,
                             [Ingredient("Seeds", "g", qty), Ingredient("Honey", "tbsp", qty * 3)])
            meals.append(PlannedMeal(MealSlot.SNACK, recipe))
        baseline = build_shopping_list(_plan_from_days([[m] for m in meals]))
        rng = random.Random(7)
        for _ in range(5):
            shuffled = meals[:]
            rng.shuffle(shuffled)
            other = build_shopping_list(_plan_from_days([[m] for m in shuffled]))
            for item in baseline:
                self.assertEqual(other.get(item.name, item.unit).total_quantity, item.total_quantity)

    def test_result_is_new_value_each_time(self):
        oatmeal = _recipe("Oatmeal", MealSlot.BREAKFAST, [Ingredient("oats", "cup", 0.5)])
        plan = generate_weekly_plan(START, BAL, RecipeCatalog([oatmeal] + self._filler()))
        first = build_shopping_list(plan)
        second = build_shopping_list(plan)
        self.assertEqual(first, second)
        self.assertIsNot(first, second)


if __name__ == '__main__':
    unittest.main()
