"""Calorie summary for the plan-detail view."""
from collections import defaultdict
from dietplan.domain.Plan import WeeklyMealPlan


def compute_plan_calories(plan: WeeklyMealPlan):
    """Aggregate calories for the given weekly plan.

    Returns structure:
    {
      'days': [
         {'date': 'YYYY-MM-DD', 'weekday': 'Monday', 'calories': int,
          'meals': { 'breakfast': { 'name': str, 'calories': int }, ... }},
         ...
      ],
      'week_total': int,
      'daily_average': float
    }
    """
    if not plan or not plan.days:
        return {'days': [], 'week_total': 0, 'daily_average': 0.0}

    days_result = []
    totals = defaultdict(int)
    for day in plan.days:
        meal_details = {}
        for meal in day.meals:
            meal_details[meal.slot.value] = {
                'name': meal.recipe.name,
                'calories': meal.recipe.calories,
            }
        days_result.append({
            'date': day.date.isoformat(),
            'weekday': day.date.strftime('%A'),
            'calories': day.total_calories,
            'meals': meal_details,
        })
        totals['calories'] += day.total_calories

    return {
        'days': days_result,
        'week_total': totals['calories'],
        'daily_average': totals['calories'] / len(plan.days),
    }


__all__ = ["compute_plan_calories"]
