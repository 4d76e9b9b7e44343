from fastapi import FastAPI, Depends, HTTPException, Query
from typing import Annotated
import logging

from dietplan.domain.DietaryPreference import DietaryPreference
from dietplan.domain.MealSlot import MealSlot
from dietplan.infra.Recipe_Repository import get_catalog
from dietplan.logic.catalog.recipe_catalog import RecipeCatalog
from dietplan.logic.planning.errors import CatalogGap
from dietplan.logic.planning.generator import generate_weekly_plan
from dietplan.logic.planning.service import generate_plan_and_list
from dietplan.logic.reporting.calories import compute_plan_calories
from dietplan.logic.shopping.list_builder import build_shopping_list
from dietplan.utilities.formatting import format_quantity
from dietplan.utilities.validators import PlanRequest

# Routers
from dietplan.api.routes import recipes

# Logging
logger = logging.getLogger("dietplan_app")

# Initialize FastAPI app
app = FastAPI(title="Diet Plan & Shopping List API")

# Include routers
app.include_router(recipes.router)


@app.on_event("startup")
def _startup_catalog():
    """Load the recipe catalog once when the app starts."""
    catalog = get_catalog()
    logger.info("Recipe catalog ready (%d recipes)", len(catalog))


# -------------------- Helpers --------------------
def _plan_or_409(req: PlanRequest, catalog: RecipeCatalog):
    try:
        return generate_weekly_plan(req.start, req.preference, catalog, offset=req.offset)
    except CatalogGap as e:
        logger.warning("Catalog gap: %s", e)
        raise HTTPException(status_code=409, detail=e.to_dict())


def _shopping_payload(shopping_list):
    return [
        {**item.to_dict(), 'display': format_quantity(item.total_quantity)}
        for item in shopping_list
    ]


# -------------------- API: Options --------------------
@app.get('/api/preferences')
def api_preferences():
    return [{'value': p.value, 'label': p.display_name} for p in DietaryPreference]


@app.get('/api/slots')
def api_slots():
    return [{'value': s.value, 'label': s.display_name} for s in MealSlot]


# -------------------- API: Meal plan --------------------
@app.get('/api/meal-plan')
@app.get('/api/meal-plan/')
def api_meal_plan(req: Annotated[PlanRequest, Query()],
                  catalog: RecipeCatalog = Depends(get_catalog)):
    """Generate a fresh seven-day plan.

    Response JSON structure:
        {
          "start_date", "end_date", "preference", "calories",
          "days": [ { date, weekday, calories, meals: [ { slot, recipe } ] } ],
          "nutrition": { days, week_total, daily_average }
        }
    """
    plan = _plan_or_409(req, catalog)
    return {**plan.to_dict(), 'nutrition': compute_plan_calories(plan)}


# -------------------- API: Shopping List (JSON) --------------------
@app.get('/api/shopping-list')
@app.get('/api/shopping-list/')
def api_shopping_list(req: Annotated[PlanRequest, Query()],
                      catalog: RecipeCatalog = Depends(get_catalog)):
    plan = _plan_or_409(req, catalog)
    items = _shopping_payload(build_shopping_list(plan))
    return {
        'start_date': plan.start_date.isoformat(),
        'preference': plan.preference.value,
        'items': items,
        'count': len(items),
    }


# -------------------- API: Plan + list in one call --------------------
@app.get('/api/plan-bundle')
def api_plan_bundle(req: Annotated[PlanRequest, Query()],
                    catalog: RecipeCatalog = Depends(get_catalog)):
    try:
        plan, shopping_list = generate_plan_and_list(req.preference, catalog, req.start, req.offset)
    except CatalogGap as e:
        logger.warning("Catalog gap: %s", e)
        raise HTTPException(status_code=409, detail=e.to_dict())
    items = _shopping_payload(shopping_list)
    return {
        'plan': plan.to_dict(),
        'shopping_list': {'items': items, 'count': len(items)},
    }
