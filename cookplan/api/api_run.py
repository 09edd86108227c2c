from fastapi import FastAPI, APIRouter, HTTPException, Query, Request
from fastapi.responses import JSONResponse
from typing import Optional
import logging

from cookplan.app.Cooking_Plan_Application import CookingPlanApplication
from cookplan.domain.Ingredient import Ingredient
from cookplan.domain.errors import (
    CookingPlanError, DuplicateEmailError, MealPlanNotFoundError, NotLoggedInError,
    NotPlanOwnerError, RecipeNotFoundError, UserNotFoundError
)
from cookplan.logic.shopping.strategies import ShoppingStrategy
from cookplan.utilities.config import LOAD_SAMPLE_DATA, REPOSITORY_TYPE
from cookplan.utilities.constants import STRATEGY_BASIC
from cookplan.utilities.validators import (
    LoginInput, MealPlanInput, PlanEntryInput, RatingInput, RecipeInput, ShareInput, UserInput
)

# Logging
logger = logging.getLogger("cookplan_app")

ERROR_STATUS = {
    NotLoggedInError: 401,
    NotPlanOwnerError: 403,
    RecipeNotFoundError: 404,
    MealPlanNotFoundError: 404,
    UserNotFoundError: 404,
    DuplicateEmailError: 409,
}


def _status_for(exc: CookingPlanError) -> int:
    for exc_type, status in ERROR_STATUS.items():
        if isinstance(exc, exc_type):
            return status
    return 400


def create_app(application: Optional[CookingPlanApplication] = None) -> FastAPI:
    """Build the HTTP app around a facade instance (a fresh one from config by default)."""
    if application is None:
        application = CookingPlanApplication(load_sample_data=LOAD_SAMPLE_DATA, repository_type=REPOSITORY_TYPE)

    api = FastAPI(title="Cooking Plan API")
    api.state.cooking_plan = application
    router = APIRouter(prefix="/api")

    @api.exception_handler(CookingPlanError)
    async def _cooking_plan_error(request: Request, exc: CookingPlanError):
        status = _status_for(exc)
        logger.info("%s %s -> %s: %s", request.method, request.url.path, status, exc)
        return JSONResponse(status_code=status, content={"detail": str(exc)})

    # -------------------- Users / session --------------------
    @router.post("/users", status_code=201)
    def register(payload: UserInput):
        return application.register(payload.name, payload.email).to_dict()

    @router.post("/login")
    def login(payload: LoginInput):
        user = application.login(payload.email)
        if user is None:
            raise HTTPException(status_code=404, detail="User not found")
        return user.to_dict()

    @router.post("/logout")
    def logout():
        application.logout()
        return {"logged_in": False}

    @router.get("/me")
    def me():
        user = application.get_current_user()
        return {"logged_in": user is not None, "user": user.to_dict() if user else None}

    # -------------------- Recipes --------------------
    @router.get("/recipes")
    def list_recipes(q: Optional[str] = Query(default=None)):
        recipes = application.search_recipes(q) if q else application.get_all_recipes()
        return {"count": len(recipes), "recipes": [r.to_dict() for r in recipes]}

    @router.post("/recipes", status_code=201)
    def create_recipe(payload: RecipeInput):
        ingredients = [Ingredient(i.name, i.amount, i.unit) for i in payload.ingredients]
        recipe = application.create_recipe(payload.title, ingredients, payload.steps,
                                           payload.tags, payload.dietary_flags)
        return recipe.to_dict()

    @router.get("/recipes/{recipe_id}")
    def recipe_detail(recipe_id: str):
        recipe = application.get_recipe(recipe_id)
        if recipe is None:
            raise HTTPException(status_code=404, detail="Recipe not found")
        return recipe.to_dict()

    @router.post("/recipes/{recipe_id}/rating")
    def rate_recipe(recipe_id: str, payload: RatingInput):
        accepted = application.rate_recipe(recipe_id, payload.rating)
        recipe = application.get_recipe(recipe_id)
        return {"accepted": accepted, "rating": recipe.rating, "ratings": recipe.ratings}

    # -------------------- Meal plans --------------------
    @router.get("/meal-plans")
    def list_meal_plans():
        plans = application.get_user_meal_plans()
        return {"count": len(plans), "meal_plans": [p.to_dict() for p in plans]}

    @router.post("/meal-plans", status_code=201)
    def create_meal_plan(payload: MealPlanInput):
        return application.create_meal_plan(payload.name).to_dict()

    @router.get("/meal-plans/{plan_id}")
    def meal_plan_detail(plan_id: str):
        plan = application.get_meal_plan(plan_id)
        if plan is None:
            raise HTTPException(status_code=404, detail="Meal plan not found")
        return plan.to_dict()

    @router.post("/meal-plans/{plan_id}/entries")
    def add_entry(plan_id: str, payload: PlanEntryInput):
        return application.add_to_meal_plan(plan_id, payload.day, payload.recipe_id).to_dict()

    @router.post("/meal-plans/{plan_id}/share", status_code=201)
    def share(plan_id: str, payload: ShareInput):
        return application.share_meal_plan(plan_id, payload.email).to_dict()

    # -------------------- Shopping list --------------------
    @router.get("/meal-plans/{plan_id}/shopping-list")
    def shopping_list(plan_id: str, strategy: Optional[str] = Query(default=STRATEGY_BASIC)):
        items = application.generate_shopping_list(plan_id, strategy)
        return {
            "meal_plan_id": plan_id,
            "strategy": ShoppingStrategy.from_token(strategy).value,
            "items": [i.to_dict() for i in items],
            "lines": [str(i) for i in items],
            "count": len(items),
        }

    api.include_router(router)
    return api


app = create_app()
