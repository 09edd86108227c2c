"""In-memory storage for recipes, meal plans, users and the current session."""
import logging
from typing import Dict, List, Optional
from uuid import uuid4

from cookplan.domain.Plan import MealPlan
from cookplan.domain.Recipe import Recipe
from cookplan.domain.User import User
from cookplan.domain.errors import UnknownRepositoryError
from cookplan.utilities.constants import RECIPE_ID_PREFIX, PLAN_ID_PREFIX, USER_ID_PREFIX

logger = logging.getLogger(__name__)


def _new_id(prefix: str) -> str:
    return f"{prefix}-{uuid4().hex}"


class MemoryRepository:
    """Dict-backed store. Lookups of unknown ids return None instead of raising.

    Also serves as the recipe store for the shopping list builder through
    ``get_recipe``.
    """

    def __init__(self):
        self.recipes: Dict[str, Recipe] = {}
        self.meal_plans: Dict[str, MealPlan] = {}
        self.users: Dict[str, User] = {}
        self.current_user_id: Optional[str] = None

    # --- Recipes ---------------------------------------------------------
    def save_recipe(self, recipe: Recipe) -> str:
        if not recipe.id:
            recipe.id = _new_id(RECIPE_ID_PREFIX)
        self.recipes[recipe.id] = recipe
        return recipe.id

    def get_recipe(self, recipe_id) -> Optional[Recipe]:
        return self.recipes.get(recipe_id)

    def get_all_recipes(self) -> List[Recipe]:
        return list(self.recipes.values())

    def delete_recipe(self, recipe_id) -> bool:
        '''Removes a recipe. Plan entries pointing at it are left as they are.'''
        if recipe_id in self.recipes:
            del self.recipes[recipe_id]
            logger.debug("Deleted recipe %s", recipe_id)
            return True
        return False

    # --- Meal plans ------------------------------------------------------
    def save_meal_plan(self, meal_plan: MealPlan) -> str:
        if not meal_plan.id:
            meal_plan.id = _new_id(PLAN_ID_PREFIX)
        self.meal_plans[meal_plan.id] = meal_plan
        return meal_plan.id

    def get_meal_plan(self, plan_id) -> Optional[MealPlan]:
        return self.meal_plans.get(plan_id)

    def get_user_meal_plans(self, user_id) -> List[MealPlan]:
        return [plan for plan in self.meal_plans.values() if plan.user_id == user_id]

    # --- Users -----------------------------------------------------------
    def save_user(self, user: User) -> str:
        if not user.id:
            user.id = _new_id(USER_ID_PREFIX)
        self.users[user.id] = user
        return user.id

    def get_user(self, user_id) -> Optional[User]:
        return self.users.get(user_id)

    def get_user_by_email(self, email: str) -> Optional[User]:
        return next((u for u in self.users.values() if u.email == email), None)

    # --- Session ---------------------------------------------------------
    def set_current_user(self, user: Optional[User]):
        self.current_user_id = user.id if user else None

    def get_current_user(self) -> Optional[User]:
        return self.get_user(self.current_user_id) if self.current_user_id else None


class RepositoryFactory:
    _KINDS = {
        "memory": MemoryRepository,
    }

    @staticmethod
    def create_repository(kind: str) -> MemoryRepository:
        try:
            repository_cls = RepositoryFactory._KINDS[kind]
        except KeyError:
            raise UnknownRepositoryError(kind) from None
        logger.debug("Creating %s repository", kind)
        return repository_cls()


__all__ = ['MemoryRepository', 'RepositoryFactory']
