"""Application facade: users and session, recipes, meal plans and shopping lists.

Ownership rules live here; the domain objects and the shopping list logic know
nothing about who is logged in.
"""
import logging
from typing import Iterable, List, Optional

from cookplan.domain.Ingredient import Ingredient
from cookplan.domain.Plan import MealPlan, PlanEntry
from cookplan.domain.Recipe import Recipe
from cookplan.domain.User import User
from cookplan.domain.errors import (
    DuplicateEmailError, MealPlanNotFoundError, NotLoggedInError, NotPlanOwnerError,
    RecipeNotFoundError, UserNotFoundError
)
from cookplan.events.Event_Bus import (
    GLOBAL_EVENT_BUS, EventBus, RECIPE_RATED, MEAL_PLAN_ENTRY_ADDED, MEAL_PLAN_SHARED,
    SHOPPING_LIST_GENERATED
)
from cookplan.infra.Memory_Repository import MemoryRepository, RepositoryFactory
from cookplan.infra.Sample_Data_Repository import reading_sample_data
from cookplan.logic.shopping.strategies import ShoppingStrategy
from cookplan.utilities.constants import SHARED_PLAN_NAME_FORMAT, STRATEGY_BASIC

logger = logging.getLogger(__name__)


class CookingPlanApplication:
    def __init__(self, repository: Optional[MemoryRepository] = None, load_sample_data: bool = False,
                 event_bus: Optional[EventBus] = None, repository_type: str = "memory"):
        self.repository = repository if repository is not None else RepositoryFactory.create_repository(repository_type)
        self._event_bus = event_bus or GLOBAL_EVENT_BUS
        if load_sample_data:
            self.initialize_sample_data()

    # --- Users / session ---------------------------------------------------
    def register(self, name: str, email: str) -> User:
        if self.repository.get_user_by_email(email):
            raise DuplicateEmailError(email)
        user = User(None, name, email)
        user_id = self.repository.save_user(user)
        logger.info("Registered user %s (%s)", name, email)
        return self.repository.get_user(user_id)

    def login(self, email: str) -> Optional[User]:
        user = self.repository.get_user_by_email(email)
        if user:
            self.repository.set_current_user(user)
            logger.info("Logged in as %s", user.name)
            return user
        logger.info("Login failed for %s", email)
        return None

    def logout(self):
        self.repository.set_current_user(None)

    def get_current_user(self) -> Optional[User]:
        return self.repository.get_current_user()

    def is_logged_in(self) -> bool:
        return self.get_current_user() is not None

    def _require_user(self) -> User:
        user = self.get_current_user()
        if user is None:
            raise NotLoggedInError()
        return user

    # --- Recipes -------------------------------------------------------------
    def create_recipe(self, title: str, ingredients: List[Ingredient], steps: List[str],
                      tags: Iterable[str] = (), dietary_flags: Iterable[str] = ()) -> Recipe:
        self._require_user()
        recipe = Recipe(None, title, ingredients, steps, list(tags), list(dietary_flags))
        self.repository.save_recipe(recipe)
        logger.info("Created recipe %s (%s)", recipe.title, recipe.id)
        return recipe

    def get_recipe(self, recipe_id) -> Optional[Recipe]:
        return self.repository.get_recipe(recipe_id)

    def get_all_recipes(self) -> List[Recipe]:
        return self.repository.get_all_recipes()

    def rate_recipe(self, recipe_id, rating) -> bool:
        """Apply a rating; False when the value is outside 1..5."""
        recipe = self.repository.get_recipe(recipe_id)
        if recipe is None:
            raise RecipeNotFoundError(recipe_id)
        success = recipe.rate(rating)
        if success:
            self.repository.save_recipe(recipe)
            self._event_bus.publish(RECIPE_RATED, {"recipe": recipe, "value": rating, "rating": recipe.rating})
        else:
            logger.debug("Rejected rating %r for recipe %s", rating, recipe_id)
        return success

    def search_recipes(self, query: str) -> List[Recipe]:
        return [r for r in self.repository.get_all_recipes() if r.matches(query)]

    # --- Meal plans ----------------------------------------------------------
    def create_meal_plan(self, name: str) -> MealPlan:
        user = self._require_user()
        meal_plan = MealPlan(None, user.id, name)
        self.repository.save_meal_plan(meal_plan)
        logger.info("Created meal plan %s (%s)", name, meal_plan.id)
        return meal_plan

    def _get_owned_plan(self, plan_id) -> MealPlan:
        meal_plan = self.repository.get_meal_plan(plan_id)
        if meal_plan is None:
            raise MealPlanNotFoundError(plan_id)
        if meal_plan.user_id != self._require_user().id:
            raise NotPlanOwnerError(plan_id)
        return meal_plan

    def add_to_meal_plan(self, plan_id, day: str, recipe_id) -> MealPlan:
        meal_plan = self._get_owned_plan(plan_id)
        entry = PlanEntry(day, recipe_id)
        meal_plan.add_entry(entry)
        self.repository.save_meal_plan(meal_plan)
        self._event_bus.publish(MEAL_PLAN_ENTRY_ADDED, {"meal_plan": meal_plan, "entry": entry})
        return meal_plan

    def get_meal_plan(self, plan_id) -> Optional[MealPlan]:
        return self.repository.get_meal_plan(plan_id)

    def get_user_meal_plans(self) -> List[MealPlan]:
        user = self.get_current_user()
        if user is None:
            return []
        return self.repository.get_user_meal_plans(user.id)

    # --- Shopping lists ------------------------------------------------------
    def generate_shopping_list(self, plan_id, strategy_type: Optional[str] = STRATEGY_BASIC) -> List[Ingredient]:
        meal_plan = self.repository.get_meal_plan(plan_id)
        if meal_plan is None:
            raise MealPlanNotFoundError(plan_id)
        strategy = ShoppingStrategy.from_token(strategy_type)
        items = strategy.builder(meal_plan, self.repository)
        self._event_bus.publish(SHOPPING_LIST_GENERATED, {
            "meal_plan": meal_plan, "strategy": strategy.value, "items": items
        })
        return items

    # --- Sharing ---------------------------------------------------------------
    def share_meal_plan(self, plan_id, target_email: str) -> MealPlan:
        """Give the target user their own copy of the plan."""
        meal_plan = self._get_owned_plan(plan_id)
        owner = self._require_user()
        target = self.repository.get_user_by_email(target_email)
        if target is None:
            raise UserNotFoundError(target_email)

        shared = MealPlan(
            None,
            target.id,
            SHARED_PLAN_NAME_FORMAT.format(name=meal_plan.name, owner=owner.name),
            list(meal_plan.entries),
        )
        self.repository.save_meal_plan(shared)
        if target.id not in meal_plan.shared_with:
            meal_plan.shared_with.append(target.id)
        self._event_bus.publish(MEAL_PLAN_SHARED, {"source": meal_plan, "copy": shared, "target": target})
        logger.info("Shared meal plan %s with %s", plan_id, target_email)
        return shared

    # --- Sample data -----------------------------------------------------------
    def initialize_sample_data(self):
        """Seed users and recipes from the bundled JSON and log in the first user."""
        data = reading_sample_data()
        users = []
        for user in data["users"]:
            existing = self.repository.get_user_by_email(user.email)
            if existing is None:
                self.repository.save_user(user)
                existing = user
            users.append(existing)
        # Sample recipes carry no ids, so the title identifies them on a reload
        known_titles = {r.title for r in self.repository.get_all_recipes()}
        added = 0
        for recipe in data["recipes"]:
            if recipe.title in known_titles:
                continue
            self.repository.save_recipe(recipe)
            known_titles.add(recipe.title)
            added += 1
        if users:
            self.login(users[0].email)
        logger.info("Sample data loaded: %d users, %d new recipes", len(users), added)
