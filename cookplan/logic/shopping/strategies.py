"""Named shopping list strategies and the selector that maps a token to one."""
import logging
from enum import Enum
from typing import Callable, Dict, List, Optional

from cookplan.domain.Ingredient import Ingredient
from cookplan.domain.Plan import MealPlan
from cookplan.logic.shopping.list_builder import (
    build_shopping_list, build_vegan_shopping_list, build_gluten_free_shopping_list
)
from cookplan.utilities.constants import STRATEGY_BASIC, STRATEGY_VEGAN, STRATEGY_GLUTEN_FREE

logger = logging.getLogger(__name__)

ShoppingListFn = Callable[[MealPlan, object], List[Ingredient]]


class ShoppingStrategy(Enum):
    BASIC = STRATEGY_BASIC
    VEGAN = STRATEGY_VEGAN
    GLUTEN_FREE = STRATEGY_GLUTEN_FREE

    @classmethod
    def from_token(cls, token: Optional[str]) -> "ShoppingStrategy":
        """Unknown or missing tokens fall back to BASIC without complaint."""
        try:
            return cls(token)
        except ValueError:
            logger.debug("Unknown shopping strategy %r, using basic", token)
            return cls.BASIC

    @property
    def builder(self) -> ShoppingListFn:
        return _BUILDERS[self]


_BUILDERS: Dict[ShoppingStrategy, ShoppingListFn] = {
    ShoppingStrategy.BASIC: build_shopping_list,
    ShoppingStrategy.VEGAN: build_vegan_shopping_list,
    ShoppingStrategy.GLUTEN_FREE: build_gluten_free_shopping_list,
}


def select_strategy(token: Optional[str]) -> ShoppingListFn:
    return ShoppingStrategy.from_token(token).builder


def generate_shopping_list(meal_plan: MealPlan, recipe_store, token: Optional[str] = STRATEGY_BASIC) -> List[Ingredient]:
    return select_strategy(token)(meal_plan, recipe_store)


__all__ = ['ShoppingStrategy', 'select_strategy', 'generate_shopping_list']
