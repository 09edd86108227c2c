"""Shopping list builder.

Merges the ingredients of every recipe scheduled in a meal plan into one list,
and provides the dietary variants that post-filter that list by ingredient name.

Provides build_shopping_list(meal_plan, recipe_store) plus the vegan and
gluten-free variants.
"""
import logging
from typing import Dict, Iterable, List, Optional, Tuple

from cookplan.domain.Ingredient import Ingredient
from cookplan.domain.Plan import MealPlan
from cookplan.domain.Recipe import Recipe
from cookplan.utilities.constants import VEGAN_DENYLIST, GLUTEN_DENYLIST

logger = logging.getLogger(__name__)


def _resolve(recipe_store, recipe_id) -> Optional[Recipe]:
    # Repositories expose get_recipe; a plain dict of id -> Recipe works too
    if hasattr(recipe_store, 'get_recipe'):
        return recipe_store.get_recipe(recipe_id)
    return recipe_store.get(recipe_id)


def build_shopping_list(meal_plan: MealPlan, recipe_store) -> List[Ingredient]:
    """Consolidate ingredients across all recipes referenced by a meal plan.

    Args:
        meal_plan: MealPlan whose entries reference recipes by id.
        recipe_store: object with get_recipe(id), or a mapping of id -> Recipe.

    Returns:
        New Ingredient objects, one per (name, unit), in order of first
        occurrence. A recipe scheduled twice counts twice. Unknown recipe ids and
        recipes without ingredients are skipped.
    """
    merged: Dict[Tuple[str, str], Ingredient] = {}

    for recipe_id in meal_plan.get_recipe_ids():
        recipe = _resolve(recipe_store, recipe_id)
        if recipe is None:
            logger.debug("Recipe %s not found, skipping", recipe_id)
            continue
        if not recipe.ingredients:
            continue
        for ing in recipe.ingredients:
            key = ing.merge_key
            if key in merged:
                merged[key].add_amount(ing.amount)
            else:
                merged[key] = ing.copy()

    return list(merged.values())


def exclude_denylisted(items: Iterable[Ingredient], denylist: Iterable[str]) -> List[Ingredient]:
    """Drop ingredients whose lower-cased name contains any denylist term."""
    terms = tuple(denylist)
    kept: List[Ingredient] = []
    for item in items:
        lowered = item.name.lower()
        if any(term in lowered for term in terms):
            logger.debug("Excluding %s", item.name)
            continue
        kept.append(item)
    return kept


def build_vegan_shopping_list(meal_plan: MealPlan, recipe_store) -> List[Ingredient]:
    # Name based only, Recipe.dietary_flags are not consulted
    return exclude_denylisted(build_shopping_list(meal_plan, recipe_store), VEGAN_DENYLIST)


def build_gluten_free_shopping_list(meal_plan: MealPlan, recipe_store) -> List[Ingredient]:
    return exclude_denylisted(build_shopping_list(meal_plan, recipe_store), GLUTEN_DENYLIST)


__all__ = [
    'build_shopping_list', 'build_vegan_shopping_list', 'build_gluten_free_shopping_list',
    'exclude_denylisted',
]
