from typing import Final

MIN_RATING: Final[int] = 1
MAX_RATING: Final[int] = 5

# Strategy tokens accepted by the shopping list selector
STRATEGY_BASIC: Final[str] = "basic"
STRATEGY_VEGAN: Final[str] = "vegan"
STRATEGY_GLUTEN_FREE: Final[str] = "glutenFree"

# Case-insensitive substrings; an ingredient whose name contains one is excluded
VEGAN_DENYLIST: Final[tuple[str, ...]] = (
    "meat", "chicken", "beef", "pork", "fish", "egg", "milk", "cheese", "butter", "honey",
)
GLUTEN_DENYLIST: Final[tuple[str, ...]] = ("wheat", "flour", "bread", "pasta", "barley", "rye")

RECIPE_ID_PREFIX: Final[str] = "recipe"
PLAN_ID_PREFIX: Final[str] = "plan"
USER_ID_PREFIX: Final[str] = "user"

SHARED_PLAN_NAME_FORMAT: Final[str] = "{name} (Shared by {owner})"
