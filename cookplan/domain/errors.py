"""Exceptions raised by the cooking plan facade and repository factory."""


class CookingPlanError(Exception):
    """Base class for all cooking plan errors."""


class NotLoggedInError(CookingPlanError):
    def __init__(self):
        super().__init__("Must be logged in")


class RecipeNotFoundError(CookingPlanError):
    def __init__(self, recipe_id):
        self.recipe_id = recipe_id
        super().__init__(f"Recipe '{recipe_id}' not found")


class MealPlanNotFoundError(CookingPlanError):
    def __init__(self, plan_id):
        self.plan_id = plan_id
        super().__init__(f"Meal plan '{plan_id}' not found")


class NotPlanOwnerError(CookingPlanError):
    """Raised when the current user tries to change a meal plan owned by someone else."""

    def __init__(self, plan_id):
        self.plan_id = plan_id
        super().__init__(f"Meal plan '{plan_id}' is not yours")


class UserNotFoundError(CookingPlanError):
    def __init__(self, email: str):
        self.email = email
        super().__init__(f"User with email '{email}' not found")


class DuplicateEmailError(CookingPlanError):
    def __init__(self, email: str):
        self.email = email
        super().__init__(f"A user with email '{email}' already exists")


class UnknownRepositoryError(CookingPlanError, ValueError):
    def __init__(self, kind):
        self.kind = kind
        super().__init__(f"Unknown repository type: {kind}")
