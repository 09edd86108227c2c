"""Recipe domain entity: title, ingredients, steps, tags, dietary flags and ratings."""
from typing import List, Optional

from cookplan.domain.Ingredient import Ingredient
from cookplan.utilities.constants import MIN_RATING, MAX_RATING


class Recipe:
    def __init__(self, id: Optional[str] = None, title: str = "",
                 ingredients: Optional[List[Ingredient]] = None, steps: Optional[List[str]] = None,
                 tags: Optional[List[str]] = None, dietary_flags: Optional[List[str]] = None):
        self.id = id
        self.title = title
        self.ingredients = ingredients[:] if ingredients else []
        self.steps = steps[:] if steps else []
        self.tags = tags[:] if tags else []
        # Informational only; the shopping list filters look at ingredient names
        self.dietary_flags = dietary_flags[:] if dietary_flags else []
        self.rating: float = 0
        self.ratings: List[int] = []

    def __str__(self) -> str:
        return f"{self.title} - {len(self.ingredients)} ingredients - Tags: {', '.join(self.tags)} - Rating: {self.rating:.1f} ({len(self.ratings)})"

    __repr__ = __str__

    def rate(self, value) -> bool:
        """Record a 1..5 rating and recompute the average.

        Returns False and leaves the recipe untouched for anything that is not an
        integer inside the range.
        """
        if isinstance(value, bool) or not isinstance(value, int):
            return False
        if not MIN_RATING <= value <= MAX_RATING:
            return False
        self.ratings.append(value)
        self.rating = sum(self.ratings) / len(self.ratings)
        return True

    def matches(self, query: str) -> bool:
        """Case-insensitive substring match on title, tags and dietary flags."""
        q = (query or "").lower()
        if q in self.title.lower():
            return True
        return any(q in tag.lower() for tag in self.tags) or \
            any(q in flag.lower() for flag in self.dietary_flags)

    @staticmethod
    def from_dict(data):
        d = dict(data)
        recipe = Recipe(
            id=d.get("id"),
            title=d.get("title", ""),
            ingredients=[Ingredient.from_dict(ing) for ing in d.get("ingredients", [])],
            steps=d.get("steps", []),
            tags=d.get("tags", []),
            dietary_flags=d.get("dietary_flags", []),
        )
        for value in d.get("ratings", []):
            recipe.rate(value)
        return recipe

    def to_dict(self):
        return {
            "id": self.id,
            "title": self.title,
            "ingredients": [ing.to_dict() for ing in self.ingredients],
            "steps": self.steps,
            "tags": self.tags,
            "dietary_flags": self.dietary_flags,
            "rating": self.rating,
            "ratings": self.ratings,
        }
