"""Meal plan domain entities: a named, user-owned list of (day, recipe id) entries."""
from typing import List, Optional


class PlanEntry:
    def __init__(self, day: str, recipe_id: Optional[str]):
        self.day = day
        self.recipe_id = recipe_id  # weak reference, the recipe may be gone

    def __repr__(self) -> str:
        return f"PlanEntry({self.day!r}, {self.recipe_id!r})"

    def to_dict(self):
        return {"day": self.day, "recipe_id": self.recipe_id}


class MealPlan:
    def __init__(self, id: Optional[str], user_id: Optional[str], name: str,
                 entries: Optional[List[PlanEntry]] = None):
        self.id = id
        self.user_id = user_id
        self.name = name
        self.entries = entries[:] if entries else []
        self.shared_with: List[str] = []

    def add_entry(self, entry: PlanEntry):
        self.entries.append(entry)

    def get_recipe_ids(self) -> List[str]:
        '''Recipe ids in entry order, repeats included, empty references dropped.'''
        return [entry.recipe_id for entry in self.entries if entry.recipe_id]

    def __repr__(self) -> str:
        return f"MealPlan({self.id!r}, {self.name!r}, {len(self.entries)} entries)"

    def to_dict(self):
        return {
            "id": self.id,
            "user_id": self.user_id,
            "name": self.name,
            "entries": [e.to_dict() for e in self.entries],
            "shared_with": self.shared_with,
        }
