"""Simple Event Bus / Observer implementation for cooking plan notifications.

Event names used so far:
  recipe.rated -> payload {"recipe": Recipe, "value": int, "rating": float}
  meal_plan.entry_added -> payload {"meal_plan": MealPlan, "entry": PlanEntry}
  meal_plan.shared -> payload {"source": MealPlan, "copy": MealPlan, "target": User}
  shopping_list.generated -> payload {"meal_plan": MealPlan, "strategy": str, "items": list}

Subscribers are callables taking (event_name, payload).
"""
from __future__ import annotations
import logging
from collections import defaultdict
from typing import Callable, Any, Dict, List

logger = logging.getLogger(__name__)

# --- Event name constants (used across modules) ---
RECIPE_RATED = "recipe.rated"
MEAL_PLAN_ENTRY_ADDED = "meal_plan.entry_added"
MEAL_PLAN_SHARED = "meal_plan.shared"
SHOPPING_LIST_GENERATED = "shopping_list.generated"
ALL_EVENTS = (RECIPE_RATED, MEAL_PLAN_ENTRY_ADDED, MEAL_PLAN_SHARED, SHOPPING_LIST_GENERATED)


class EventBus:
	def __init__(self):
		self._subscribers: Dict[str, List[Callable[[str, Any], None]]] = defaultdict(list)

	def subscribe(self, event_name: str, callback: Callable[[str, Any], None]):
		if callback not in self._subscribers[event_name]:
			self._subscribers[event_name].append(callback)

	def unsubscribe(self, event_name: str, callback: Callable[[str, Any], None]):
		try:
			self._subscribers[event_name].remove(callback)
		except (ValueError, KeyError):
			pass

	def publish(self, event_name: str, payload: Any):
		for cb in list(self._subscribers.get(event_name, [])):
			try:
				cb(event_name, payload)
			except Exception:
				logger.exception("Error delivering %s to %s", event_name, cb)


# A singleton-like instance (can be imported)
GLOBAL_EVENT_BUS = EventBus()


def log_listener(event_name: str, payload: Any):
	logger.info("[EVENT] %s: %s", event_name, payload)


__all__ = [
	'EventBus', 'GLOBAL_EVENT_BUS', 'log_listener',
	'ALL_EVENTS', 'RECIPE_RATED', 'MEAL_PLAN_ENTRY_ADDED', 'MEAL_PLAN_SHARED', 'SHOPPING_LIST_GENERATED'
]
