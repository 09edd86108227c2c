import json
import logging
from typing import Dict, List, Any

from cookplan.domain.Recipe import Recipe
from cookplan.domain.User import User
from cookplan.infra.paths import SAMPLE_DATA_FILE

logger = logging.getLogger(__name__)


def reading_sample_data(path=SAMPLE_DATA_FILE) -> Dict[str, List[Any]]:
    """Read sample users and recipes from JSON with graceful error handling.

    Returns a dict with 'users' (User list) and 'recipes' (Recipe list); both are
    empty when the file is missing, unreadable or malformed.
    """
    empty: Dict[str, List[Any]] = {"users": [], "recipes": []}
    try:
        with open(path, 'r', encoding='utf-8') as f:
            data = json.load(f)
        users = [User(None, u.get("name", ""), u.get("email", "")) for u in data.get("users", [])]
        recipes = [Recipe.from_dict(entry) for entry in data.get("recipes", [])]
        return {"users": users, "recipes": recipes}
    except FileNotFoundError:
        logger.warning(f"Sample data file not found: {path}. Starting empty.")
        return empty
    except json.JSONDecodeError as e:
        logger.error(f"Invalid JSON in sample data file: {e}")
        return empty
    except Exception as e:
        logger.error(f"Error reading sample data: {e}")
        return empty
