import json
import os
import tempfile
import unittest
from cookplan.domain.Plan import MealPlan
from cookplan.domain.Recipe import Recipe
from cookplan.domain.User import User
from cookplan.domain.errors import UnknownRepositoryError
from cookplan.infra.Memory_Repository import MemoryRepository, RepositoryFactory
from cookplan.infra.Sample_Data_Repository import reading_sample_data


class TestMemoryRepository(unittest.TestCase):

    def setUp(self):
        self.repo = RepositoryFactory.create_repository("memory")

    def test_factory_unknown_kind(self):
        with self.assertRaises(UnknownRepositoryError):
            RepositoryFactory.create_repository("sqlite")
        self.assertIsInstance(self.repo, MemoryRepository)

    def test_save_assigns_prefixed_ids(self):
        recipe_id = self.repo.save_recipe(Recipe(None, "Soup"))
        plan_id = self.repo.save_meal_plan(MealPlan(None, "u", "Plan"))
        user_id = self.repo.save_user(User(None, "Ann", "ann@example.com"))
        self.assertTrue(recipe_id.startswith("recipe-"))
        self.assertTrue(plan_id.startswith("plan-"))
        self.assertTrue(user_id.startswith("user-"))
        self.assertNotEqual(recipe_id, self.repo.save_recipe(Recipe(None, "Stew")))

    def test_save_keeps_existing_id(self):
        self.assertEqual(self.repo.save_recipe(Recipe("fixed", "Soup")), "fixed")
        self.assertEqual(self.repo.get_recipe("fixed").title, "Soup")

    def test_unknown_lookups_return_none(self):
        self.assertIsNone(self.repo.get_recipe("nope"))
        self.assertIsNone(self.repo.get_meal_plan("nope"))
        self.assertIsNone(self.repo.get_user("nope"))
        self.assertIsNone(self.repo.get_user_by_email("nobody@example.com"))
        self.assertFalse(self.repo.delete_recipe("nope"))

    def test_delete_recipe(self):
        rid = self.repo.save_recipe(Recipe(None, "Soup"))
        self.assertTrue(self.repo.delete_recipe(rid))
        self.assertEqual(self.repo.get_all_recipes(), [])

    def test_user_meal_plans(self):
        self.repo.save_meal_plan(MealPlan(None, "u1", "A"))
        self.repo.save_meal_plan(MealPlan(None, "u2", "B"))
        self.repo.save_meal_plan(MealPlan(None, "u1", "C"))
        self.assertEqual([p.name for p in self.repo.get_user_meal_plans("u1")], ["A", "C"])

    def test_current_user(self):
        user = User(None, "Ann", "ann@example.com")
        self.repo.save_user(user)
        self.assertIsNone(self.repo.get_current_user())
        self.repo.set_current_user(user)
        self.assertIs(self.repo.get_current_user(), user)
        self.repo.set_current_user(None)
        self.assertIsNone(self.repo.get_current_user())


class TestSampleData(unittest.TestCase):

    def test_bundled_sample_data(self):
        data = reading_sample_data()
        self.assertEqual([u.email for u in data["users"]], ["alice@example.com", "bob@example.com"])
        self.assertEqual([r.title for r in data["recipes"]],
                         ["Vegetable Stir Fry", "Grilled Chicken", "Pasta Carbonara"])
        self.assertEqual(str(data["recipes"][0].ingredients[1]), "2 Carrot")

    def test_missing_file(self):
        self.assertEqual(reading_sample_data("/nonexistent/sample.json"), {"users": [], "recipes": []})

    def test_invalid_json(self):
        fd, path = tempfile.mkstemp(suffix=".json")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write("{not json")
            self.assertEqual(reading_sample_data(path), {"users": [], "recipes": []})
        finally:
            os.remove(path)

    def _read_raw(self, content):
        fd, path = tempfile.mkstemp(suffix=".json")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(content)
            return reading_sample_data(path)
        finally:
            os.remove(path)

    def test_top_level_list_gives_empty_data(self):
        with self.assertLogs("cookplan.infra.Sample_Data_Repository", level="ERROR"):
            data = self._read_raw("[]")
        self.assertEqual(data, {"users": [], "recipes": []})

    def test_non_numeric_amount_gives_empty_data(self):
        content = json.dumps({"recipes": [{"title": "T", "ingredients": [{"name": "x", "amount": "2"}]}]})
        with self.assertLogs("cookplan.infra.Sample_Data_Repository", level="ERROR"):
            data = self._read_raw(content)
        self.assertEqual(data, {"users": [], "recipes": []})

    def test_custom_file(self):
        fd, path = tempfile.mkstemp(suffix=".json")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump({"recipes": [{"title": "Tea", "ingredients": [{"name": "Tea", "amount": 1}]}]}, f)
            data = reading_sample_data(path)
            self.assertEqual(data["users"], [])
            self.assertEqual(data["recipes"][0].ingredients[0].unit, "")
        finally:
            os.remove(path)
