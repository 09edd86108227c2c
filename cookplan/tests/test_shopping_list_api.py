import unittest
from fastapi.testclient import TestClient
from cookplan.api.api_run import create_app
from cookplan.app.Cooking_Plan_Application import CookingPlanApplication
from cookplan.events.Event_Bus import EventBus


class TestShoppingListAPI(unittest.TestCase):

    def setUp(self):
        self.client = TestClient(create_app(CookingPlanApplication(event_bus=EventBus())))
        self.client.post('/api/users', json={'name': 'Alice', 'email': 'alice@example.com'})
        self.client.post('/api/users', json={'name': 'Bob', 'email': 'bob@example.com'})
        self.client.post('/api/login', json={'email': 'alice@example.com'})

    def _recipe(self, title, ingredients, **extra):
        resp = self.client.post('/api/recipes', json={'title': title, 'ingredients': ingredients, **extra})
        self.assertEqual(resp.status_code, 201)
        return resp.json()['id']

    def _plan_with(self, *recipe_ids):
        plan_id = self.client.post('/api/meal-plans', json={'name': 'Week'}).json()['id']
        for rid in recipe_ids:
            resp = self.client.post(f'/api/meal-plans/{plan_id}/entries', json={'day': 'Monday', 'recipe_id': rid})
            self.assertEqual(resp.status_code, 200)
        return plan_id

    def test_basic_shopping_list(self):
        a = self._recipe('A', [{'name': 'Broccoli', 'amount': 200, 'unit': 'g'},
                               {'name': 'Soy Sauce', 'amount': 3, 'unit': 'tbsp'}])
        b = self._recipe('B', [{'name': 'Soy Sauce', 'amount': 1, 'unit': 'tbsp'},
                               {'name': 'Garlic', 'amount': 2, 'unit': 'cloves'}])
        plan_id = self._plan_with(a, b)
        resp = self.client.get(f'/api/meal-plans/{plan_id}/shopping-list')
        self.assertEqual(resp.status_code, 200)
        data = resp.json()
        self.assertEqual(data['strategy'], 'basic')
        self.assertEqual(data['count'], 3)
        self.assertEqual(data['lines'], ['200 g Broccoli', '4 tbsp Soy Sauce', '2 cloves Garlic'])

    def test_strategy_query(self):
        rid = self._recipe('Mixed', [{'name': 'Chicken Breast', 'amount': 2},
                                     {'name': 'Bread', 'amount': 1, 'unit': 'loaf'}],
                           dietary_flags=['vegan'])
        plan_id = self._plan_with(rid)
        vegan = self.client.get(f'/api/meal-plans/{plan_id}/shopping-list', params={'strategy': 'vegan'}).json()
        self.assertEqual([i['name'] for i in vegan['items']], ['Bread'])
        gf = self.client.get(f'/api/meal-plans/{plan_id}/shopping-list', params={'strategy': 'glutenFree'}).json()
        self.assertEqual([i['name'] for i in gf['items']], ['Chicken Breast'])
        paleo = self.client.get(f'/api/meal-plans/{plan_id}/shopping-list', params={'strategy': 'paleo'}).json()
        self.assertEqual(paleo['strategy'], 'basic')
        self.assertEqual(paleo['count'], 2)

    def test_unknown_plan(self):
        resp = self.client.get('/api/meal-plans/missing/shopping-list')
        self.assertEqual(resp.status_code, 404)

    def test_rating(self):
        rid = self._recipe('Soup', [])
        self.assertTrue(self.client.post(f'/api/recipes/{rid}/rating', json={'rating': 3}).json()['accepted'])
        data = self.client.post(f'/api/recipes/{rid}/rating', json={'rating': 5}).json()
        self.assertEqual(data['rating'], 4.0)
        rejected = self.client.post(f'/api/recipes/{rid}/rating', json={'rating': 6}).json()
        self.assertFalse(rejected['accepted'])
        self.assertEqual(rejected['ratings'], [3, 5])
        self.assertEqual(self.client.post('/api/recipes/missing/rating', json={'rating': 3}).status_code, 404)

    def test_rating_body_types(self):
        rid = self._recipe('Stew', [])
        fractional = self.client.post(f'/api/recipes/{rid}/rating', json={'rating': 4.5})
        self.assertEqual(fractional.status_code, 200)
        self.assertFalse(fractional.json()['accepted'])
        self.assertEqual(self.client.post(f'/api/recipes/{rid}/rating', json={'rating': '5'}).status_code, 422)
        self.assertEqual(self.client.post(f'/api/recipes/{rid}/rating', json={'rating': True}).status_code, 422)
        self.assertEqual(self.client.get(f'/api/recipes/{rid}').json()['ratings'], [])

    def test_ownership_and_session_errors(self):
        plan_id = self._plan_with()
        self.client.post('/api/login', json={'email': 'bob@example.com'})
        resp = self.client.post(f'/api/meal-plans/{plan_id}/entries', json={'day': 'Monday', 'recipe_id': 'x'})
        self.assertEqual(resp.status_code, 403)
        self.client.post('/api/logout')
        self.assertEqual(self.client.post('/api/meal-plans', json={'name': 'X'}).status_code, 401)
        self.assertEqual(self.client.post('/api/users', json={'name': 'A', 'email': 'alice@example.com'}).status_code, 409)
        self.assertEqual(self.client.post('/api/login', json={'email': 'zed@example.com'}).status_code, 404)

    def test_share_and_list(self):
        plan_id = self._plan_with()
        resp = self.client.post(f'/api/meal-plans/{plan_id}/share', json={'email': 'bob@example.com'})
        self.assertEqual(resp.status_code, 201)
        self.assertEqual(resp.json()['name'], 'Week (Shared by Alice)')
        self.client.post('/api/login', json={'email': 'bob@example.com'})
        plans = self.client.get('/api/meal-plans').json()
        self.assertEqual(plans['count'], 1)
        self.assertEqual(self.client.get('/api/me').json()['user']['name'], 'Bob')

    def test_search(self):
        self._recipe('Vegetable Stir Fry', [], tags=['quick'])
        self._recipe('Grilled Chicken', [])
        data = self.client.get('/api/recipes', params={'q': 'QUICK'}).json()
        self.assertEqual([r['title'] for r in data['recipes']], ['Vegetable Stir Fry'])
        self.assertEqual(self.client.get('/api/recipes').json()['count'], 2)
