"""Handler tests for /api/UCSBDiningCommonsMenuItem with a store double."""

from __future__ import annotations

from django.test import TestCase

from dining.records import MenuItem
from dining.views import MenuItemViewSet
from tests.utils import call_view, create_user, mock_store, response_json

BASE = "/api/UCSBDiningCommonsMenuItem"


class MenuItemHandlerTests(TestCase):
    """Menu items expose list, get, and create only."""

    @classmethod
    def setUpTestData(cls):
        cls.user = create_user("user@test.com", "USER")
        cls.admin = create_user("admin@test.com", "ADMIN", "USER")

    def setUp(self):
        self.store = mock_store()
        self.penne = MenuItem("ortega", "Baked Penne Pasta with Cheese", "Entree Specials", id=1)

    def test_update_and_delete_are_not_exposed(self):
        self.assertFalse(hasattr(MenuItemViewSet, "update"))
        self.assertFalse(hasattr(MenuItemViewSet, "destroy"))

    def test_logged_out_users_cannot_get_all(self):
        response = call_view(MenuItemViewSet, {"get": "list"}, self.store, "get", f"{BASE}/all")

        self.assertEqual(response.status_code, 403)
        self.assertEqual(self.store.method_calls, [])

    def test_logged_in_user_can_get_all(self):
        banh_mi = MenuItem("portola", "Tofu Banh Mi Sandwich", "Entree Specials", id=2)
        self.store.find_all.return_value = [self.penne, banh_mi]

        response = call_view(MenuItemViewSet, {"get": "list"}, self.store, "get", f"{BASE}/all", user=self.user)

        self.assertEqual(response.status_code, 200)
        self.assertEqual(
            response_json(response),
            [
                {"id": 1, "diningCommonsCode": "ortega", "name": "Baked Penne Pasta with Cheese",
                 "station": "Entree Specials"},
                {"id": 2, "diningCommonsCode": "portola", "name": "Tofu Banh Mi Sandwich",
                 "station": "Entree Specials"},
            ],
        )

    def test_get_by_id_parses_numeric_key(self):
        self.store.find_by_id.return_value = self.penne

        response = call_view(MenuItemViewSet, {"get": "retrieve"}, self.store, "get", f"{BASE}?id=1", user=self.user)

        self.assertEqual(response.status_code, 200)
        self.store.find_by_id.assert_called_once_with(1)
        self.assertEqual(response_json(response)["name"], "Baked Penne Pasta with Cheese")

    def test_get_by_id_with_non_numeric_key_is_a_client_error(self):
        response = call_view(MenuItemViewSet, {"get": "retrieve"}, self.store, "get", f"{BASE}?id=abc", user=self.user)

        self.assertEqual(response.status_code, 400)
        self.assertIn("id", response_json(response)["errors"])
        self.assertEqual(self.store.method_calls, [])

    def test_get_by_id_when_the_id_does_not_exist(self):
        self.store.find_by_id.return_value = None

        response = call_view(MenuItemViewSet, {"get": "retrieve"}, self.store, "get", f"{BASE}?id=7", user=self.user)

        self.assertEqual(response.status_code, 404)
        self.assertEqual(
            response_json(response),
            {"type": "EntityNotFoundException", "message": "UCSBDiningCommonsMenuItem with id 7 not found"},
        )

    def test_logged_out_users_cannot_get_by_id(self):
        response = call_view(MenuItemViewSet, {"get": "retrieve"}, self.store, "get", f"{BASE}?id=1")

        self.assertEqual(response.status_code, 403)
        self.assertEqual(self.store.method_calls, [])

    def test_logged_out_users_cannot_post(self):
        response = call_view(
            MenuItemViewSet, {"post": "create"}, self.store, "post",
            f"{BASE}/post?diningCommonsCode=ortega&name=Penne&station=Entree",
        )

        self.assertEqual(response.status_code, 403)
        self.assertEqual(self.store.method_calls, [])

    def test_regular_users_cannot_post(self):
        response = call_view(
            MenuItemViewSet, {"post": "create"}, self.store, "post",
            f"{BASE}/post?diningCommonsCode=ortega&name=Penne&station=Entree", user=self.user,
        )

        self.assertEqual(response.status_code, 403)
        self.assertEqual(self.store.method_calls, [])

    def test_admin_can_post_and_gets_store_assigned_id(self):
        """The key is left unset for the store, and the response carries the assigned one."""
        self.store.save.return_value = self.penne

        response = call_view(
            MenuItemViewSet, {"post": "create"}, self.store, "post",
            f"{BASE}/post?diningCommonsCode=ortega&name=Baked%20Penne%20Pasta%20with%20Cheese"
            "&station=Entree%20Specials",
            user=self.admin,
        )

        self.assertEqual(response.status_code, 200)
        self.store.save.assert_called_once_with(
            MenuItem("ortega", "Baked Penne Pasta with Cheese", "Entree Specials")
        )
        self.assertEqual(response_json(response)["id"], 1)

    def test_admin_can_post_form_fields(self):
        self.store.save.return_value = self.penne

        response = call_view(
            MenuItemViewSet, {"post": "create"}, self.store, "post", f"{BASE}/post",
            user=self.admin,
            data={"diningCommonsCode": "ortega", "name": "Baked Penne Pasta with Cheese",
                  "station": "Entree Specials"},
        )

        self.assertEqual(response.status_code, 200)
        self.store.save.assert_called_once_with(
            MenuItem("ortega", "Baked Penne Pasta with Cheese", "Entree Specials")
        )
