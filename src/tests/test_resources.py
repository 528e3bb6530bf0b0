"""Unit tests for the generic CRUD resource against a store double."""

from __future__ import annotations

from django.test import SimpleTestCase

from core.resources import CrudResource, NotFound
from organizations.records import Organization
from tests.utils import mock_store


class CrudResourceTests(SimpleTestCase):
    """Lookup misses are returned as values and never reach the write methods."""

    def setUp(self):
        self.store = mock_store()
        self.resource = CrudResource(
            self.store,
            "UCSBOrganizations",
            mutable_fields=("org_translation", "org_translation_short", "inactive"),
        )
        self.zpr = Organization("zpr", "ZETA PHI RHO", "ZETA PHI RHO", False)

    def test_not_found_message(self):
        """NotFound renders the fixed '<Entity> with id <key> not found' message."""
        self.assertEqual(NotFound("UCSBArticles", 7).message, "UCSBArticles with id 7 not found")

    def test_list_returns_store_snapshot(self):
        """list returns exactly what the store iterates, in store order."""
        sky = Organization("sky", "SKYDIVING CLUB AT UCSB", "SKYDIVING CLUB", False)
        self.store.find_all.return_value = [self.zpr, sky]

        self.assertEqual(self.resource.list(), [self.zpr, sky])

    def test_get_miss_returns_not_found(self):
        """A miss yields NotFound carrying entity name and key."""
        self.store.find_by_id.return_value = None

        outcome = self.resource.get("krc")

        self.assertEqual(outcome, NotFound("UCSBOrganizations", "krc"))
        self.store.find_by_id.assert_called_once_with("krc")

    def test_create_returns_saved_record(self):
        """create hands the record to save and returns the store's result."""
        self.store.save.return_value = self.zpr

        self.assertIs(self.resource.create(self.zpr), self.zpr)
        self.store.save.assert_called_once_with(self.zpr)

    def test_update_copies_only_allow_listed_fields(self):
        """The key and unknown attributes are never taken from the changes."""
        self.store.find_by_id.return_value = self.zpr

        merged = self.resource.update(
            "zpr",
            {"org_code": "other", "org_translation": "ZPR", "inactive": True, "bogus": 1},
        )

        expected = Organization("zpr", "ZPR", "ZETA PHI RHO", True)
        self.assertEqual(merged, expected)
        self.store.save.assert_called_once_with(expected)

    def test_update_miss_never_saves(self):
        """Update on a missing key returns NotFound without calling save."""
        self.store.find_by_id.return_value = None

        outcome = self.resource.update("krc", {"org_translation": "X"})

        self.assertIsInstance(outcome, NotFound)
        self.store.save.assert_not_called()

    def test_delete_existing_returns_message(self):
        """Delete removes the looked-up record exactly once."""
        self.store.find_by_id.return_value = self.zpr

        message = self.resource.delete("zpr")

        self.assertEqual(message, "UCSBOrganizations with id zpr deleted")
        self.store.delete.assert_called_once_with(self.zpr)

    def test_delete_miss_never_deletes(self):
        """Delete on a missing key returns NotFound without calling delete."""
        self.store.find_by_id.return_value = None

        outcome = self.resource.delete("krc")

        self.assertEqual(outcome.message, "UCSBOrganizations with id krc not found")
        self.store.delete.assert_not_called()
