"""
Unit tests for notifications/directory.py

Tests settings and user lookups with a mocked Supabase client.
"""

import unittest

from notifications.directory import SupabaseDirectory
from tests.fixtures.mock_helpers import create_mock_supabase


class TestSupabaseDirectory(unittest.IsolatedAsyncioTestCase):
    """Tests for SupabaseDirectory."""

    async def test_get_settings_parses_row(self):
        supabase = create_mock_supabase(
            [
                {
                    "notifications": {
                        "connect.notification.project.active": {"email": {"enabled": "no"}}
                    },
                    "services": {"email": {"bundlePeriod": "weekly"}},
                }
            ]
        )
        directory = SupabaseDirectory(supabase)

        settings = await directory.get_settings("40051")

        self.assertTrue(
            settings.is_service_disabled("connect.notification.project.active", "email")
        )
        self.assertEqual(settings.bundle_period("email"), "weekly")
        supabase.table.assert_called_with("notification_settings")
        supabase.eq.assert_called_with("user_id", "40051")

    async def test_get_settings_defaults_when_missing(self):
        directory = SupabaseDirectory(create_mock_supabase([]))

        settings = await directory.get_settings("40051")

        self.assertEqual(settings.notifications, {})
        self.assertIsNone(settings.bundle_period("email"))

    async def test_get_settings_handles_null_columns(self):
        directory = SupabaseDirectory(
            create_mock_supabase([{"notifications": None, "services": None}])
        )

        settings = await directory.get_settings("40051")

        self.assertEqual(settings.services, {})

    async def test_get_users_by_id(self):
        supabase = create_mock_supabase(
            [
                {
                    "id": 40051,
                    "email": "member@example.com",
                    "first_name": "Jane",
                    "last_name": "Doe",
                    "handle": "jdoe",
                }
            ]
        )
        directory = SupabaseDirectory(supabase)

        users = await directory.get_users_by_id(["40051"])

        self.assertEqual(len(users), 1)
        self.assertEqual(users[0].id, "40051")
        self.assertEqual(users[0].full_name, "Jane Doe")
        supabase.in_.assert_called_with("id", ["40051"])

    async def test_get_users_by_id_unknown(self):
        directory = SupabaseDirectory(create_mock_supabase([]))

        self.assertEqual(await directory.get_users_by_id(["1"]), [])


if __name__ == "__main__":
    unittest.main()
