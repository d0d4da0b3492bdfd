"""
Lookups of users and their notification settings.

Both are read from Supabase on every call; nothing is cached so a settings
change applies to the next event.
"""

import asyncio
from typing import Any, List, Sequence, cast

from models.notification import User
from models.settings import NotificationSettings
from models.types import UserID
from shared.db import SETTINGS_TABLE, USERS_TABLE, get_supabase_client


class SupabaseDirectory:
    """Settings store and user directory backed by Supabase tables."""

    def __init__(self, supabase: Any = None):
        self._supabase = supabase

    @property
    def supabase(self) -> Any:
        if self._supabase is None:
            self._supabase = get_supabase_client()
        return self._supabase

    def _fetch_settings(self, user_id: str) -> NotificationSettings:
        response = (
            self.supabase.table(SETTINGS_TABLE)
            .select("notifications, services")
            .eq("user_id", user_id)
            .execute()
        )
        if not response.data:
            return NotificationSettings()

        row = cast(dict[str, Any], response.data[0])
        return NotificationSettings(
            notifications=row.get("notifications") or {},
            services=row.get("services") or {},
        )

    def _fetch_users(self, user_ids: Sequence[str]) -> List[User]:
        response = (
            self.supabase.table(USERS_TABLE)
            .select("id, email, first_name, last_name, handle")
            .in_("id", list(user_ids))
            .execute()
        )
        users = []
        for row in response.data or []:
            users.append(
                User(
                    id=UserID(str(row["id"])),
                    email=row.get("email"),
                    first_name=row.get("first_name") or "",
                    last_name=row.get("last_name") or "",
                    handle=row.get("handle") or "",
                )
            )
        return users

    async def get_settings(self, user_id: str) -> NotificationSettings:
        """Get a user's notification settings (empty settings if none are stored)."""
        return await asyncio.to_thread(self._fetch_settings, user_id)

    async def get_users_by_id(self, user_ids: Sequence[str]) -> List[User]:
        """Get users by id; unknown ids are simply missing from the result."""
        return await asyncio.to_thread(self._fetch_users, user_ids)
