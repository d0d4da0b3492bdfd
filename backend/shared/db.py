"""Supabase access for the notification tables (settings, users, scheduled events)."""

import os
from functools import lru_cache

from dotenv import load_dotenv
from supabase import Client, create_client

load_dotenv()

SETTINGS_TABLE = "notification_settings"
USERS_TABLE = "user_profiles"
SCHEDULED_EVENTS_TABLE = "scheduled_events"


@lru_cache
def get_supabase_client() -> Client:
    """Get the shared Supabase client; SUPABASE_URL and SUPABASE_SERVICE_KEY are required."""
    url: str | None = os.getenv("SUPABASE_URL")
    key: str | None = os.getenv("SUPABASE_SERVICE_KEY")

    if not url or not key:
        raise ValueError("SUPABASE_URL and SUPABASE_SERVICE_KEY must be set")

    return create_client(url, key)
