"""Runtime configuration for the email notification service.

Values come from environment variables (optionally loaded from a .env file)
and are collected into a typed, read-only model.
"""

import os
from functools import lru_cache

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict

load_dotenv()


class NotificationConfig(BaseModel):
    """Read-only configuration surface used by the email handlers."""

    model_config = ConfigDict(frozen=True)

    connect_url: str = "https://connect.example.com"
    default_reply_email: str = "no-reply@example.com"
    reply_email_from: str = "Project Notifications"
    mention_email: str | None = None
    reply_email_domain: str = "example.com"
    reply_email_prefix: str = "project-replies"
    auth_secret: str = ""
    env: str = "dev"
    enable_dev_mode: bool = False
    dev_mode_email: str | None = None
    originator: str = "project-notifications"
    bus_api_url: str = "http://localhost:3000/v5"
    bus_api_token: str | None = None
    bus_api_timeout: float = 30.0

    @classmethod
    def from_env(cls) -> "NotificationConfig":
        """Build configuration from environment variables, keeping defaults for unset ones."""
        env_values = {
            "connect_url": os.getenv("CONNECT_URL"),
            "default_reply_email": os.getenv("DEFAULT_REPLY_EMAIL"),
            "reply_email_from": os.getenv("REPLY_EMAIL_FROM"),
            "mention_email": os.getenv("MENTION_EMAIL"),
            "reply_email_domain": os.getenv("REPLY_EMAIL_DOMAIN"),
            "reply_email_prefix": os.getenv("REPLY_EMAIL_PREFIX"),
            "auth_secret": os.getenv("AUTH_SECRET"),
            "env": os.getenv("ENV"),
            "dev_mode_email": os.getenv("DEV_MODE_EMAIL"),
            "originator": os.getenv("BUS_API_ORIGINATOR"),
            "bus_api_url": os.getenv("BUS_API_URL"),
            "bus_api_token": os.getenv("BUS_API_TOKEN"),
            "bus_api_timeout": os.getenv("BUS_API_TIMEOUT"),
        }
        values = {key: value for key, value in env_values.items() if value}
        values["enable_dev_mode"] = os.getenv("ENABLE_DEV_MODE", "false").lower() == "true"
        return cls(**values)


@lru_cache
def get_config() -> NotificationConfig:
    """Get the process-wide configuration."""
    return NotificationConfig.from_env()
