"""Pydantic models for per-user notification settings."""

from pydantic import BaseModel, ConfigDict, Field


class ServiceToggle(BaseModel):
    """Per notification type switch for one delivery service."""

    model_config = ConfigDict(frozen=True, extra="allow")

    enabled: str | None = None


class ServiceOptions(BaseModel):
    """Service wide options (e.g. bundle period for email)."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="allow")

    bundle_period: str | None = Field(None, alias="bundlePeriod")


class NotificationSettings(BaseModel):
    """Read-only snapshot of a user's notification settings.

    ``notifications`` is keyed by notification type then by service id,
    ``services`` by service id. Every accessor has a default so callers never
    need to walk optional levels themselves.
    """

    model_config = ConfigDict(frozen=True)

    notifications: dict[str, dict[str, ServiceToggle]] = Field(default_factory=dict)
    services: dict[str, ServiceOptions] = Field(default_factory=dict)

    def service_enabled(self, notification_type: str, service_id: str) -> str | None:
        """Raw ``enabled`` value ("yes"/"no") or None when not set."""
        toggle = self.notifications.get(notification_type, {}).get(service_id)
        return toggle.enabled if toggle else None

    def is_service_disabled(self, notification_type: str, service_id: str) -> bool:
        return self.service_enabled(notification_type, service_id) == "no"

    def bundle_period(self, service_id: str) -> str | None:
        options = self.services.get(service_id)
        return options.bundle_period if options else None
