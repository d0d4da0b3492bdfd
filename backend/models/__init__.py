"""Pydantic models for data validation and type checking."""

from models.notification import (
    BundleGroupDefinition,
    BundlingPolicy,
    NotificationEvent,
    ProjectBundle,
    ScheduledEvent,
    ScheduledEventStatus,
    Section,
    User,
)
from models.settings import NotificationSettings, ServiceOptions, ServiceToggle

__all__ = [
    "NotificationEvent",
    "BundleGroupDefinition",
    "Section",
    "ProjectBundle",
    "ScheduledEvent",
    "ScheduledEventStatus",
    "User",
    "BundlingPolicy",
    "NotificationSettings",
    "ServiceToggle",
    "ServiceOptions",
]
