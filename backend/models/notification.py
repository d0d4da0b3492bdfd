"""Pydantic models for email notifications."""

from enum import Enum
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field

from models.types import (
    EmailPayload,
    NotificationData,
    PeriodName,
    ScheduledEventID,
    UserID,
)
from shared.utils import numeric_id


class NotificationEvent(BaseModel):
    """Inbound notification as handed over by the event consumer."""

    model_config = ConfigDict(frozen=True)

    user_id: UserID
    type: str = Field(..., min_length=1)
    timestamp: str
    contents: dict[str, Any] = Field(default_factory=dict)
    project_id: Any = None
    topic_id: int | str | None = None
    post_id: int | str | None = None
    post_content: str | None = None
    file_name: str | None = None

    @classmethod
    def from_message(
        cls,
        topic_name: str,
        message_json: dict[str, Any],
        notification: dict[str, Any],
        timestamp: str,
    ) -> "NotificationEvent":
        """Build an event from the consumer triple; newType wins over the topic name."""
        return cls(
            user_id=UserID(str(notification["userId"])),
            type=notification.get("newType") or topic_name,
            timestamp=timestamp,
            contents=dict(notification.get("contents") or {}),
            project_id=message_json.get("projectId"),
            topic_id=numeric_id(message_json.get("topicId")),
            post_id=numeric_id(message_json.get("postId")),
            post_content=message_json.get("postContent") or None,
            file_name=message_json.get("fileName") or None,
        )


class BundleGroupDefinition(BaseModel):
    """Static presentation template for a group of notification types."""

    model_config = ConfigDict(frozen=True)

    types: frozenset[str]
    title: str
    subject: str
    group_by: str | None = None


class Section(BaseModel):
    """One titled block of notifications inside an email."""

    model_config = ConfigDict(frozen=True)

    title: str
    group_key: str
    notifications: list[NotificationData]

    def to_payload(self) -> dict[str, Any]:
        """Template shape: the group key is exposed as a boolean flag."""
        return {
            "title": self.title,
            self.group_key: True,
            "notifications": list(self.notifications),
        }


class ProjectBundle(BaseModel):
    """All sections of one project inside an email."""

    model_config = ConfigDict(frozen=True)

    id: Any = None
    name: str | None = None
    sections: list[Section] = Field(default_factory=list)

    def to_payload(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "sections": [section.to_payload() for section in self.sections],
        }


class ScheduledEventStatus(str, Enum):
    """Lifecycle of a bundled event in the scheduler queue."""

    PENDING = "pending"
    COMPLETED = "completed"
    FAILED = "failed"


class ScheduledEvent(BaseModel):
    """Email event waiting in the scheduler until its bundle period elapses."""

    model_config = ConfigDict(frozen=True)

    id: ScheduledEventID | None = None
    data: EmailPayload
    period: PeriodName
    user_id: UserID
    event_type: str
    reference: Literal["project", "topic"]
    reference_id: Any = None
    status: ScheduledEventStatus = ScheduledEventStatus.PENDING

    @property
    def project_id(self) -> Any:
        return self.data.get("data", {}).get("projectId")

    @property
    def project_name(self) -> str | None:
        return self.data.get("data", {}).get("projectName")

    @property
    def notification(self) -> NotificationData:
        """Event data as rendered by the email templates."""
        return self.data.get("data", {})


class User(BaseModel):
    """User record from the user directory."""

    id: UserID
    email: str | None = None
    first_name: str = ""
    last_name: str = ""
    handle: str = ""

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"


class BundlingPolicy(BaseModel):
    """Outcome of bundling resolution for one event."""

    model_config = ConfigDict(frozen=True)

    bundle: bool
    period: PeriodName | None = None
