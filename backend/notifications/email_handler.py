"""
Email notification handler.

Depending on the user's settings an email is sent immediately through the Bus
API, or queued in the scheduler and sent later in a periodic bundle together
with the user's other notifications.
"""

from typing import Any, Dict, List, Optional

from config.events_config import (
    EMAIL_BUNDLED_EVENT,
    EMAIL_GENERAL_EVENT,
    POST_MENTION,
    SCHEDULED_EVENT_PERIOD,
    SETTINGS_EMAIL_SERVICE_ID,
)
from config.settings import NotificationConfig
from models.notification import NotificationEvent, ScheduledEvent, User
from models.types import EmailPayload, UserID
from notifications.bundling import (
    is_email_disabled,
    is_messaging_event,
    resolve_bundling_policy,
)
from notifications.email_content import (
    build_email_message,
    build_notification_data,
    wrap_individual_notification,
)
from notifications.error_logger import report_notification_error
from notifications.reply_tokens import generate_reply_token
from notifications.scheduled_events import process_due_events
from notifications.scheduler import EventScheduler, SetStatus, create_event_scheduler
from shared.utils import numeric_id, sanitize_email, utc_now_iso


def resolve_recipient(user: User, config: NotificationConfig) -> str:
    """
    Email address the notification goes to.

    A missing address is reported but does not stop processing. In dev mode
    every email goes to the configured development address.
    """
    email = user.email
    if not email:
        print(f"  ✗ Email not received for user: {user.id}")
        report_notification_error(
            error_type="recipient",
            error_message=f"Email not received for user: {user.id}",
            context={"user_id": user.id, "handle": user.handle},
        )
    if config.enable_dev_mode:
        email = config.dev_mode_email
    return email or ""


def build_reply_to(
    event: NotificationEvent, user: User, config: NotificationConfig
) -> str:
    """Reply address of a topic/post email: ``<prefix>+<topicId>/<token>@<domain>``."""
    token = generate_reply_token(
        config.auth_secret,
        numeric_id(event.user_id),
        event.topic_id,
        sanitize_email(user.email),
    )
    return f"{config.reply_email_prefix}+{event.topic_id}/{token}@{config.reply_email_domain}"


class EmailNotificationHandler:
    """
    Sends email notifications for inbound events.

    Collaborators:
        directory: ``get_settings(user_id)`` and ``get_users_by_id(ids)``
        bus: ``post_event(topic, payload)``
        scheduler: queue of bundled events; created for EMAIL_BUNDLED_EVENT when omitted
    """

    def __init__(
        self,
        config: NotificationConfig,
        directory: Any,
        bus: Any,
        scheduler: Optional[EventScheduler] = None,
    ):
        self.config = config
        self.directory = directory
        self.bus = bus
        self.scheduler = scheduler or create_event_scheduler(
            EMAIL_BUNDLED_EVENT, SCHEDULED_EVENT_PERIOD, self.process_due
        )

    async def process_due(
        self, events: List[ScheduledEvent], set_status: SetStatus
    ) -> Dict[str, int]:
        """Due-events callback of the scheduler."""
        return await process_due_events(events, set_status, self.bus, self.config)

    async def _get_user(self, user_id: UserID) -> User:
        users = await self.directory.get_users_by_id([user_id])
        return users[0] if users else User(id=user_id)

    async def handle(
        self,
        topic_name: str,
        message_json: Dict[str, Any],
        notification: Dict[str, Any],
    ) -> Optional[EmailPayload]:
        """
        Handle one notification.

        Args:
            topic_name: Topic the event was consumed from (the default notification type)
            message_json: Raw message of the event
            notification: Pre-processed notification ``{userId, newType?, contents}``

        Returns:
            The email event sent immediately, or None when the notification was
            bundled or email is disabled for it

        Raises:
            UnsupportedBundlePeriodError: If the user's bundle period is unknown
            BusApiError: If sending the email event fails
        """
        event = NotificationEvent.from_message(
            topic_name, message_json, notification, utc_now_iso()
        )

        settings = await self.directory.get_settings(event.user_id)
        if is_email_disabled(settings, event.type):
            print(
                f"  ⊘ Notification '{event.type}' won't be sent by '{SETTINGS_EMAIL_SERVICE_ID}'"
                f" service to the user '{event.user_id}' due to their notification settings."
            )
            return None

        user = await self._get_user(event.user_id)
        recipient = resolve_recipient(user, self.config)

        messaging_event = is_messaging_event(event.type)
        data = build_notification_data(event, user, messaging_event)
        message = build_email_message(data, recipient, self.config)

        reference, reference_id = "project", data.get("projectId")
        if messaging_event:
            reference, reference_id = "topic", event.topic_id
            if event.type == POST_MENTION and self.config.mention_email:
                message = {**message, "cc": [self.config.mention_email]}
            message = {**message, "replyTo": build_reply_to(event, user, self.config)}

        policy = resolve_bundling_policy(
            settings, event.type, messaging_event, user_id=event.user_id
        )

        if policy.bundle:
            await self.scheduler.add_event(
                ScheduledEvent(
                    data=message,
                    period=policy.period,
                    user_id=event.user_id,
                    event_type=EMAIL_GENERAL_EVENT,
                    reference=reference,
                    reference_id=reference_id,
                )
            )
            print(f"  ⏳ Bundled '{event.type}' for user {event.user_id} ({policy.period})")
            return None

        payload = {**message, "data": wrap_individual_notification(data, self.config)}
        await self.bus.post_event(EMAIL_GENERAL_EVENT, payload)
        print(f"  ✓ Sent {EMAIL_GENERAL_EVENT} event for '{event.type}' to user {event.user_id}")
        return payload
