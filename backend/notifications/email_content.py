"""
Data handed to the email templates.

Builds the ``data`` part of email events: the per-event notification data, the
project/section structure of a single notification and of a bundle, and the
envelope fields shared by every email event.
"""

from typing import Any, Dict, List, Sequence

from config.events_config import (
    BUNDLED_EMAIL_SUBJECT,
    EMAIL_GENERAL_EVENT,
    EMAIL_VERSION,
    EVENT_BUNDLES,
)
from config.settings import NotificationConfig
from models.notification import NotificationEvent, ProjectBundle, ScheduledEvent, User
from models.types import EmailPayload, NotificationData
from notifications.sections import build_sections, classify, resolve_placeholders
from shared.utils import markdown_to_html


def build_notification_data(
    event: NotificationEvent, user: User, messaging_event: bool
) -> NotificationData:
    """
    Notification data for one event.

    Recipient and author fields come first, the event contents are merged on
    top of them, then topic/post and file details are added.
    """
    contents = event.contents
    data: NotificationData = {
        "name": user.full_name,
        "handle": user.handle,
        "date": event.timestamp,
        "projectName": contents.get("projectName"),
        "projectId": event.project_id,
        "authorHandle": contents.get("userHandle"),
        "authorFullName": contents.get("userFullName"),
        "photoURL": contents.get("photoURL"),
        "type": event.type,
        event.type: True,
    }
    data = {**data, **contents}

    if messaging_event:
        data = {**data, "topicId": event.topic_id, "postId": event.post_id}
        if event.post_content:
            data = {**data, "post": markdown_to_html(event.post_content)}

    if event.file_name:
        data = {**data, "fileName": event.file_name}

    return data


def build_email_message(
    data: NotificationData,
    recipient: str,
    config: NotificationConfig,
) -> EmailPayload:
    """Envelope of an email event sent on behalf of the notification's author."""
    return {
        "data": data,
        "recipients": [recipient],
        "version": EMAIL_VERSION,
        "from": {
            "name": data.get("authorHandle"),
            "email": config.default_reply_email,
        },
        "categories": [f"{config.env}:{EMAIL_GENERAL_EVENT}".lower()],
    }


def wrap_individual_notification(
    data: NotificationData, config: NotificationConfig
) -> Dict[str, Any]:
    """
    Template data for an email about a single notification.

    Args:
        data: Notification data of the event
        config: Service configuration (for the connect URL)

    Returns:
        Dict with subject, connectURL and one project holding the notification
    """
    definition = EVENT_BUNDLES[classify(data.get("type"))]
    subject = resolve_placeholders(definition.subject, [data])

    project = ProjectBundle(
        id=data.get("projectId"),
        name=data.get("projectName"),
        sections=build_sections([data]),
    )
    return {
        "subject": subject,
        "connectURL": config.connect_url,
        "projects": [project.to_payload()],
    }


def build_project_bundles(events: Sequence[ScheduledEvent]) -> List[ProjectBundle]:
    """One bundle per distinct project, each with the sections of its events."""
    events_by_project: Dict[Any, List[ScheduledEvent]] = {}
    for event in events:
        events_by_project.setdefault(event.project_id, []).append(event)

    return [
        ProjectBundle(
            id=project_events[0].project_id,
            name=project_events[0].project_name,
            sections=build_sections([e.notification for e in project_events]),
        )
        for project_events in events_by_project.values()
    ]


def build_bundled_message(
    user_events: Sequence[ScheduledEvent], config: NotificationConfig
) -> EmailPayload:
    """
    Email event bundling all due events of one user.

    The envelope of the first event is reused (recipients, categories) with the
    sender switched to the service address.
    """
    projects = build_project_bundles(user_events)
    return {
        **user_events[0].data,
        "replyTo": config.default_reply_email,
        "version": EMAIL_VERSION,
        "cc": [],
        "from": {
            "name": config.reply_email_from,
            "email": config.default_reply_email,
        },
        "data": {
            "subject": BUNDLED_EMAIL_SUBJECT,
            "connectURL": config.connect_url,
            "projects": [project.to_payload() for project in projects],
        },
    }
