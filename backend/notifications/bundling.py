"""
Bundling decision for email notifications.

Resolves, from a user's settings, whether an email should be sent right away
or accumulated and delivered later as part of a periodic bundle.
"""

from config.events_config import (
    DEFAULT_BUNDLE_PERIOD,
    MESSAGING_EVENT_TYPES,
    SCHEDULED_EVENT_PERIOD,
    SETTINGS_EMAIL_BUNDLING_SERVICE_ID,
    SETTINGS_EMAIL_SERVICE_ID,
)
from models.notification import BundlingPolicy
from models.settings import NotificationSettings
from notifications.errors import UnsupportedBundlePeriodError


def is_messaging_event(notification_type: str) -> bool:
    """Topic and post activity is delivered as it happens unless the user opts in."""
    return notification_type in MESSAGING_EVENT_TYPES


def is_email_disabled(settings: NotificationSettings, notification_type: str) -> bool:
    """Email is enabled for every type unless explicitly switched off."""
    return settings.is_service_disabled(notification_type, SETTINGS_EMAIL_SERVICE_ID)


def resolve_bundling_policy(
    settings: NotificationSettings,
    notification_type: str,
    messaging_event: bool,
    user_id: str = "",
) -> BundlingPolicy:
    """
    Decide whether a notification is bundled and for which period.

    When bundling is not set for the type, non-messaging events are bundled
    daily (or with the user's bundle period if one is set). Messaging events
    never default into bundling.

    Args:
        settings: User's notification settings snapshot
        notification_type: Effective notification type
        messaging_event: True for topic/post activity
        user_id: Used in the error message only

    Returns:
        BundlingPolicy with bundle=True and a known period, or bundle=False

    Raises:
        UnsupportedBundlePeriodError: If bundling is enabled with an unknown period
    """
    bundling_enabled = settings.service_enabled(
        notification_type, SETTINGS_EMAIL_BUNDLING_SERVICE_ID
    )
    bundle_period = settings.bundle_period(SETTINGS_EMAIL_SERVICE_ID)

    if not bundling_enabled and not messaging_event:
        bundling_enabled = "yes"
        bundle_period = bundle_period or DEFAULT_BUNDLE_PERIOD

    if bundling_enabled == "yes" and bundle_period:
        if bundle_period not in SCHEDULED_EVENT_PERIOD:
            raise UnsupportedBundlePeriodError(
                user_id, SETTINGS_EMAIL_SERVICE_ID, bundle_period
            )
        return BundlingPolicy(bundle=True, period=bundle_period)

    return BundlingPolicy(bundle=False)
