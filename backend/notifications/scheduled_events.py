"""
Delivery of bundled email events once their period has elapsed.

Due events are grouped by user; each user gets one email covering all of
their projects. The terminal status of the events follows the single bus call
made for that user: all completed, or all failed.
"""

import asyncio
from typing import Any, Dict, List, Sequence

from config.events_config import EMAIL_GENERAL_EVENT
from config.settings import NotificationConfig
from models.notification import ScheduledEvent, ScheduledEventStatus
from notifications.email_content import build_bundled_message
from notifications.error_logger import report_notification_error
from notifications.scheduler import SetStatus


def group_events_by_user(
    events: Sequence[ScheduledEvent],
) -> Dict[str, List[ScheduledEvent]]:
    events_by_user: Dict[str, List[ScheduledEvent]] = {}
    for event in events:
        events_by_user.setdefault(event.user_id, []).append(event)
    return events_by_user


async def _send_user_bundle(
    user_id: str,
    user_events: List[ScheduledEvent],
    set_status: SetStatus,
    bus: Any,
    config: NotificationConfig,
) -> bool:
    message = build_bundled_message(user_events, config)

    try:
        await bus.post_event(EMAIL_GENERAL_EVENT, message)
    except Exception as e:
        print(f"  ✗ Failed to send {EMAIL_GENERAL_EVENT} bundle to user {user_id}: {e}")
        await set_status(user_events, ScheduledEventStatus.FAILED)
        report_notification_error(
            error_type="sending",
            error_message=str(e),
            context={
                "user_id": user_id,
                "event_ids": [event.id for event in user_events],
                "payload": message,
            },
        )
        return False

    print(
        f"  ✓ Sent {EMAIL_GENERAL_EVENT} bundle of {len(user_events)} notifications to user {user_id}"
    )
    await set_status(user_events, ScheduledEventStatus.COMPLETED)
    return True


async def process_due_events(
    events: Sequence[ScheduledEvent],
    set_status: SetStatus,
    bus: Any,
    config: NotificationConfig,
) -> Dict[str, int]:
    """
    Send one bundled email per user for the given due events.

    Dispatch failures are never raised: they mark every event of the affected
    user as failed.

    Args:
        events: Due events handed over by the scheduler
        set_status: Callback recording the terminal status of events
        bus: Bus client exposing ``post_event(topic, payload)``
        config: Service configuration

    Returns:
        Dictionary with stats per user: sent, failed
    """
    if not events:
        return {"sent": 0, "failed": 0}

    events_by_user = group_events_by_user(events)
    results = await asyncio.gather(
        *(
            _send_user_bundle(user_id, user_events, set_status, bus, config)
            for user_id, user_events in events_by_user.items()
        )
    )

    sent = sum(1 for result in results if result)
    return {"sent": sent, "failed": len(results) - sent}
