"""
CLI script for sending bundled email notifications.

Meant to be run by cron once per bundle period (see SCHEDULED_EVENT_PERIOD in
config.events_config for the schedule of each period).

Usage:
    # Send the daily bundles
    uv run python -m notifications.process_scheduled_events --period daily

    # Dry run (don't actually send emails or update statuses)
    uv run python -m notifications.process_scheduled_events --period hourly --dry-run
"""

import argparse
import asyncio

from config.events_config import SCHEDULED_EVENT_PERIOD
from config.settings import get_config
from notifications.bus_client import BusApiClient
from notifications.directory import SupabaseDirectory
from notifications.email_handler import EmailNotificationHandler
from notifications.scheduled_events import group_events_by_user
from shared.utils import print_summary


async def process_scheduled_events(period: str, dry_run: bool = False) -> dict[str, int]:
    """
    Send bundled emails for all pending events of a period.

    Args:
        period: Bundle period name (e.g. 'daily')
        dry_run: If True, only report what would be sent

    Returns:
        Dictionary with stats per user: sent, failed
    """
    config = get_config()
    handler = EmailNotificationHandler(config, SupabaseDirectory(), BusApiClient(config))
    scheduler = handler.scheduler

    print(f"Processing bundled email events for period: {period}")

    if dry_run:
        events = await scheduler.load_due(period)
        if not events:
            print("No pending bundled events to process.")
            return {"sent": 0, "failed": 0}

        events_by_user = group_events_by_user(events)
        for user_id, user_events in events_by_user.items():
            print(
                f"  [DRY RUN] Would send bundle of {len(user_events)} notifications to user {user_id}"
            )
        return {"sent": len(events_by_user), "failed": 0}

    stats = await scheduler.run_due(period)
    print_summary(stats["sent"], stats["failed"])
    return stats


def main() -> None:
    """CLI entry point."""
    parser = argparse.ArgumentParser(description="Send bundled email notifications")

    parser.add_argument(
        "--period",
        required=True,
        choices=sorted(SCHEDULED_EVENT_PERIOD),
        help="Bundle period to process",
    )

    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Dry run mode (don't actually send emails)",
    )

    args = parser.parse_args()
    asyncio.run(process_scheduled_events(args.period, dry_run=args.dry_run))


if __name__ == "__main__":
    main()
