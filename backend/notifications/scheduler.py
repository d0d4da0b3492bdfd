"""
Queue of bundled email events stored in Supabase.

Events are inserted as pending with the bundle period chosen for them. A
periodic job (see process_scheduled_events) loads the pending events of one
period and hands them to the due-events callback, which reports back the
terminal status of each event.
"""

import asyncio
from typing import Any, Awaitable, Callable, List, Mapping, Sequence, cast

from models.notification import ScheduledEvent, ScheduledEventStatus
from models.types import ScheduledEventID, UserID
from shared.db import SCHEDULED_EVENTS_TABLE, get_supabase_client

SetStatus = Callable[[Sequence[ScheduledEvent], ScheduledEventStatus], Awaitable[None]]
OnDue = Callable[[List[ScheduledEvent], SetStatus], Awaitable[Any]]


class EventScheduler:
    """Pending event queue for one event type."""

    def __init__(
        self,
        event_type: str,
        periods: Mapping[str, str],
        on_due: OnDue,
        supabase: Any = None,
    ):
        self.event_type = event_type
        self.periods = periods
        self.on_due = on_due
        self._supabase = supabase

    @property
    def supabase(self) -> Any:
        if self._supabase is None:
            self._supabase = get_supabase_client()
        return self._supabase

    def _check_period(self, period: str) -> None:
        if period not in self.periods:
            raise ValueError(
                f"Unsupported period '{period}', expected one of: {', '.join(self.periods)}"
            )

    def _insert(self, event: ScheduledEvent) -> None:
        self.supabase.table(SCHEDULED_EVENTS_TABLE).insert(
            {
                "event_type": self.event_type,
                "data": event.data,
                "period": event.period,
                "user_id": event.user_id,
                "reference": event.reference,
                "reference_id": event.reference_id,
                "status": ScheduledEventStatus.PENDING.value,
            },
            returning="minimal",
        ).execute()

    def _select_pending(self, period: str) -> List[ScheduledEvent]:
        response = (
            self.supabase.table(SCHEDULED_EVENTS_TABLE)
            .select("*")
            .eq("event_type", self.event_type)
            .eq("period", period)
            .eq("status", ScheduledEventStatus.PENDING.value)
            .order("created_at", desc=False)
            .execute()
        )
        events = []
        for row in response.data or []:
            row = cast(dict[str, Any], row)
            events.append(
                ScheduledEvent(
                    id=ScheduledEventID(row["id"]),
                    data=row["data"],
                    period=row["period"],
                    user_id=UserID(str(row["user_id"])),
                    event_type=row.get("event_type") or self.event_type,
                    reference=row["reference"],
                    reference_id=row.get("reference_id"),
                    status=ScheduledEventStatus(row["status"]),
                )
            )
        return events

    def _update_status(
        self, event_ids: List[ScheduledEventID], status: ScheduledEventStatus
    ) -> None:
        self.supabase.table(SCHEDULED_EVENTS_TABLE).update(
            {"status": status.value}
        ).in_("id", event_ids).execute()

    async def add_event(self, event: ScheduledEvent) -> None:
        """Queue an event for its bundle period."""
        self._check_period(event.period)
        await asyncio.to_thread(self._insert, event)

    async def load_due(self, period: str) -> List[ScheduledEvent]:
        """Pending events of this scheduler's type for a period, oldest first."""
        self._check_period(period)
        return await asyncio.to_thread(self._select_pending, period)

    async def set_status(
        self, events: Sequence[ScheduledEvent], status: ScheduledEventStatus
    ) -> None:
        """Record the terminal status of processed events."""
        event_ids = [event.id for event in events if event.id is not None]
        if not event_ids:
            return
        await asyncio.to_thread(self._update_status, event_ids, status)

    async def run_due(self, period: str) -> Any:
        """Hand the due events of a period to the callback and return its result."""
        events = await self.load_due(period)
        print(f"Found {len(events)} pending {self.event_type} events for period '{period}'")
        return await self.on_due(events, self.set_status)


def create_event_scheduler(
    event_type: str, periods: Mapping[str, str], on_due: OnDue, supabase: Any = None
) -> EventScheduler:
    """Create the scheduler for ``event_type`` calling ``on_due`` with due events."""
    return EventScheduler(event_type, periods, on_due, supabase=supabase)
