"""Shared type definitions for type checking.

Uses NewType for IDs to provide compile-time type safety - prevents mixing
different ID types (e.g., passing a ProjectID where a UserID is expected).

Uses TypeAlias for structural types.
"""

from typing import Any, NewType, TypeAlias

# ID types using NewType for type safety
UserID = NewType("UserID", str)
ProjectID = NewType("ProjectID", str)
ScheduledEventID = NewType("ScheduledEventID", int)

# Structural aliases
NotificationData: TypeAlias = dict[str, Any]  # event data rendered by email templates
EmailPayload: TypeAlias = dict[str, Any]  # message posted to the bus
PeriodName: TypeAlias = str  # key of SCHEDULED_EVENT_PERIOD
