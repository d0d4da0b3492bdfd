"""
Email notifications for project events.

This module handles:
- Classifying notifications into bundle groups and building email sections
- Deciding per user settings whether an email is sent now or bundled
- Sending individual email events via the Bus API
- Sending periodic bundles of due events (one email per user)
"""

from .bundling import resolve_bundling_policy
from .email_handler import EmailNotificationHandler
from .scheduled_events import process_due_events
from .sections import build_sections, classify, resolve_placeholders

__all__ = [
    'EmailNotificationHandler',
    'build_sections',
    'classify',
    'process_due_events',
    'resolve_bundling_policy',
    'resolve_placeholders',
]
