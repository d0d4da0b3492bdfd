"""
Error report files for the email notification handlers.

Each failure (missing recipient, bus dispatch, scheduling) is written to its
own timestamped file so it can be inspected after a batch run.
"""

import json
import os
from datetime import datetime
from typing import Any

DEFAULT_LOG_DIR = os.path.join(os.path.dirname(__file__), "logs")


def log_notification_error(
    error_type: str, error_message: str, context: dict[str, Any] | None = None
) -> str:
    """
    Write a notification error report.

    Args:
        error_type: Type of error ('recipient', 'sending', 'scheduling')
        error_message: The error message
        context: Optional details (user_id, event ids, payload, ...)

    Returns:
        Path to the report file
    """
    log_dir = os.getenv("NOTIFICATION_ERROR_LOG_DIR", DEFAULT_LOG_DIR)
    os.makedirs(log_dir, exist_ok=True)

    # Microseconds keep concurrent reports from one batch apart
    now = datetime.now()
    filename = os.path.join(
        log_dir, f"notification_{error_type}_error_{now.strftime('%Y%m%d_%H%M%S_%f')}.txt"
    )

    with open(filename, "w", encoding="utf-8") as f:
        f.write(f"Notification Error Report - {now}\n")
        f.write("=" * 60 + "\n\n")
        f.write(f"Error Type: {error_type}\n")
        f.write(f"Error Message: {error_message}\n\n")

        if context:
            f.write("Context:\n")
            f.write("-" * 60 + "\n")
            for key, value in context.items():
                if isinstance(value, (dict, list)):
                    value = json.dumps(value, default=str)
                f.write(f"{key}: {value}\n")

    return filename


def report_notification_error(
    error_type: str, error_message: str, context: dict[str, Any] | None = None
) -> str | None:
    """
    Write a notification error report without letting the write itself fail the caller.

    Returns:
        Path to the report file, or None when it could not be written
    """
    try:
        return log_notification_error(error_type, error_message, context)
    except OSError as e:
        print(f"  ⚠️ Could not write {error_type} error report: {e}")
        return None
