"""Exceptions raised by the email notification handlers."""


class NotificationError(Exception):
    """Base exception for notification processing failures."""


class UnsupportedBundlePeriodError(NotificationError):
    """A user's bundle period setting names a period the scheduler does not know."""

    def __init__(self, user_id: str, service_id: str, period: str):
        super().__init__(
            f"User's '{user_id}' setting for service '{service_id}' option "
            f"'bundlePeriod' has unsupported value '{period}'."
        )
        self.user_id = user_id
        self.service_id = service_id
        self.period = period


class BusApiError(NotificationError):
    """Posting an event to the Bus API failed."""

    def __init__(self, topic: str, message: str, status_code: int | None = None):
        super().__init__(f"Failed to post '{topic}' event to bus api: {message}")
        self.topic = topic
        self.status_code = status_code
