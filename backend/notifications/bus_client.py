"""
Client for posting events to the Bus API.

The HTTP call is made with requests in a worker thread so handlers running on
the event loop are not blocked while the bus answers.
"""

import asyncio
from typing import Any, Dict

import requests

from config.settings import NotificationConfig
from shared.utils import utc_now_iso
from notifications.errors import BusApiError


class BusApiClient:
    """Posts ``{topic, originator, timestamp, mime-type, payload}`` events to the bus."""

    def __init__(self, config: NotificationConfig, session: requests.Session | None = None):
        self.config = config
        self.session = session or requests.Session()

    def build_event(self, topic: str, payload: Dict[str, Any]) -> Dict[str, Any]:
        return {
            "topic": topic,
            "originator": self.config.originator,
            "timestamp": utc_now_iso(),
            "mime-type": "application/json",
            "payload": payload,
        }

    def _post(self, event: Dict[str, Any]) -> None:
        headers = {"Content-Type": "application/json"}
        if self.config.bus_api_token:
            headers["Authorization"] = f"Bearer {self.config.bus_api_token}"

        url = f"{self.config.bus_api_url.rstrip('/')}/bus/events"
        try:
            response = self.session.post(
                url, json=event, headers=headers, timeout=self.config.bus_api_timeout
            )
            response.raise_for_status()
        except requests.HTTPError as e:
            status_code = e.response.status_code if e.response is not None else None
            raise BusApiError(event["topic"], str(e), status_code) from e
        except requests.RequestException as e:
            raise BusApiError(event["topic"], str(e)) from e

    async def post_event(self, topic: str, payload: Dict[str, Any]) -> Dict[str, Any]:
        """
        Post an event to the bus.

        Returns:
            The event envelope that was sent

        Raises:
            BusApiError: On transport errors or a non-2xx response
        """
        event = self.build_event(topic, payload)
        await asyncio.to_thread(self._post, event)
        return event
