"""
Integration tests for the bundled email flow.

Events go through the handler, are queued with the scheduler and are later
delivered by the due-events callback as one email per user.
"""

import unittest
from unittest.mock import AsyncMock, patch

from config.events_config import FILE_UPLOADED, POST_CREATED, PROJECT_ACTIVE
from models.notification import ScheduledEventStatus
from notifications.email_handler import EmailNotificationHandler
from notifications.errors import BusApiError
from tests.fixtures.event_factory import create_test_user
from tests.fixtures.mock_helpers import (
    create_mock_bus,
    create_mock_directory,
    create_mock_scheduler,
    create_test_config,
)


class TestBundledDelivery(unittest.IsolatedAsyncioTestCase):
    """End-to-end: handle -> schedule -> process due events."""

    def setUp(self):
        self.directory = create_mock_directory(users=[create_test_user()])
        self.bus = create_mock_bus()
        self.scheduler = create_mock_scheduler()
        self.handler = EmailNotificationHandler(
            create_test_config(), self.directory, self.bus, self.scheduler
        )
        self.set_status = AsyncMock()

    def _queued_events(self):
        """Events handed to the scheduler, with ids as the queue would assign them."""
        return [
            call.args[0].model_copy(update={"id": index})
            for index, call in enumerate(self.scheduler.add_event.call_args_list, start=1)
        ]

    async def _handle(self, notification_type, author, project_id=1001, **message):
        await self.handler.handle(
            notification_type,
            {"projectId": project_id, **message},
            {
                "userId": "40051",
                "contents": {"projectName": f"Project {project_id}", "userHandle": author},
            },
        )

    async def test_two_authors_one_project(self):
        await self._handle(FILE_UPLOADED, "alice", fileName="a.pdf")
        await self._handle(FILE_UPLOADED, "bob", fileName="b.pdf")
        self.bus.post_event.assert_not_called()

        events = self._queued_events()
        stats = await self.handler.process_due(events, self.set_status)

        self.assertEqual(stats, {"sent": 1, "failed": 0})
        self.bus.post_event.assert_awaited_once()
        message = self.bus.post_event.call_args.args[1]
        self.assertEqual(message["recipients"], ["member@example.com"])
        projects = message["data"]["projects"]
        self.assertEqual(len(projects), 1)
        self.assertEqual(projects[0]["name"], "Project 1001")
        titles = sorted(section["title"] for section in projects[0]["sections"])
        self.assertEqual(
            titles, ["Files and links shared by alice", "Files and links shared by bob"]
        )
        for section in projects[0]["sections"]:
            self.assertEqual(len(section["notifications"]), 1)
        self.set_status.assert_awaited_once_with(events, ScheduledEventStatus.COMPLETED)

    @patch("notifications.scheduled_events.report_notification_error")
    async def test_failed_bundle_marks_every_event_failed(self, mock_log):
        await self._handle(PROJECT_ACTIVE, "alice", project_id=1)
        await self._handle(FILE_UPLOADED, "bob", project_id=2)
        self.bus.post_event.side_effect = BusApiError("external.action.email", "down", 503)

        events = self._queued_events()
        stats = await self.handler.process_due(events, self.set_status)

        self.assertEqual(stats, {"sent": 0, "failed": 1})
        self.set_status.assert_awaited_once_with(events, ScheduledEventStatus.FAILED)

    async def test_posts_bypass_bundle(self):
        await self._handle(POST_CREATED, "alice", topicId=7)
        await self._handle(PROJECT_ACTIVE, "alice")

        self.assertEqual(self.bus.post_event.await_count, 1)
        self.assertEqual(self.scheduler.add_event.await_count, 1)


if __name__ == "__main__":
    unittest.main()
