"""Unit tests for Pydantic models."""

import unittest

from pydantic import ValidationError

from models import (
    NotificationEvent,
    NotificationSettings,
    ProjectBundle,
    ScheduledEvent,
    ScheduledEventStatus,
    Section,
    User,
)


class TestNotificationEvent(unittest.TestCase):
    """Tests for NotificationEvent.from_message()."""

    def test_new_type_wins_over_topic(self):
        event = NotificationEvent.from_message(
            "topic.name", {}, {"userId": 1, "newType": "new.type"}, "now"
        )
        self.assertEqual(event.type, "new.type")
        self.assertEqual(event.user_id, "1")

    def test_topic_name_is_default_type(self):
        event = NotificationEvent.from_message("topic.name", {}, {"userId": 1}, "now")
        self.assertEqual(event.type, "topic.name")
        self.assertEqual(event.contents, {})

    def test_ids_parsed_from_message(self):
        event = NotificationEvent.from_message(
            "t",
            {"projectId": 5, "topicId": "12", "postId": "34", "fileName": "a.pdf"},
            {"userId": 1, "contents": {"x": 1}},
            "now",
        )
        self.assertEqual(event.project_id, 5)
        self.assertEqual(event.topic_id, 12)
        self.assertEqual(event.post_id, 34)
        self.assertEqual(event.file_name, "a.pdf")

    def test_non_numeric_topic_id_on_project_event_kept(self):
        event = NotificationEvent.from_message(
            "connect.notification.project.active",
            {"projectId": 5, "topicId": "draft"},
            {"userId": 1},
            "now",
        )
        self.assertEqual(event.topic_id, "draft")
        self.assertIsNone(event.post_id)

    def test_zero_ids_parsed(self):
        event = NotificationEvent.from_message(
            "t", {"topicId": "0", "postId": 0}, {"userId": 1}, "now"
        )
        self.assertEqual(event.topic_id, 0)
        self.assertEqual(event.post_id, 0)

    def test_event_is_immutable(self):
        event = NotificationEvent.from_message("t", {}, {"userId": 1}, "now")
        with self.assertRaises(ValidationError):
            event.type = "other"

    def test_empty_type_rejected(self):
        with self.assertRaises(ValidationError):
            NotificationEvent(user_id="1", type="", timestamp="now")


class TestSectionAndBundle(unittest.TestCase):
    """Tests for Section and ProjectBundle payloads."""

    def test_bundle_payload(self):
        section = Section(title="T", group_key="DEFAULT", notifications=[{"a": 1}])
        bundle = ProjectBundle(id=1, name="P", sections=[section])

        self.assertEqual(
            bundle.to_payload(),
            {
                "id": 1,
                "name": "P",
                "sections": [{"title": "T", "DEFAULT": True, "notifications": [{"a": 1}]}],
            },
        )


class TestScheduledEvent(unittest.TestCase):
    """Tests for ScheduledEvent."""

    def _event(self, **overrides):
        values = {
            "data": {"data": {"projectId": "p1", "projectName": "Mobile App"}},
            "period": "daily",
            "user_id": "1",
            "event_type": "external.action.email",
            "reference": "project",
            "reference_id": "p1",
        }
        values.update(overrides)
        return ScheduledEvent(**values)

    def test_defaults_to_pending(self):
        self.assertEqual(self._event().status, ScheduledEventStatus.PENDING)

    def test_project_accessors(self):
        event = self._event()
        self.assertEqual(event.project_id, "p1")
        self.assertEqual(event.project_name, "Mobile App")
        self.assertEqual(event.notification, {"projectId": "p1", "projectName": "Mobile App"})

    def test_invalid_reference_rejected(self):
        with self.assertRaises(ValidationError):
            self._event(reference="challenge")

    def test_status_values(self):
        self.assertEqual(ScheduledEventStatus("completed"), ScheduledEventStatus.COMPLETED)
        self.assertEqual(ScheduledEventStatus.FAILED.value, "failed")


class TestNotificationSettings(unittest.TestCase):
    """Tests for NotificationSettings accessors."""

    def test_empty_settings_defaults(self):
        settings = NotificationSettings()
        self.assertIsNone(settings.service_enabled("any.type", "email"))
        self.assertFalse(settings.is_service_disabled("any.type", "email"))
        self.assertIsNone(settings.bundle_period("email"))

    def test_nested_values(self):
        settings = NotificationSettings(
            notifications={"t": {"email": {"enabled": "no"}, "emailBundling": {"enabled": "yes"}}},
            services={"email": {"bundlePeriod": "hourly"}},
        )
        self.assertTrue(settings.is_service_disabled("t", "email"))
        self.assertEqual(settings.service_enabled("t", "emailBundling"), "yes")
        self.assertEqual(settings.bundle_period("email"), "hourly")

    def test_extra_fields_allowed(self):
        settings = NotificationSettings(
            notifications={"t": {"web": {"enabled": "yes", "sound": "on"}}}
        )
        self.assertEqual(settings.service_enabled("t", "web"), "yes")


class TestUser(unittest.TestCase):
    """Tests for User."""

    def test_full_name(self):
        self.assertEqual(User(id="1", first_name="Jane", last_name="Doe").full_name, "Jane Doe")

    def test_email_optional(self):
        self.assertIsNone(User(id="1").email)


if __name__ == "__main__":
    unittest.main()
