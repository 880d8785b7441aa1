"""Tests for shared/notifications.py."""

from shared.notifications import Notification, NotificationBus, NotificationLevel


class TestNotificationBus:
    def test_publish_reaches_subscribers(self):
        """Every subscriber should receive a published notification."""
        bus = NotificationBus()
        first, second = [], []
        bus.subscribe(first.append)
        bus.subscribe(second.append)

        bus.success("notes.create", "Saved")

        assert len(first) == len(second) == 1
        assert first[0] == Notification(
            level=NotificationLevel.SUCCESS,
            message="Saved",
            operation="notes.create",
        )

    def test_level_helpers(self):
        """info/error helpers should set the matching level."""
        bus = NotificationBus()
        seen = []
        bus.subscribe(seen.append)

        bus.info("auth.resend_otp", "OTP resent")
        bus.error("notes.delete", "Failed to delete note")

        assert [n.level for n in seen] == [NotificationLevel.INFO, NotificationLevel.ERROR]

    def test_unsubscribe(self):
        """Unsubscribed handlers should not receive notifications."""
        bus = NotificationBus()
        seen = []
        unsubscribe = bus.subscribe(seen.append)
        unsubscribe()

        bus.error("op", "message")
        assert seen == []

    def test_failing_handler_is_isolated(self):
        """A raising handler should not stop delivery to the others."""
        bus = NotificationBus()
        seen = []

        def broken(_notification):
            raise RuntimeError("toast container missing")

        bus.subscribe(broken)
        bus.subscribe(seen.append)

        bus.error("op", "message")
        assert [n.message for n in seen] == ["message"]
