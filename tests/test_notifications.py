"""Tests for the Celery order notification."""
from storefront.services import notification_service
from storefront.services.notification_service import NotificationService, send_order_notification_task


class BrokenTask:
    def delay(self, *args, **kwargs):
        raise ConnectionError("broker unavailable")


def test_task_runs_eagerly():
    result = send_order_notification_task.delay(7, 42)

    assert result.get() == {"user_id": 7, "order_id": 42, "status": "sent"}


def test_queue_returns_true_when_sent():
    assert NotificationService.send_order_notification(7, 42) is True


def test_broker_failure_is_logged_not_raised(monkeypatch):
    monkeypatch.setattr(notification_service, "send_order_notification_task", BrokenTask())

    assert NotificationService.send_order_notification(7, 42) is False
