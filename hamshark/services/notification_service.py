# hamshark/services/notification_service.py
from decimal import Decimal

from hamshark.celery_worker import celery_app
from hamshark.utils.logging import get_logger

logger = get_logger(__name__)


class NotificationService:
    """Order notifications, sent through Celery."""

    @staticmethod
    def send_order_notification(order_id: str, user_id: str | None, total: Decimal, points: int):
        send_order_notification_task.delay(order_id, user_id, str(total), points)


@celery_app.task(name="hamshark.services.notification_service.send_order_notification_task")
def send_order_notification_task(order_id: str, user_id: str | None, total: str, points: int):
    """Stand-in for the SMS/push channel: the message is only logged."""
    who = f"User {user_id}" if user_id else "Guest"
    logger.info(f"[NOTIFICATION] {who}: order {order_id} confirmed, total {total}, +{points} points")
    return {"order_id": order_id, "user_id": user_id, "status": "sent"}
