# hamshark/services/order_service.py
from typing import List
from uuid import uuid4

from hamshark.domain.errors import NotFoundError, ValidationError
from hamshark.domain.models import Order, OrderRequest, OrderStatus
from hamshark.domain.schemas import MealLogOut, ReceiptShareOut
from hamshark.repos.factory import Repositories
from hamshark.services import pricing
from hamshark.services.notification_service import NotificationService
from hamshark.services.user_service import UserService
from hamshark.utils.logging import get_logger

logger = get_logger(__name__)

SHARE_METHODS = ("whatsapp", "email")
MEAL_TYPES = ("breakfast", "lunch", "dinner", "snack")
RECEIPT_URL = "https://hamshark.com/receipt/{order_id}"


class OrderService:
    """
    Order ledger.

    Orders are stored as submitted; afterwards only the status changes.
    """

    def __init__(
        self,
        repos: Repositories,
        notification_service: NotificationService | None = None,
        policy: pricing.PricingPolicy = pricing.DEFAULT_POLICY,
    ):
        self.repos = repos
        self.user_service = UserService(repos.users)
        self.notification_service = notification_service or NotificationService()
        self.policy = policy

    # =====================================================
    # COMMANDS
    # =====================================================
    def create_order(self, request: OrderRequest) -> Order:
        """
        Use Case: record a checked-out cart.

        1. Assigns an id and derives loyalty points from the total
        2. Fills in surprise gifts when the request carries none
        3. Stores the order
        4. Credits the user's points (when a user is given)
        5. Sends the notification (async, failures only logged)
        """
        points = pricing.loyalty_points(request.total, self.policy)
        gifts = request.surprise_gifts or [g.name for g in pricing.surprise_gifts(request.total, self.policy)]

        order = self.repos.orders.add(
            Order(
                id=str(uuid4()),
                **request.model_dump(exclude={"surprise_gifts"}),
                loyalty_points_earned=points,
                surprise_gifts=gifts,
            )
        )
        logger.info(f"Order {order.id} created: {len(order.items)} lines, total {order.total}, {points} points")

        if order.user_id:
            self.user_service.add_loyalty_points(order.user_id, points)

        # best effort: the order and its points are already stored
        try:
            self.notification_service.send_order_notification(order.id, order.user_id, order.total, points)
        except Exception as e:
            logger.warning(f"Notification for order {order.id} not sent: {e}")
        return order

    def update_status(self, order_id: str, status: OrderStatus) -> Order:
        order = self.repos.orders.update_status(order_id, status)
        if order is None:
            raise NotFoundError("Order", order_id)
        logger.info(f"Order {order_id} status -> {status}")
        return order

    # =====================================================
    # QUERY
    # =====================================================
    def get_order(self, order_id: str) -> Order:
        order = self.repos.orders.get(order_id)
        if order is None:
            raise NotFoundError("Order", order_id)
        return order

    def orders_by_user(self, user_id: str) -> List[Order]:
        return self.repos.orders.list_by_user(user_id)

    # =====================================================
    # INTEGRATIONS (mocked)
    # =====================================================
    def share_receipt(self, order_id: str, method: str) -> ReceiptShareOut:
        method = (method or "").lower()
        if method not in SHARE_METHODS:
            raise ValidationError(f"Unsupported share method: {method}", {"allowed": list(SHARE_METHODS)})
        order = self.get_order(order_id)

        logger.info(f"Receipt for order {order.id} shared via {method}")
        return ReceiptShareOut(
            success=True,
            message=f"Receipt shared via {method}",
            share_url=RECEIPT_URL.format(order_id=order.id),
        )

    def log_meal(self, order_id: str, meal_type: str = "lunch") -> MealLogOut:
        """Calories come from the catalog; lines whose item is gone count 0."""
        meal_type = (meal_type or "lunch").lower()
        if meal_type not in MEAL_TYPES:
            raise ValidationError(f"Unknown meal type: {meal_type}", {"allowed": list(MEAL_TYPES)})
        order = self.get_order(order_id)

        total_calories = 0.0
        for line in order.items:
            item = self.repos.menu.get(line.menu_item_id)
            if item is not None and item.nutrition is not None:
                total_calories += item.nutrition.calories * line.quantity

        logger.info(f"Order {order.id} logged as {meal_type}: {total_calories} kcal")
        return MealLogOut(
            success=True,
            message="Meal logged successfully to HealthifyMe",
            meal_type=meal_type,
            total_calories=total_calories,
        )
