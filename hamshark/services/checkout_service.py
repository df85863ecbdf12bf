# hamshark/services/checkout_service.py
from dataclasses import dataclass
from enum import Enum

from hamshark.domain.errors import CheckoutInProgressError
from hamshark.domain.models import CheckoutSummary, Order
from hamshark.services import pricing
from hamshark.services.cart_service import CartService
from hamshark.services.order_client import OrderClient
from hamshark.utils.logging import get_logger
from hamshark.utils.settings import DEFAULT_TRUCK_LOCATION

logger = get_logger(__name__)


class CheckoutState(str, Enum):
    DRAFT = "draft"            # still in the cart
    SUBMITTED = "submitted"    # request sent
    CONFIRMED = "confirmed"    # ledger accepted
    FAILED = "failed"          # ledger rejected or unreachable, cart kept


@dataclass(frozen=True)
class CheckoutResult:
    order_id: str
    order: Order
    summary: CheckoutSummary
    cart_cleared: bool = True


class CheckoutService:
    """
    Checkout use case: price the cart, send it once, clear the cart on success.

    Only one submission may be in flight. Nothing is retried here; after a
    failure the cart is unchanged and the user can submit again. The HTTP
    timeout of the client is the only time limit.
    """

    def __init__(
        self,
        cart: CartService,
        client: OrderClient,
        policy: pricing.PricingPolicy = pricing.DEFAULT_POLICY,
        truck_location: str = DEFAULT_TRUCK_LOCATION,
    ):
        self.cart = cart
        self.client = client
        self.policy = policy
        self.truck_location = truck_location
        self.state = CheckoutState.DRAFT
        self.busy = False
        self.last_error: Exception | None = None

    def preview(self) -> CheckoutSummary:
        return pricing.summarize_lines(self.cart.items, self.policy)

    def submit(self, user_id: str | None = None, truck_location: str | None = None) -> CheckoutResult:
        if self.busy:
            raise CheckoutInProgressError()

        lines = self.cart.items
        request = pricing.finalize(
            lines,
            truck_location=truck_location or self.truck_location,
            user_id=user_id,
            policy=self.policy,
        )
        summary = pricing.summarize_lines(lines, self.policy)

        self.busy = True
        self.state = CheckoutState.SUBMITTED
        self.last_error = None
        logger.info(f"Submitting order: {len(request.items)} lines, total {request.total}")
        try:
            order = self.client.submit_order(request)
        except Exception as e:
            self.state = CheckoutState.FAILED
            self.last_error = e
            logger.warning(f"Checkout failed, cart kept ({self.cart.item_count()} items): {e}")
            raise
        finally:
            self.busy = False

        self.state = CheckoutState.CONFIRMED
        logger.info(f"Order {order.id} confirmed, {order.loyalty_points_earned} points earned")
        # the order is stored by now; a cart storage error is reported, not raised
        try:
            self.cart.clear()
        except Exception as e:
            logger.error(f"Order {order.id} confirmed but the cart could not be cleared: {e}")
            return CheckoutResult(order_id=order.id, order=order, summary=summary, cart_cleared=False)
        return CheckoutResult(order_id=order.id, order=order, summary=summary)
