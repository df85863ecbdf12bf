# hamshark/services/order_client.py
from typing import List

import requests
from requests import RequestException

from hamshark.domain.errors import NotFoundError, TransientSubmissionError, ValidationError
from hamshark.domain.models import MenuItem, Order, OrderRequest, OrderStatus
from hamshark.utils.logging import get_logger
from hamshark.utils.retry import http_retry
from hamshark.utils.settings import ORDER_SERVICE_TIMEOUT, ORDER_SERVICE_URL

logger = get_logger(__name__)


def _message(resp: requests.Response) -> str:
    try:
        body = resp.json()
    except ValueError:
        return resp.text or resp.reason
    return str(body.get("detail") or body.get("message") or body)


class OrderClient:
    """
    Storefront side of the REST backend.

    Reads are idempotent and retried; order submission is sent exactly once,
    a failure is reported as TransientSubmissionError and left to the user.
    """

    def __init__(
        self,
        base_url: str | None = None,
        timeout: float = ORDER_SERVICE_TIMEOUT,
        session: requests.Session | None = None,
    ):
        self.base_url = (base_url or ORDER_SERVICE_URL).rstrip("/")
        self.timeout = timeout
        self.session = session or requests.Session()

    # =====================================================
    # CATALOG
    # =====================================================
    @http_retry()
    def fetch_menu(self, category: str | None = None, cuisine: str | None = None) -> List[MenuItem]:
        if category:
            url = f"{self.base_url}/menu/category/{category}"
        elif cuisine:
            url = f"{self.base_url}/menu/cuisine/{cuisine}"
        else:
            url = f"{self.base_url}/menu"
        logger.info(f"OrderClient GET {url}")

        resp = self.session.get(url, timeout=self.timeout)
        resp.raise_for_status()
        return [MenuItem.model_validate(item) for item in resp.json()]

    @http_retry()
    def fetch_menu_item(self, item_id: str) -> MenuItem:
        url = f"{self.base_url}/menu/{item_id}"
        logger.info(f"OrderClient GET {url}")

        resp = self.session.get(url, timeout=self.timeout)
        if resp.status_code == 404:
            raise NotFoundError("Menu item", item_id)
        resp.raise_for_status()
        return MenuItem.model_validate(resp.json())

    # =====================================================
    # ORDERS
    # =====================================================
    def submit_order(self, request: OrderRequest) -> Order:
        url = f"{self.base_url}/orders"
        logger.info(f"OrderClient POST {url} ({len(request.items)} items, total {request.total})")

        try:
            resp = self.session.post(
                url,
                json=request.model_dump(mode="json", by_alias=True),
                timeout=self.timeout,
            )
        except RequestException as e:
            logger.error(f"Order submission failed: {e}")
            raise TransientSubmissionError(details={"reason": str(e)}) from e

        if resp.status_code >= 500:
            logger.error(f"Order submission failed with {resp.status_code}")
            raise TransientSubmissionError(details={"status": resp.status_code})
        if resp.status_code >= 400:
            raise ValidationError(f"Order rejected: {_message(resp)}", {"status": resp.status_code})

        # pydantic and JSON decode errors are both ValueError
        try:
            return Order.model_validate(resp.json())
        except ValueError as e:
            logger.error(f"Unreadable order confirmation ({resp.status_code}): {e}")
            raise TransientSubmissionError(details={"status": resp.status_code, "reason": "unreadable response"}) from e

    @http_retry()
    def get_order(self, order_id: str) -> Order:
        url = f"{self.base_url}/orders/{order_id}"
        logger.info(f"OrderClient GET {url}")

        resp = self.session.get(url, timeout=self.timeout)
        if resp.status_code == 404:
            raise NotFoundError("Order", order_id)
        resp.raise_for_status()
        return Order.model_validate(resp.json())

    def update_order_status(self, order_id: str, status: OrderStatus) -> Order:
        url = f"{self.base_url}/orders/{order_id}/status"
        logger.info(f"OrderClient PATCH {url} -> {status}")

        resp = self.session.patch(url, json={"status": status}, timeout=self.timeout)
        if resp.status_code == 404:
            raise NotFoundError("Order", order_id)
        resp.raise_for_status()
        return Order.model_validate(resp.json())
