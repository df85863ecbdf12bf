# hamshark/services/cart_sync.py
"""
Cart change notification and the cart badge.

Views that show the cart size learn about changes two ways:
  1. CartUpdated events published in-process by CartService (preferred)
  2. polling the persisted cart every CART_POLL_INTERVAL_SECONDS, which also
     picks up edits written straight to the store by another process

A poll is skipped while the last refresh is younger than the interval, so an
event always wins over the poll.
"""
import json
import threading
import time
from dataclasses import dataclass
from typing import Callable, List

from hamshark.services.cart_store import CartStore
from hamshark.utils.logging import get_logger
from hamshark.utils.settings import CART_POLL_INTERVAL_SECONDS, CART_STORAGE_KEY

logger = get_logger(__name__)

BADGE_MAX = 99


@dataclass(frozen=True)
class CartUpdated:
    action: str
    item_count: int


CartHandler = Callable[[CartUpdated], None]


class CartEventBus:
    """Synchronous in-process pub/sub, handlers run in subscription order."""

    def __init__(self) -> None:
        self._handlers: List[CartHandler] = []

    def subscribe(self, handler: CartHandler) -> None:
        self._handlers.append(handler)

    def unsubscribe(self, handler: CartHandler) -> None:
        if handler in self._handlers:
            self._handlers.remove(handler)

    def publish(self, event: CartUpdated) -> None:
        for handler in list(self._handlers):
            try:
                handler(event)
            except Exception:
                # one broken view must not stop the others from updating
                logger.exception(f"Cart handler {handler!r} failed on {event.action}")


def count_items_in_store(store: CartStore) -> int:
    """Sum of quantities in the persisted cart, 0 when nothing is stored."""
    raw = store.get(CART_STORAGE_KEY)
    if not raw:
        return 0
    return sum(int(line.get("quantity", 0)) for line in json.loads(raw))


class CartBadge:
    def __init__(
        self,
        store: CartStore,
        bus: CartEventBus | None = None,
        interval: float = CART_POLL_INTERVAL_SECONDS,
        clock: Callable[[], float] = time.monotonic,
    ):
        self.store = store
        self.interval = interval
        self._clock = clock
        self._last_refresh: float | None = None
        self.count = 0
        if bus is not None:
            bus.subscribe(self.on_cart_updated)
        self.refresh()

    @property
    def label(self) -> str:
        if self.count <= 0:
            return ""
        return f"{BADGE_MAX}+" if self.count > BADGE_MAX else str(self.count)

    def refresh(self) -> int:
        try:
            self.count = count_items_in_store(self.store)
        except (ValueError, TypeError, AttributeError) as e:
            logger.warning(f"Unreadable cart in store, keeping badge at {self.count}: {e}")
        self._last_refresh = self._clock()
        return self.count

    def on_cart_updated(self, event: CartUpdated) -> None:
        # the count is always re-derived from the store, not taken from the event
        self.refresh()

    def poll(self) -> bool:
        """Refresh unless an event already refreshed within the interval."""
        if self._last_refresh is not None and self._clock() - self._last_refresh < self.interval:
            return False
        self.refresh()
        return True

    def watch(self, stop: threading.Event) -> None:
        """Blocking poll loop; run it in its own thread and set `stop` to end it."""
        logger.info(f"Cart badge polling every {self.interval}s")
        while not stop.wait(self.interval):
            self.poll()
