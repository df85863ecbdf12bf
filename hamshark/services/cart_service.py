# hamshark/services/cart_service.py
from copy import deepcopy
from decimal import Decimal
from typing import List
from uuid import uuid4

from pydantic import TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from hamshark.domain.errors import NotFoundError, ValidationError
from hamshark.domain.models import CartLineItem, CustomizationValue, Customizations, CustomMeal, MenuItem, NutritionTotals
from hamshark.services import catalog_filters
from hamshark.services.cart_store import CartStore
from hamshark.services.cart_sync import CartEventBus, CartUpdated
from hamshark.services.meal_composer import compose_line_item
from hamshark.utils.logging import get_logger
from hamshark.utils.settings import CART_STORAGE_KEY, CUSTOM_MEALS_STORAGE_KEY

logger = get_logger(__name__)

_LINES = TypeAdapter(List[CartLineItem])
_MEALS = TypeAdapter(List[CustomMeal])


class CartService:
    """
    Session cart.

    Commands (add, update, remove, customize, clear) change state and write
    the whole cart through to the store before returning, then publish a
    CartUpdated event. Queries (subtotal, nutrition, count) only read.

    Unit prices are captured when a line is added; later catalog price
    changes never touch lines already in the cart.
    """

    def __init__(self, store: CartStore, bus: CartEventBus | None = None):
        self.store = store
        self.bus = bus or CartEventBus()
        self._items: List[CartLineItem] = self._load(CART_STORAGE_KEY, _LINES)
        self._custom_meals: List[CustomMeal] = self._load(CUSTOM_MEALS_STORAGE_KEY, _MEALS)

    def _load(self, key: str, adapter: TypeAdapter) -> list:
        raw = self.store.get(key)
        if not raw:
            return []
        try:
            return adapter.validate_json(raw)
        except PydanticValidationError as e:
            logger.warning(f"Discarding unreadable {key}: {e.error_count()} errors")
            return []

    # =====================================================
    # QUERY
    # =====================================================
    @property
    def items(self) -> List[CartLineItem]:
        return deepcopy(self._items)

    def get_item(self, item_id: str) -> CartLineItem:
        return self._find(item_id).model_copy(deep=True)

    def _find(self, item_id: str) -> CartLineItem:
        for line in self._items:
            if line.id == item_id:
                return line
        raise NotFoundError("Cart item", item_id)

    def subtotal(self) -> Decimal:
        return sum((i.price * i.quantity for i in self._items), Decimal("0.00"))

    def total_nutrition(self) -> NutritionTotals:
        return catalog_filters.total_nutrition((i.menu_item, i.quantity) for i in self._items)

    def item_count(self) -> int:
        return sum(i.quantity for i in self._items)

    def is_empty(self) -> bool:
        return not self._items

    def custom_meals(self) -> List[CustomMeal]:
        return deepcopy(self._custom_meals)

    # =====================================================
    # COMMANDS
    # =====================================================
    def add_item(
        self,
        menu_item: MenuItem,
        quantity: int = 1,
        customizations: Customizations | None = None,
    ) -> CartLineItem:
        if quantity < 1:
            raise ValidationError("Quantity must be at least 1", {"quantity": quantity})
        if not menu_item.is_available:
            raise ValidationError("Item is not available", {"menu_item_id": menu_item.id})

        customizations = dict(customizations or {})
        snapshot = deepcopy(self._items)

        # same dish, same options, same captured price -> bump the existing line
        for line in self._items:
            if (
                line.menu_item.id == menu_item.id
                and line.customizations == customizations
                and line.price == menu_item.price
            ):
                line.quantity += quantity
                logger.info(f"Item {menu_item.id} already in cart, quantity now {line.quantity}")
                self._commit("add", snapshot)
                return line.model_copy(deep=True)

        try:
            line = CartLineItem(
                id=f"cart-{uuid4().hex[:12]}",
                menu_item=menu_item,
                quantity=quantity,
                customizations=customizations,
                price=menu_item.price,
            )
        except PydanticValidationError as e:
            raise ValidationError("Invalid customizations", {"errors": e.errors()}) from e

        self._items.append(line)
        logger.info(f"Added {quantity} x {menu_item.id} to cart as {line.id}")
        self._commit("add", snapshot)
        return line.model_copy(deep=True)

    def add_line_item(self, line: CartLineItem) -> CartLineItem:
        snapshot = deepcopy(self._items)
        self._items.append(line.model_copy(deep=True))
        logger.info(f"Added line {line.id} ({line.menu_item.name})")
        self._commit("add", snapshot)
        return line.model_copy(deep=True)

    def add_custom_meal(self, meal: CustomMeal) -> CartLineItem:
        """Remember the meal for later sessions and put one of it in the cart."""
        saved = deepcopy(self._custom_meals)
        self.save_custom_meal(meal)
        try:
            return self.add_line_item(compose_line_item(meal))
        except Exception:
            self._custom_meals = saved
            self._write_meals()
            raise

    def update_quantity(self, item_id: str, quantity: int) -> CartLineItem | None:
        if quantity <= 0:
            self.remove_item(item_id)
            return None

        line = self._find(item_id)
        snapshot = deepcopy(self._items)
        line.quantity = quantity
        logger.info(f"Cart line {item_id} quantity set to {quantity}")
        self._commit("update", snapshot)
        return line.model_copy(deep=True)

    def remove_item(self, item_id: str) -> None:
        self._find(item_id)
        snapshot = deepcopy(self._items)
        self._items = [i for i in self._items if i.id != item_id]
        logger.info(f"Removed cart line {item_id}")
        self._commit("remove", snapshot)

    def add_customization(self, item_id: str, key: str, value: CustomizationValue) -> CartLineItem:
        line = self._find(item_id)
        snapshot = deepcopy(self._items)
        try:
            line.customizations = {**line.customizations, key: value}
        except PydanticValidationError as e:
            raise ValidationError(
                "Customization values must be text, numbers or true/false",
                {"key": key, "value": repr(value)},
            ) from e
        self._commit("customize", snapshot)
        return line.model_copy(deep=True)

    def clear(self) -> None:
        # store first: on failure the cart stays in memory and on disk
        try:
            self.store.remove(CART_STORAGE_KEY)
        except Exception:
            logger.error("Removing persisted cart failed, cart kept")
            raise
        self._items = []
        logger.info("Cart cleared")
        self.bus.publish(CartUpdated(action="clear", item_count=0))

    def reload(self) -> None:
        """Re-read the cart written by another session (last write wins)."""
        self._items = self._load(CART_STORAGE_KEY, _LINES)
        self._custom_meals = self._load(CUSTOM_MEALS_STORAGE_KEY, _MEALS)

    def save_custom_meal(self, meal: CustomMeal) -> None:
        snapshot = deepcopy(self._custom_meals)
        self._custom_meals.append(meal.model_copy(deep=True))
        try:
            self._write_meals()
        except Exception:
            self._custom_meals = snapshot
            logger.error(f"Saving custom meal {meal.id} failed, change rolled back")
            raise

    def _write_meals(self) -> None:
        self.store.set(CUSTOM_MEALS_STORAGE_KEY, _MEALS.dump_json(self._custom_meals, by_alias=True).decode())

    def _commit(self, action: str, snapshot: List[CartLineItem]) -> None:
        # write-through: memory and store agree after every command, or neither changed
        try:
            self.store.set(CART_STORAGE_KEY, _LINES.dump_json(self._items, by_alias=True).decode())
        except Exception:
            self._items = snapshot
            logger.error(f"Persisting cart after {action} failed, change rolled back")
            raise
        self.bus.publish(CartUpdated(action=action, item_count=self.item_count()))
