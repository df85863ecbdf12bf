from decimal import Decimal
from unittest.mock import DEFAULT, MagicMock

import pytest

from hamshark.domain.errors import NotFoundError, ValidationError
from hamshark.services import meal_composer
from hamshark.services.cart_service import CartService
from hamshark.services.cart_store import InMemoryCartStore
from hamshark.utils.settings import CART_STORAGE_KEY, CUSTOM_MEALS_STORAGE_KEY


def expected_subtotal(cart):
    return sum((line.price * line.quantity for line in cart.items), Decimal("0"))


def test_add_captures_price_and_merges_same_line(cart, make_item):
    item = make_item("a", price="120.00")

    first = cart.add_item(item, 2)
    second = cart.add_item(item, 1)

    assert first.id == second.id
    assert len(cart.items) == 1
    assert cart.items[0].quantity == 3
    assert cart.subtotal() == Decimal("360.00")


def test_different_customizations_make_separate_lines(cart, make_item):
    item = make_item("a")
    cart.add_item(item, 1, {"spice": "hot"})
    cart.add_item(item, 1, {"spice": "mild"})
    assert len(cart.items) == 2
    assert cart.item_count() == 2


def test_price_change_does_not_touch_existing_lines(cart, make_item):
    cart.add_item(make_item("a", price="100.00"))
    cart.add_item(make_item("a", price="90.00"))

    assert [line.price for line in cart.items] == [Decimal("100.00"), Decimal("90.00")]
    assert cart.subtotal() == Decimal("190.00")


def test_add_rejects_bad_quantity_and_unavailable(cart, make_item):
    with pytest.raises(ValidationError):
        cart.add_item(make_item("a"), 0)
    with pytest.raises(ValidationError):
        cart.add_item(make_item("b", is_available=False))
    assert cart.is_empty()


def test_subtotal_tracks_every_mutation(cart, make_item):
    a = cart.add_item(make_item("a", price="80.00"), 2)
    assert cart.subtotal() == expected_subtotal(cart)

    b = cart.add_item(make_item("b", price="35.50"), 3)
    assert cart.subtotal() == expected_subtotal(cart) == Decimal("266.50")

    cart.update_quantity(a.id, 5)
    assert cart.subtotal() == expected_subtotal(cart) == Decimal("506.50")

    cart.add_customization(b.id, "extra", True)
    assert cart.subtotal() == expected_subtotal(cart)

    cart.remove_item(a.id)
    assert cart.subtotal() == expected_subtotal(cart) == Decimal("106.50")


def test_update_quantity_zero_equals_remove(make_item):
    carts = [CartService(InMemoryCartStore()) for _ in range(2)]
    for c in carts:
        c.add_item(make_item("a"), 2)
        c.add_item(make_item("b"), 1)

    removed_by_update = carts[0].update_quantity(carts[0].items[0].id, 0)
    carts[1].remove_item(carts[1].items[0].id)

    assert removed_by_update is None
    assert [(l.menu_item.id, l.quantity) for l in carts[0].items] == [
        (l.menu_item.id, l.quantity) for l in carts[1].items
    ]
    assert carts[0].subtotal() == carts[1].subtotal()


def test_unknown_line_raises_not_found(cart):
    with pytest.raises(NotFoundError):
        cart.remove_item("cart-missing")
    with pytest.raises(NotFoundError):
        cart.update_quantity("cart-missing", 2)
    with pytest.raises(NotFoundError):
        cart.add_customization("cart-missing", "k", "v")


def test_customization_values_are_restricted(cart, make_item):
    line = cart.add_item(make_item("a"))

    cart.add_customization(line.id, "spice", "hot")
    cart.add_customization(line.id, "extra_cheese", True)
    cart.add_customization(line.id, "shots", 2)
    assert cart.get_item(line.id).customizations == {"spice": "hot", "extra_cheese": True, "shots": 2}

    with pytest.raises(ValidationError):
        cart.add_customization(line.id, "toppings", ["onion"])
    assert "toppings" not in cart.get_item(line.id).customizations


def test_total_nutrition_uses_quantities(cart, menu_by_id):
    cart.add_item(menu_by_id["ni3"], 2)
    cart.add_item(menu_by_id["bd1"], 1)

    totals = cart.total_nutrition()
    assert totals.calories == 340 * 2 + 180
    assert totals.protein == 18 * 2 + 6


def test_items_is_a_snapshot(cart, make_item):
    cart.add_item(make_item("a"))
    snapshot = cart.items
    snapshot[0].quantity = 9
    assert cart.items[0].quantity == 1


def test_round_trip_through_store(store, menu_by_id):
    cart = CartService(store)
    cart.add_item(menu_by_id["ni1"], 2, {"spice": "extra", "no_onion": True})
    cart.add_item(menu_by_id["si1"], 1)
    cart.add_custom_meal(meal_composer.compose("Bowl", ["Paneer", "Rice"], size="large"))

    reloaded = CartService(store)

    assert reloaded.items == cart.items
    assert reloaded.subtotal() == cart.subtotal()
    assert reloaded.total_nutrition() == cart.total_nutrition()
    assert [m.id for m in reloaded.custom_meals()] == [m.id for m in cart.custom_meals()]


def test_persisted_json_uses_storefront_layout(cart, store, make_item):
    cart.add_item(make_item("a", price="12.50"), 2)
    raw = store.get(CART_STORAGE_KEY)
    assert '"menuItem"' in raw
    assert '"isVegetarian"' in raw
    assert '"price":"12.50"' in raw


def test_unreadable_store_starts_empty(store):
    store.set(CART_STORAGE_KEY, "{not json")
    store.set(CUSTOM_MEALS_STORAGE_KEY, "[1, 2]")
    cart = CartService(store)
    assert cart.is_empty()
    assert cart.custom_meals() == []


def test_clear_removes_persisted_copy(cart, store, make_item):
    cart.add_item(make_item("a"))
    cart.clear()
    assert cart.is_empty()
    assert store.get(CART_STORAGE_KEY) is None


def test_failed_persist_rolls_back(make_item):
    store = InMemoryCartStore()
    cart = CartService(store)
    cart.add_item(make_item("a"))

    broken = MagicMock(wraps=store)
    broken.set.side_effect = OSError("disk full")
    cart.store = broken

    with pytest.raises(OSError):
        cart.add_item(make_item("b"))
    assert [l.menu_item.id for l in cart.items] == ["a"]


def test_mutations_publish_events(cart, bus, make_item):
    events = []
    bus.subscribe(events.append)

    line = cart.add_item(make_item("a"), 2)
    cart.update_quantity(line.id, 3)
    cart.clear()

    assert [(e.action, e.item_count) for e in events] == [("add", 2), ("update", 3), ("clear", 0)]


def test_returned_lines_are_copies(store, make_item):
    cart = CartService(store)
    line = cart.add_item(make_item("a"), 1)
    line.quantity = 7
    cart.get_item(line.id).quantity = 8
    cart.update_quantity(line.id, 2).customizations["spice"] = "hot"

    assert cart.item_count() == 2
    assert cart.get_item(line.id).customizations == {}
    assert CartService(store).item_count() == cart.item_count()


def test_failed_clear_keeps_cart_everywhere(make_item):
    store = InMemoryCartStore()
    cart = CartService(store)
    cart.add_item(make_item("a"), 2)

    broken = MagicMock(wraps=store)
    broken.remove.side_effect = OSError("read-only")
    cart.store = broken

    with pytest.raises(OSError):
        cart.clear()
    assert cart.item_count() == 2
    assert CartService(store).item_count() == 2


def test_failed_meal_save_rolls_back(make_item):
    store = InMemoryCartStore()
    cart = CartService(store)
    meal = meal_composer.compose("Bowl", ["Paneer", "Rice"])

    broken = MagicMock(wraps=store)
    broken.set.side_effect = OSError("disk full")
    cart.store = broken

    with pytest.raises(OSError):
        cart.save_custom_meal(meal)
    with pytest.raises(OSError):
        cart.add_custom_meal(meal)
    assert cart.custom_meals() == []
    assert cart.is_empty()


def test_custom_meal_not_kept_when_line_cannot_be_added(make_item):
    store = InMemoryCartStore()
    cart = CartService(store)
    meal = meal_composer.compose("Bowl", ["Paneer", "Rice"])

    broken = MagicMock(wraps=store)
    broken.set.side_effect = [DEFAULT, OSError("disk full"), DEFAULT]
    cart.store = broken

    with pytest.raises(OSError):
        cart.add_custom_meal(meal)
    assert cart.custom_meals() == []
    assert cart.is_empty()
    assert CartService(store).custom_meals() == []
