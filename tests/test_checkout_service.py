from decimal import Decimal
from unittest.mock import MagicMock

import pytest

from hamshark.domain.errors import CheckoutInProgressError, TransientSubmissionError, ValidationError
from hamshark.domain.models import Order
from hamshark.services.checkout_service import CheckoutService, CheckoutState
from hamshark.utils.settings import CART_STORAGE_KEY


def confirmed(request, order_id="ord-1"):
    return Order(id=order_id, **request.model_dump(), loyalty_points_earned=34)


@pytest.fixture
def client():
    client = MagicMock()
    client.submit_order.side_effect = lambda request: confirmed(request)
    return client


@pytest.fixture
def filled_cart(cart, make_item):
    cart.add_item(make_item("a", price="150"), 2)
    return cart


def test_successful_checkout_clears_cart(filled_cart, store, client):
    checkout = CheckoutService(filled_cart, client)

    result = checkout.submit(user_id="u1")

    assert result.order_id == "ord-1"
    assert result.summary.total == Decimal("340.00")
    assert checkout.state is CheckoutState.CONFIRMED
    assert checkout.busy is False
    assert filled_cart.is_empty()
    assert store.get(CART_STORAGE_KEY) is None

    sent = client.submit_order.call_args.args[0]
    assert sent.total == Decimal("340.00")
    assert sent.user_id == "u1"
    assert sent.truck_location == "Tech Park - Sector 5"


def test_failed_checkout_keeps_cart(filled_cart, client):
    client.submit_order.side_effect = TransientSubmissionError()
    checkout = CheckoutService(filled_cart, client)

    with pytest.raises(TransientSubmissionError, match="Checkout failed, please retry"):
        checkout.submit()

    assert checkout.state is CheckoutState.FAILED
    assert checkout.busy is False
    assert filled_cart.item_count() == 2
    assert isinstance(checkout.last_error, TransientSubmissionError)


def test_retry_after_failure_is_manual(filled_cart, client):
    client.submit_order.side_effect = TransientSubmissionError()
    checkout = CheckoutService(filled_cart, client)

    with pytest.raises(TransientSubmissionError):
        checkout.submit()
    assert client.submit_order.call_count == 1

    client.submit_order.side_effect = lambda request: confirmed(request, "ord-2")
    assert checkout.submit().order_id == "ord-2"
    assert filled_cart.is_empty()


def test_rejected_order_keeps_cart(filled_cart, client):
    client.submit_order.side_effect = ValidationError("Order rejected")
    checkout = CheckoutService(filled_cart, client)

    with pytest.raises(ValidationError):
        checkout.submit()
    assert checkout.state is CheckoutState.FAILED
    assert not filled_cart.is_empty()


def test_second_submit_while_in_flight(filled_cart, client):
    checkout = CheckoutService(filled_cart, client)
    nested = []

    def submit_again(request):
        with pytest.raises(CheckoutInProgressError):
            checkout.submit()
        nested.append(checkout.state)
        return confirmed(request)

    client.submit_order.side_effect = submit_again
    checkout.submit()

    assert nested == [CheckoutState.SUBMITTED]
    assert client.submit_order.call_count == 1


def test_empty_cart_is_not_submitted(cart, client):
    checkout = CheckoutService(cart, client)
    with pytest.raises(ValidationError):
        checkout.submit()
    assert checkout.state is CheckoutState.DRAFT
    client.submit_order.assert_not_called()


def test_preview(filled_cart, client):
    summary = CheckoutService(filled_cart, client).preview()
    assert summary.loyalty_points_earned == 34
    client.submit_order.assert_not_called()


def test_confirmed_order_survives_cart_storage_error(filled_cart, store, client):
    broken = MagicMock(wraps=store)
    broken.remove.side_effect = OSError("read-only")
    filled_cart.store = broken
    checkout = CheckoutService(filled_cart, client)

    result = checkout.submit()

    assert result.order_id == "ord-1"
    assert result.cart_cleared is False
    assert checkout.state is CheckoutState.CONFIRMED
    assert filled_cart.item_count() == 2
    assert store.get(CART_STORAGE_KEY) is not None


def test_unexpected_client_error_marks_failed(filled_cart, client):
    client.submit_order.side_effect = ValueError("bad body")
    checkout = CheckoutService(filled_cart, client)

    with pytest.raises(ValueError):
        checkout.submit()
    assert checkout.state is CheckoutState.FAILED
    assert isinstance(checkout.last_error, ValueError)
    assert checkout.busy is False
    assert filled_cart.item_count() == 2
