"""Shared fixtures.

Environment is pinned before any hamshark module is imported: settings are
read once at import time.
"""
import os

os.environ["REPOSITORY_BACKEND"] = "memory"
os.environ["CELERY_TASK_ALWAYS_EAGER"] = "1"
os.environ["CART_STORE"] = "memory"
os.environ["GIFT_SCHEME"] = "both"

from decimal import Decimal
from typing import AsyncIterator, Callable, List

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from hamshark.data import sample_data
from hamshark.domain.models import MenuItem, Nutrition
from hamshark.repos.factory import reset_memory_repositories
from hamshark.services.cart_service import CartService
from hamshark.services.cart_store import InMemoryCartStore
from hamshark.services.cart_sync import CartEventBus


@pytest.fixture(autouse=True)
def _fresh_backend():
    """Every test starts from freshly seeded in-memory repositories."""
    reset_memory_repositories()
    yield
    reset_memory_repositories()


@pytest.fixture
def menu() -> List[MenuItem]:
    return sample_data.menu_items()


@pytest.fixture
def menu_by_id(menu) -> dict:
    return {i.id: i for i in menu}


@pytest.fixture
def make_item() -> Callable[..., MenuItem]:
    def _make(id: str = "x1", price: str = "100.00", **overrides) -> MenuItem:
        data = dict(
            id=id,
            name=f"Item {id}",
            description="",
            price=Decimal(price),
            category="Curry",
            cuisine="North Indian",
            nutrition=Nutrition(calories=300, protein=20, carbs=30, fat=10, fiber=4, sodium=500),
        )
        data.update(overrides)
        return MenuItem(**data)

    return _make


@pytest.fixture
def store() -> InMemoryCartStore:
    return InMemoryCartStore()


@pytest.fixture
def bus() -> CartEventBus:
    return CartEventBus()


@pytest.fixture
def cart(store, bus) -> CartService:
    return CartService(store, bus)


@pytest_asyncio.fixture
async def client() -> AsyncIterator[AsyncClient]:
    """Async HTTP client bound to the ASGI app, no network involved."""
    from hamshark.main import app

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
