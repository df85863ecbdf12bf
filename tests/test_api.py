from typing import Any, Dict

import pytest
from httpx import AsyncClient


def order_body(**overrides) -> Dict[str, Any]:
    body = {
        "items": [{"menuItemId": "ni3", "quantity": 2, "customizations": {"spice": "mild"}, "price": "200.00"}],
        "subtotal": "400.00",
        "tax": "20.00",
        "total": "420.00",
        "status": "confirmed",
        "truckLocation": "Tech Park - Sector 5",
    }
    body.update(overrides)
    return body


@pytest.mark.asyncio
async def test_health(client: AsyncClient) -> None:
    resp = await client.get("/health")
    assert resp.status_code == 200
    assert resp.json() == {"status": "ok", "repositoryBackend": "memory"}


@pytest.mark.asyncio
async def test_menu_listing_and_lookup(client: AsyncClient) -> None:
    resp = await client.get("/api/menu")
    assert resp.status_code == 200
    items = resp.json()
    assert len(items) == 17
    assert items[0]["id"] == "ni1"
    assert items[0]["isVegetarian"] is True
    assert items[0]["price"] == "180.00"

    resp = await client.get("/api/menu/ni2")
    assert resp.json()["name"] == "Butter Chicken"

    resp = await client.get("/api/menu/nope")
    assert resp.status_code == 404


@pytest.mark.asyncio
async def test_menu_by_category_and_cuisine(client: AsyncClient) -> None:
    resp = await client.get("/api/menu/category/dosa")
    assert [i["id"] for i in resp.json()] == ["si1"]

    resp = await client.get("/api/menu/cuisine/Street Food")
    assert [i["id"] for i in resp.json()] == ["sf1", "sf2"]


@pytest.mark.asyncio
async def test_menu_query_filters(client: AsyncClient) -> None:
    resp = await client.get(
        "/api/menu",
        params={"diet": "vegetarian", "max_price": "100", "sort": "price-low-high", "exclude_allergens": ["dairy"]},
    )
    assert [i["id"] for i in resp.json()] == ["sf1", "sf2", "si4"]

    resp = await client.get("/api/menu", params={"q": "paneer", "goal": "muscle-gain"})
    assert [i["id"] for i in resp.json()] == ["ni1", "ni9"]


@pytest.mark.asyncio
async def test_order_lifecycle(client: AsyncClient) -> None:
    resp = await client.post("/api/orders", json=order_body())
    assert resp.status_code == 201
    order = resp.json()
    assert order["loyaltyPointsEarned"] == 42
    assert order["total"] == "420.00"
    assert order["items"][0]["customizations"] == {"spice": "mild"}
    assert order["surpriseGifts"] == ["Free Healthy Drink", "Free Lemon Detox"]

    resp = await client.get(f"/api/orders/{order['id']}")
    assert resp.status_code == 200
    assert resp.json()["id"] == order["id"]

    resp = await client.patch(f"/api/orders/{order['id']}/status", json={"status": "ready"})
    assert resp.status_code == 200
    assert resp.json()["status"] == "ready"


@pytest.mark.asyncio
async def test_order_errors(client: AsyncClient) -> None:
    assert (await client.get("/api/orders/missing")).status_code == 404
    assert (await client.patch("/api/orders/missing/status", json={"status": "ready"})).status_code == 404

    assert (await client.post("/api/orders", json=order_body(items=[]))).status_code == 422
    bad_qty = order_body(items=[{"menuItemId": "ni3", "quantity": 0, "price": "200.00"}])
    assert (await client.post("/api/orders", json=bad_qty)).status_code == 422

    order = (await client.post("/api/orders", json=order_body())).json()
    resp = await client.patch(f"/api/orders/{order['id']}/status", json={"status": "teleported"})
    assert resp.status_code == 422


@pytest.mark.asyncio
async def test_share_and_log_meal(client: AsyncClient) -> None:
    order = (await client.post("/api/orders", json=order_body())).json()

    resp = await client.post(f"/api/orders/{order['id']}/share", json={"method": "email"})
    assert resp.json() == {
        "success": True,
        "message": "Receipt shared via email",
        "shareUrl": f"https://hamshark.com/receipt/{order['id']}",
    }
    assert (await client.post(f"/api/orders/{order['id']}/share", json={"method": "pigeon"})).status_code == 400

    resp = await client.post("/api/healthifyme/log-meal", json={"orderId": order["id"]})
    assert resp.status_code == 200
    assert resp.json()["mealType"] == "lunch"
    assert resp.json()["totalCalories"] == 680

    resp = await client.post("/api/healthifyme/log-meal", json={"orderId": "missing"})
    assert resp.status_code == 404


@pytest.mark.asyncio
async def test_users_and_loyalty(client: AsyncClient) -> None:
    resp = await client.post("/api/users", json={"username": "asha", "email": "asha@example.com"})
    assert resp.status_code == 201
    user = resp.json()
    assert user["loyaltyPoints"] == 0
    assert user["membershipTier"] == "bronze"

    assert (await client.post("/api/users", json={"username": "asha"})).status_code == 400

    await client.post("/api/orders", json=order_body(userId=user["id"], total="3000.00"))
    resp = await client.get(f"/api/users/{user['id']}")
    assert resp.json()["loyaltyPoints"] == 300
    assert resp.json()["membershipTier"] == "silver"

    resp = await client.get(f"/api/users/{user['id']}/orders")
    assert len(resp.json()) == 1

    assert (await client.get("/api/users/missing")).status_code == 404


@pytest.mark.asyncio
async def test_trucks(client: AsyncClient) -> None:
    trucks = (await client.get("/api/trucks")).json()
    assert [t["id"] for t in trucks] == ["loc1", "loc2"]
    assert trucks[0]["currentStatus"] == "open"
    assert trucks[0]["schedule"][0] == {"day": "Monday", "startTime": "11:30", "endTime": "14:30", "isOpen": True}

    resp = await client.patch("/api/trucks/loc2/status", json={"status": "open"})
    assert resp.json()["currentStatus"] == "open"
    assert (await client.get("/api/trucks/loc2")).json()["currentStatus"] == "open"

    assert (await client.patch("/api/trucks/loc2/status", json={"status": "flying"})).status_code == 422
    assert (await client.get("/api/trucks/loc9")).status_code == 404


@pytest.mark.asyncio
async def test_plans_and_rewards(client: AsyncClient) -> None:
    plans = (await client.get("/api/membership-plans")).json()
    assert [p["id"] for p in plans] == ["plan1", "plan2", "plan3"]
    assert (await client.get("/api/membership-plans/plan3")).json()["price"] == "199.00"
    assert (await client.get("/api/membership-plans/plan9")).status_code == 404

    rewards = (await client.get("/api/loyalty-rewards")).json()
    assert [r["pointsCost"] for r in rewards] == [50, 100, 250]
    silver = (await client.get("/api/loyalty-rewards/tier/Silver")).json()
    assert [r["id"] for r in silver] == ["reward2"]
