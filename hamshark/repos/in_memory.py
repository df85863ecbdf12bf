# hamshark/repos/in_memory.py
"""Dict-backed repositories. State lives as long as the process."""
from typing import Dict, Generic, List, Optional, TypeVar

from hamshark.domain.models import (
    LoyaltyReward,
    MembershipPlan,
    MenuItem,
    Order,
    OrderStatus,
    TruckLocation,
    TruckStatus,
    User,
)

T = TypeVar("T", MenuItem, Order, TruckLocation, LoyaltyReward, MembershipPlan, User)


class _InMemoryStore(Generic[T]):
    # copies go in and out so callers never mutate stored records
    def __init__(self) -> None:
        self._rows: Dict[str, T] = {}

    def _put(self, row: T) -> T:
        self._rows[row.id] = row.model_copy(deep=True)
        return row.model_copy(deep=True)

    def _get(self, row_id: str) -> Optional[T]:
        row = self._rows.get(row_id)
        return row.model_copy(deep=True) if row is not None else None

    def _all(self) -> List[T]:
        return [r.model_copy(deep=True) for r in self._rows.values()]

    def clear(self) -> None:
        self._rows.clear()


class InMemoryMenuRepository(_InMemoryStore[MenuItem]):
    def list_items(self) -> List[MenuItem]:
        return self._all()

    def get(self, item_id: str) -> Optional[MenuItem]:
        return self._get(item_id)

    def add(self, item: MenuItem) -> MenuItem:
        return self._put(item)


class InMemoryOrderRepository(_InMemoryStore[Order]):
    def add(self, order: Order) -> Order:
        return self._put(order)

    def get(self, order_id: str) -> Optional[Order]:
        return self._get(order_id)

    def list_by_user(self, user_id: str) -> List[Order]:
        return [o for o in self._all() if o.user_id == user_id]

    def update_status(self, order_id: str, status: OrderStatus) -> Optional[Order]:
        order = self._get(order_id)
        if order is None:
            return None
        return self._put(order.model_copy(update={"status": status}))


class InMemoryTruckRepository(_InMemoryStore[TruckLocation]):
    def list_all(self) -> List[TruckLocation]:
        return self._all()

    def get(self, truck_id: str) -> Optional[TruckLocation]:
        return self._get(truck_id)

    def add(self, truck: TruckLocation) -> TruckLocation:
        return self._put(truck)

    def update_status(self, truck_id: str, status: TruckStatus) -> Optional[TruckLocation]:
        truck = self._get(truck_id)
        if truck is None:
            return None
        return self._put(truck.model_copy(update={"current_status": status}))


class InMemoryRewardRepository(_InMemoryStore[LoyaltyReward]):
    def list_all(self) -> List[LoyaltyReward]:
        return self._all()

    def add(self, reward: LoyaltyReward) -> LoyaltyReward:
        return self._put(reward)


class InMemoryPlanRepository(_InMemoryStore[MembershipPlan]):
    def list_all(self) -> List[MembershipPlan]:
        return self._all()

    def get(self, plan_id: str) -> Optional[MembershipPlan]:
        return self._get(plan_id)

    def add(self, plan: MembershipPlan) -> MembershipPlan:
        return self._put(plan)


class InMemoryUserRepository(_InMemoryStore[User]):
    def get(self, user_id: str) -> Optional[User]:
        return self._get(user_id)

    def get_by_username(self, username: str) -> Optional[User]:
        return next((u for u in self._all() if u.username == username), None)

    def add(self, user: User) -> User:
        return self._put(user)

    def save(self, user: User) -> User:
        return self._put(user)
