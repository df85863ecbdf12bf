# hamshark/repos/ports.py
"""Repository interfaces the backend services depend on."""
from typing import List, Optional, Protocol

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


class MenuRepository(Protocol):
    def list_items(self) -> List[MenuItem]: ...

    def get(self, item_id: str) -> Optional[MenuItem]: ...

    def add(self, item: MenuItem) -> MenuItem: ...


class OrderRepository(Protocol):
    def add(self, order: Order) -> Order: ...

    def get(self, order_id: str) -> Optional[Order]: ...

    def list_by_user(self, user_id: str) -> List[Order]: ...

    def update_status(self, order_id: str, status: OrderStatus) -> Optional[Order]: ...


class TruckRepository(Protocol):
    def list_all(self) -> List[TruckLocation]: ...

    def get(self, truck_id: str) -> Optional[TruckLocation]: ...

    def add(self, truck: TruckLocation) -> TruckLocation: ...

    def update_status(self, truck_id: str, status: TruckStatus) -> Optional[TruckLocation]: ...


class RewardRepository(Protocol):
    def list_all(self) -> List[LoyaltyReward]: ...

    def add(self, reward: LoyaltyReward) -> LoyaltyReward: ...


class PlanRepository(Protocol):
    def list_all(self) -> List[MembershipPlan]: ...

    def get(self, plan_id: str) -> Optional[MembershipPlan]: ...

    def add(self, plan: MembershipPlan) -> MembershipPlan: ...


class UserRepository(Protocol):
    def get(self, user_id: str) -> Optional[User]: ...

    def get_by_username(self, username: str) -> Optional[User]: ...

    def add(self, user: User) -> User: ...

    def save(self, user: User) -> User: ...
