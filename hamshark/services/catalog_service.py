# hamshark/services/catalog_service.py
from decimal import Decimal
from typing import List, Sequence

from hamshark.domain.errors import NotFoundError
from hamshark.domain.models import LoyaltyReward, MembershipPlan, MenuItem, TruckLocation, TruckStatus
from hamshark.repos.factory import Repositories
from hamshark.services import catalog_filters
from hamshark.utils.logging import get_logger

logger = get_logger(__name__)


class CatalogService:
    """Read side of the backend: menu, truck stops, plans and rewards."""

    def __init__(self, repos: Repositories):
        self.repos = repos

    # =====================================================
    # MENU
    # =====================================================
    def list_menu(
        self,
        q: str | None = None,
        diet: str | None = None,
        goal: str | None = None,
        exclude_allergens: Sequence[str] = (),
        min_price: Decimal | None = None,
        max_price: Decimal | None = None,
        sort: str | None = None,
    ) -> List[MenuItem]:
        items = catalog_filters.search_menu_items(self.repos.menu.list_items(), q or "")
        if diet:
            items = catalog_filters.filter_by_diet(items, diet)
        if goal:
            items = catalog_filters.items_for_goal(items, goal)
        if exclude_allergens:
            items = catalog_filters.exclude_allergens(items, exclude_allergens)
        if min_price is not None or max_price is not None:
            low = min_price if min_price is not None else Decimal("0")
            high = max_price if max_price is not None else Decimal("Infinity")
            items = catalog_filters.filter_by_price_range(items, low, high)
        if sort:
            items = catalog_filters.sort_menu_items(items, sort)
        return items

    def menu_by_category(self, category: str) -> List[MenuItem]:
        return catalog_filters.filter_by_category(self.repos.menu.list_items(), category)

    def menu_by_cuisine(self, cuisine: str) -> List[MenuItem]:
        return catalog_filters.filter_by_cuisine(self.repos.menu.list_items(), cuisine)

    def get_menu_item(self, item_id: str) -> MenuItem:
        # unavailable items stay reachable by id so old carts and orders resolve
        item = self.repos.menu.get(item_id)
        if item is None:
            raise NotFoundError("Menu item", item_id)
        return item

    # =====================================================
    # TRUCKS
    # =====================================================
    def list_trucks(self) -> List[TruckLocation]:
        return self.repos.trucks.list_all()

    def get_truck(self, truck_id: str) -> TruckLocation:
        truck = self.repos.trucks.get(truck_id)
        if truck is None:
            raise NotFoundError("Truck location", truck_id)
        return truck

    def update_truck_status(self, truck_id: str, status: TruckStatus) -> TruckLocation:
        truck = self.repos.trucks.update_status(truck_id, status)
        if truck is None:
            raise NotFoundError("Truck location", truck_id)
        logger.info(f"Truck {truck_id} is now {status}")
        return truck

    # =====================================================
    # MEMBERSHIP / LOYALTY
    # =====================================================
    def list_plans(self) -> List[MembershipPlan]:
        return [p for p in self.repos.plans.list_all() if p.is_active]

    def get_plan(self, plan_id: str) -> MembershipPlan:
        plan = self.repos.plans.get(plan_id)
        if plan is None:
            raise NotFoundError("Membership plan", plan_id)
        return plan

    def list_rewards(self) -> List[LoyaltyReward]:
        return [r for r in self.repos.rewards.list_all() if r.is_active]

    def rewards_by_tier(self, tier: str) -> List[LoyaltyReward]:
        tier = tier.lower()
        return [r for r in self.list_rewards() if r.tier.lower() == tier]
