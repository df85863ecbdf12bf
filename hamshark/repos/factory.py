# hamshark/repos/factory.py
"""
Repository selection.

REPOSITORY_BACKEND:
    memory - process-wide dict repositories seeded with the demo data (default)
    sql    - SQLAlchemy repositories bound to the request's Session
"""
from dataclasses import dataclass

from sqlalchemy.orm import Session

from hamshark.data import sample_data
from hamshark.repos.in_memory import (
    InMemoryMenuRepository,
    InMemoryOrderRepository,
    InMemoryPlanRepository,
    InMemoryRewardRepository,
    InMemoryTruckRepository,
    InMemoryUserRepository,
)
from hamshark.repos.loyalty_repo import PlanRepo, RewardRepo
from hamshark.repos.menu_repo import MenuRepo
from hamshark.repos.order_repo import OrderRepo
from hamshark.repos.ports import (
    MenuRepository,
    OrderRepository,
    PlanRepository,
    RewardRepository,
    TruckRepository,
    UserRepository,
)
from hamshark.repos.truck_repo import TruckRepo
from hamshark.repos.user_repo import UserRepo
from hamshark.utils.logging import get_logger
from hamshark.utils.settings import REPOSITORY_BACKEND

logger = get_logger(__name__)


@dataclass
class Repositories:
    menu: MenuRepository
    orders: OrderRepository
    trucks: TruckRepository
    rewards: RewardRepository
    plans: PlanRepository
    users: UserRepository


def seed(repos: Repositories) -> None:
    for item in sample_data.menu_items():
        repos.menu.add(item)
    for truck in sample_data.truck_locations():
        repos.trucks.add(truck)
    for plan in sample_data.membership_plans():
        repos.plans.add(plan)
    for reward in sample_data.loyalty_rewards():
        repos.rewards.add(reward)


def create_memory_repositories(seeded: bool = True) -> Repositories:
    repos = Repositories(
        menu=InMemoryMenuRepository(),
        orders=InMemoryOrderRepository(),
        trucks=InMemoryTruckRepository(),
        rewards=InMemoryRewardRepository(),
        plans=InMemoryPlanRepository(),
        users=InMemoryUserRepository(),
    )
    if seeded:
        seed(repos)
    return repos


def create_sql_repositories(db: Session) -> Repositories:
    return Repositories(
        menu=MenuRepo(db),
        orders=OrderRepo(db),
        trucks=TruckRepo(db),
        rewards=RewardRepo(db),
        plans=PlanRepo(db),
        users=UserRepo(db),
    )


_memory: Repositories | None = None


def get_memory_repositories() -> Repositories:
    global _memory
    if _memory is None:
        _memory = create_memory_repositories()
        logger.info("In-memory repositories created and seeded")
    return _memory


def reset_memory_repositories() -> None:
    """Drop the process-wide in-memory state; the next call re-seeds."""
    global _memory
    _memory = None


def create_repositories(db: Session | None = None, backend: str | None = None) -> Repositories:
    backend = (backend or REPOSITORY_BACKEND).lower()
    if backend == "memory":
        return get_memory_repositories()
    if backend == "sql":
        if db is None:
            raise ValueError("REPOSITORY_BACKEND=sql needs a database session")
        return create_sql_repositories(db)
    raise ValueError(f"Unknown REPOSITORY_BACKEND: {backend}")
