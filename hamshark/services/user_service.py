# hamshark/services/user_service.py
from uuid import uuid4

from hamshark.domain.errors import NotFoundError, ValidationError
from hamshark.domain.models import User
from hamshark.repos.ports import UserRepository
from hamshark.utils.logging import get_logger

logger = get_logger(__name__)

# (minimum balance, tier), highest first
TIERS = (
    (1000, "shark-elite"),
    (500, "gold"),
    (250, "silver"),
    (0, "bronze"),
)


def tier_for(points: int) -> str:
    for minimum, tier in TIERS:
        if points >= minimum:
            return tier
    return "bronze"


class UserService:
    def __init__(self, users: UserRepository):
        self.repo = users

    def create_user(self, username: str, email: str | None = None) -> User:
        username = username.strip()
        if not username:
            raise ValidationError("Username is required")
        if self.repo.get_by_username(username):
            raise ValidationError("Username already taken", {"username": username})

        user = self.repo.add(User(id=str(uuid4()), username=username, email=email))
        logger.info(f"User {user.id} created ({username})")
        return user

    def get_user(self, user_id: str) -> User:
        user = self.repo.get(user_id)
        if not user:
            raise NotFoundError("User", user_id)
        return user

    def add_loyalty_points(self, user_id: str, points: int) -> User | None:
        """Credit points and recompute the tier; unknown users are skipped."""
        user = self.repo.get(user_id)
        if not user:
            logger.warning(f"Loyalty accrual skipped, user {user_id} not found")
            return None

        balance = user.loyalty_points + points
        updated = self.repo.save(
            user.model_copy(update={"loyalty_points": balance, "membership_tier": tier_for(balance)})
        )
        logger.info(f"User {user_id}: +{points} points, balance {balance} ({updated.membership_tier})")
        return updated
