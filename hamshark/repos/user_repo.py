# hamshark/repos/user_repo.py
from sqlalchemy import select
from sqlalchemy.orm import Session

from hamshark.data.models.user import UserModel
from hamshark.domain.models import User


def _to_domain(row: UserModel) -> User:
    return User.model_validate(row, from_attributes=True)


class UserRepo:
    def __init__(self, db: Session):
        self.db = db

    def get(self, user_id: str) -> User | None:
        row = self.db.get(UserModel, user_id)
        return _to_domain(row) if row else None

    def get_by_username(self, username: str) -> User | None:
        row = self.db.execute(select(UserModel).where(UserModel.username == username)).scalar_one_or_none()
        return _to_domain(row) if row else None

    def add(self, user: User) -> User:
        row = UserModel(**user.model_dump())
        self.db.add(row)
        self.db.commit()
        self.db.refresh(row)
        return _to_domain(row)

    def save(self, user: User) -> User:
        row = self.db.get(UserModel, user.id)
        row.loyalty_points = user.loyalty_points
        row.membership_tier = user.membership_tier
        row.email = user.email
        self.db.commit()
        self.db.refresh(row)
        return _to_domain(row)
