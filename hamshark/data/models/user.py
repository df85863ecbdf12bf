from datetime import datetime, timezone

from sqlalchemy import Column, DateTime, Integer, String

from hamshark.data.database import Base


class UserModel(Base):
    __tablename__ = "users"

    id = Column(String, primary_key=True)
    username = Column(String, nullable=False, unique=True)
    email = Column(String, nullable=True)
    loyalty_points = Column(Integer, nullable=False, default=0)
    membership_tier = Column(String, nullable=False, default="bronze")
    created_at = Column(DateTime(timezone=True), nullable=False, default=lambda: datetime.now(timezone.utc))
