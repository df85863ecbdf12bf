from sqlalchemy import Boolean, Column, Integer, String

from hamshark.data.database import Base


class LoyaltyRewardModel(Base):
    __tablename__ = "loyalty_rewards"

    id = Column(String, primary_key=True)
    name = Column(String, nullable=False)
    description = Column(String, nullable=False)
    points_cost = Column(Integer, nullable=False)
    category = Column(String, nullable=False)
    tier = Column(String, nullable=False, index=True)
    is_active = Column(Boolean, nullable=False, default=True)
