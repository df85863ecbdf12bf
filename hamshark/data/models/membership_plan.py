from sqlalchemy import JSON, Boolean, Column, Integer, Numeric, String

from hamshark.data.database import Base


class MembershipPlanModel(Base):
    __tablename__ = "membership_plans"

    id = Column(String, primary_key=True)
    name = Column(String, nullable=False)
    description = Column(String, nullable=False)
    price = Column(Numeric(10, 2), nullable=False)
    duration = Column(Integer, nullable=False)  # days
    features = Column(JSON, nullable=False, default=list)
    target_audience = Column(String, nullable=True)
    is_active = Column(Boolean, nullable=False, default=True)
