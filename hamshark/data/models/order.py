from datetime import datetime, timezone

from sqlalchemy import JSON, Column, DateTime, Integer, Numeric, String

from hamshark.data.database import Base


class OrderModel(Base):
    __tablename__ = "orders"

    id = Column(String, primary_key=True)
    user_id = Column(String, nullable=True, index=True)

    items = Column(JSON, nullable=False)  # [{menuItemId, quantity, customizations, price}]
    subtotal = Column(Numeric(10, 2), nullable=False)
    tax = Column(Numeric(10, 2), nullable=False)
    total = Column(Numeric(10, 2), nullable=False)

    status = Column(String, nullable=False, default="pending")  # pending, confirmed, preparing, ready, completed, cancelled
    truck_location = Column(String, nullable=True)
    pickup_time = Column(DateTime(timezone=True), nullable=True)
    loyalty_points_earned = Column(Integer, nullable=False, default=0)
    surprise_gifts = Column(JSON, nullable=False, default=list)
    created_at = Column(DateTime(timezone=True), nullable=False, default=lambda: datetime.now(timezone.utc))
