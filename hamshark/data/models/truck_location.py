from sqlalchemy import JSON, Column, DateTime, Integer, Numeric, String

from hamshark.data.database import Base


class TruckLocationModel(Base):
    __tablename__ = "truck_locations"

    id = Column(String, primary_key=True)
    name = Column(String, nullable=False)
    address = Column(String, nullable=False)
    latitude = Column(Numeric(10, 7), nullable=True)
    longitude = Column(Numeric(10, 7), nullable=True)
    schedule = Column(JSON, nullable=False, default=list)
    current_status = Column(String, nullable=False, default="closed")  # open, closed, coming
    estimated_arrival = Column(DateTime(timezone=True), nullable=True)
    orders_today = Column(Integer, nullable=False, default=0)
