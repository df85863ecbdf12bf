# hamshark/repos/order_repo.py
from typing import List

from sqlalchemy import select
from sqlalchemy.orm import Session

from hamshark.data.models.order import OrderModel
from hamshark.domain.models import Order, OrderStatus


def _to_domain(row: OrderModel) -> Order:
    return Order.model_validate(row, from_attributes=True)


class OrderRepo:
    def __init__(self, db: Session):
        self.db = db

    def add(self, order: Order) -> Order:
        data = order.model_dump()
        # JSON column: Decimal prices go in as strings
        data["items"] = [i.model_dump(mode="json") for i in order.items]
        row = OrderModel(**data)
        self.db.add(row)
        self.db.commit()
        self.db.refresh(row)
        return _to_domain(row)

    def get(self, order_id: str) -> Order | None:
        row = self.db.get(OrderModel, order_id)
        return _to_domain(row) if row else None

    def list_by_user(self, user_id: str) -> List[Order]:
        rows = self.db.execute(
            select(OrderModel).where(OrderModel.user_id == user_id).order_by(OrderModel.created_at)
        ).scalars().all()
        return [_to_domain(r) for r in rows]

    def update_status(self, order_id: str, status: OrderStatus) -> Order | None:
        row = self.db.get(OrderModel, order_id)
        if not row:
            return None
        row.status = status
        self.db.commit()
        self.db.refresh(row)
        return _to_domain(row)
