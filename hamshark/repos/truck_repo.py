# hamshark/repos/truck_repo.py
from typing import List

from sqlalchemy import select
from sqlalchemy.orm import Session

from hamshark.data.models.truck_location import TruckLocationModel
from hamshark.domain.models import TruckLocation, TruckStatus


def _to_domain(row: TruckLocationModel) -> TruckLocation:
    return TruckLocation.model_validate(row, from_attributes=True)


class TruckRepo:
    def __init__(self, db: Session):
        self.db = db

    def list_all(self) -> List[TruckLocation]:
        rows = self.db.execute(select(TruckLocationModel).order_by(TruckLocationModel.id)).scalars().all()
        return [_to_domain(r) for r in rows]

    def get(self, truck_id: str) -> TruckLocation | None:
        row = self.db.get(TruckLocationModel, truck_id)
        return _to_domain(row) if row else None

    def add(self, truck: TruckLocation) -> TruckLocation:
        data = truck.model_dump()
        data["schedule"] = [s.model_dump(mode="json") for s in truck.schedule]
        row = TruckLocationModel(**data)
        self.db.add(row)
        self.db.commit()
        self.db.refresh(row)
        return _to_domain(row)

    def update_status(self, truck_id: str, status: TruckStatus) -> TruckLocation | None:
        row = self.db.get(TruckLocationModel, truck_id)
        if not row:
            return None
        row.current_status = status
        self.db.commit()
        self.db.refresh(row)
        return _to_domain(row)
