# hamshark/repos/menu_repo.py
from typing import List

from sqlalchemy import select
from sqlalchemy.orm import Session

from hamshark.data.models.menu_item import MenuItemModel
from hamshark.domain.models import MenuItem


def _to_domain(row: MenuItemModel) -> MenuItem:
    return MenuItem.model_validate(row, from_attributes=True)


class MenuRepo:
    def __init__(self, db: Session):
        self.db = db

    def list_items(self) -> List[MenuItem]:
        rows = self.db.execute(select(MenuItemModel).order_by(MenuItemModel.id)).scalars().all()
        return [_to_domain(r) for r in rows]

    def get(self, item_id: str) -> MenuItem | None:
        row = self.db.get(MenuItemModel, item_id)
        return _to_domain(row) if row else None

    def add(self, item: MenuItem) -> MenuItem:
        row = MenuItemModel(**item.model_dump())
        self.db.add(row)
        self.db.commit()
        self.db.refresh(row)
        return _to_domain(row)
