from sqlalchemy import JSON, Boolean, Column, Numeric, String, Text

from hamshark.data.database import Base


class MenuItemModel(Base):
    __tablename__ = "menu_items"

    id = Column(String, primary_key=True)
    name = Column(String, nullable=False)
    description = Column(Text, nullable=False, default="")
    price = Column(Numeric(10, 2), nullable=False)
    category = Column(String, nullable=False, index=True)
    cuisine = Column(String, nullable=False, index=True)
    is_vegetarian = Column(Boolean, nullable=False, default=False)
    is_vegan = Column(Boolean, nullable=False, default=False)
    spice_level = Column(String, nullable=False, default="mild")
    nutrition = Column(JSON, nullable=True)  # calories, protein, carbs, fat, fiber?, sodium?
    ingredients = Column(JSON, nullable=False, default=list)
    allergens = Column(JSON, nullable=False, default=list)
    tags = Column(JSON, nullable=False, default=list)
    image_url = Column(String, nullable=True)
    is_available = Column(Boolean, nullable=False, default=True)
