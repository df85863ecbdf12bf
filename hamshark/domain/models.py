# hamshark/domain/models.py
"""
Domain records shared by the storefront core and the backend.

All models serialize with camelCase aliases (menuItemId, isVegetarian, ...)
so the persisted cart and the REST payloads keep the storefront layout.
Money is Decimal; in JSON mode it is written as a decimal string.
"""
from datetime import datetime, timezone
from decimal import Decimal
from typing import Dict, List, Literal, Optional, Union

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    StrictBool,
    StrictFloat,
    StrictInt,
    StrictStr,
)
from pydantic.alias_generators import to_camel


# closed set of scalar kinds allowed in a line item's customization bag
CustomizationValue = Union[StrictBool, StrictInt, StrictFloat, StrictStr]
Customizations = Dict[str, CustomizationValue]

OrderStatus = Literal["pending", "confirmed", "preparing", "ready", "completed", "cancelled"]
TruckStatus = Literal["open", "closed", "coming"]
MealSize = Literal["small", "medium", "large"]


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# =====================================================
# CATALOG
# =====================================================
class Nutrition(CamelModel):
    model_config = ConfigDict(frozen=True)

    calories: float = 0
    protein: float = 0
    carbs: float = 0
    fat: float = 0
    fiber: Optional[float] = None
    sodium: Optional[float] = None


class MenuItem(CamelModel):
    """Catalog entry. Immutable once seeded."""

    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    description: str = ""
    price: Decimal
    category: str
    cuisine: str
    is_vegetarian: bool = False
    is_vegan: bool = False
    spice_level: str = "mild"
    nutrition: Optional[Nutrition] = None
    ingredients: List[str] = Field(default_factory=list)
    allergens: List[str] = Field(default_factory=list)
    tags: List[str] = Field(default_factory=list)
    image_url: Optional[str] = None
    is_available: bool = True


class NutritionTotals(CamelModel):
    calories: float = 0
    protein: float = 0
    carbs: float = 0
    fat: float = 0
    fiber: float = 0
    sodium: float = 0


# =====================================================
# COMPOSER
# =====================================================
class Ingredient(CamelModel):
    model_config = ConfigDict(frozen=True)

    name: str
    price: Decimal
    protein: float
    carbs: float
    fat: float
    calories: float


class CustomMeal(CamelModel):
    id: str
    name: str
    ingredients: List[str]
    base_price: Decimal
    nutrition: NutritionTotals
    size: MealSize = "medium"


# =====================================================
# CART
# =====================================================
class CartLineItem(CamelModel):
    """One priced, quantified cart entry; price is the unit price at add time."""

    model_config = ConfigDict(validate_assignment=True)

    id: str
    menu_item: MenuItem
    quantity: int = Field(default=1, ge=1)
    customizations: Customizations = Field(default_factory=dict)
    price: Decimal

    @property
    def line_total(self) -> Decimal:
        return self.price * self.quantity


# =====================================================
# CHECKOUT / ORDERS
# =====================================================
class SurpriseGift(CamelModel):
    model_config = ConfigDict(frozen=True)

    name: str
    threshold: Decimal
    value: Optional[Decimal] = None
    scheme: str


class CheckoutSummary(CamelModel):
    model_config = ConfigDict(frozen=True)

    subtotal: Decimal
    tax: Decimal
    delivery_fee: Decimal
    total: Decimal
    loyalty_points_earned: int
    gifts: List[SurpriseGift] = Field(default_factory=list)


class OrderItem(CamelModel):
    menu_item_id: str = Field(..., min_length=1)
    quantity: int = Field(..., ge=1)
    customizations: Customizations = Field(default_factory=dict)
    price: Decimal = Field(..., ge=0)


class OrderRequest(CamelModel):
    """Finalized submission built from a cart at checkout."""

    model_config = ConfigDict(frozen=True)

    items: List[OrderItem] = Field(..., min_length=1)
    subtotal: Decimal = Field(..., ge=0)
    tax: Decimal = Field(..., ge=0)
    total: Decimal = Field(..., ge=0)
    status: OrderStatus = "confirmed"
    truck_location: Optional[str] = None
    user_id: Optional[str] = None
    pickup_time: Optional[datetime] = None
    surprise_gifts: List[str] = Field(default_factory=list)


class Order(CamelModel):
    """Order as held by the ledger; only status changes after creation."""

    id: str
    items: List[OrderItem]
    subtotal: Decimal
    tax: Decimal
    total: Decimal
    status: OrderStatus = "pending"
    truck_location: Optional[str] = None
    user_id: Optional[str] = None
    pickup_time: Optional[datetime] = None
    loyalty_points_earned: int = 0
    surprise_gifts: List[str] = Field(default_factory=list)
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))


# =====================================================
# BACKEND SAMPLE DATA
# =====================================================
class ScheduleSlot(CamelModel):
    day: str
    start_time: str
    end_time: str
    is_open: bool = True


class TruckLocation(CamelModel):
    id: str
    name: str
    address: str
    latitude: Optional[Decimal] = None
    longitude: Optional[Decimal] = None
    schedule: List[ScheduleSlot] = Field(default_factory=list)
    current_status: TruckStatus = "closed"
    estimated_arrival: Optional[datetime] = None
    orders_today: int = 0


class LoyaltyReward(CamelModel):
    id: str
    name: str
    description: str
    points_cost: int
    category: str
    tier: str
    is_active: bool = True


class MembershipPlan(CamelModel):
    id: str
    name: str
    description: str
    price: Decimal
    duration: int  # days
    features: List[str] = Field(default_factory=list)
    target_audience: Optional[str] = None
    is_active: bool = True


class User(CamelModel):
    id: str
    username: str
    email: Optional[str] = None
    loyalty_points: int = 0
    membership_tier: str = "bronze"
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
