# hamshark/domain/schemas.py
"""Request/response bodies of the REST API that are not domain records."""
from pydantic import Field

from hamshark.domain.models import CamelModel, OrderStatus, TruckStatus


class OrderStatusIn(CamelModel):
    """Body of PATCH /orders/{id}/status."""

    status: OrderStatus = Field(..., description="pending, confirmed, preparing, ready, completed or cancelled")


class TruckStatusIn(CamelModel):
    status: TruckStatus = Field(..., description="open, closed or coming")


class ReceiptShareIn(CamelModel):
    method: str = Field(..., min_length=1, description="whatsapp or email")


class ReceiptShareOut(CamelModel):
    success: bool
    message: str
    share_url: str


class MealLogIn(CamelModel):
    order_id: str = Field(..., min_length=1)
    meal_type: str = Field("lunch", description="breakfast, lunch, dinner or snack")


class MealLogOut(CamelModel):
    success: bool
    message: str
    meal_type: str
    total_calories: float


class UserCreate(CamelModel):
    """Schema for creating a user."""

    username: str = Field(..., min_length=1, max_length=100, description="Unique user name")
    email: str | None = Field(None, max_length=255)


class HealthOut(CamelModel):
    status: str
    repository_backend: str
