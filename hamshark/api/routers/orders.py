# hamshark/api/routers/orders.py
from fastapi import APIRouter, Depends, HTTPException

from hamshark.api.deps import get_repositories
from hamshark.domain.errors import NotFoundError, ValidationError
from hamshark.domain.models import Order, OrderRequest
from hamshark.domain.schemas import OrderStatusIn, ReceiptShareIn, ReceiptShareOut
from hamshark.repos.factory import Repositories
from hamshark.services.order_service import OrderService

router = APIRouter(prefix="/orders", tags=["orders"])


def get_service(repos: Repositories):
    return OrderService(repos)


@router.post("", response_model=Order, status_code=201)
def create_order(payload: OrderRequest, repos: Repositories = Depends(get_repositories)):
    """
    Records a checked-out cart.
    Loyalty points are credited and the notification is sent asynchronously.
    """
    svc = get_service(repos)
    try:
        return svc.create_order(payload)
    except ValidationError as e:
        raise HTTPException(status_code=400, detail=e.message)


@router.get("/{order_id}", response_model=Order)
def get_order(order_id: str, repos: Repositories = Depends(get_repositories)):
    svc = get_service(repos)
    try:
        return svc.get_order(order_id)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=e.message)


@router.patch("/{order_id}/status", response_model=Order)
def update_order_status(
    order_id: str,
    payload: OrderStatusIn,
    repos: Repositories = Depends(get_repositories),
):
    svc = get_service(repos)
    try:
        return svc.update_status(order_id, payload.status)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=e.message)


@router.post("/{order_id}/share", response_model=ReceiptShareOut)
def share_receipt(
    order_id: str,
    payload: ReceiptShareIn,
    repos: Repositories = Depends(get_repositories),
):
    svc = get_service(repos)
    try:
        return svc.share_receipt(order_id, payload.method)
    except ValidationError as e:
        raise HTTPException(status_code=400, detail=e.message)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=e.message)
