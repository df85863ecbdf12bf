# hamshark/api/routers/users.py
from typing import List

from fastapi import APIRouter, Depends, HTTPException

from hamshark.api.deps import get_repositories
from hamshark.domain.errors import NotFoundError, ValidationError
from hamshark.domain.models import Order, User
from hamshark.domain.schemas import UserCreate
from hamshark.repos.factory import Repositories
from hamshark.services.order_service import OrderService
from hamshark.services.user_service import UserService

router = APIRouter(prefix="/users", tags=["users"])


@router.post("", response_model=User, status_code=201)
def create_user(payload: UserCreate, repos: Repositories = Depends(get_repositories)):
    service = UserService(repos.users)
    try:
        return service.create_user(payload.username, payload.email)
    except ValidationError as e:
        raise HTTPException(status_code=400, detail=e.message)


@router.get("/{user_id}", response_model=User)
def get_user(user_id: str, repos: Repositories = Depends(get_repositories)):
    service = UserService(repos.users)
    try:
        return service.get_user(user_id)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=e.message)


@router.get("/{user_id}/orders", response_model=List[Order])
def orders_by_user(user_id: str, repos: Repositories = Depends(get_repositories)):
    return OrderService(repos).orders_by_user(user_id)
