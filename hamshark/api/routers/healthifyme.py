# hamshark/api/routers/healthifyme.py
from fastapi import APIRouter, Depends, HTTPException

from hamshark.api.deps import get_repositories
from hamshark.domain.errors import NotFoundError, ValidationError
from hamshark.domain.schemas import MealLogIn, MealLogOut
from hamshark.repos.factory import Repositories
from hamshark.services.order_service import OrderService

router = APIRouter(prefix="/healthifyme", tags=["integrations"])


@router.post("/log-meal", response_model=MealLogOut)
def log_meal(payload: MealLogIn, repos: Repositories = Depends(get_repositories)):
    """Mock of the HealthifyMe meal log: reports the calories of an order."""
    svc = OrderService(repos)
    try:
        return svc.log_meal(payload.order_id, payload.meal_type)
    except ValidationError as e:
        raise HTTPException(status_code=400, detail=e.message)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=e.message)
