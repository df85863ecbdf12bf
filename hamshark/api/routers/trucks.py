# hamshark/api/routers/trucks.py
from typing import List

from fastapi import APIRouter, Depends, HTTPException

from hamshark.api.deps import get_repositories
from hamshark.domain.errors import NotFoundError
from hamshark.domain.models import TruckLocation
from hamshark.domain.schemas import TruckStatusIn
from hamshark.repos.factory import Repositories
from hamshark.services.catalog_service import CatalogService

router = APIRouter(prefix="/trucks", tags=["trucks"])


@router.get("", response_model=List[TruckLocation])
def list_trucks(repos: Repositories = Depends(get_repositories)):
    return CatalogService(repos).list_trucks()


@router.get("/{truck_id}", response_model=TruckLocation)
def get_truck(truck_id: str, repos: Repositories = Depends(get_repositories)):
    try:
        return CatalogService(repos).get_truck(truck_id)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=e.message)


@router.patch("/{truck_id}/status", response_model=TruckLocation)
def update_truck_status(
    truck_id: str,
    payload: TruckStatusIn,
    repos: Repositories = Depends(get_repositories),
):
    try:
        return CatalogService(repos).update_truck_status(truck_id, payload.status)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=e.message)
