# hamshark/api/routers/membership.py
from typing import List

from fastapi import APIRouter, Depends, HTTPException

from hamshark.api.deps import get_repositories
from hamshark.domain.errors import NotFoundError
from hamshark.domain.models import MembershipPlan
from hamshark.repos.factory import Repositories
from hamshark.services.catalog_service import CatalogService

router = APIRouter(prefix="/membership-plans", tags=["membership"])


@router.get("", response_model=List[MembershipPlan])
def list_plans(repos: Repositories = Depends(get_repositories)):
    return CatalogService(repos).list_plans()


@router.get("/{plan_id}", response_model=MembershipPlan)
def get_plan(plan_id: str, repos: Repositories = Depends(get_repositories)):
    try:
        return CatalogService(repos).get_plan(plan_id)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=e.message)
