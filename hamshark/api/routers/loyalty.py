# hamshark/api/routers/loyalty.py
from typing import List

from fastapi import APIRouter, Depends

from hamshark.api.deps import get_repositories
from hamshark.domain.models import LoyaltyReward
from hamshark.repos.factory import Repositories
from hamshark.services.catalog_service import CatalogService

router = APIRouter(prefix="/loyalty-rewards", tags=["loyalty"])


@router.get("", response_model=List[LoyaltyReward])
def list_rewards(repos: Repositories = Depends(get_repositories)):
    return CatalogService(repos).list_rewards()


@router.get("/tier/{tier}", response_model=List[LoyaltyReward])
def rewards_by_tier(tier: str, repos: Repositories = Depends(get_repositories)):
    return CatalogService(repos).rewards_by_tier(tier)
