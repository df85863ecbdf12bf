# hamshark/api/routers/health.py
from fastapi import APIRouter

from hamshark.domain.schemas import HealthOut
from hamshark.utils.settings import REPOSITORY_BACKEND

router = APIRouter(tags=["health"])


@router.get("/health", response_model=HealthOut)
def health():
    return HealthOut(status="ok", repository_backend=REPOSITORY_BACKEND)
