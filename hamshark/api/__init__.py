# hamshark/api/__init__.py
from fastapi import APIRouter

from hamshark.api.routers import healthifyme, loyalty, membership, menu, orders, trucks, users

api_router = APIRouter(prefix="/api")
api_router.include_router(menu.router)
api_router.include_router(orders.router)
api_router.include_router(healthifyme.router)
api_router.include_router(trucks.router)
api_router.include_router(membership.router)
api_router.include_router(loyalty.router)
api_router.include_router(users.router)
