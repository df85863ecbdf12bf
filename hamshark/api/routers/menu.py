# hamshark/api/routers/menu.py
from decimal import Decimal
from typing import List

from fastapi import APIRouter, Depends, HTTPException, Query

from hamshark.api.deps import get_repositories
from hamshark.domain.errors import NotFoundError
from hamshark.domain.models import MenuItem
from hamshark.repos.factory import Repositories
from hamshark.services.catalog_service import CatalogService

router = APIRouter(prefix="/menu", tags=["menu"])


def get_service(repos: Repositories):
    return CatalogService(repos)


@router.get("", response_model=List[MenuItem])
def list_menu(
    q: str | None = Query(None, description="Search in name, description, ingredients and tags"),
    diet: str | None = Query(None, description="vegetarian, vegan, high-protein, low-carb or a tag"),
    goal: str | None = Query(None, description="weight-loss, muscle-gain or heart-healthy"),
    exclude_allergens: List[str] = Query([]),
    min_price: Decimal | None = Query(None, ge=0),
    max_price: Decimal | None = Query(None, ge=0),
    sort: str | None = Query(None, description="e.g. price-low-high, calories-high-low, name-a-z"),
    repos: Repositories = Depends(get_repositories),
):
    """Available menu items, optionally narrowed and sorted."""
    return get_service(repos).list_menu(
        q=q,
        diet=diet,
        goal=goal,
        exclude_allergens=exclude_allergens,
        min_price=min_price,
        max_price=max_price,
        sort=sort,
    )


@router.get("/category/{category}", response_model=List[MenuItem])
def menu_by_category(category: str, repos: Repositories = Depends(get_repositories)):
    return get_service(repos).menu_by_category(category)


@router.get("/cuisine/{cuisine}", response_model=List[MenuItem])
def menu_by_cuisine(cuisine: str, repos: Repositories = Depends(get_repositories)):
    return get_service(repos).menu_by_cuisine(cuisine)


@router.get("/{item_id}", response_model=MenuItem)
def get_menu_item(item_id: str, repos: Repositories = Depends(get_repositories)):
    try:
        return get_service(repos).get_menu_item(item_id)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=e.message)
