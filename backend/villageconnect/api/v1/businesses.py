"""Business directory endpoints."""

from typing import List, Optional
from fastapi import APIRouter, Depends, Query, status

from villageconnect.api.deps import get_current_user, get_business_service
from villageconnect.config import get_settings
from villageconnect.exceptions import NotFound
from villageconnect.models.user import User
from villageconnect.schemas.business import (
    BusinessCreate,
    BusinessUpdate,
    BusinessResponse,
)
from villageconnect.services.access_control import load_owned_business
from villageconnect.services.business_service import BusinessService
from villageconnect.services.query_resolver import resolve_businesses

settings = get_settings()
router = APIRouter()


# =============================================================================
# Public Reads
# =============================================================================

@router.get("/businesses", response_model=List[BusinessResponse])
async def list_businesses(
    category: Optional[str] = Query(None, description='Category filter; "all" means no filter'),
    search: Optional[str] = Query(None, description="Case-insensitive text search"),
    store: BusinessService = Depends(get_business_service),
):
    """List businesses, newest first, optionally filtered."""
    return await resolve_businesses(
        store,
        category=category,
        search=search,
        search_within_category=settings.SEARCH_WITHIN_CATEGORY,
    )


@router.get("/businesses/{business_id}", response_model=BusinessResponse)
async def get_business(
    business_id: int,
    store: BusinessService = Depends(get_business_service),
):
    """Get a single business."""
    business = await store.get_by_id(business_id)
    if not business:
        raise NotFound("Business", business_id)
    return business


# =============================================================================
# Owner Operations
# =============================================================================

@router.post("/businesses", response_model=BusinessResponse, status_code=status.HTTP_201_CREATED)
async def create_business(
    data: BusinessCreate,
    user: User = Depends(get_current_user),
    store: BusinessService = Depends(get_business_service),
):
    """Register a business owned by the caller."""
    return await store.create(data, owner_id=user.id)


@router.get("/my-businesses", response_model=List[BusinessResponse])
async def list_my_businesses(
    user: User = Depends(get_current_user),
    store: BusinessService = Depends(get_business_service),
):
    """List the caller's own businesses."""
    return await store.get_by_owner(user.id)


@router.put("/businesses/{business_id}", response_model=BusinessResponse)
async def update_business(
    business_id: int,
    data: BusinessUpdate,
    user: User = Depends(get_current_user),
    store: BusinessService = Depends(get_business_service),
):
    """Partially update a business. Owner only."""
    await load_owned_business(store, business_id, user.id, action="update")
    
    updated = await store.update(business_id, data)
    if not updated:
        raise NotFound("Business", business_id)
    
    return updated


@router.delete("/businesses/{business_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_business(
    business_id: int,
    user: User = Depends(get_current_user),
    store: BusinessService = Depends(get_business_service),
):
    """Delete a business. Owner only."""
    await load_owned_business(store, business_id, user.id, action="delete")
    await store.delete(business_id)
