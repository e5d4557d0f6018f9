"""Authentication endpoints."""

from fastapi import APIRouter, Depends

from villageconnect.api.deps import get_current_user
from villageconnect.models.user import User
from villageconnect.schemas.user import UserResponse

router = APIRouter()


@router.get("/user", response_model=UserResponse)
async def get_auth_user(
    user: User = Depends(get_current_user),
):
    """Get the caller's profile as known from their identity token."""
    return user
