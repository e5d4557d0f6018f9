"""Main router for the directory API."""

from fastapi import APIRouter

from villageconnect.api.v1 import auth, businesses

api_router = APIRouter()

# =============================================================================
# Authentication
# =============================================================================
api_router.include_router(
    auth.router,
    prefix="/auth",
    tags=["Authentication"]
)

# =============================================================================
# Business Directory
# =============================================================================
api_router.include_router(
    businesses.router,
    tags=["Businesses"]
)
