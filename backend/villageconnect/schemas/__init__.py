"""Pydantic schemas for API request/response validation."""

from villageconnect.schemas.business import (
    BusinessCreate,
    BusinessUpdate,
    BusinessResponse,
)
from villageconnect.schemas.user import (
    UserUpsert,
    UserResponse,
)

__all__ = [
    # Business
    "BusinessCreate",
    "BusinessUpdate",
    "BusinessResponse",
    # User
    "UserUpsert",
    "UserResponse",
]
