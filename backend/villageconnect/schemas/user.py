"""User-related Pydantic schemas."""

from datetime import datetime
from typing import Optional

from villageconnect.schemas.business import CamelModel


class UserUpsert(CamelModel):
    """Profile data taken from identity-provider claims."""
    
    id: str
    email: Optional[str] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    profile_image_url: Optional[str] = None


class UserResponse(CamelModel):
    """Schema for user response."""
    
    id: str
    email: Optional[str]
    first_name: Optional[str]
    last_name: Optional[str]
    profile_image_url: Optional[str]
    created_at: datetime
    updated_at: datetime
