"""Business-related Pydantic schemas."""

from datetime import datetime
from decimal import Decimal
from typing import Optional
from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from villageconnect.models.business import BusinessCategory


class CamelModel(BaseModel):
    """Base schema speaking camelCase on the wire, snake_case in Python."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class BusinessCreate(CamelModel):
    """
    Schema for registering a business.

    Server-assigned fields (id, ownerId, rating, isOpen, timestamps) are not
    part of the schema; unknown keys in the payload are dropped.
    """
    
    name: str = Field(..., max_length=255)
    category: BusinessCategory
    description: Optional[str] = None
    phone: Optional[str] = Field(None, max_length=20)
    address: Optional[str] = None
    latitude: Optional[Decimal] = Field(None, ge=-90, le=90)
    longitude: Optional[Decimal] = Field(None, ge=-180, le=180)
    
    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        """Reject blank names."""
        v = v.strip()
        if not v:
            raise ValueError("Business name is required")
        return v


class BusinessUpdate(CamelModel):
    """Schema for a partial business update. Only keys sent are applied."""
    
    name: Optional[str] = Field(None, max_length=255)
    category: Optional[BusinessCategory] = None
    description: Optional[str] = None
    phone: Optional[str] = Field(None, max_length=20)
    address: Optional[str] = None
    latitude: Optional[Decimal] = Field(None, ge=-90, le=90)
    longitude: Optional[Decimal] = Field(None, ge=-180, le=180)
    
    @field_validator("name")
    @classmethod
    def validate_name(cls, v: Optional[str]) -> str:
        if v is None:
            raise ValueError("Business name may not be null")
        v = v.strip()
        if not v:
            raise ValueError("Business name is required")
        return v
    
    @field_validator("category")
    @classmethod
    def validate_category(cls, v: Optional[BusinessCategory]) -> BusinessCategory:
        if v is None:
            raise ValueError("Category may not be null")
        return v


class BusinessResponse(CamelModel):
    """Schema for business response."""
    
    id: int
    name: str
    category: BusinessCategory
    description: Optional[str]
    phone: Optional[str]
    address: Optional[str]
    latitude: Optional[float]
    longitude: Optional[float]
    rating: float
    is_open: bool
    owner_id: str
    created_at: datetime
    updated_at: datetime
