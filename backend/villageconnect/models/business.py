"""Business (directory listing) model."""

from datetime import datetime
from enum import Enum as PyEnum
from sqlalchemy import Column, Integer, String, Boolean, DateTime, Numeric, Text, ForeignKey, Enum, Index
from sqlalchemy.orm import relationship
from villageconnect.database import Base


class BusinessCategory(str, PyEnum):
    """Closed set of listing categories, stored as their literal values."""
    SHOP = "shop"
    SERVICE = "service"
    FOOD = "food"
    HEALTH = "health"
    OTHER = "other"


class Business(Base):
    """Business entity - a listing owned by exactly one user."""
    
    __tablename__ = "businesses"
    
    id = Column(Integer, primary_key=True, autoincrement=True)
    
    # Basic Info
    name = Column(String(255), nullable=False)
    category = Column(
        Enum(
            BusinessCategory,
            name="business_category",
            native_enum=False,
            length=100,
            values_callable=lambda enum: [member.value for member in enum],
        ),
        nullable=False,
    )
    description = Column(Text)
    phone = Column(String(20))
    
    # Location
    address = Column(Text)
    latitude = Column(Numeric(10, 8))
    longitude = Column(Numeric(11, 8))
    
    # Server-owned state
    rating = Column(Numeric(3, 2), default=0, nullable=False)
    is_open = Column(Boolean, default=True, nullable=False)
    
    # Ownership never changes after creation
    owner_id = Column(String, ForeignKey("users.id"), nullable=False)
    
    # Timestamps
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False)
    
    # Relationships
    owner = relationship("User", back_populates="businesses")
    
    __table_args__ = (
        Index("ix_businesses_owner_id", "owner_id"),
        Index("ix_businesses_category", "category"),
        Index("ix_businesses_created_at", "created_at"),
        # Never hand out the id of a deleted row again
        {"sqlite_autoincrement": True},
    )
    
    def __repr__(self):
        return f"<Business {self.id} {self.name}>"
