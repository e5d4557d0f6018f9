"""SQLAlchemy models."""

from villageconnect.models.business import Business, BusinessCategory
from villageconnect.models.user import User

__all__ = [
    "Business",
    "BusinessCategory",
    "User",
]
