"""Business logic services."""

from villageconnect.services.business_service import BusinessService
from villageconnect.services.user_service import UserService
from villageconnect.services.query_resolver import resolve_businesses
from villageconnect.services.access_control import ensure_owner, load_owned_business

__all__ = [
    "BusinessService",
    "UserService",
    "resolve_businesses",
    "ensure_owner",
    "load_owned_business",
]
