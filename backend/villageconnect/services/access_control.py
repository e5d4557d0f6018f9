"""Ownership checks for mutating business operations."""

from typing import Optional

from villageconnect.exceptions import Forbidden, NotFound
from villageconnect.models.business import Business
from villageconnect.services.business_service import BusinessService


def ensure_owner(
    caller_id: str,
    business: Optional[Business],
    business_id: Optional[int] = None,
    action: str = "modify",
) -> Business:
    """Return ``business`` if ``caller_id`` owns it; raise NotFound or Forbidden otherwise."""
    if business is None:
        raise NotFound("Business", business_id)
    if business.owner_id != caller_id:
        raise Forbidden(
            f"Not authorized to {action} this business",
            {"id": business.id},
        )
    return business


async def load_owned_business(
    store: BusinessService,
    business_id: int,
    caller_id: str,
    action: str = "modify",
) -> Business:
    """
    Load the current row and check ownership against it.

    Always reads from the store; decisions are never cached between calls.
    """
    business = await store.get_by_id(business_id)
    return ensure_owner(caller_id, business, business_id, action)
