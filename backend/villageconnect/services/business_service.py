"""Business service - the record store for directory listings."""

import logging
from datetime import datetime
from typing import List, Optional
from sqlalchemy import select, delete, or_, cast, String
from sqlalchemy.ext.asyncio import AsyncSession

from villageconnect.models.business import Business, BusinessCategory
from villageconnect.schemas.business import BusinessCreate, BusinessUpdate
from villageconnect.services.store import store_operation

logger = logging.getLogger(__name__)

LIKE_ESCAPE = "\\"


def contains_pattern(text: str) -> str:
    """Build a LIKE pattern matching ``text`` anywhere, wildcards taken literally."""
    escaped = (
        text.replace(LIKE_ESCAPE, LIKE_ESCAPE * 2)
        .replace("%", LIKE_ESCAPE + "%")
        .replace("_", LIKE_ESCAPE + "_")
    )
    return f"%{escaped}%"


class BusinessService:
    """
    Service for business records.

    Performs no ownership checks: callers gate update and delete through
    ``access_control`` first. Every list comes back newest first.
    """
    
    def __init__(self, db: AsyncSession):
        self.db = db
    
    def _ordered(self, query):
        return query.order_by(Business.created_at.desc(), Business.id.desc())
    
    async def _list(self, query, operation: str) -> List[Business]:
        async with store_operation(self.db, operation):
            result = await self.db.execute(self._ordered(query))
            return list(result.scalars().all())
    
    async def create(self, data: BusinessCreate, owner_id: str) -> Business:
        """Create a business owned by ``owner_id``."""
        business = Business(owner_id=owner_id, **data.model_dump())
        async with store_operation(self.db, "create business"):
            self.db.add(business)
            await self.db.commit()
            await self.db.refresh(business)
        logger.info("Created business %s for owner %s", business.id, owner_id)
        return business
    
    async def get_by_id(self, business_id: int) -> Optional[Business]:
        """Get business by ID."""
        async with store_operation(self.db, "fetch business"):
            result = await self.db.execute(
                select(Business).where(Business.id == business_id)
            )
            return result.scalar_one_or_none()
    
    async def get_by_owner(self, owner_id: str) -> List[Business]:
        """List the businesses owned by a user."""
        return await self._list(
            select(Business).where(Business.owner_id == owner_id),
            "fetch your businesses",
        )
    
    async def get_all(self) -> List[Business]:
        """List every business."""
        return await self._list(select(Business), "fetch businesses")
    
    async def search(
        self,
        text: str,
        category: Optional[BusinessCategory] = None,
    ) -> List[Business]:
        """
        Case-insensitive substring search over name, description and category.

        When ``category`` is given the matches are further restricted to it.
        """
        pattern = contains_pattern(text)
        query = select(Business).where(
            or_(
                Business.name.ilike(pattern, escape=LIKE_ESCAPE),
                Business.description.ilike(pattern, escape=LIKE_ESCAPE),
                cast(Business.category, String).ilike(pattern, escape=LIKE_ESCAPE),
            )
        )
        if category is not None:
            query = query.where(Business.category == category)
        return await self._list(query, "search businesses")
    
    async def get_by_category(self, category: BusinessCategory) -> List[Business]:
        """List businesses in exactly one category."""
        return await self._list(
            select(Business).where(Business.category == category),
            "fetch businesses",
        )
    
    async def update(self, business_id: int, data: BusinessUpdate) -> Optional[Business]:
        """Apply the fields set on ``data``; always refreshes updated_at."""
        business = await self.get_by_id(business_id)
        if not business:
            return None
        
        update_data = data.model_dump(exclude_unset=True)
        async with store_operation(self.db, "update business"):
            for field, value in update_data.items():
                setattr(business, field, value)
            business.updated_at = datetime.utcnow()
            await self.db.commit()
            await self.db.refresh(business)
        logger.info("Updated business %s fields=%s", business_id, sorted(update_data))
        return business
    
    async def delete(self, business_id: int) -> None:
        """Hard-delete a business. Deleting a missing id is a no-op."""
        async with store_operation(self.db, "delete business"):
            await self.db.execute(delete(Business).where(Business.id == business_id))
            await self.db.commit()
        logger.info("Deleted business %s", business_id)
