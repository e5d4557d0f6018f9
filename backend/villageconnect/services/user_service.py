"""User service - identity records mirrored from the identity provider."""

from datetime import datetime
from typing import Optional
from sqlalchemy import select
from sqlalchemy.dialects import postgresql, sqlite
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from villageconnect.exceptions import Conflict
from villageconnect.models.user import User
from villageconnect.schemas.user import UserUpsert
from villageconnect.services.store import store_operation

# Dialects with INSERT ... ON CONFLICT support
UPSERT_INSERTS = {
    "postgresql": postgresql.insert,
    "sqlite": sqlite.insert,
}


class UserService:
    """Service for user operations."""
    
    def __init__(self, db: AsyncSession):
        self.db = db
    
    async def get(self, user_id: str) -> Optional[User]:
        """Get user by ID."""
        async with store_operation(self.db, "fetch user"):
            result = await self.db.execute(select(User).where(User.id == user_id))
            return result.scalar_one_or_none()
    
    async def upsert(self, data: UserUpsert) -> User:
        """
        Insert the user, or refresh its profile if the id already exists.

        Profile fields missing from ``data`` keep their stored value. An email
        already held by a different user id raises Conflict.
        """
        now = datetime.utcnow()
        profile = data.model_dump(exclude={"id"}, exclude_none=True)
        
        insert = UPSERT_INSERTS[self.db.get_bind().dialect.name]
        stmt = (
            insert(User)
            .values(id=data.id, created_at=now, updated_at=now, **profile)
            .on_conflict_do_update(
                index_elements=["id"],
                set_={**profile, "updated_at": now},
            )
            .returning(User)
        )
        
        async with store_operation(self.db, "save user"):
            try:
                result = await self.db.execute(
                    stmt, execution_options={"populate_existing": True}
                )
            except IntegrityError:
                # The id conflict is absorbed by the upsert; only email is left
                await self.db.rollback()
                raise Conflict(
                    "Email is already linked to another account",
                    {"id": data.id},
                )
            user = result.scalar_one()
            await self.db.commit()
        return user
