"""Shared helpers for services that talk to the database."""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from villageconnect.exceptions import StoreFailure

logger = logging.getLogger(__name__)


@asynccontextmanager
async def store_operation(db: AsyncSession, operation: str) -> AsyncIterator[None]:
    """Roll back and raise StoreFailure when the database errors inside the block."""
    try:
        yield
    except SQLAlchemyError as exc:
        logger.exception("Database error while trying to %s", operation)
        await db.rollback()
        raise StoreFailure(operation) from exc
