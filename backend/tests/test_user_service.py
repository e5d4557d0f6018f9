"""Tests for user upserts."""

import pytest
from sqlalchemy import func, select

from villageconnect.exceptions import Conflict
from villageconnect.models.user import User
from villageconnect.schemas.user import UserUpsert
from villageconnect.services.user_service import UserService


class TestUpsert:
    """Insert-or-update keyed on the user id."""

    @pytest.mark.asyncio
    async def test_inserts_new_user(self, db):
        user = await UserService(db).upsert(
            UserUpsert(id="u1", email="ada@example.com", first_name="Ada")
        )

        assert user.id == "u1"
        assert user.email == "ada@example.com"
        assert user.first_name == "Ada"
        assert user.created_at is not None

    @pytest.mark.asyncio
    async def test_repeated_upsert_keeps_one_row(self, db):
        service = UserService(db)
        await service.upsert(UserUpsert(id="u1", email="ada@example.com"))
        await service.upsert(UserUpsert(id="u1", email="ada@example.com"))

        count = (await db.execute(select(func.count(User.id)))).scalar()

        assert count == 1

    @pytest.mark.asyncio
    async def test_updates_profile_on_conflict(self, db):
        service = UserService(db)
        first = await service.upsert(UserUpsert(id="u1", email="ada@example.com", last_name="Byron"))
        created_at = first.created_at

        user = await service.upsert(UserUpsert(id="u1", last_name="Lovelace"))

        assert user.last_name == "Lovelace"
        # Claims missing from the second call keep their stored value
        assert user.email == "ada@example.com"
        assert user.created_at == created_at
        assert user.updated_at >= created_at

    @pytest.mark.asyncio
    async def test_get(self, db):
        service = UserService(db)
        await service.upsert(UserUpsert(id="u1"))

        assert (await service.get("u1")).id == "u1"
        assert await service.get("nobody") is None

    @pytest.mark.asyncio
    async def test_email_taken_by_other_user_conflicts(self, db):
        service = UserService(db)
        await service.upsert(UserUpsert(id="u1", email="ada@example.com"))

        with pytest.raises(Conflict) as exc_info:
            await service.upsert(UserUpsert(id="u2", email="ada@example.com"))

        assert exc_info.value.status_code == 409
        # The session is still usable and the first user is untouched
        assert (await service.get("u1")).email == "ada@example.com"
        assert await service.get("u2") is None
