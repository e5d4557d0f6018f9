"""Tests for the business record store."""

from datetime import datetime, timedelta
from decimal import Decimal

import pytest
from sqlalchemy import update

from villageconnect.models.business import Business, BusinessCategory
from villageconnect.schemas.business import BusinessUpdate
from villageconnect.services.business_service import BusinessService


class TestCreate:
    """Creating records."""

    @pytest.mark.asyncio
    async def test_server_assigned_fields(self, make_business):
        business = await make_business(
            "Village Bakery",
            "food",
            owner_id="u1",
            phone="555-0100",
            latitude=Decimal("51.5"),
            longitude=Decimal("-0.12"),
        )

        assert business.id is not None
        assert business.owner_id == "u1"
        assert business.category is BusinessCategory.FOOD
        assert business.rating == 0
        assert business.is_open is True
        assert business.created_at is not None
        assert business.updated_at is not None

    @pytest.mark.asyncio
    async def test_ids_are_not_reused(self, db, make_business):
        store = BusinessService(db)
        first = await make_business("First")
        await store.delete(first.id)

        second = await make_business("Second")

        assert second.id != first.id


class TestLists:
    """Ordering and owner filtering."""

    @pytest.mark.asyncio
    async def test_newest_first(self, db, make_business):
        for name in ("A", "B", "C"):
            await make_business(name)

        result = await BusinessService(db).get_all()

        assert [b.name for b in result] == ["C", "B", "A"]

    @pytest.mark.asyncio
    async def test_ordered_by_created_at_not_id(self, db, make_business):
        await make_business("Recent")
        old = Business(
            name="Backfilled",
            category=BusinessCategory.SHOP,
            owner_id="u1",
            created_at=datetime.utcnow() - timedelta(days=30),
        )
        db.add(old)
        await db.commit()

        result = await BusinessService(db).get_all()

        assert [b.name for b in result] == ["Recent", "Backfilled"]

    @pytest.mark.asyncio
    async def test_same_created_at_latest_insert_first(self, db, make_business):
        for name in ("A", "B", "C"):
            await make_business(name)
        await db.execute(update(Business).values(created_at=datetime(2024, 1, 1)))
        await db.commit()

        result = await BusinessService(db).get_all()

        assert [b.name for b in result] == ["C", "B", "A"]

    @pytest.mark.asyncio
    async def test_get_by_owner(self, db, make_business):
        await make_business("Mine 1", owner_id="u1")
        await make_business("Theirs", owner_id="u2")
        await make_business("Mine 2", owner_id="u1")

        result = await BusinessService(db).get_by_owner("u1")

        assert [b.name for b in result] == ["Mine 2", "Mine 1"]

    @pytest.mark.asyncio
    async def test_get_by_category(self, db, make_business):
        await make_business("Bakery", "food")
        await make_business("Pharmacy", "health")

        result = await BusinessService(db).get_by_category(BusinessCategory.HEALTH)

        assert [b.name for b in result] == ["Pharmacy"]


class TestUpdate:
    """Partial updates."""

    @pytest.mark.asyncio
    async def test_only_sent_fields_change(self, db, make_business):
        created = await make_business("Bakery", "food", description="Bread", phone="555-0100")

        updated = await BusinessService(db).update(created.id, BusinessUpdate(phone="555-0199"))

        assert updated.phone == "555-0199"
        assert updated.description == "Bread"
        assert updated.name == "Bakery"

    @pytest.mark.asyncio
    async def test_refreshes_updated_at(self, db, make_business):
        created = await make_business("Bakery", "food")
        past = datetime(2024, 1, 1)
        await db.execute(
            update(Business).where(Business.id == created.id).values(updated_at=past)
        )
        await db.commit()
        await db.refresh(created)

        updated = await BusinessService(db).update(created.id, BusinessUpdate())

        assert updated.updated_at > past
        assert updated.created_at == created.created_at

    @pytest.mark.asyncio
    async def test_clears_optional_field(self, db, make_business):
        created = await make_business("Bakery", "food", description="Bread")

        updated = await BusinessService(db).update(created.id, BusinessUpdate(description=None))

        assert updated.description is None

    @pytest.mark.asyncio
    async def test_missing_returns_none(self, db):
        assert await BusinessService(db).update(404, BusinessUpdate(name="Ghost")) is None


class TestDelete:
    """Hard deletes."""

    @pytest.mark.asyncio
    async def test_removes_row(self, db, make_business):
        store = BusinessService(db)
        created = await make_business("Bakery")

        await store.delete(created.id)

        assert await store.get_by_id(created.id) is None

    @pytest.mark.asyncio
    async def test_missing_id_is_noop(self, db, make_business):
        store = BusinessService(db)
        await make_business("Bakery")

        await store.delete(12345)

        assert len(await store.get_all()) == 1
