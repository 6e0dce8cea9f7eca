"""
Unit tests for the in-memory coffee store
"""
import asyncio

import pytest

from coffee_api.app.core.exceptions import CoffeeValidationError, DuplicateCoffeeError
from coffee_api.app.schemas.coffee import CoffeeCreate, CoffeeRead
from coffee_api.app.services.coffee_service import InMemoryCoffeeStore, UpsertResult


@pytest.fixture
def store():
    return InMemoryCoffeeStore()


@pytest.fixture
def seeded_store():
    return InMemoryCoffeeStore(initial=[CoffeeRead(id="A", name="Cafe Cereza")])


class TestCreate:
    """Create and lookup"""

    @pytest.mark.asyncio
    async def test_blank_ids_are_generated_and_distinct(self, store):
        created = [await store.create_coffee(CoffeeCreate(id=blank, name="Cafe"))
                   for blank in [None, "", "   ", None, ""]]
        ids = [c.id for c in created]
        assert all(ids)
        assert len(set(ids)) == len(ids)

    @pytest.mark.asyncio
    async def test_create_then_get_returns_supplied_fields(self, store):
        created = await store.create_coffee(CoffeeCreate(id="X1", name="Cafe Lareno"))
        assert created == CoffeeRead(id="X1", name="Cafe Lareno")
        assert await store.get_coffee("X1") == created

    @pytest.mark.asyncio
    async def test_create_with_generated_id_is_retrievable(self, store):
        created = await store.create_coffee(CoffeeCreate(name="Cafe Ganador"))
        fetched = await store.get_coffee(created.id)
        assert fetched is not None
        assert fetched.name == "Cafe Ganador"

    @pytest.mark.asyncio
    async def test_list_keeps_insertion_order(self, store):
        for name in ["one", "two", "three"]:
            await store.create_coffee(CoffeeCreate(name=name))
        assert [c.name for c in await store.list_coffees()] == ["one", "two", "three"]

    @pytest.mark.asyncio
    async def test_duplicate_id_is_rejected(self, seeded_store):
        with pytest.raises(DuplicateCoffeeError):
            await seeded_store.create_coffee(CoffeeCreate(id="A", name="Other"))
        assert len(await seeded_store.list_coffees()) == 1

    @pytest.mark.asyncio
    async def test_blank_name_is_rejected(self, store):
        bad = CoffeeCreate.model_construct(id=None, name="  ")
        with pytest.raises(CoffeeValidationError):
            await store.create_coffee(bad)
        assert await store.count() == 0

    @pytest.mark.asyncio
    async def test_get_missing_returns_none(self, store):
        assert await store.get_coffee("nope") is None


class TestUpsert:
    """Upsert semantics"""

    @pytest.mark.asyncio
    async def test_hit_updates_in_place(self, seeded_store):
        await seeded_store.create_coffee(CoffeeCreate(id="B", name="Cafe Ganador"))
        coffee, result = await seeded_store.upsert_coffee("A", CoffeeCreate(id="A", name="Cafe Dulce"))
        assert result is UpsertResult.UPDATED
        assert result.status_code == 200
        assert coffee == CoffeeRead(id="A", name="Cafe Dulce")
        assert [c.id for c in await seeded_store.list_coffees()] == ["A", "B"]
        assert (await seeded_store.get_coffee("A")).name == "Cafe Dulce"

    @pytest.mark.asyncio
    async def test_hit_keeps_path_id(self, seeded_store):
        coffee, result = await seeded_store.upsert_coffee("A", CoffeeCreate(id="Z", name="Renamed"))
        assert result is UpsertResult.UPDATED
        assert coffee.id == "A"
        assert await seeded_store.get_coffee("Z") is None

    @pytest.mark.asyncio
    async def test_miss_behaves_like_create(self, seeded_store):
        coffee, result = await seeded_store.upsert_coffee("B", CoffeeCreate(name="Cafe Nuevo"))
        assert result is UpsertResult.CREATED
        assert result.status_code == 201
        assert coffee.id not in ("A", "B")
        assert await seeded_store.get_coffee(coffee.id) == coffee
        assert len(await seeded_store.list_coffees()) == 2

    @pytest.mark.asyncio
    async def test_miss_keeps_body_id(self, store):
        coffee, result = await store.upsert_coffee("B", CoffeeCreate(id="C", name="Cafe"))
        assert result is UpsertResult.CREATED
        assert coffee.id == "C"

    @pytest.mark.asyncio
    async def test_scan_continues_past_first_match(self):
        store = InMemoryCoffeeStore(initial=[
            CoffeeRead(id="A", name="first"),
            CoffeeRead(id="B", name="middle"),
            CoffeeRead(id="A", name="last"),
        ])
        coffee, result = await store.upsert_coffee("A", CoffeeCreate(name="updated"))
        assert result is UpsertResult.UPDATED
        assert coffee.name == "updated"
        assert [(c.id, c.name) for c in await store.list_coffees()] == [
            ("A", "updated"),
            ("B", "middle"),
            ("A", "updated"),
        ]


class TestDelete:
    """Delete semantics"""

    @pytest.mark.asyncio
    async def test_delete_present_id(self, seeded_store):
        assert await seeded_store.delete_coffee("A") == 1
        assert await seeded_store.get_coffee("A") is None
        assert await seeded_store.list_coffees() == []

    @pytest.mark.asyncio
    async def test_delete_absent_id_is_noop(self, seeded_store):
        before = await seeded_store.list_coffees()
        assert await seeded_store.delete_coffee("missing") == 0
        assert await seeded_store.list_coffees() == before

    @pytest.mark.asyncio
    async def test_delete_removes_all_colliding_records(self):
        store = InMemoryCoffeeStore(initial=[CoffeeRead(id="A", name="x"), CoffeeRead(id="A", name="y")])
        assert await store.delete_coffee("A") == 2


class TestIsolation:
    """Returned records are copies"""

    @pytest.mark.asyncio
    async def test_mutating_returned_record_does_not_touch_store(self, seeded_store):
        coffee = await seeded_store.get_coffee("A")
        coffee.name = "tampered"
        listed = await seeded_store.list_coffees()
        listed[0].name = "tampered too"
        assert (await seeded_store.get_coffee("A")).name == "Cafe Cereza"

    @pytest.mark.asyncio
    async def test_previous_result_unchanged_by_later_update(self, seeded_store):
        before = await seeded_store.get_coffee("A")
        await seeded_store.upsert_coffee("A", CoffeeCreate(name="Cafe Dulce"))
        assert before.name == "Cafe Cereza"

    @pytest.mark.asyncio
    async def test_initial_records_are_copied(self):
        seed = CoffeeRead(id="A", name="Cafe Cereza")
        store = InMemoryCoffeeStore(initial=[seed])
        seed.name = "changed"
        assert (await store.get_coffee("A")).name == "Cafe Cereza"


class TestConcurrency:
    """Concurrent access"""

    @pytest.mark.asyncio
    async def test_concurrent_creates_keep_all_records(self, store):
        results = await asyncio.gather(
            *(store.create_coffee(CoffeeCreate(name=f"Cafe {i}")) for i in range(50))
        )
        assert len({c.id for c in results}) == 50
        assert await store.count() == 50

    @pytest.mark.asyncio
    async def test_concurrent_upserts_of_same_missing_id(self, store):
        results = await asyncio.gather(
            *(store.upsert_coffee("same", CoffeeCreate(id="same", name=f"v{i}")) for i in range(10)),
            return_exceptions=True,
        )
        created = [r for r in results if not isinstance(r, Exception) and r[1] is UpsertResult.CREATED]
        assert len(created) == 1
        assert await store.count() == 1
