"""
Unit tests for the SQLite coffee repository
"""
import sqlite3

import pytest
import pytest_asyncio

from coffee_api.app.core.db import MIGRATIONS, init_db
from coffee_api.app.core.exceptions import CoffeeStorageError, DuplicateCoffeeError
from coffee_api.app.schemas.coffee import CoffeeCreate, CoffeeRead
from coffee_api.app.services.coffee_repository import SqliteCoffeeRepository
from coffee_api.app.services.coffee_service import UpsertResult


@pytest.fixture
def db_path(tmp_path):
    return str(tmp_path / "coffee.db")


@pytest_asyncio.fixture
async def repo(db_path):
    repository = SqliteCoffeeRepository(db_path)
    await repository.open()
    return repository


class TestMigrations:
    """Schema migrations"""

    def test_init_db_applies_all_migrations(self, db_path):
        assert init_db(db_path) == MIGRATIONS[-1][0]
        conn = sqlite3.connect(db_path)
        try:
            columns = {row[1] for row in conn.execute("PRAGMA table_info(coffees)")}
        finally:
            conn.close()
        assert {"id", "name", "created_at", "updated_at"} <= columns

    def test_init_db_is_idempotent(self, db_path):
        first = init_db(db_path)
        assert init_db(db_path) == first


class TestRepository:
    """CRUD against SQLite"""

    @pytest.mark.asyncio
    async def test_create_and_get(self, repo):
        created = await repo.create_coffee(CoffeeCreate(name="Cafe Cereza"))
        assert created.id
        assert await repo.get_coffee(created.id) == created

    @pytest.mark.asyncio
    async def test_list_in_insertion_order(self, repo):
        for name in ["b", "a", "c"]:
            await repo.create_coffee(CoffeeCreate(name=name))
        assert [c.name for c in await repo.list_coffees()] == ["b", "a", "c"]

    @pytest.mark.asyncio
    async def test_get_missing_returns_none(self, repo):
        assert await repo.get_coffee("missing") is None

    @pytest.mark.asyncio
    async def test_duplicate_id_is_rejected(self, repo):
        await repo.create_coffee(CoffeeCreate(id="A", name="Cafe Cereza"))
        with pytest.raises(DuplicateCoffeeError):
            await repo.create_coffee(CoffeeCreate(id="A", name="Other"))
        assert await repo.count() == 1

    @pytest.mark.asyncio
    async def test_upsert_hit_and_miss(self, repo):
        await repo.create_coffee(CoffeeCreate(id="A", name="Cafe Cereza"))
        coffee, result = await repo.upsert_coffee("A", CoffeeCreate(id="A", name="Cafe Dulce"))
        assert result is UpsertResult.UPDATED
        assert coffee == CoffeeRead(id="A", name="Cafe Dulce")
        assert (await repo.get_coffee("A")).name == "Cafe Dulce"

        coffee, result = await repo.upsert_coffee("B", CoffeeCreate(name="Cafe Nuevo"))
        assert result is UpsertResult.CREATED
        assert coffee.id not in ("A", "B")
        assert await repo.count() == 2

    @pytest.mark.asyncio
    async def test_delete_is_idempotent(self, repo):
        await repo.create_coffee(CoffeeCreate(id="A", name="Cafe Cereza"))
        assert await repo.delete_coffee("A") == 1
        assert await repo.delete_coffee("A") == 0
        assert await repo.get_coffee("A") is None

    @pytest.mark.asyncio
    async def test_data_survives_new_repository_instance(self, repo, db_path):
        await repo.create_coffee(CoffeeCreate(id="A", name="Cafe Cereza"))
        reopened = SqliteCoffeeRepository(db_path)
        await reopened.open()
        assert await reopened.get_coffee("A") == CoffeeRead(id="A", name="Cafe Cereza")


class TestStorageErrors:
    """Storage failures are not absence"""

    @pytest.mark.asyncio
    async def test_unreachable_database_raises_storage_error(self, tmp_path):
        repo = SqliteCoffeeRepository(str(tmp_path / "missing" / "coffee.db"))
        with pytest.raises(CoffeeStorageError):
            await repo.get_coffee("A")

    @pytest.mark.asyncio
    async def test_missing_schema_raises_storage_error(self, db_path):
        repo = SqliteCoffeeRepository(db_path)
        with pytest.raises(CoffeeStorageError):
            await repo.list_coffees()

    @pytest.mark.asyncio
    async def test_open_failure_raises_storage_error(self, tmp_path):
        repo = SqliteCoffeeRepository(str(tmp_path / "missing" / "coffee.db"))
        with pytest.raises(CoffeeStorageError):
            await repo.open()
