"""
Pokedex Backend - Pokemon API Tests
====================================

What:  End-to-end tests of the /pokemon endpoints.
How:   HTTPX AsyncClient → FastAPI app → real repository → in-memory SQLite.

What we test:
    ✅ Create → 201 with the entity; lookup → 200; unknown name → 404 with null data
    ✅ Page-based listing with clamped limit/page
    ✅ Count and delete-all (including repeated delete)
    ✅ Write failures → 500 with a generic message
    ✅ Writes are committed before the response starts
"""

import asyncio
import json

import pytest
from sqlalchemy import func, select
from sqlalchemy.exc import OperationalError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from app.database import Base, get_db_session
from app.models.pokemon import Pokemon
from app.repositories.pokemon_repository import PokemonRepository, get_pokemon_repository


class TestCreateAndLookup:

    @pytest.mark.asyncio
    async def test_create_then_get(self, test_client, sample_pokemon_data):
        response = await test_client.post("/pokemon", json=sample_pokemon_data)

        assert response.status_code == 201
        body = response.json()
        assert body["data"]["name"] == "Pikachu"
        assert body["data"]["type"] == "Electric"
        assert isinstance(body["data"]["id"], int)

        response = await test_client.get("/pokemon/Pikachu")

        assert response.status_code == 200
        assert response.json()["data"]["name"] == "Pikachu"

    @pytest.mark.asyncio
    async def test_get_unknown_name_on_empty_store(self, test_client):
        response = await test_client.get("/pokemon/Nonexistent")

        assert response.status_code == 404
        assert response.json()["data"] is None

    @pytest.mark.asyncio
    async def test_duplicate_names_are_accepted(self, test_client):
        first = await test_client.post("/pokemon", json={"name": "Eevee", "type": "Normal"})
        second = await test_client.post("/pokemon", json={"name": "Eevee", "type": "Normal"})

        assert first.status_code == 201
        assert second.status_code == 201
        assert (await test_client.get("/pokemon/count")).json() == {"total": 2}

    @pytest.mark.asyncio
    async def test_create_missing_field_is_rejected(self, test_client):
        response = await test_client.post("/pokemon", json={"name": "Mew"})

        assert response.status_code == 422

    @pytest.mark.asyncio
    async def test_response_carries_request_id(self, test_client):
        response = await test_client.get("/pokemon", headers={"X-Request-ID": "abc12345"})

        assert response.headers["X-Request-ID"] == "abc12345"


class TestList:

    @pytest.mark.asyncio
    async def test_second_page_of_five(self, test_client, seed_pokemon):
        await seed_pokemon(12)

        response = await test_client.get("/pokemon", params={"limit": 5, "page": 2})

        assert response.status_code == 200
        data = response.json()["data"]
        assert [item["name"] for item in data["items"]] == [
            f"Pokemon-{i}" for i in range(6, 11)
        ]
        assert data["total"] == 12
        assert data["limit"] == 5
        assert data["page"] == 2

    @pytest.mark.asyncio
    async def test_defaults_on_empty_store(self, test_client):
        response = await test_client.get("/pokemon")

        assert response.status_code == 200
        assert response.json() == {"data": {"items": [], "total": 0, "limit": 50, "page": 1}}

    @pytest.mark.asyncio
    async def test_limit_above_max_and_page_below_one_are_clamped(self, test_client, seed_pokemon):
        await seed_pokemon(3)

        response = await test_client.get("/pokemon", params={"limit": 1000, "page": 0})

        data = response.json()["data"]
        assert data["limit"] == 100
        assert data["page"] == 1
        assert len(data["items"]) == 3

    @pytest.mark.asyncio
    async def test_malformed_values_fall_back_to_defaults(self, test_client):
        response = await test_client.get("/pokemon", params={"limit": "lots", "page": "first"})

        assert response.status_code == 200
        data = response.json()["data"]
        assert data["limit"] == 50
        assert data["page"] == 1


    @pytest.mark.asyncio
    async def test_page_past_64_bit_offset_returns_empty_items(self, test_client, seed_pokemon):
        await seed_pokemon(3)

        response = await test_client.get("/pokemon", params={"page": "99999999999999999999"})

        assert response.status_code == 200
        data = response.json()["data"]
        assert data["items"] == []
        assert data["total"] == 3
        assert data["page"] == 99999999999999999999

    @pytest.mark.asyncio
    async def test_negative_limit_uses_default(self, test_client):
        response = await test_client.get("/pokemon", params={"limit": -5})

        assert response.json()["data"]["limit"] == 50

    @pytest.mark.asyncio
    async def test_limit_fallback_is_documented(self, test_client):
        schema = (await test_client.get("/openapi.json")).json()

        parameters = schema["paths"]["/pokemon"]["get"]["parameters"]
        limit_doc = next(p for p in parameters if p["name"] == "limit")["description"]
        assert "negative" in limit_doc
        assert "50" in limit_doc


class TestCountAndDelete:

    @pytest.mark.asyncio
    async def test_count_is_not_treated_as_a_name(self, test_client, seed_pokemon):
        await seed_pokemon(4)

        response = await test_client.get("/pokemon/count")

        assert response.status_code == 200
        assert response.json() == {"total": 4}

    @pytest.mark.asyncio
    async def test_delete_removes_all_records(self, test_client, seed_pokemon):
        await seed_pokemon(7)

        response = await test_client.delete("/pokemon")

        assert response.status_code == 200
        assert response.json() == {"data": "Pokemons deleted successfully!"}
        assert (await test_client.get("/pokemon/count")).json() == {"total": 0}

    @pytest.mark.asyncio
    async def test_delete_twice_is_idempotent(self, test_client, seed_pokemon):
        await seed_pokemon(2)

        first = await test_client.delete("/pokemon")
        second = await test_client.delete("/pokemon")

        assert first.status_code == 200
        assert second.status_code == 200
        assert (await test_client.get("/pokemon/count")).json() == {"total": 0}


class TestWriteFailure:

    @pytest.mark.asyncio
    async def test_insert_failure_returns_500_with_generic_message(self, test_client):
        from app.main import app

        class FailingRepository(PokemonRepository):
            async def insert(self, pokemon):
                raise OperationalError("INSERT", {}, Exception("connection lost"))

        app.dependency_overrides[get_pokemon_repository] = lambda: FailingRepository(None)

        response = await test_client.post("/pokemon", json={"name": "Mew", "type": "Psychic"})

        assert response.status_code == 500
        body = response.json()
        assert body["data"] == "Failed to create Pokemon."
        assert "connection lost" not in response.text


class TestCommitTiming:
    """
    Drives the app with raw ASGI messages against a file-backed SQLite
    database and counts rows from a second engine at the moment the response
    status is sent.
    """

    async def _rows_visible_at_response_start(self, tmp_path, method, body=None, seed=0):
        from app.main import app

        url = f"sqlite+aiosqlite:///{tmp_path / 'pokedex.db'}"
        app_engine = create_async_engine(url)
        observer = create_async_engine(url)
        async with app_engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
        factory = async_sessionmaker(app_engine, class_=AsyncSession, expire_on_commit=False)

        if seed:
            async with factory() as session:
                session.add_all([Pokemon(name=f"Pokemon-{i}", type="Normal") for i in range(seed)])
                await session.commit()

        async def override_get_db_session():
            async with factory() as session:
                try:
                    yield session
                    await session.commit()
                except Exception:
                    await session.rollback()
                    raise

        payload = json.dumps(body).encode() if body is not None else b""
        pending = [{"type": "http.request", "body": payload, "more_body": False}]
        finished = asyncio.Event()
        seen = {}

        async def receive():
            if pending:
                return pending.pop(0)
            await finished.wait()
            return {"type": "http.disconnect"}

        async def send(message):
            if message["type"] == "http.response.start":
                seen["status"] = message["status"]
                async with observer.connect() as conn:
                    result = await conn.execute(select(func.count()).select_from(Pokemon))
                    seen["rows"] = result.scalar()

        scope = {
            "type": "http",
            "asgi": {"version": "3.0"},
            "http_version": "1.1",
            "method": method,
            "scheme": "http",
            "path": "/pokemon",
            "raw_path": b"/pokemon",
            "root_path": "",
            "query_string": b"",
            "headers": [
                (b"host", b"test"),
                (b"content-type", b"application/json"),
                (b"content-length", str(len(payload)).encode()),
            ],
            "client": ("127.0.0.1", 12345),
            "server": ("test", 80),
        }

        app.dependency_overrides[get_db_session] = override_get_db_session
        try:
            await app(scope, receive, send)
        finally:
            finished.set()
            app.dependency_overrides.clear()
            await app_engine.dispose()
            await observer.dispose()
        return seen

    @pytest.mark.asyncio
    async def test_created_row_is_visible_when_response_starts(self, tmp_path):
        seen = await self._rows_visible_at_response_start(
            tmp_path, "POST", body={"name": "Pikachu", "type": "Electric"}
        )

        assert seen == {"status": 201, "rows": 1}

    @pytest.mark.asyncio
    async def test_delete_is_visible_when_response_starts(self, tmp_path):
        seen = await self._rows_visible_at_response_start(tmp_path, "DELETE", seed=4)

        assert seen == {"status": 200, "rows": 0}
