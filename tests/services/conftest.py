"""Service test fixtures — async DB, seeded API users + FastAPI test client.

Invariants:
    - Every test gets a fresh in-memory SQLite database
    - get_db dependency overridden to use the test DB
    - db_manager patched so the readiness probe sees the test engine
    - `auth` maps a persona name to ready-to-send Authorization headers

Design Decisions:
    - SQLite in-memory with StaticPool: every session shares the one connection,
      so rows committed by a request are visible to assertions
"""

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import (
    AsyncSession, async_sessionmaker, create_async_engine,
)
from sqlalchemy.pool import StaticPool

import smartsales.infrastructure.database as db_module
import smartsales.models  # noqa: F401
from smartsales.db.base import Base
from smartsales.infrastructure.database import DatabaseSessionManager, get_db
from smartsales.infrastructure.identity import digest_token
from smartsales.main import app
from smartsales.models.api_user import ApiUser
from smartsales.models.catalog_post import CatalogPost

PERSONAS: dict[str, dict] = {
    "admin": {"roles": ["administrator"], "capabilities": []},
    "cashier": {"roles": ["cashier"], "capabilities": []},
    "outlet_manager": {"roles": ["outlet_manager"], "capabilities": []},
    "store_keeper": {"roles": ["shop_manager"], "capabilities": ["manage_store"]},
    "subscriber": {"roles": ["subscriber"], "capabilities": []},
}


@pytest.fixture
async def test_engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        echo=False,
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
async def test_session_factory(test_engine):
    return async_sessionmaker(
        test_engine, class_=AsyncSession, expire_on_commit=False,
    )


@pytest.fixture
async def test_db(test_session_factory):
    async with test_session_factory() as session:
        yield session


@pytest.fixture
async def auth(test_db):
    """Seed one API user per persona; returns {persona: headers}."""
    headers = {}
    for login, grants in PERSONAS.items():
        token = f"token-{login}"
        test_db.add(ApiUser(
            login=login,
            token_digest=digest_token(token),
            roles=grants["roles"],
            capabilities=grants["capabilities"],
        ))
        headers[login] = {"Authorization": f"Bearer {token}"}
    await test_db.commit()
    return headers


@pytest.fixture
async def seed_posts(test_db):
    """Insert catalog posts: seed_posts(product=3, outlet=1, draft_product=1)."""

    async def _seed(product: int = 0, outlet: int = 0, draft_product: int = 0):
        for _ in range(product):
            test_db.add(CatalogPost(post_type="product", status="publish"))
        for _ in range(outlet):
            test_db.add(CatalogPost(post_type="outlet", status="publish"))
        for _ in range(draft_product):
            test_db.add(CatalogPost(post_type="product", status="draft"))
        await test_db.commit()

    return _seed


@pytest.fixture
async def client(test_engine, test_session_factory):
    """FastAPI test client with DB dependency overridden."""
    async def override_get_db():
        async with test_session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db

    original_manager = db_module.db_manager
    fake_manager = DatabaseSessionManager.__new__(DatabaseSessionManager)
    fake_manager.engine = test_engine
    fake_manager._session_factory = test_session_factory
    db_module.db_manager = fake_manager

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
    db_module.db_manager = original_manager
