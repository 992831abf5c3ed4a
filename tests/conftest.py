# tests/conftest.py
from __future__ import annotations

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from main import app
from services.school_details.repositories import build_school_repository
from shared import config
from shared.db import get_db, init_models


# Make anyio run on asyncio (so our async fixtures work everywhere)
@pytest.fixture(scope="session")
def anyio_backend():
    return "asyncio"


@pytest.fixture
async def db_engine(tmp_path):
    """Throwaway SQLite database per test."""
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'schools.db'}")
    await init_models(engine)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(db_engine):
    return async_sessionmaker(bind=db_engine, expire_on_commit=False, class_=AsyncSession)


@pytest.fixture(params=["orm", "sql"])
def strategy(request):
    return request.param


@pytest.fixture
async def db_session(session_factory):
    async with session_factory() as session:
        yield session


@pytest.fixture
def repository(db_session, strategy):
    return build_school_repository(strategy, db_session)


@pytest.fixture
async def client(session_factory, strategy, monkeypatch):
    async def _override_get_db():
        async with session_factory() as session:
            yield session

    monkeypatch.setattr(config, "SCHOOL_DATA_ACCESS", strategy)
    app.dependency_overrides[get_db] = _override_get_db
    try:
        async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
            yield ac
    finally:
        app.dependency_overrides.clear()
