"""Pytest fixtures for nómina service tests."""

from __future__ import annotations

from collections.abc import AsyncGenerator
from pathlib import Path

import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession

from nomina_service.api.app import create_app
from nomina_service.api.dependencies import get_db_session
from nomina_service.database import build_engine, make_session_factory
from nomina_service.services.schema_provisioner import SchemaProvisioner


@pytest_asyncio.fixture
async def engine(tmp_path: Path) -> AsyncGenerator[AsyncEngine, None]:
    """File-backed SQLite engine with the schema provisioned."""
    engine = build_engine(f"sqlite+aiosqlite:///{tmp_path / 'nomina_test.db'}")
    assert await SchemaProvisioner(engine).ensure_schema()

    yield engine

    await engine.dispose()


@pytest_asyncio.fixture
async def session(engine: AsyncEngine) -> AsyncGenerator[AsyncSession, None]:
    """Create a database session for each test."""
    async with make_session_factory(engine)() as session:
        yield session
        await session.rollback()


@pytest_asyncio.fixture
async def client(engine: AsyncEngine) -> AsyncGenerator[AsyncClient, None]:
    """Async HTTP client bound to the test engine."""
    app = create_app()
    session_factory = make_session_factory(engine)

    async def override_db_session() -> AsyncGenerator[AsyncSession, None]:
        async with session_factory() as session:
            yield session

    app.dependency_overrides[get_db_session] = override_db_session

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
