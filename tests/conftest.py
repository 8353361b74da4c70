"""
tests.conftest

Shared fixtures: a temporary SQLite store per test, a session on it, and an
in-process HTTP client for the FastAPI app.
"""

from __future__ import annotations

from collections.abc import AsyncIterator, Awaitable, Callable
from pathlib import Path

import httpx
import pytest
import pytest_asyncio
from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from staff_skills.api.app import create_app
from staff_skills.db.init_db import init_db
from staff_skills.db.models import Person, Skill
from staff_skills.db.session import create_engine, create_sessionmaker, session_scope
from staff_skills.observability import middleware as _middleware
from staff_skills.observability.logging import get_logger
from staff_skills.settings import Settings


@pytest.fixture(autouse=True)
def _fresh_middleware_logger(monkeypatch: pytest.MonkeyPatch) -> None:
    """Give each test an uncached middleware logger so `capture_logs` can reroute it."""
    monkeypatch.setattr(_middleware, "log", get_logger(_middleware.__name__))


@pytest.fixture()
def settings(tmp_path: Path) -> Settings:
    return Settings(env="test", database_url=f"sqlite+aiosqlite:///{tmp_path / 'test.db'}")


@pytest_asyncio.fixture()
async def session_factory(settings: Settings) -> AsyncIterator[async_sessionmaker[AsyncSession]]:
    engine = create_engine(settings)
    await init_db(engine)
    try:
        yield create_sessionmaker(engine)
    finally:
        await engine.dispose()


@pytest_asyncio.fixture()
async def session(
    session_factory: async_sessionmaker[AsyncSession],
) -> AsyncIterator[AsyncSession]:
    async with session_scope(session_factory) as s:
        yield s


@pytest_asyncio.fixture()
async def client(settings: Settings) -> AsyncIterator[httpx.AsyncClient]:
    app = create_app(settings=settings)
    # httpx ASGITransport does not run the lifespan; drive it explicitly.
    async with app.router.lifespan_context(app):
        transport = httpx.ASGITransport(app=app)
        async with httpx.AsyncClient(transport=transport, base_url="http://test") as c:
            yield c


@pytest.fixture()
def row_counts(
    session_factory: async_sessionmaker[AsyncSession],
) -> Callable[[], Awaitable[tuple[int, int]]]:
    """(persons, skills) row counts, read through a fresh session."""

    async def _count() -> tuple[int, int]:
        async with session_factory() as s:
            persons = (await s.execute(select(func.count()).select_from(Person))).scalar_one()
            skills = (await s.execute(select(func.count()).select_from(Skill))).scalar_one()
        return persons, skills

    return _count
