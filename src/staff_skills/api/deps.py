"""
staff_skills.api.deps

FastAPI dependency wiring for the API layer.
"""

from __future__ import annotations

from collections.abc import AsyncIterator

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from staff_skills.services.person_service import PersonService


def sessionmaker_from_app(request: Request) -> async_sessionmaker[AsyncSession]:
    # Created in the app lifespan, see `staff_skills.api.app.create_app`.
    return request.app.state.sessionmaker  # type: ignore[attr-defined]


async def db_session(
    session_factory: async_sessionmaker[AsyncSession] = Depends(sessionmaker_from_app),
) -> AsyncIterator[AsyncSession]:
    # Request-scoped session. Commit/rollback is managed by the service layer.
    async with session_factory() as session:
        yield session


def person_service(session: AsyncSession = Depends(db_session)) -> PersonService:
    return PersonService(session=session)
