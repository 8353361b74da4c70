"""
staff_skills.db.init_db

DB initialization helpers (dev/test convenience).
"""

from __future__ import annotations

from sqlalchemy.ext.asyncio import AsyncEngine

from staff_skills.db import models  # noqa: F401  # registers tables on Base.metadata
from staff_skills.db.base import Base


async def init_db(engine: AsyncEngine) -> None:
    """
    Dev/test bootstrap: create tables if they don't exist.
    Production schemas are managed by the Alembic revisions under `alembic/versions`.
    """

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
