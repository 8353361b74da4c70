"""
staff_skills.db.repositories.persons

Repository for the Person aggregate (Person + owned Skills).

Responsibilities:
- Load persons with their skills eagerly loaded.
- Insert, overwrite and delete persons; skills follow through ORM cascades.

The repository flushes but never commits; callers own the transaction.
"""

from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from staff_skills.db.models import ID_MAX, ID_MIN, Person, Skill


class PersonRepo:
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def list_all(self) -> list[Person]:
        stmt = select(Person).options(selectinload(Person.skills)).order_by(Person.id)
        return list((await self._session.execute(stmt)).scalars().all())

    async def get(self, person_id: int) -> Person | None:
        if not ID_MIN <= person_id <= ID_MAX:
            # Out-of-range ids would overflow the driver's integer binding.
            return None
        stmt = select(Person).options(selectinload(Person.skills)).where(Person.id == person_id)
        return (await self._session.execute(stmt)).scalar_one_or_none()

    async def add(self, person: Person) -> Person:
        # Skills attached to `person` are inserted in the same flush, keyed by the new id.
        self._session.add(person)
        await self._session.flush()
        return person

    async def update(
        self,
        person: Person,
        *,
        name: str,
        display_name: str,
        skills: list[Skill],
    ) -> Person:
        person.name = name
        person.display_name = display_name
        # Whole-collection replacement: previous skills become orphans and are deleted.
        person.skills = skills
        await self._session.flush()
        return person

    async def delete(self, person_id: int) -> bool:
        person = await self.get(person_id)
        if person is None:
            return False
        await self._session.delete(person)
        await self._session.flush()
        return True
