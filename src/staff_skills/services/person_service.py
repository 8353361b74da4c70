"""
staff_skills.services.person_service

Aggregate service for persons and their skills (transaction owner).

Responsibilities:
- Validate incoming payloads before touching the store.
- Drive `PersonRepo` and map entities to response DTOs.
- Commit each mutating operation as one unit of work, rolling back on failure.

Not-found is reported as `None` (get/update) or `False` (delete), never raised.
"""

from __future__ import annotations

from sqlalchemy.ext.asyncio import AsyncSession

from staff_skills.db.repositories.persons import PersonRepo
from staff_skills.observability.logging import get_logger
from staff_skills.schemas import PersonRequest, PersonResponse
from staff_skills.services.mapping import to_person_entity, to_response, to_skill_entities
from staff_skills.services.validation import PersonValidationError, validate_skills

log = get_logger(__name__)


class PersonService:
    def __init__(self, *, session: AsyncSession) -> None:
        self._session = session
        self._persons = PersonRepo(session)

    async def list_all(self) -> list[PersonResponse]:
        persons = await self._persons.list_all()
        log.info("persons_listed", count=len(persons))
        return [to_response(p) for p in persons]

    async def get(self, person_id: int) -> PersonResponse | None:
        person = await self._persons.get(person_id)
        if person is None:
            log.info("person_not_found", person_id=person_id)
            return None
        return to_response(person)

    async def create(self, request: PersonRequest) -> PersonResponse:
        self._validate(request)
        try:
            person = await self._persons.add(to_person_entity(request))
            await self._session.commit()
        except Exception:
            await self._session.rollback()
            raise
        log.info("person_created", person_id=person.id, skills=len(person.skills))
        return to_response(person)

    async def update(self, person_id: int, request: PersonRequest) -> PersonResponse | None:
        self._validate(request, person_id=person_id)
        try:
            person = await self._persons.get(person_id)
            if person is None:
                log.info("person_not_found", person_id=person_id)
                return None
            await self._persons.update(
                person,
                name=request.name,
                display_name=request.display_name,
                skills=to_skill_entities(request.skills),
            )
            await self._session.commit()
        except Exception:
            await self._session.rollback()
            raise
        log.info("person_updated", person_id=person.id, skills=len(person.skills))
        return to_response(person)

    async def delete(self, person_id: int) -> bool:
        try:
            deleted = await self._persons.delete(person_id)
            if not deleted:
                log.info("person_not_found", person_id=person_id)
                return False
            await self._session.commit()
        except Exception:
            await self._session.rollback()
            raise
        log.info("person_deleted", person_id=person_id)
        return True

    def _validate(self, request: PersonRequest, *, person_id: int | None = None) -> None:
        try:
            validate_skills(request.skills)
        except PersonValidationError as e:
            log.warning("person_rejected", person_id=person_id, reason=str(e))
            raise


# --- Module Notes -----------------------------------------------------------
# The service is the only place that commits. Routers translate its results to HTTP.
