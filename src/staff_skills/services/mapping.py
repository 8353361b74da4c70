"""
staff_skills.services.mapping

Pure conversions between ORM entities and transfer objects.
"""

from __future__ import annotations

from collections.abc import Iterable

from staff_skills.db.models import Person, Skill
from staff_skills.schemas import PersonRequest, PersonResponse, SkillDto


def to_response(person: Person) -> PersonResponse:
    return PersonResponse(
        id=person.id,
        name=person.name,
        display_name=person.display_name,
        skills=[SkillDto(name=s.name, level=s.level) for s in person.skills],
    )


def to_skill_entities(skills: Iterable[SkillDto]) -> list[Skill]:
    # Always fresh rows: ids are assigned by the store on flush.
    return [Skill(name=s.name, level=s.level) for s in skills]


def to_person_entity(request: PersonRequest) -> Person:
    return Person(
        name=request.name,
        display_name=request.display_name,
        skills=to_skill_entities(request.skills),
    )
