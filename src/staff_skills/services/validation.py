"""
staff_skills.services.validation

Input checks applied by `PersonService` before any persistence call.
"""

from __future__ import annotations

from collections.abc import Iterable

from staff_skills.db.models import SKILL_LEVEL_MAX, SKILL_LEVEL_MIN
from staff_skills.schemas import SkillDto


class PersonValidationError(ValueError):
    """Base class for rejected person payloads."""


class InvalidSkillLevelError(PersonValidationError):
    def __init__(self, skill_name: str, level: int) -> None:
        super().__init__(
            f"skill {skill_name!r} has level {level}; "
            f"level must be between {SKILL_LEVEL_MIN} and {SKILL_LEVEL_MAX}"
        )
        self.skill_name = skill_name
        self.level = level


def validate_skills(skills: Iterable[SkillDto]) -> None:
    for skill in skills:
        if not SKILL_LEVEL_MIN <= skill.level <= SKILL_LEVEL_MAX:
            raise InvalidSkillLevelError(skill.name, skill.level)
