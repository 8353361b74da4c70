"""
staff_skills.schemas

Transfer objects exchanged between the API layer and `PersonService`.

JSON uses camelCase (`displayName`); snake_case field names are accepted on input
so services and tests can build the models directly.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, StrictInt
from pydantic.alias_generators import to_camel


class _Dto(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class SkillDto(_Dto):
    name: str
    # Strict: JSON booleans are not levels. The range is checked by services.validation
    # so out-of-range numbers surface as 400, not 422.
    level: StrictInt


class PersonRequest(_Dto):
    name: str
    display_name: str
    skills: list[SkillDto] = Field(default_factory=list)


class PersonResponse(_Dto):
    id: int
    name: str
    display_name: str
    skills: list[SkillDto] = Field(default_factory=list)
