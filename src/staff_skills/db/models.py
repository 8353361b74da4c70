"""
staff_skills.db.models

Persistence schema for the Person/Skill aggregate.

Responsibilities:
- Person: employee record, aggregate root owning its skills.
- Skill: named skill with a level, owned by exactly one Person.
"""

from __future__ import annotations

from sqlalchemy import BigInteger, ForeignKey, Integer, SmallInteger, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from staff_skills.db.base import Base

# SQLite only autoincrements INTEGER PRIMARY KEY columns.
_Id = BigInteger().with_variant(Integer(), "sqlite")

# Store-assigned ids are signed 64-bit integers; nothing outside this range can exist.
ID_MIN = -(2**63)
ID_MAX = 2**63 - 1

SKILL_LEVEL_MIN = 1
SKILL_LEVEL_MAX = 10


class Person(Base):
    __tablename__ = "persons"

    id: Mapped[int] = mapped_column(_Id, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(Text, nullable=False)
    display_name: Mapped[str] = mapped_column(Text, nullable=False)

    # Skills are replaced wholesale on update; orphans are deleted on flush.
    skills: Mapped[list[Skill]] = relationship(
        back_populates="person",
        cascade="all, delete-orphan",
        passive_deletes=True,
        order_by="Skill.id",
    )

    def __repr__(self) -> str:
        return f"Person(id={self.id!r}, name={self.name!r})"


class Skill(Base):
    __tablename__ = "skills"

    id: Mapped[int] = mapped_column(_Id, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(Text, nullable=False)
    # Range [SKILL_LEVEL_MIN, SKILL_LEVEL_MAX] is enforced by services.validation.
    level: Mapped[int] = mapped_column(SmallInteger, nullable=False)
    person_id: Mapped[int] = mapped_column(
        _Id, ForeignKey("persons.id", ondelete="CASCADE"), nullable=False, index=True
    )

    person: Mapped[Person] = relationship(back_populates="skills")

    def __repr__(self) -> str:
        return f"Skill(id={self.id!r}, name={self.name!r}, level={self.level!r})"
