"""Skill record: a named skill within a category."""

from resume_store.core.domain_types import SkillLevel
from resume_store.schemas.base import EntityRecord


class SkillRecord(EntityRecord):
    category: str
    name: str
    level: SkillLevel | None = None
    years_experience: int | None = None
    order_index: int = 0
    is_featured: bool = False
    description: str | None = None
