"""Skill repository backed by SQLAlchemy."""

from resume_store.core.domain_types import EntityName
from resume_store.core.filters import SkillFilters
from resume_store.infrastructure.repositories.base import SqlAlchemyRepository
from resume_store.models.skill import Skill
from resume_store.schemas.skill import SkillRecord


class SqlAlchemySkillRepository(SqlAlchemyRepository[SkillRecord, SkillFilters]):
    entity = EntityName.SKILL
    model = Skill
    record_type = SkillRecord
    filters_type = SkillFilters
    required_fields = ("category", "name")

    def _conditions(self, filters: SkillFilters):
        conditions = []
        if filters.category is not None:
            conditions.append(Skill.category == filters.category)
        if filters.level is not None:
            conditions.append(Skill.level == filters.level.value)
        if filters.featured is not None:
            conditions.append(Skill.is_featured == filters.featured)
        return conditions

    def _ordering(self) -> tuple:
        return (Skill.category, Skill.order_index, Skill.name, Skill.id)

    async def get_by_category(self, category: str) -> list[SkillRecord]:
        return await self.get_all(SkillFilters(category=category))

    async def get_featured(self) -> list[SkillRecord]:
        return await self.get_all(SkillFilters(featured=True))
