"""Experience repository backed by SQLAlchemy.

Ordering: newest start_date first, then id.
"""

from resume_store.core.domain_types import EntityName
from resume_store.core.filters import ExperienceFilters
from resume_store.infrastructure.repositories.base import SqlAlchemyRepository
from resume_store.models.experience import Experience
from resume_store.schemas.experience import ExperienceRecord


class SqlAlchemyExperienceRepository(
    SqlAlchemyRepository[ExperienceRecord, ExperienceFilters],
):
    entity = EntityName.EXPERIENCE
    model = Experience
    record_type = ExperienceRecord
    filters_type = ExperienceFilters
    required_fields = ("company", "position", "start_date")

    def _conditions(self, filters: ExperienceFilters):
        conditions = []
        if filters.company is not None:
            conditions.append(Experience.company.icontains(filters.company, autoescape=True))
        if filters.position is not None:
            conditions.append(Experience.position.icontains(filters.position, autoescape=True))
        if filters.date_from is not None:
            conditions.append(Experience.start_date >= filters.date_from)
        if filters.date_to is not None:
            conditions.append(Experience.start_date <= filters.date_to)
        if filters.is_current is True:
            conditions.append(Experience.end_date.is_(None))
        elif filters.is_current is False:
            conditions.append(Experience.end_date.is_not(None))
        return conditions

    def _ordering(self) -> tuple:
        return (Experience.start_date.desc(), Experience.id)

    async def get_current(self) -> list[ExperienceRecord]:
        return await self.get_all(ExperienceFilters(is_current=True))
