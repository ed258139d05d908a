"""Achievement repository backed by SQLAlchemy.

Ordering: most recent year first (undated last), then order_index, then id.
"""

from resume_store.core.domain_types import EntityName
from resume_store.core.filters import AchievementFilters
from resume_store.infrastructure.repositories.base import SqlAlchemyRepository
from resume_store.models.achievement import Achievement
from resume_store.schemas.achievement import AchievementRecord


class SqlAlchemyAchievementRepository(
    SqlAlchemyRepository[AchievementRecord, AchievementFilters],
):
    entity = EntityName.ACHIEVEMENT
    model = Achievement
    record_type = AchievementRecord
    filters_type = AchievementFilters
    required_fields = ("title",)

    def _conditions(self, filters: AchievementFilters):
        conditions = []
        if filters.category is not None:
            conditions.append(Achievement.category == filters.category)
        if filters.year is not None:
            conditions.append(Achievement.year_achieved == filters.year)
        if filters.featured is not None:
            conditions.append(Achievement.is_featured == filters.featured)
        return conditions

    def _ordering(self) -> tuple:
        return (
            Achievement.year_achieved.desc().nulls_last(),
            Achievement.order_index,
            Achievement.id,
        )

    async def get_featured(self) -> list[AchievementRecord]:
        return await self.get_all(AchievementFilters(featured=True))
