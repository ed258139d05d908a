"""Education repository backed by SQLAlchemy."""

from resume_store.core.domain_types import EducationType, EntityName
from resume_store.core.filters import EducationFilters
from resume_store.infrastructure.repositories.base import SqlAlchemyRepository
from resume_store.models.education import Education
from resume_store.schemas.education import EducationRecord


class SqlAlchemyEducationRepository(
    SqlAlchemyRepository[EducationRecord, EducationFilters],
):
    entity = EntityName.EDUCATION
    model = Education
    record_type = EducationRecord
    filters_type = EducationFilters
    required_fields = ("institution", "degree_or_certification", "type")

    def _conditions(self, filters: EducationFilters):
        conditions = []
        if filters.type is not None:
            conditions.append(Education.type == filters.type.value)
        if filters.institution is not None:
            conditions.append(
                Education.institution.icontains(filters.institution, autoescape=True),
            )
        if filters.status is not None:
            conditions.append(Education.status == filters.status.value)
        if filters.featured is not None:
            conditions.append(Education.is_featured == filters.featured)
        return conditions

    def _ordering(self) -> tuple:
        return (
            Education.type,
            Education.year_completed.desc().nulls_last(),
            Education.order_index,
            Education.id,
        )

    async def get_by_type(self, education_type: EducationType) -> list[EducationRecord]:
        return await self.get_all(EducationFilters(type=education_type))

    async def get_featured(self) -> list[EducationRecord]:
        return await self.get_all(EducationFilters(featured=True))
