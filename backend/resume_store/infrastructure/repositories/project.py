"""Project repository backed by SQLAlchemy.

The technology predicate is an EXISTS over project_technologies, so it
composes with pagination like any other column predicate.
"""

from resume_store.core.domain_types import EntityName
from resume_store.core.filters import ProjectFilters
from resume_store.infrastructure.repositories.base import SqlAlchemyRepository
from resume_store.models.project import Project, ProjectTechnology
from resume_store.schemas.project import ProjectRecord


class SqlAlchemyProjectRepository(SqlAlchemyRepository[ProjectRecord, ProjectFilters]):
    entity = EntityName.PROJECT
    model = Project
    record_type = ProjectRecord
    filters_type = ProjectFilters
    required_fields = ("name",)

    def _conditions(self, filters: ProjectFilters):
        conditions = []
        if filters.status is not None:
            conditions.append(Project.status == filters.status.value)
        if filters.technology is not None:
            conditions.append(
                Project.technology_links.any(ProjectTechnology.name == filters.technology),
            )
        if filters.featured is not None:
            conditions.append(Project.is_featured == filters.featured)
        return conditions

    def _ordering(self) -> tuple:
        return (
            Project.start_date.desc().nulls_last(),
            Project.order_index,
            Project.id,
        )

    async def get_featured(self) -> list[ProjectRecord]:
        return await self.get_all(ProjectFilters(featured=True))
