"""Profile repository backed by SQLAlchemy."""

from sqlalchemy import select

from resume_store.core.domain_types import EntityName
from resume_store.core.errors import NotFoundError
from resume_store.core.filters import ProfileFilters
from resume_store.infrastructure.repositories.base import SqlAlchemyRepository
from resume_store.models.profile import Profile
from resume_store.schemas.profile import ProfileRecord


class SqlAlchemyProfileRepository(SqlAlchemyRepository[ProfileRecord, ProfileFilters]):
    entity = EntityName.PROFILE
    model = Profile
    record_type = ProfileRecord
    filters_type = ProfileFilters
    required_fields = ("name", "title", "email")

    def _conditions(self, filters: ProfileFilters):
        conditions = []
        if filters.email is not None:
            conditions.append(Profile.email == filters.email)
        return conditions

    async def get_profile(self) -> ProfileRecord:
        """The most recently created profile."""
        stmt = (
            select(Profile)
            .order_by(Profile.created_at.desc(), Profile.id.desc())
            .limit(1)
        )
        with self._wrap("get_profile"):
            async with self._sessions() as session:
                row = (await session.scalars(stmt)).first()
                if row is None:
                    raise NotFoundError(self.entity.value)
                return self._to_record(row)
