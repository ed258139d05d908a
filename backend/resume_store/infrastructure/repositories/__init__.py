"""SQLAlchemy implementations of the repository protocols.

build_repositories() is the only place that knows which implementation
backs which protocol.
"""

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from resume_store.core.repository_protocols import Repositories
from resume_store.infrastructure.repositories.achievement import (
    SqlAlchemyAchievementRepository,
)
from resume_store.infrastructure.repositories.education import (
    SqlAlchemyEducationRepository,
)
from resume_store.infrastructure.repositories.experience import (
    SqlAlchemyExperienceRepository,
)
from resume_store.infrastructure.repositories.profile import (
    SqlAlchemyProfileRepository,
)
from resume_store.infrastructure.repositories.project import (
    SqlAlchemyProjectRepository,
)
from resume_store.infrastructure.repositories.skill import SqlAlchemySkillRepository

__all__ = [
    "SqlAlchemyAchievementRepository",
    "SqlAlchemyEducationRepository",
    "SqlAlchemyExperienceRepository",
    "SqlAlchemyProfileRepository",
    "SqlAlchemyProjectRepository",
    "SqlAlchemySkillRepository",
    "build_repositories",
]


def build_repositories(
    session_factory: async_sessionmaker[AsyncSession],
) -> Repositories:
    """One SQLAlchemy repository per entity, all sharing session_factory."""
    return Repositories(
        profile=SqlAlchemyProfileRepository(session_factory),
        experience=SqlAlchemyExperienceRepository(session_factory),
        skill=SqlAlchemySkillRepository(session_factory),
        achievement=SqlAlchemyAchievementRepository(session_factory),
        education=SqlAlchemyEducationRepository(session_factory),
        project=SqlAlchemyProjectRepository(session_factory),
    )
