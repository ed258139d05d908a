"""Boundary Protocols: repository contracts and the Repositories bundle.

Invariants:
    - Callers depend only on these Protocols, never on an implementation
    - Every method is a coroutine and may be awaited concurrently on one instance
    - Failures are raised as RepositoryError; cancellation propagates as asyncio.CancelledError
    - create/update return a new record carrying id and timestamps; the argument is not mutated
    - Convenience reads equal get_all() with the matching predicate preset
    - Repositories holds one implementation per entity, none of them None

Design Decisions:
    - Protocol over ABC: structural subtyping, test doubles need no base class
    - runtime_checkable so wiring code can assert what it was handed
"""

from dataclasses import dataclass, fields
from typing import Protocol, runtime_checkable

from resume_store.core.domain_types import EducationType, EntityId
from resume_store.core.filters import (
    AchievementFilters, EducationFilters, ExperienceFilters,
    ProfileFilters, ProjectFilters, SkillFilters,
)
from resume_store.schemas import (
    AchievementRecord, EducationRecord, ExperienceRecord,
    ProfileRecord, ProjectRecord, SkillRecord,
)


@runtime_checkable
class ProfileRepository(Protocol):
    """Contract for profile persistence."""
    async def get_all(
        self, filters: ProfileFilters | None = None,
    ) -> list[ProfileRecord]: ...
    async def get_by_id(self, entity_id: EntityId) -> ProfileRecord: ...
    async def get_profile(self) -> ProfileRecord: ...
    async def create(self, entity: ProfileRecord) -> ProfileRecord: ...
    async def update(self, entity: ProfileRecord) -> ProfileRecord: ...
    async def delete(self, entity_id: EntityId) -> None: ...


@runtime_checkable
class ExperienceRepository(Protocol):
    """Contract for work experience persistence."""
    async def get_all(
        self, filters: ExperienceFilters | None = None,
    ) -> list[ExperienceRecord]: ...
    async def get_by_id(self, entity_id: EntityId) -> ExperienceRecord: ...
    async def get_current(self) -> list[ExperienceRecord]: ...
    async def create(self, entity: ExperienceRecord) -> ExperienceRecord: ...
    async def update(self, entity: ExperienceRecord) -> ExperienceRecord: ...
    async def delete(self, entity_id: EntityId) -> None: ...


@runtime_checkable
class SkillRepository(Protocol):
    """Contract for skill persistence."""
    async def get_all(
        self, filters: SkillFilters | None = None,
    ) -> list[SkillRecord]: ...
    async def get_by_id(self, entity_id: EntityId) -> SkillRecord: ...
    async def get_by_category(self, category: str) -> list[SkillRecord]: ...
    async def get_featured(self) -> list[SkillRecord]: ...
    async def create(self, entity: SkillRecord) -> SkillRecord: ...
    async def update(self, entity: SkillRecord) -> SkillRecord: ...
    async def delete(self, entity_id: EntityId) -> None: ...


@runtime_checkable
class AchievementRepository(Protocol):
    """Contract for achievement persistence."""
    async def get_all(
        self, filters: AchievementFilters | None = None,
    ) -> list[AchievementRecord]: ...
    async def get_by_id(self, entity_id: EntityId) -> AchievementRecord: ...
    async def get_featured(self) -> list[AchievementRecord]: ...
    async def create(self, entity: AchievementRecord) -> AchievementRecord: ...
    async def update(self, entity: AchievementRecord) -> AchievementRecord: ...
    async def delete(self, entity_id: EntityId) -> None: ...


@runtime_checkable
class EducationRepository(Protocol):
    """Contract for education and certification persistence."""
    async def get_all(
        self, filters: EducationFilters | None = None,
    ) -> list[EducationRecord]: ...
    async def get_by_id(self, entity_id: EntityId) -> EducationRecord: ...
    async def get_by_type(
        self, education_type: EducationType,
    ) -> list[EducationRecord]: ...
    async def get_featured(self) -> list[EducationRecord]: ...
    async def create(self, entity: EducationRecord) -> EducationRecord: ...
    async def update(self, entity: EducationRecord) -> EducationRecord: ...
    async def delete(self, entity_id: EntityId) -> None: ...


@runtime_checkable
class ProjectRepository(Protocol):
    """Contract for project persistence."""
    async def get_all(
        self, filters: ProjectFilters | None = None,
    ) -> list[ProjectRecord]: ...
    async def get_by_id(self, entity_id: EntityId) -> ProjectRecord: ...
    async def get_featured(self) -> list[ProjectRecord]: ...
    async def create(self, entity: ProjectRecord) -> ProjectRecord: ...
    async def update(self, entity: ProjectRecord) -> ProjectRecord: ...
    async def delete(self, entity_id: EntityId) -> None: ...


@dataclass(frozen=True)
class Repositories:
    """One repository per entity, handed to upper layers as a single dependency."""
    profile: ProfileRepository
    experience: ExperienceRepository
    skill: SkillRepository
    achievement: AchievementRepository
    education: EducationRepository
    project: ProjectRepository

    def __post_init__(self) -> None:
        missing = [f.name for f in fields(self) if getattr(self, f.name) is None]
        if missing:
            raise ValueError(f"missing repositories: {', '.join(missing)}")
