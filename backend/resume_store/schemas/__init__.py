"""Entity Records: pydantic field sets for the six resume entities.

Invariants:
    - Records are what repositories accept and return, never ORM rows
    - id, created_at, updated_at are None until the record is persisted
"""

from resume_store.schemas.base import EntityRecord
from resume_store.schemas.profile import ProfileRecord
from resume_store.schemas.experience import ExperienceRecord
from resume_store.schemas.skill import SkillRecord
from resume_store.schemas.achievement import AchievementRecord
from resume_store.schemas.education import EducationRecord
from resume_store.schemas.project import ProjectRecord

__all__ = [
    "EntityRecord",
    "ProfileRecord",
    "ExperienceRecord",
    "SkillRecord",
    "AchievementRecord",
    "EducationRecord",
    "ProjectRecord",
]
