"""Domain Types: identity wrappers and the closed vocabularies of resume entities.

Invariants:
    - Identities are positive integers assigned by the database
    - Every closed set of values is an Enum, no raw string matching
    - Enum values match the CHECK constraints of the relational schema

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enums: stored in plain String columns and serialized without custom encoders
"""

from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

EntityId = NewType("EntityId", int)


# ─── Enums ───────────────────────────────────────────────────────

class SkillLevel(str, Enum):
    """Proficiency scale for a skill."""
    BEGINNER = "beginner"
    INTERMEDIATE = "intermediate"
    ADVANCED = "advanced"
    EXPERT = "expert"


class EducationType(str, Enum):
    EDUCATION = "education"
    CERTIFICATION = "certification"


class EducationStatus(str, Enum):
    COMPLETED = "completed"
    IN_PROGRESS = "in_progress"
    PLANNED = "planned"


class ProjectStatus(str, Enum):
    """Project lifecycle states, maps to DB `status` column."""
    ACTIVE = "active"
    COMPLETED = "completed"
    ARCHIVED = "archived"
    PLANNED = "planned"


class EntityName(str, Enum):
    """Entity names as they appear in RepositoryError messages."""
    PROFILE = "profile"
    EXPERIENCE = "experience"
    SKILL = "skill"
    ACHIEVEMENT = "achievement"
    EDUCATION = "education"
    PROJECT = "project"
