"""Filter Objects: per-entity optional predicates plus pagination.

Invariants:
    - Every predicate defaults to None, meaning "no constraint"
    - Filters are frozen; a call site builds one, passes it, discards it
    - limit/offset are non-negative; 0 means unspecified
    - Unknown fields are rejected (extra="forbid")
"""

from datetime import date
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field

from resume_store.core.domain_types import (
    SkillLevel, EducationType, EducationStatus, ProjectStatus,
)

PageSize = Annotated[int, Field(ge=0)]

_FILTER_CONFIG = ConfigDict(frozen=True, extra="forbid")


class ProfileFilters(BaseModel):
    model_config = _FILTER_CONFIG

    email: str | None = None
    limit: PageSize = 0
    offset: PageSize = 0


class ExperienceFilters(BaseModel):
    """Company and position match case-insensitive substrings.

    date_from/date_to bound start_date (inclusive). is_current=True keeps
    positions without an end_date, False keeps finished ones.
    """
    model_config = _FILTER_CONFIG

    company: str | None = None
    position: str | None = None
    date_from: date | None = None
    date_to: date | None = None
    is_current: bool | None = None
    limit: PageSize = 0
    offset: PageSize = 0


class SkillFilters(BaseModel):
    model_config = _FILTER_CONFIG

    category: str | None = None
    level: SkillLevel | None = None
    featured: bool | None = None
    limit: PageSize = 0
    offset: PageSize = 0


class AchievementFilters(BaseModel):
    model_config = _FILTER_CONFIG

    category: str | None = None
    year: int | None = None
    featured: bool | None = None
    limit: PageSize = 0
    offset: PageSize = 0


class EducationFilters(BaseModel):
    """Institution matches a case-insensitive substring, the rest match exactly."""
    model_config = _FILTER_CONFIG

    type: EducationType | None = None
    institution: str | None = None
    status: EducationStatus | None = None
    featured: bool | None = None
    limit: PageSize = 0
    offset: PageSize = 0


class ProjectFilters(BaseModel):
    """technology keeps projects whose technologies list contains it."""
    model_config = _FILTER_CONFIG

    status: ProjectStatus | None = None
    technology: str | None = None
    featured: bool | None = None
    limit: PageSize = 0
    offset: PageSize = 0
