"""Project record: a notable project and the technologies it used."""

from datetime import date

from pydantic import Field, computed_field, field_validator

from resume_store.core.domain_types import ProjectStatus
from resume_store.schemas.base import EntityRecord


class ProjectRecord(EntityRecord):
    name: str
    description: str | None = None
    short_description: str | None = None
    technologies: list[str] = Field(default_factory=list)
    github_url: str | None = None
    demo_url: str | None = None
    start_date: date | None = None
    end_date: date | None = None
    status: ProjectStatus = ProjectStatus.ACTIVE
    is_featured: bool = False
    order_index: int = 0
    key_features: list[str] = Field(default_factory=list)

    @field_validator("technologies", mode="before")
    @classmethod
    def materialize_technologies(cls, v):
        # ORM rows expose an association proxy, not a list
        return list(v) if v is not None else []

    @computed_field
    @property
    def is_ongoing(self) -> bool:
        return self.end_date is None and self.status is ProjectStatus.ACTIVE
