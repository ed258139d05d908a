"""Experience record: one position in the work history.

Invariants:
    - end_date None means the position is current
"""

from datetime import date

from pydantic import Field, computed_field

from resume_store.schemas.base import EntityRecord


class ExperienceRecord(EntityRecord):
    company: str
    position: str
    start_date: date
    end_date: date | None = None
    description: str | None = None
    highlights: list[str] = Field(default_factory=list)
    location: str | None = None
    order_index: int = 0

    @computed_field
    @property
    def is_current(self) -> bool:
        return self.end_date is None
