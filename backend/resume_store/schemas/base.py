"""Record Base: identity and timestamp fields shared by every entity record.

Invariants:
    - Timestamps are always timezone-aware UTC once set
    - Records load straight from ORM rows (from_attributes)
"""

from datetime import datetime, timezone
from typing import ClassVar

from pydantic import BaseModel, ConfigDict, field_validator


class EntityRecord(BaseModel):
    """Fields the database assigns on insert."""

    model_config = ConfigDict(from_attributes=True)

    # Fields the repository manages; everything else is caller-writable.
    SYSTEM_FIELDS: ClassVar[frozenset[str]] = frozenset(
        {"id", "created_at", "updated_at"},
    )

    id: int | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None

    @field_validator("created_at", "updated_at")
    @classmethod
    def assume_utc(cls, v: datetime | None) -> datetime | None:
        """SQLite hands back naive datetimes; they were written as UTC."""
        if v is not None and v.tzinfo is None:
            return v.replace(tzinfo=timezone.utc)
        return v

    @classmethod
    def writable_fields(cls) -> list[str]:
        return [
            name for name in cls.model_fields
            if name not in cls.SYSTEM_FIELDS
        ]
