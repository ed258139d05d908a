"""Profile record: the resume owner's contact details and summary."""

from resume_store.schemas.base import EntityRecord


class ProfileRecord(EntityRecord):
    name: str
    title: str
    email: str
    phone: str | None = None
    location: str | None = None
    linkedin: str | None = None
    github: str | None = None
    summary: str | None = None
