"""Education record: a degree or a certification.

Invariants:
    - type is education or certification
    - credential_id, credential_url, expiry_date only make sense for certifications
      but are not enforced
"""

from datetime import date

from resume_store.core.domain_types import EducationType, EducationStatus
from resume_store.schemas.base import EntityRecord


class EducationRecord(EntityRecord):
    institution: str
    degree_or_certification: str
    type: EducationType
    status: EducationStatus = EducationStatus.COMPLETED
    field_of_study: str | None = None
    year_started: int | None = None
    year_completed: int | None = None
    description: str | None = None
    credential_id: str | None = None
    credential_url: str | None = None
    expiry_date: date | None = None
    order_index: int = 0
    is_featured: bool = False
