"""Education ORM: degrees and certifications.

Invariants:
    - type is 'education' or 'certification'
    - status is 'completed', 'in_progress' or 'planned'
"""

from datetime import date

from sqlalchemy import Boolean, CheckConstraint, Date, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from resume_store.db.base import Base, TimestampMixin


class Education(TimestampMixin, Base):
    __tablename__ = "education"
    __table_args__ = (
        CheckConstraint(
            "type IN ('education', 'certification')", name="chk_education_type",
        ),
        CheckConstraint(
            "status IN ('completed', 'in_progress', 'planned')",
            name="chk_education_status",
        ),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    institution: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    degree_or_certification: Mapped[str] = mapped_column(String(255), nullable=False)
    field_of_study: Mapped[str | None] = mapped_column(String(255), nullable=True)
    year_started: Mapped[int | None] = mapped_column(Integer, nullable=True)
    year_completed: Mapped[int | None] = mapped_column(Integer, nullable=True)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    type: Mapped[str] = mapped_column(String(50), nullable=False, index=True)
    status: Mapped[str] = mapped_column(
        String(50), nullable=False, default="completed",
    )
    credential_id: Mapped[str | None] = mapped_column(String(255), nullable=True)
    credential_url: Mapped[str | None] = mapped_column(String(500), nullable=True)
    expiry_date: Mapped[date | None] = mapped_column(Date, nullable=True)
    order_index: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    is_featured: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
