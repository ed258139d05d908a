"""Experience ORM: work history entries.

Invariants:
    - end_date NULL marks the current position
    - highlights is a JSON list of strings, never NULL
"""

from datetime import date

from sqlalchemy import Date, Index, Integer, JSON, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from resume_store.db.base import Base, TimestampMixin


class Experience(TimestampMixin, Base):
    __tablename__ = "experiences"
    __table_args__ = (
        Index("idx_experiences_dates", "start_date", "end_date"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    company: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    position: Mapped[str] = mapped_column(String(255), nullable=False)
    start_date: Mapped[date] = mapped_column(Date, nullable=False)
    end_date: Mapped[date | None] = mapped_column(Date, nullable=True)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    highlights: Mapped[list] = mapped_column(JSON, nullable=False, default=list)
    location: Mapped[str | None] = mapped_column(String(255), nullable=True)
    order_index: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
