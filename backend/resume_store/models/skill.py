"""Skill ORM: technical and soft skills grouped by category.

Invariants:
    - (category, name) is unique
    - level is NULL or one of SkillLevel
"""

from sqlalchemy import (
    Boolean, CheckConstraint, Index, Integer, String, Text, UniqueConstraint,
)
from sqlalchemy.orm import Mapped, mapped_column

from resume_store.db.base import Base, TimestampMixin


class Skill(TimestampMixin, Base):
    __tablename__ = "skills"
    __table_args__ = (
        UniqueConstraint("category", "name", name="uq_skills_category_name"),
        CheckConstraint(
            "level IN ('beginner', 'intermediate', 'advanced', 'expert') "
            "OR level IS NULL",
            name="chk_skill_level",
        ),
        Index("idx_skills_category_order", "category", "order_index"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    category: Mapped[str] = mapped_column(String(100), nullable=False)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    level: Mapped[str | None] = mapped_column(String(50), nullable=True)
    years_experience: Mapped[int | None] = mapped_column(Integer, nullable=True)
    order_index: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    is_featured: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
