"""Project ORM: notable projects and the technologies they used.

Invariants:
    - Technologies live in project_technologies, ordered by position
    - Deleting a project deletes its technology rows
    - key_features is a JSON list of strings, never NULL

Design Decisions:
    - Child table instead of a JSON array so "uses technology X" is a plain
      EXISTS on every backend
    - technologies exposed through an association proxy as a list of names
"""

from datetime import date

from sqlalchemy import (
    Boolean, CheckConstraint, Date, ForeignKey, Integer, JSON, String, Text,
)
from sqlalchemy.ext.associationproxy import AssociationProxy, association_proxy
from sqlalchemy.ext.orderinglist import ordering_list
from sqlalchemy.orm import Mapped, mapped_column, relationship

from resume_store.db.base import Base, TimestampMixin


class Project(TimestampMixin, Base):
    __tablename__ = "projects"
    __table_args__ = (
        CheckConstraint(
            "status IN ('active', 'completed', 'archived', 'planned')",
            name="chk_project_status",
        ),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    short_description: Mapped[str | None] = mapped_column(String(500), nullable=True)
    github_url: Mapped[str | None] = mapped_column(String(500), nullable=True)
    demo_url: Mapped[str | None] = mapped_column(String(500), nullable=True)
    start_date: Mapped[date | None] = mapped_column(Date, nullable=True)
    end_date: Mapped[date | None] = mapped_column(Date, nullable=True)
    status: Mapped[str] = mapped_column(
        String(50), nullable=False, default="active", index=True,
    )
    is_featured: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    order_index: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    key_features: Mapped[list] = mapped_column(JSON, nullable=False, default=list)

    # Relationships
    technology_links: Mapped[list["ProjectTechnology"]] = relationship(
        "ProjectTechnology", back_populates="project",
        cascade="all, delete-orphan", lazy="selectin",
        order_by="ProjectTechnology.position",
        collection_class=ordering_list("position"),
    )
    technologies: AssociationProxy[list[str]] = association_proxy(
        "technology_links", "name",
        creator=lambda name: ProjectTechnology(name=name),
    )


class ProjectTechnology(Base):
    """One technology used by a project, in display order."""
    __tablename__ = "project_technologies"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    project_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("projects.id", ondelete="CASCADE"),
        nullable=False, index=True,
    )
    name: Mapped[str] = mapped_column(String(100), nullable=False, index=True)
    position: Mapped[int] = mapped_column(Integer, nullable=False, default=0)

    project: Mapped["Project"] = relationship(
        "Project", back_populates="technology_links",
    )
