"""ORM Models: SQLAlchemy declarative models for all resume entities.

Invariants:
    - All models inherit from Base (db/base.py)
    - Entities are independent tables; only projects own child rows

Design Decisions:
    - One file per entity
    - All models imported here so Base.metadata is complete before create_all
"""

from resume_store.models.profile import Profile  # noqa: F401
from resume_store.models.experience import Experience  # noqa: F401
from resume_store.models.skill import Skill  # noqa: F401
from resume_store.models.achievement import Achievement  # noqa: F401
from resume_store.models.education import Education  # noqa: F401
from resume_store.models.project import Project, ProjectTechnology  # noqa: F401
