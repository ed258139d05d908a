"""Repository test fixtures: a fresh SQLite database per test.

Invariants:
    - Every test gets its own database file under tmp_path
    - Tables come from Base.metadata.create_all, dropped with the directory

Design Decisions:
    - File-backed SQLite rather than :memory: so each session gets its own
      connection, as it would against PostgreSQL
"""

import pytest
from sqlalchemy.ext.asyncio import (
    AsyncSession, async_sessionmaker, create_async_engine,
)

import resume_store.models  # noqa: F401
from resume_store.core.domain_types import SkillLevel
from resume_store.db.base import Base
from resume_store.infrastructure.repositories import build_repositories
from tests.infrastructure.builders import make_skill


@pytest.fixture
async def test_engine(tmp_path):
    engine = create_async_engine(
        f"sqlite+aiosqlite:///{tmp_path / 'resume.db'}", echo=False,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def test_session_factory(test_engine):
    return async_sessionmaker(
        test_engine, class_=AsyncSession, expire_on_commit=False,
    )


@pytest.fixture
def repos(test_session_factory):
    return build_repositories(test_session_factory)


@pytest.fixture
async def four_skills(repos):
    """The four-row fixture used for filter and pagination tests."""
    created = []
    for skill in (
        make_skill(name="Go", order_index=1, is_featured=True),
        make_skill(
            name="Python", level=SkillLevel.ADVANCED, years_experience=3,
            order_index=2, is_featured=True,
        ),
        make_skill(
            category="Databases", name="PostgreSQL", level=SkillLevel.ADVANCED,
            years_experience=4, is_featured=False,
        ),
        make_skill(
            category="Cloud Platforms", name="AWS",
            level=SkillLevel.INTERMEDIATE, years_experience=2, is_featured=True,
        ),
    ):
        created.append(await repos.skill.create(skill))
    return created
