"""Project Repository: technology membership, status predicates, child-row lifecycle."""

from datetime import date

import pytest
from sqlalchemy import func, select

from resume_store.core.domain_types import ProjectStatus
from resume_store.core.errors import ErrorKind, RepositoryError
from resume_store.core.filters import ProjectFilters
from resume_store.models.project import ProjectTechnology
from tests.infrastructure.builders import make_project


@pytest.fixture
async def projects(repos):
    created = []
    for proj in (
        make_project(is_featured=True),
        make_project(
            name="resume-api", technologies=["Go", "PostgreSQL"],
            start_date=date(2024, 1, 1), status=ProjectStatus.COMPLETED,
            end_date=date(2024, 6, 1), is_featured=True,
        ),
        make_project(
            name="dotfiles", technologies=["Shell"], start_date=None,
            status=ProjectStatus.ARCHIVED,
        ),
    ):
        created.append(await repos.project.create(proj))
    return created


async def _technology_rows(session_factory) -> int:
    async with session_factory() as session:
        return await session.scalar(select(func.count()).select_from(ProjectTechnology))


async def test_round_trip_keeps_technology_order(repos):
    created = await repos.project.create(
        make_project(technologies=["Terraform", "Kubernetes", "ArgoCD"]),
    )
    fetched = await repos.project.get_by_id(created.id)

    assert fetched == created
    assert fetched.technologies == ["Terraform", "Kubernetes", "ArgoCD"]
    assert fetched.key_features == ["GitOps", "Observability"]
    assert fetched.is_ongoing is True


async def test_newest_start_first_undated_last(repos, projects):
    result = await repos.project.get_all()
    assert [p.name for p in result] == ["resume-api", "Homelab", "dotfiles"]


async def test_technology_filter(repos, projects):
    result = await repos.project.get_all(ProjectFilters(technology="Go"))
    assert [p.name for p in result] == ["resume-api", "Homelab"]


async def test_technology_and_status_combine(repos, projects):
    result = await repos.project.get_all(
        ProjectFilters(technology="Go", status=ProjectStatus.ACTIVE),
    )
    assert [p.name for p in result] == ["Homelab"]


async def test_technology_filter_paginates(repos, projects):
    result = await repos.project.get_all(ProjectFilters(technology="Go", limit=1, offset=1))
    assert [p.name for p in result] == ["Homelab"]


async def test_get_featured_equals_featured_filter(repos, projects):
    assert await repos.project.get_featured() == await repos.project.get_all(
        ProjectFilters(featured=True),
    )


async def test_update_replaces_technologies(repos, projects, test_session_factory):
    homelab = projects[0]
    changed = homelab.model_copy(update={"technologies": ["Go", "Nix"]})

    updated = await repos.project.update(changed)

    assert updated.technologies == ["Go", "Nix"]
    assert (await repos.project.get_by_id(homelab.id)).technologies == ["Go", "Nix"]
    assert await repos.project.get_all(ProjectFilters(technology="Kubernetes")) == []
    assert await _technology_rows(test_session_factory) == 5


async def test_delete_removes_technology_rows(repos, projects, test_session_factory):
    await repos.project.delete(projects[1].id)

    assert await _technology_rows(test_session_factory) == 3
    with pytest.raises(RepositoryError) as exc_info:
        await repos.project.get_by_id(projects[1].id)
    assert exc_info.value.kind is ErrorKind.NOT_FOUND
