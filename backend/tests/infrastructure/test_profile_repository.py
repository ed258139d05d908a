"""Profile Repository: latest-profile read, email predicate and uniqueness."""

import pytest

from resume_store.core.errors import ErrorKind, RepositoryError
from resume_store.core.filters import ProfileFilters
from tests.infrastructure.builders import make_profile


async def test_get_profile_without_rows_is_not_found(repos):
    with pytest.raises(RepositoryError) as exc_info:
        await repos.profile.get_profile()
    assert exc_info.value.kind is ErrorKind.NOT_FOUND
    assert str(exc_info.value) == (
        "repository error during get_profile on profile: profile not found"
    )


async def test_get_profile_returns_latest(repos):
    await repos.profile.create(make_profile())
    newest = await repos.profile.create(make_profile(email="jane@new.example.com"))

    assert await repos.profile.get_profile() == newest


async def test_round_trip(repos):
    created = await repos.profile.create(make_profile(summary="Builds platforms."))
    assert await repos.profile.get_by_id(created.id) == created


async def test_email_filter(repos):
    await repos.profile.create(make_profile())
    other = await repos.profile.create(make_profile(email="john@example.com", name="John"))

    result = await repos.profile.get_all(ProfileFilters(email="john@example.com"))

    assert result == [other]


async def test_duplicate_email_is_validation_error(repos):
    await repos.profile.create(make_profile())
    with pytest.raises(RepositoryError) as exc_info:
        await repos.profile.create(make_profile(name="Impostor"))
    assert exc_info.value.kind is ErrorKind.VALIDATION
    assert exc_info.value.http_status == 400


async def test_update_profile(repos):
    created = await repos.profile.create(make_profile())
    updated = await repos.profile.update(
        created.model_copy(update={"title": "Principal Engineer", "phone": "+27 21 555 0100"}),
    )

    fetched = await repos.profile.get_by_id(created.id)
    assert fetched == updated
    assert fetched.title == "Principal Engineer"
    assert fetched.created_at == created.created_at


async def test_missing_email_is_validation_error(repos):
    invalid = make_profile().model_copy(update={"email": None})
    with pytest.raises(RepositoryError) as exc_info:
        await repos.profile.create(invalid)
    assert exc_info.value.kind is ErrorKind.VALIDATION
    assert exc_info.value.cause.field == "email"
