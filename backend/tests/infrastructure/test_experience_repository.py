"""Experience Repository: substring, date-range and current-position predicates."""

from datetime import date

import pytest

from resume_store.core.errors import ErrorKind, RepositoryError
from resume_store.core.filters import ExperienceFilters
from tests.infrastructure.builders import make_experience


@pytest.fixture
async def history(repos):
    created = []
    for exp in (
        make_experience(
            company="Acme Corp", position="Junior Developer",
            start_date=date(2014, 2, 1), end_date=date(2017, 6, 30),
        ),
        make_experience(
            company="Globex", position="Senior Engineer",
            start_date=date(2017, 7, 1), end_date=date(2021, 12, 31),
        ),
        make_experience(
            company="Initech 100% Remote", position="Staff Engineer",
            start_date=date(2022, 1, 10), end_date=None,
        ),
    ):
        created.append(await repos.experience.create(exp))
    return created


async def test_round_trip_keeps_highlights_and_dates(repos):
    exp = make_experience(highlights=["Led migration", "Mentored 4 engineers"])
    created = await repos.experience.create(exp)

    fetched = await repos.experience.get_by_id(created.id)

    assert fetched == created
    assert fetched.highlights == ["Led migration", "Mentored 4 engineers"]
    assert fetched.start_date == date(2020, 1, 1)
    assert fetched.is_current is True


async def test_newest_position_first(repos, history):
    result = await repos.experience.get_all()
    assert [e.company for e in result] == ["Initech 100% Remote", "Globex", "Acme Corp"]


async def test_company_matches_case_insensitive_substring(repos, history):
    result = await repos.experience.get_all(ExperienceFilters(company="glob"))
    assert [e.company for e in result] == ["Globex"]


async def test_wildcards_in_filter_are_literal(repos, history):
    result = await repos.experience.get_all(ExperienceFilters(company="100%"))
    assert [e.company for e in result] == ["Initech 100% Remote"]
    assert await repos.experience.get_all(ExperienceFilters(company="%")) == result


async def test_position_and_date_range_combine(repos, history):
    result = await repos.experience.get_all(ExperienceFilters(
        position="engineer",
        date_from=date(2017, 1, 1),
        date_to=date(2021, 1, 1),
    ))
    assert [e.company for e in result] == ["Globex"]


async def test_is_current_tri_state(repos, history):
    current = await repos.experience.get_all(ExperienceFilters(is_current=True))
    finished = await repos.experience.get_all(ExperienceFilters(is_current=False))
    everything = await repos.experience.get_all(ExperienceFilters(is_current=None))

    assert [e.company for e in current] == ["Initech 100% Remote"]
    assert [e.company for e in finished] == ["Globex", "Acme Corp"]
    assert len(everything) == 3


async def test_get_current_equals_is_current_filter(repos, history):
    assert await repos.experience.get_current() == await repos.experience.get_all(
        ExperienceFilters(is_current=True),
    )


async def test_update_can_close_a_position(repos, history):
    current = history[2]
    closed = current.model_copy(update={"end_date": date(2024, 5, 31)})

    await repos.experience.update(closed)

    assert await repos.experience.get_current() == []


async def test_missing_start_date_is_validation_error(repos):
    invalid = make_experience().model_copy(update={"start_date": None})
    with pytest.raises(RepositoryError) as exc_info:
        await repos.experience.create(invalid)
    assert exc_info.value.kind is ErrorKind.VALIDATION
