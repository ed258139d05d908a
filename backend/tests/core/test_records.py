"""Entity Records: system fields, UTC timestamps, derived flags."""

from datetime import date, datetime, timezone

from resume_store.core.domain_types import ProjectStatus
from resume_store.schemas import (
    EducationRecord, ExperienceRecord, ProjectRecord, SkillRecord,
)


def test_writable_fields_exclude_system_fields():
    fields = SkillRecord.writable_fields()
    assert "id" not in fields
    assert "created_at" not in fields
    assert "updated_at" not in fields
    assert {"category", "name", "level", "is_featured"} <= set(fields)


def test_naive_timestamps_become_utc():
    record = SkillRecord(
        category="Languages", name="Go",
        created_at=datetime(2024, 1, 1, 12, 0),
    )
    assert record.created_at == datetime(2024, 1, 1, 12, 0, tzinfo=timezone.utc)


def test_experience_is_current_follows_end_date():
    open_ended = ExperienceRecord(company="A", position="B", start_date=date(2020, 1, 1))
    closed = open_ended.model_copy(update={"end_date": date(2021, 1, 1)})
    assert open_ended.is_current is True
    assert closed.is_current is False


def test_project_is_ongoing_needs_active_and_open():
    active = ProjectRecord(name="Homelab")
    archived = ProjectRecord(name="Old", status=ProjectStatus.ARCHIVED)
    finished = ProjectRecord(name="Done", end_date=date(2023, 1, 1))
    assert active.is_ongoing is True
    assert archived.is_ongoing is False
    assert finished.is_ongoing is False


def test_project_technologies_accept_any_iterable():
    record = ProjectRecord(name="x", technologies=("Go", "Rust"))
    assert record.technologies == ["Go", "Rust"]
    assert ProjectRecord(name="y", technologies=None).technologies == []


def test_education_defaults_to_completed():
    record = EducationRecord(
        institution="MIT", degree_or_certification="MSc", type="education",
    )
    assert record.status.value == "completed"
