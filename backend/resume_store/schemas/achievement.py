"""Achievement record: a key accomplishment, optionally with a measured impact."""

from resume_store.schemas.base import EntityRecord


class AchievementRecord(EntityRecord):
    title: str
    description: str | None = None
    category: str | None = None
    impact_metric: str | None = None
    year_achieved: int | None = None
    order_index: int = 0
    is_featured: bool = False
