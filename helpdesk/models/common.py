from datetime import datetime, timezone

from sqlalchemy import DateTime
from sqlmodel import Field


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def timestamp_field():
    """Non-null UTC timestamp column defaulting to the current time."""
    return Field(default_factory=utc_now, sa_type=DateTime(timezone=True), nullable=False)
