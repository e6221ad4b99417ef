"""Daily mood check models."""

from datetime import date, datetime
from enum import IntEnum

from pydantic import BaseModel, Field

from coaching_analytics.models.progress import utc_now


class MoodLevel(IntEnum):
    """Self-reported mood for the day."""

    LOW = 1
    MEDIUM = 2
    HIGH = 3


class MoodLog(BaseModel):
    """One mood sample per user per UTC calendar day."""

    user_id: str
    day: date
    mood: MoodLevel
    updated_at: datetime = Field(default_factory=utc_now)
