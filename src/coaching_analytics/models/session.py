"""Coaching session and peer assessment models."""

from datetime import UTC, datetime
from enum import StrEnum

from pydantic import BaseModel, Field, field_validator


class SessionStatus(StrEnum):
    """Session lifecycle states."""

    SCHEDULED = "SCHEDULED"
    COMPLETED = "COMPLETED"


class SessionAssessment(BaseModel):
    """Scores given by a rater to one attendee after a session (0-10 each)."""

    rater_id: str
    target_id: str
    leadership: float = Field(ge=0, le=10)
    communication: float = Field(ge=0, le=10)
    adaptability: float = Field(ge=0, le=10)
    emotional_int: float = Field(ge=0, le=10)
    comment: str = ""

    @property
    def energy_proxy(self) -> float:
        """Energy on a 0-100 scale from leadership and adaptability."""
        return (self.leadership + self.adaptability) / 2 * 10

    @property
    def focus_proxy(self) -> float:
        """Focus on a 0-100 scale from communication and emotional intelligence."""
        return (self.communication + self.emotional_int) / 2 * 10


class CoachingSession(BaseModel):
    """A scheduled or completed coaching session."""

    id: str
    coach_id: str
    attendees: list[str] = Field(default_factory=list)
    start_time: datetime
    end_time: datetime
    duration: int = Field(ge=0)  # minutes
    status: SessionStatus = SessionStatus.SCHEDULED
    video_url: str = ""
    assessments: list[SessionAssessment] = Field(default_factory=list)

    @field_validator("start_time", "end_time")
    @classmethod
    def assume_utc(cls, value: datetime) -> datetime:
        if value.tzinfo is None:
            return value.replace(tzinfo=UTC)
        return value

    @property
    def is_completed(self) -> bool:
        return self.status == SessionStatus.COMPLETED

    def assessments_for(self, user_id: str) -> list[SessionAssessment]:
        """Assessments whose target is the given user."""
        return [a for a in self.assessments if a.target_id == user_id]
