"""Computed analytics models (never persisted)."""

import datetime as dt
from enum import StrEnum

from pydantic import BaseModel, Field


class EnergyLevel(StrEnum):
    """Weekly energy summary label."""

    HIGH = "Haute"
    MEDIUM = "Moyenne"
    LOW = "Basse"

    @classmethod
    def from_average(cls, average: float) -> "EnergyLevel":
        """Map an average daily energy (0-100) to a label."""
        if average >= 75:
            return cls.HIGH
        elif average >= 40:
            return cls.MEDIUM
        else:
            return cls.LOW


class DailyStatPoint(BaseModel):
    """Energy and focus for one calendar day."""

    day_label: str  # "Lun", "Mar", ...
    energy: int = Field(ge=0, le=100)
    focus: int = Field(ge=0, le=100)
    date: dt.date


class UserStatistics(BaseModel):
    learning_time: str
    completion_rate: str
    energy_level: EnergyLevel
    chart_data: list[DailyStatPoint] = Field(default_factory=list)


class TeamMemberStatistics(BaseModel):
    id: str
    name: str
    email: str
    role: str
    learning_time: str
    completion_rate: str
    last_active: dt.datetime | None = None
