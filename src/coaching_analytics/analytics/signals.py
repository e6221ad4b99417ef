"""Daily energy and focus signals, resolved in priority order.

Each metric is backed by an ordered tuple of providers. A provider looks at
one day's snapshot and returns a raw 0-100 value, or ``None`` when its source
has no data for that day. The first provider with a value wins; a metric with
no value at all is 0.
"""

from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from datetime import date

from coaching_analytics.models.mood import MoodLog
from coaching_analytics.models.session import CoachingSession, SessionAssessment
from coaching_analytics.scoring import clamp_percent, mean

MOOD_ENERGY_PER_POINT = 33
FOCUS_PER_SESSION = 25


@dataclass
class DaySnapshot:
    """Everything known about one user's calendar day."""

    day: date
    sessions: list[CoachingSession] = field(default_factory=list)
    assessments: list[SessionAssessment] = field(default_factory=list)
    mood: MoodLog | None = None


SignalProvider = Callable[[DaySnapshot], float | None]


def mood_energy(snapshot: DaySnapshot) -> float | None:
    """Self-reported mood: 1 -> 33, 2 -> 66, 3 -> 99."""
    if snapshot.mood is None:
        return None
    return int(snapshot.mood.mood) * MOOD_ENERGY_PER_POINT


def session_energy(snapshot: DaySnapshot) -> float | None:
    """Mean peer-rated leadership/adaptability across the day's assessments."""
    if not snapshot.assessments:
        return None
    return mean(a.energy_proxy for a in snapshot.assessments)


def session_focus(snapshot: DaySnapshot) -> float | None:
    """Mean peer-rated communication/emotional intelligence."""
    if not snapshot.assessments:
        return None
    return mean(a.focus_proxy for a in snapshot.assessments)


def activity_focus(snapshot: DaySnapshot) -> float | None:
    """25 points per completed session that day, capped at 100."""
    return min(100, len(snapshot.sessions) * FOCUS_PER_SESSION)


ENERGY_SIGNALS: tuple[SignalProvider, ...] = (mood_energy, session_energy)
FOCUS_SIGNALS: tuple[SignalProvider, ...] = (session_focus, activity_focus)


def resolve(providers: Sequence[SignalProvider], snapshot: DaySnapshot) -> int:
    """Value of the first provider that has data, rounded and clamped to 0-100."""
    for provider in providers:
        value = provider(snapshot)
        if value is not None:
            return clamp_percent(value)
    return 0
