"""User and team statistics: learning time, completion rate and the 7-day chart."""

from collections.abc import Callable
from datetime import UTC, date, datetime, time, timedelta

import structlog

from coaching_analytics.analytics.signals import (
    ENERGY_SIGNALS,
    FOCUS_SIGNALS,
    DaySnapshot,
    resolve,
)
from coaching_analytics.errors import Forbidden, NotFound
from coaching_analytics.models.mood import MoodLog
from coaching_analytics.models.progress import CourseProgress, utc_now
from coaching_analytics.models.session import CoachingSession
from coaching_analytics.models.statistics import (
    DailyStatPoint,
    EnergyLevel,
    TeamMemberStatistics,
    UserStatistics,
)
from coaching_analytics.models.user import TEAM_MEMBER_ROLES, TEAM_VIEWER_ROLES
from coaching_analytics.scoring import mean, round_half_up
from coaching_analytics.storage.base import MoodStore, ProgressStore, SessionStore, UserDirectory

logger = structlog.get_logger()

CHART_DAYS = 7
MINUTES_PER_LESSON = 15

# Indexed by date.weekday() (Monday == 0)
DAY_LABELS = ("Lun", "Mar", "Mer", "Jeu", "Ven", "Sam", "Dim")


def trailing_days(today: date, count: int = CHART_DAYS) -> list[date]:
    """The ``count`` calendar days ending with ``today``, oldest first."""
    return [today - timedelta(days=offset) for offset in range(count - 1, -1, -1)]


def day_bounds(day: date) -> tuple[datetime, datetime]:
    """UTC midnight of ``day`` and of the following day."""
    start = datetime.combine(day, time.min, tzinfo=UTC)
    return start, start + timedelta(days=1)


def build_daily_series(
    user_id: str,
    sessions: list[CoachingSession],
    mood_logs: list[MoodLog],
    days: list[date],
) -> list[DailyStatPoint]:
    """Fuse mood logs and session assessments into one point per day."""
    moods_by_day = {log.day: log for log in mood_logs}
    points = []
    for day in days:
        start, end = day_bounds(day)
        day_sessions = [s for s in sessions if start <= s.start_time < end]
        snapshot = DaySnapshot(
            day=day,
            sessions=day_sessions,
            assessments=[a for s in day_sessions for a in s.assessments_for(user_id)],
            mood=moods_by_day.get(day),
        )
        points.append(
            DailyStatPoint(
                day_label=DAY_LABELS[day.weekday()],
                energy=resolve(ENERGY_SIGNALS, snapshot),
                focus=resolve(FOCUS_SIGNALS, snapshot),
                date=day,
            )
        )
    return points


def summarize_energy(points: list[DailyStatPoint]) -> EnergyLevel:
    """Label the week from days that have an energy reading; empty days are skipped."""
    readings = [p.energy for p in points if p.energy > 0]
    if not readings:
        return EnergyLevel.LOW
    return EnergyLevel.from_average(mean(readings))


def total_learning_minutes(
    sessions: list[CoachingSession], entries: list[CourseProgress]
) -> int:
    session_minutes = sum(s.duration for s in sessions if s.is_completed)
    lesson_minutes = sum(len(e.completed_lesson_ids) for e in entries) * MINUTES_PER_LESSON
    return session_minutes + lesson_minutes


def format_learning_time(total_minutes: int) -> str:
    hours, minutes = divmod(total_minutes, 60)
    return f"{hours}h {minutes}m"


def completion_rate(entries: list[CourseProgress]) -> int:
    """Mean course progress, 0 without any entry."""
    if not entries:
        return 0
    return round_half_up(mean(e.progress for e in entries))


class AnalyticsAggregator:
    """Computes statistics from a fresh snapshot of the stores on every call.

    Args:
        sessions: Completed coaching sessions and their assessments.
        moods: Daily mood logs.
        progress: Course progress ledger.
        users: User directory.
        clock: Returns the current time; "today" is its UTC date.
    """

    def __init__(
        self,
        sessions: SessionStore,
        moods: MoodStore,
        progress: ProgressStore,
        users: UserDirectory,
        clock: Callable[[], datetime] = utc_now,
    ):
        self.sessions = sessions
        self.moods = moods
        self.progress = progress
        self.users = users
        self.clock = clock

    def today(self) -> date:
        return self.clock().astimezone(UTC).date()

    def _learning_summary(self, user_id: str) -> tuple[list[CoachingSession], str, int]:
        sessions = self.sessions.find_completed_for_user_in_range(user_id, None, None)
        entries = self.progress.list_for_user(user_id)
        learning_time = format_learning_time(total_learning_minutes(sessions, entries))
        return sessions, learning_time, completion_rate(entries)

    def compute_user_statistics(self, user_id: str) -> UserStatistics:
        """Learning time, completion rate, energy label and the 7-day chart."""
        if self.users.get_user(user_id) is None:
            raise NotFound("User", user_id)

        sessions, learning_time, rate = self._learning_summary(user_id)
        days = trailing_days(self.today())
        mood_logs = self.moods.find_for_user_in_range(user_id, days[0], days[-1])
        chart = build_daily_series(user_id, sessions, mood_logs, days)
        energy_level = summarize_energy(chart)

        logger.info(
            "statistics_computed",
            user_id=user_id,
            learning_time=learning_time,
            completion_rate=rate,
            energy_level=energy_level.value,
        )
        return UserStatistics(
            learning_time=learning_time,
            completion_rate=f"{rate}%",
            energy_level=energy_level,
            chart_data=chart,
        )

    def compute_team_statistics(self, manager_id: str) -> list[TeamMemberStatistics]:
        """Learning summary of every learner and coach, for managers and coaches."""
        manager = self.users.get_user(manager_id)
        if manager is None:
            raise NotFound("User", manager_id)
        if manager.role not in TEAM_VIEWER_ROLES:
            raise Forbidden(f"Role {manager.role} cannot view team statistics")

        team = []
        for member in self.users.list_users(TEAM_MEMBER_ROLES):
            if member.id == manager.id:
                continue
            _, learning_time, rate = self._learning_summary(member.id)
            team.append(
                TeamMemberStatistics(
                    id=member.id,
                    name=member.name,
                    email=member.email,
                    role=member.role,
                    learning_time=learning_time,
                    completion_rate=f"{rate}%",
                    last_active=member.last_active,
                )
            )
        logger.info("team_statistics_computed", manager_id=manager_id, members=len(team))
        return team
