"""Weekly log assembly and summaries."""

import logging
import math
import random
from collections import defaultdict
from collections.abc import Sequence
from dataclasses import dataclass
from datetime import UTC, date, datetime, time, timedelta, tzinfo
from typing import Protocol
from uuid import UUID

from nutrimind.domain.entries import DaySummary, LogEntry
from nutrimind.domain.goals import EffectiveGoalProfile, GoalProfile
from nutrimind.domain.nutrition import MealSlot, NutrientProfile

DAY_LABELS = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")
DAYS_IN_WEEK = 7
SYNTHETIC_VARIANCE = 0.2
SYNTHETIC_NAME = "Daily log (estimated)"
SYNTHETIC_HOUR = 12

_logger = logging.getLogger(__name__)


class HistoryRepository(Protocol):
    """Read-only source of previously logged entries."""

    def list_entries(self, start: datetime, end: datetime) -> list[LogEntry]:
        """Return entries logged in ``[start, end)``."""


@dataclass(frozen=True)
class WeekOverview:
    """Calorie performance across the days that have entries."""

    active_days: int
    total_calories: float
    average_calories: int
    target_calories: float
    difference: float
    is_deficit: bool


def week_start(today: date) -> date:
    """Return the Monday of the ISO week containing ``today``."""
    return today - timedelta(days=today.weekday())


def build_week(  # noqa: PLR0913
    today: date,
    live_entries: Sequence[LogEntry],
    goals: GoalProfile | EffectiveGoalProfile,
    *,
    history: HistoryRepository | None = None,
    rng: random.Random | None = None,
    synthetic: bool = True,
    tz: tzinfo | None = None,
) -> list[DaySummary]:
    """Build Monday..Sunday summaries for the week containing ``today``.

    Today's summary holds ``live_entries`` itself. Future days are empty.
    Past days use ``history`` when it has entries for them and otherwise
    get one synthetic placeholder entry when ``synthetic`` is enabled.
    """
    zone = tz or UTC
    generator = rng or random.Random()
    monday = week_start(today)
    past = _load_history(history, monday, today, zone)

    week: list[DaySummary] = []
    for offset in range(DAYS_IN_WEEK):
        day = monday + timedelta(days=offset)
        label = DAY_LABELS[offset]
        if day > today:
            entries: Sequence[LogEntry] = []
        elif day == today:
            entries = live_entries
        elif past.get(day):
            entries = past[day]
        elif synthetic:
            entries = [synthetic_entry(day, goals.targets.calories, generator, zone)]
        else:
            entries = []
        week.append(DaySummary(day=day, label=label, entries=entries))
    return week


def synthetic_entry(
    day: date, goal_calories: float, rng: random.Random, tz: tzinfo
) -> LogEntry:
    """Create a placeholder entry for a past day without history."""
    variance = rng.uniform(-SYNTHETIC_VARIANCE, SYNTHETIC_VARIANCE)
    daily_calories = _round_half_up(goal_calories * (1 + variance))
    nutrients = NutrientProfile(
        calories=daily_calories,
        protein=_round_half_up(daily_calories * 0.3 / 4),
        carbs=_round_half_up(daily_calories * 0.4 / 4),
        fat=_round_half_up(daily_calories * 0.3 / 9),
        fiber=20,
        salt=2000,
        potassium=3000,
    )
    return LogEntry(
        id=UUID(int=rng.getrandbits(128), version=4),
        name=SYNTHETIC_NAME,
        nutrients=nutrients,
        meal_slot=MealSlot.SNACK,
        logged_at=datetime.combine(day, time(hour=SYNTHETIC_HOUR), tzinfo=tz),
    )


def summarize_week(
    week: Sequence[DaySummary], goals: GoalProfile | EffectiveGoalProfile
) -> WeekOverview:
    """Compare logged calories against the target for the active days."""
    active = [summary for summary in week if summary.entries]
    total = sum(
        entry.nutrients.calories for summary in active for entry in summary.entries
    )
    days = len(active) or 1
    target = goals.targets.calories * days
    difference = target - total
    return WeekOverview(
        active_days=len(active),
        total_calories=total,
        average_calories=_round_half_up(total / days),
        target_calories=target,
        difference=difference,
        is_deficit=difference > 0,
    )


def _load_history(
    history: HistoryRepository | None, monday: date, today: date, tz: tzinfo
) -> dict[date, list[LogEntry]]:
    if history is None or monday >= today:
        return {}
    start = datetime.combine(monday, time.min, tzinfo=tz)
    end = datetime.combine(today, time.min, tzinfo=tz)
    entries = history.list_entries(start.astimezone(UTC), end.astimezone(UTC))
    grouped: dict[date, list[LogEntry]] = defaultdict(list)
    for entry in entries:
        grouped[entry.logged_at.astimezone(tz).date()].append(entry)
    for day_entries in grouped.values():
        day_entries.sort(key=lambda entry: entry.logged_at)
    _logger.debug("Loaded history for %s days since %s", len(grouped), monday)
    return grouped


def _round_half_up(value: float) -> int:
    return math.floor(value + 0.5)
