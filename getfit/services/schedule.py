"""
Recurring 7-day workout schedule.

Maps any calendar date to one of the 7 workout templates. "Today" is aligned
with the template at the user's phase offset and every other date is shifted
by its calendar-day distance from today.
"""
from datetime import date, datetime, timedelta
from typing import Dict, List, Optional

import pytz

from getfit.core.config import settings
from getfit.schemas.schedule import MuscleTarget, WorkoutDay

MUSCLES: Dict[str, MuscleTarget] = {
    "chest": MuscleTarget(id="chest", label="Chest", muscle_id=2),
    "back": MuscleTarget(id="back", label="Back", muscle_id=7),
    "shoulders": MuscleTarget(id="shoulders", label="Shoulders", muscle_id=6),
    "biceps": MuscleTarget(id="biceps", label="Biceps", muscle_id=1),
    "triceps": MuscleTarget(id="triceps", label="Triceps", muscle_id=5),
    "legs": MuscleTarget(id="legs", label="Legs", muscle_id=3),
    "glutes": MuscleTarget(id="glutes", label="Glutes", muscle_id=9),
    "abs": MuscleTarget(id="abs", label="Core", muscle_id=12),
    # no specific MuscleWiki muscle
    "cardio": MuscleTarget(id="cardio", label="Cardio", muscle_id=0),
}
MUSCLES["core"] = MUSCLES["abs"]


def _template(index: int, name: str, color: str, muscles: List[str], is_rest: bool = False) -> WorkoutDay:
    return WorkoutDay(
        index=index,
        name=name,
        color=color,
        is_rest=is_rest,
        muscles=[MUSCLES[m] for m in muscles],
    )


WORKOUT_TEMPLATES: List[WorkoutDay] = [
    _template(0, "Chest + Shoulders", "red", ["chest", "shoulders"]),
    _template(1, "Back + Biceps", "blue", ["back", "biceps"]),
    _template(2, "Legs", "purple", ["legs", "glutes"]),
    _template(3, "Rest + Stretching", "cyan", [], is_rest=True),
    _template(4, "Back + Core", "emerald", ["back", "core"]),
    _template(5, "Cardio", "rose", ["cardio"]),
    _template(6, "Cardio + Core", "orange", ["cardio", "abs"]),
]

CYCLE_LENGTH = len(WORKOUT_TEMPLATES)

# date.weekday(): Monday == 0
_WEEKDAY_TO_TEMPLATE = {
    0: 0,  # Monday -> Chest + Shoulders
    1: 1,  # Tuesday -> Back + Biceps
    2: 2,  # Wednesday -> Legs
    3: 3,  # Thursday -> Rest + Stretching
    4: 4,  # Friday -> Back + Core
    5: 5,  # Saturday -> Cardio
    6: 6,  # Sunday -> Cardio + Core
}

SHORT_DAY_NAMES = ["Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat"]
FULL_DAY_NAMES = [
    "Sunday",
    "Monday",
    "Tuesday",
    "Wednesday",
    "Thursday",
    "Friday",
    "Saturday",
]
MONTH_NAMES = [
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
]

CALENDAR_CELLS = 42  # 6 rows * 7 days


def today() -> date:
    """Current calendar date in the configured timezone."""
    tz = pytz.timezone(settings.timezone)
    return datetime.now(tz).date()


def clamp_offset(offset: int) -> int:
    return max(0, min(CYCLE_LENGTH - 1, int(offset)))


def days_between(start: date, end: date) -> int:
    """Calendar-day difference, positive when ``end`` is after ``start``."""
    return (end - start).days


def workout_index_for_date(target: date, offset: int = 0, today_date: Optional[date] = None) -> int:
    if today_date is None:
        today_date = today()
    diff = days_between(today_date, target)
    return ((offset + diff) % CYCLE_LENGTH + CYCLE_LENGTH) % CYCLE_LENGTH


def workout_for_date(target: date, offset: int = 0, today_date: Optional[date] = None) -> WorkoutDay:
    """
    Workout template for ``target``.

    ``offset`` is the template index used for today; the rest of the
    schedule is shifted around it.
    """
    return WORKOUT_TEMPLATES[workout_index_for_date(target, offset, today_date)]


def workout_for_weekday(target: date) -> WorkoutDay:
    """Fixed weekday mapping used before the phase offset existed."""
    return WORKOUT_TEMPLATES[_WEEKDAY_TO_TEMPLATE[target.weekday()]]


def sunday_index(day: date) -> int:
    """Weekday index with Sunday == 0."""
    return (day.weekday() + 1) % 7


def day_name(day_index: int) -> str:
    return SHORT_DAY_NAMES[day_index]


def full_day_name(day_index: int) -> str:
    return FULL_DAY_NAMES[day_index]


def month_name(month_index: int) -> str:
    """``month_index`` is zero-based, January == 0."""
    return MONTH_NAMES[month_index]


def days_in_month(year: int, month: int) -> List[date]:
    """
    Calendar grid for a month: leading days of the previous month so that the
    first row starts on Sunday, every day of the month, then days of the next
    month until the grid has 42 cells.
    """
    first_day = date(year, month, 1)
    start = first_day - timedelta(days=sunday_index(first_day))
    return [start + timedelta(days=i) for i in range(CALENDAR_CELLS)]


def last_n_days(n: int, today_date: Optional[date] = None) -> List[date]:
    """The ``n`` days ending today, oldest first."""
    if today_date is None:
        today_date = today()
    return [today_date - timedelta(days=i) for i in range(n - 1, -1, -1)]
