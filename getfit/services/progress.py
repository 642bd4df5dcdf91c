"""
Progress statistics over a trailing window of days.
"""
import math
from datetime import date
from typing import Dict, List

from sqlalchemy.orm import Session

from getfit.models.weight_entry import WeightEntry
from getfit.models.workout_log import WorkoutStatusEntry
from getfit.schemas.tracker import (
    ConsistencyStats,
    MuscleFrequency,
    ProgressSummary,
    WeightPoint,
)
from getfit.services import tracker_store
from getfit.services.schedule import last_n_days, workout_for_date

PROGRESS_WINDOW_DAYS = 30

# muscle groups counted per workout name; Legs day counts only "Legs"
MUSCLE_GROUPS_BY_WORKOUT: Dict[str, List[str]] = {
    "Chest + Shoulders": ["Chest", "Shoulders"],
    "Back + Biceps": ["Back", "Biceps"],
    "Legs": ["Legs"],
    "Rest + Stretching": [],
    "Back + Core": ["Back", "Core"],
    "Cardio": ["Cardio"],
    "Cardio + Core": ["Cardio", "Core"],
}


def consistency_stats(days: List[date], statuses: Dict[date, str], offset: int, today_date: date) -> ConsistencyStats:
    done_count = 0
    scheduled_count = 0
    for day in days:
        if statuses.get(day) == "done":
            done_count += 1
        if not workout_for_date(day, offset, today_date).is_rest:
            scheduled_count += 1

    percentage = int(math.floor(done_count / scheduled_count * 100 + 0.5)) if scheduled_count > 0 else 0
    return ConsistencyStats(
        done_count=done_count,
        scheduled_count=scheduled_count,
        percentage=percentage,
    )


def muscle_frequency(days: List[date], statuses: Dict[date, str], offset: int, today_date: date) -> List[MuscleFrequency]:
    frequency: Dict[str, int] = {}
    for day in days:
        if statuses.get(day) != "done":
            continue
        workout = workout_for_date(day, offset, today_date)
        for name in MUSCLE_GROUPS_BY_WORKOUT.get(workout.name, []):
            frequency[name] = frequency.get(name, 0) + 1

    entries = sorted(frequency.items(), key=lambda item: item[1], reverse=True)
    max_count = entries[0][1] if entries else 1
    return [
        MuscleFrequency(name=name, count=count, percentage=count / max_count * 100)
        for name, count in entries
    ]


def progress_summary(db: Session, today_date: date, window: int = PROGRESS_WINDOW_DAYS) -> ProgressSummary:
    days = last_n_days(window, today_date)
    offset = tracker_store.get_offset(db)

    status_rows = (
        db.query(WorkoutStatusEntry)
        .filter(WorkoutStatusEntry.date >= days[0], WorkoutStatusEntry.date <= days[-1])
        .all()
    )
    statuses = {row.date: row.status for row in status_rows}

    weight_rows = (
        db.query(WeightEntry)
        .filter(WeightEntry.date >= days[0], WeightEntry.date <= days[-1])
        .order_by(WeightEntry.date.asc())
        .all()
    )

    return ProgressSummary(
        days=window,
        offset=offset,
        consistency=consistency_stats(days, statuses, offset, today_date),
        muscle_frequency=muscle_frequency(days, statuses, offset, today_date),
        weights=[WeightPoint(date=w.date, weight=w.weight, unit=w.unit) for w in weight_rows],
    )
