"""
Workout schedule endpoints: today's workout, the template list, any date,
the phase offset and a month calendar grid.
"""
import logging
from datetime import date
from typing import List

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from getfit.deps import get_db, get_today
from getfit.schemas.schedule import (
    CalendarDay,
    CalendarMonth,
    OffsetRead,
    OffsetUpdate,
    ScheduledWorkout,
    WorkoutDay,
)
from getfit.services import schedule, tracker_store

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["schedule"])


@router.get("/schedule/templates", response_model=List[WorkoutDay])
def list_templates():
    return schedule.WORKOUT_TEMPLATES


@router.get("/schedule/offset", response_model=OffsetRead)
def get_offset(
    db: Session = Depends(get_db),
    today: date = Depends(get_today),
):
    offset = tracker_store.get_offset(db)
    return OffsetRead(offset=offset, today=today, workout=schedule.WORKOUT_TEMPLATES[offset])


@router.put("/schedule/offset", response_model=OffsetRead)
def update_offset(
    payload: OffsetUpdate,
    db: Session = Depends(get_db),
    today: date = Depends(get_today),
):
    """Choose which template is today's workout; the rest of the cycle shifts with it."""
    offset = tracker_store.set_offset(db, schedule.clamp_offset(payload.offset))
    return OffsetRead(offset=offset, today=today, workout=schedule.WORKOUT_TEMPLATES[offset])


@router.get("/schedule/today", response_model=ScheduledWorkout)
def today_workout(
    db: Session = Depends(get_db),
    today: date = Depends(get_today),
):
    offset = tracker_store.get_offset(db)
    return ScheduledWorkout(
        date=today,
        offset=offset,
        workout=schedule.workout_for_date(today, offset, today),
    )


@router.get("/schedule/{day}", response_model=ScheduledWorkout)
def workout_for_day(
    day: date,
    db: Session = Depends(get_db),
    today: date = Depends(get_today),
):
    offset = tracker_store.get_offset(db)
    return ScheduledWorkout(
        date=day,
        offset=offset,
        workout=schedule.workout_for_date(day, offset, today),
    )


@router.get("/calendar/{year}/{month}", response_model=CalendarMonth)
def calendar_month(
    year: int,
    month: int,
    db: Session = Depends(get_db),
    today: date = Depends(get_today),
):
    """
    42-cell month grid (weeks start on Sunday) with the scheduled workout,
    completion and status of every day.
    """
    if not 1 <= month <= 12 or not 1900 <= year <= 2999:
        raise HTTPException(status_code=400, detail="Invalid year or month")

    offset = tracker_store.get_offset(db)
    completions = tracker_store.list_completions(db)
    statuses = tracker_store.list_statuses(db)

    days = []
    for day in schedule.days_in_month(year, month):
        key = tracker_store.date_key(day)
        days.append(
            CalendarDay(
                date=day,
                day_name=schedule.day_name(schedule.sunday_index(day)),
                in_month=day.month == month,
                is_today=day == today,
                workout=schedule.workout_for_date(day, offset, today),
                completed=completions.get(key, False),
                status=statuses.get(key),
            )
        )

    return CalendarMonth(
        year=year,
        month=month,
        month_name=schedule.month_name(month - 1),
        offset=offset,
        days=days,
    )
