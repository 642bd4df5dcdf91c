from datetime import date as date_type
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class MuscleTarget(BaseModel):
    id: str
    label: str
    muscle_id: int

    model_config = ConfigDict(frozen=True)


class WorkoutDay(BaseModel):
    """Один из 7 фиксированных шаблонов недельного цикла."""
    index: int
    name: str
    color: str
    is_rest: bool
    muscles: List[MuscleTarget]

    model_config = ConfigDict(frozen=True)


class ScheduledWorkout(BaseModel):
    date: date_type
    offset: int
    workout: WorkoutDay


class OffsetRead(BaseModel):
    offset: int
    today: date_type
    workout: WorkoutDay


class OffsetUpdate(BaseModel):
    offset: int = Field(..., ge=0, le=6)


class CalendarDay(BaseModel):
    date: date_type
    day_name: str
    in_month: bool
    is_today: bool
    workout: WorkoutDay
    completed: bool
    status: Optional[str] = None


class CalendarMonth(BaseModel):
    year: int
    month: int
    month_name: str
    offset: int
    days: List[CalendarDay]
