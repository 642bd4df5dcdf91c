from datetime import date as date_type, datetime
from typing import Dict, List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

WorkoutStatus = Literal["done", "rest", "missed"]
WeightUnit = Literal["kg", "lbs"]
Mood = Literal["great", "good", "okay", "tired", "sore"]


class CompletionToggle(BaseModel):
    date: date_type
    completed: bool


class CompletionsRead(BaseModel):
    completed: Dict[str, bool]


class StatusUpdate(BaseModel):
    status: Optional[WorkoutStatus] = None


class StatusRead(BaseModel):
    date: date_type
    status: Optional[WorkoutStatus] = None
    completed: bool


class StatusesRead(BaseModel):
    statuses: Dict[str, WorkoutStatus]


class WeightUpdate(BaseModel):
    weight: float
    unit: WeightUnit = "kg"


class WeightRead(BaseModel):
    date: date_type
    weight: float
    unit: WeightUnit

    model_config = ConfigDict(from_attributes=True)


class NoteUpdate(BaseModel):
    note: str
    mood: Optional[Mood] = None


class NoteRead(BaseModel):
    date: date_type
    note: str
    mood: Optional[Mood] = None

    model_config = ConfigDict(from_attributes=True)


class PhotoCreate(BaseModel):
    data_url: str = Field(..., alias="dataUrl")
    date: Optional[date_type] = None
    note: Optional[str] = None

    model_config = ConfigDict(populate_by_name=True)


class PhotoRead(BaseModel):
    id: str
    date: date_type
    data_url: str = Field(..., serialization_alias="dataUrl")
    note: Optional[str] = None
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)


class ConsistencyStats(BaseModel):
    done_count: int
    scheduled_count: int
    percentage: int


class MuscleFrequency(BaseModel):
    name: str
    count: int
    percentage: float


class WeightPoint(BaseModel):
    date: date_type
    weight: float
    unit: WeightUnit


class ProgressSummary(BaseModel):
    days: int
    offset: int
    consistency: ConsistencyStats
    muscle_frequency: List[MuscleFrequency]
    weights: List[WeightPoint]
