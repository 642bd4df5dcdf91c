from typing import Any, Dict, List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field


class FitnessFilters(BaseModel):
    age_group: Optional[str] = Field(None, alias="ageGroup")
    gender: Optional[str] = None
    type: Optional[Literal["workout", "stretch"]] = None
    muscle_group: Optional[str] = Field(None, alias="muscleGroup")
    goal: Optional[str] = None
    equipment: Optional[str] = None

    model_config = ConfigDict(populate_by_name=True)


class ExerciseResult(BaseModel):
    id: str
    name: str
    target: str
    primary_muscles: List[str] = Field(serialization_alias="primaryMuscles")
    secondary_muscles: List[str] = Field(serialization_alias="secondaryMuscles")
    equipment: str
    difficulty: str
    video_url: Optional[str] = Field(None, serialization_alias="videoUrl")
    thumbnail_url: Optional[str] = Field(None, serialization_alias="thumbnailUrl")
    gif_url: Optional[str] = Field(None, serialization_alias="gifUrl")
    instructions: List[str]
    tags: List[str]
    source: Literal["musclewiki", "ai"]


class FitnessResponse(BaseModel):
    exercises: List[ExerciseResult]
    source: Literal["musclewiki", "mixed", "ai"]
    count: int


class UserInfo(BaseModel):
    gender: str = ""
    age: Union[str, int] = ""
    height: str = ""
    weight: str = ""
    activity_level: str = Field("", alias="activityLevel")
    diet_preference: str = Field("", alias="dietPreference")
    goal: str = ""
    workout_access: str = Field("", alias="workoutAccess")
    time_per_day: Union[str, int] = Field("", alias="timePerDay")

    model_config = ConfigDict(populate_by_name=True)


class PlanResponse(BaseModel):
    workout_plan: Dict[str, Any] = Field(serialization_alias="workoutPlan")
    meal_plan: Dict[str, Any] = Field(serialization_alias="mealPlan")
