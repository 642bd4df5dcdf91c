from typing import List, Literal, Optional, Union

from pydantic import BaseModel, Field


class Exercise(BaseModel):
    id: Union[int, str]
    name: str
    target: str
    primary_muscles: List[str] = Field(default_factory=list, serialization_alias="primaryMuscles")
    secondary_muscles: List[str] = Field(default_factory=list, serialization_alias="secondaryMuscles")
    equipment: str
    difficulty: str
    video_url: Optional[str] = Field(None, serialization_alias="videoUrl")
    thumbnail_url: Optional[str] = Field(None, serialization_alias="thumbnailUrl")
    instructions: List[str] = Field(default_factory=list)


class ExerciseList(BaseModel):
    count: int
    exercises: List[Exercise]


class Stretch(BaseModel):
    id: Union[int, str]
    name: str
    target: str
    primary_muscles: List[str] = Field(default_factory=list, serialization_alias="primaryMuscles")
    secondary_muscles: List[str] = Field(default_factory=list, serialization_alias="secondaryMuscles")
    video_url: Optional[str] = Field(None, serialization_alias="videoUrl")
    thumbnail_url: Optional[str] = Field(None, serialization_alias="thumbnailUrl")
    instructions: List[str] = Field(default_factory=list)
    duration: str
    type: Literal["pre", "post"]


class StretchList(BaseModel):
    count: int
    pre_workout: List[Stretch] = Field(serialization_alias="preWorkout")
    post_workout: List[Stretch] = Field(serialization_alias="postWorkout")
