"""
Reshapes MuscleWiki exercises for the frontend and sorts stretches into
pre-workout (dynamic) and post-workout (static) groups.
"""
import math
from typing import Any, Dict, List, Optional

from getfit.schemas.exercise import Exercise, ExerciseList, Stretch, StretchList

DYNAMIC_KEYWORDS = ("dynamic", "swing", "circle", "rotation")

PRE_WORKOUT_DURATION = "30-60 seconds"
POST_WORKOUT_DURATION = "20-30 seconds"


def muscle_names(items: Optional[List[Dict[str, Any]]]) -> List[str]:
    return [m.get("name") for m in items or [] if m.get("name")]


def _first_media(images: Optional[List[Dict[str, Any]]], field: str) -> Optional[str]:
    if not images:
        return None
    return images[0].get(field) or None


def gendered_media(ex: Dict[str, Any], field: str, gender: str = "male") -> Optional[str]:
    """Media for the requested gender, falling back to the other one."""
    male = _first_media(ex.get("male_images"), field)
    female = _first_media(ex.get("female_images"), field)
    if gender == "female":
        return female or male
    return male or female


def ordered_steps(ex: Dict[str, Any]) -> List[str]:
    steps = ex.get("correct_steps") or []
    return [s.get("text", "") for s in sorted(steps, key=lambda s: s.get("order", 0))]


def primary_target(ex: Dict[str, Any]) -> str:
    primary = ex.get("muscles_primary") or []
    return primary[0].get("name") if primary and primary[0].get("name") else "Unknown"


def normalize_exercise(ex: Dict[str, Any]) -> Exercise:
    category = ex.get("category") or {}
    difficulty = ex.get("difficulty") or {}
    return Exercise(
        id=ex.get("id"),
        name=ex.get("name") or "Exercise",
        target=primary_target(ex),
        primary_muscles=muscle_names(ex.get("muscles_primary")),
        secondary_muscles=muscle_names(ex.get("muscles_secondary")),
        equipment=category.get("name") or "Bodyweight",
        difficulty=difficulty.get("name") or "Intermediate",
        video_url=_first_media(ex.get("male_images"), "unbranded_video"),
        thumbnail_url=_first_media(ex.get("male_images"), "og_image"),
        instructions=ordered_steps(ex),
    )


def build_exercise_list(data: Dict[str, Any]) -> ExerciseList:
    results = data.get("results") or []
    return ExerciseList(
        count=data.get("count", len(results)),
        exercises=[normalize_exercise(ex) for ex in results],
    )


def is_pre_workout(name: str) -> bool:
    lowered = name.lower()
    return any(keyword in lowered for keyword in DYNAMIC_KEYWORDS)


def normalize_stretch(ex: Dict[str, Any]) -> Stretch:
    name = ex.get("name") or "Stretch"
    pre = is_pre_workout(name)
    return Stretch(
        id=ex.get("id"),
        name=name,
        target=primary_target(ex),
        primary_muscles=muscle_names(ex.get("muscles_primary")),
        secondary_muscles=muscle_names(ex.get("muscles_secondary")),
        video_url=_first_media(ex.get("male_images"), "unbranded_video"),
        thumbnail_url=_first_media(ex.get("male_images"), "og_image"),
        instructions=ordered_steps(ex),
        duration=PRE_WORKOUT_DURATION if pre else POST_WORKOUT_DURATION,
        type="pre" if pre else "post",
    )


def split_stretches(data: Dict[str, Any]) -> StretchList:
    """
    Most MuscleWiki stretches are static holds. When none of them look
    dynamic, the first half of the list is offered as pre-workout.
    """
    results = data.get("results") or []
    stretches = [normalize_stretch(ex) for ex in results]
    pre = [s for s in stretches if s.type == "pre"]
    post = [s for s in stretches if s.type == "post"]

    if not pre and post:
        half = math.ceil(len(post) / 2)
        pre = [
            s.model_copy(update={"type": "pre", "duration": PRE_WORKOUT_DURATION})
            for s in post[:half]
        ]
        post = post[half:]

    return StretchList(
        count=data.get("count", len(results)),
        pre_workout=pre,
        post_workout=post,
    )
