"""
Age- and goal-aware exercise recommendations.

MuscleWiki is tried first for workouts with a known muscle group. When it
yields fewer than 5 usable exercises the list is topped up (or replaced)
with OpenAI suggestions.
"""
import asyncio
import json
import logging
import time
from typing import Any, Dict, List, Optional

from getfit.external.musclewiki_client import MUSCLE_IDS, fetch_exercises
from getfit.schemas.fitness import ExerciseResult, FitnessFilters, FitnessResponse
from getfit.services.exercise_library import gendered_media, muscle_names, ordered_steps, primary_target
from getfit.services.llm_client import OpenAINotConfigured, chat_completion
from getfit.services.video_check import validate_video_url, youtube_thumbnail

logger = logging.getLogger(__name__)

MAX_EXERCISES = 8
MIN_MUSCLEWIKI_EXERCISES = 5
MUSCLEWIKI_LIMIT = 20


def _is_senior(age_group: Optional[str]) -> bool:
    return bool(age_group) and ("Senior" in age_group or "60+" in age_group)


def musclewiki_tags(ex: Dict[str, Any], filters: FitnessFilters) -> List[str]:
    tags: List[str] = []
    if _is_senior(filters.age_group):
        tags += ["Low Impact", "Joint Friendly"]
    if (ex.get("difficulty") or {}).get("name") == "Beginner":
        tags.append("Beginner Friendly")
    category = ex.get("category")
    if not category or category.get("name") == "Bodyweight":
        tags.append("No Equipment")
    return tags


def ai_tags(filters: FitnessFilters) -> List[str]:
    tags: List[str] = []
    if _is_senior(filters.age_group):
        tags += ["Low Impact", "Joint Friendly"]
    if filters.goal and "beginner" in filters.goal.lower():
        tags.append("Beginner Friendly")
    if not filters.equipment or "bodyweight" in filters.equipment.lower():
        tags.append("No Equipment")
    return tags


def age_context(age_group: str) -> str:
    if "Teen" in age_group or "13-17" in age_group:
        return "Focus on safe, form-focused exercises suitable for growing bodies. "
    if "Young Adult" in age_group or "18-30" in age_group:
        return "Can include moderate to high intensity exercises. "
    if "Adult" in age_group or "31-50" in age_group:
        return "Focus on sustainable, joint-friendly movements. "
    if "Senior" in age_group or "50+" in age_group or "60+" in age_group:
        return (
            "Prioritize low-impact, joint-friendly exercises. Avoid high-impact movements. "
            "Focus on balance and mobility. "
        )
    return ""


def build_prompt(filters: FitnessFilters) -> str:
    context = age_context(filters.age_group or "")
    if filters.goal:
        context += f"Goal: {filters.goal}. "
    if filters.equipment:
        context += f"Equipment available: {filters.equipment}. "
    if filters.muscle_group:
        context += f"Focus on: {filters.muscle_group}. "

    if filters.type == "workout":
        return f"""Generate exactly 5-8 personalized workout exercises for a {filters.age_group} {filters.gender}. {context}

Output format as JSON:
{{
  "exercises": [
    {{
      "name": "Exercise Name",
      "target": "Primary muscle group",
      "primaryMuscles": ["muscle1", "muscle2"],
      "secondaryMuscles": ["muscle3"],
      "equipment": "Equipment needed",
      "difficulty": "Beginner/Intermediate/Advanced",
      "videoUrl": "YouTube URL if available",
      "instructions": ["Step 1", "Step 2", "Step 3"],
      "tags": ["Low Impact", "Joint Friendly"]
    }}
  ]
}}

Requirements:
- Exercises should be age-appropriate and safe
- Include clear, numbered instructions
- ONLY provide YouTube video URLs that are publicly available and accessible
- Do NOT include placeholder URLs or unavailable video links
- If you cannot find a valid YouTube video URL for an exercise, omit the videoUrl field (set to null)
- Add relevant tags (Low Impact, Joint Friendly, Beginner Friendly, etc.)
- Respect equipment constraints
- Focus on the specified muscle group if provided
- Return ONLY valid JSON, no markdown formatting"""

    return f"""Generate exactly 5-8 personalized stretching exercises for a {filters.age_group} {filters.gender}. {context}

Output format as JSON:
{{
  "exercises": [
    {{
      "name": "Stretch Name",
      "target": "Primary muscle group",
      "primaryMuscles": ["muscle1", "muscle2"],
      "secondaryMuscles": ["muscle3"],
      "equipment": "None or minimal",
      "difficulty": "Beginner/Intermediate/Advanced",
      "videoUrl": "YouTube URL if available",
      "instructions": ["Step 1", "Step 2", "Step 3"],
      "tags": ["Low Impact", "Joint Friendly"],
      "duration": "30 seconds"
    }}
  ]
}}

Requirements:
- Stretches should be age-appropriate and safe
- Include clear, numbered instructions
- ONLY provide YouTube video URLs that are publicly available and accessible
- Do NOT include placeholder URLs or unavailable video links
- If you cannot find a valid YouTube video URL for a stretch, omit the videoUrl field (set to null)
- Add relevant tags
- Specify duration for each stretch
- Return ONLY valid JSON, no markdown formatting"""


async def _from_musclewiki_entry(ex: Dict[str, Any], filters: FitnessFilters) -> ExerciseResult:
    gender = filters.gender or "male"
    video_url = gendered_media(ex, "unbranded_video", gender)
    valid = await validate_video_url(video_url) if video_url else False
    category = ex.get("category") or {}
    difficulty = ex.get("difficulty") or {}
    return ExerciseResult(
        id=f"mw-{ex.get('id')}",
        name=ex.get("name") or "Exercise",
        target=primary_target(ex),
        primary_muscles=muscle_names(ex.get("muscles_primary")),
        secondary_muscles=muscle_names(ex.get("muscles_secondary")),
        equipment=category.get("name") or "Bodyweight",
        difficulty=difficulty.get("name") or "Intermediate",
        video_url=video_url if valid else None,
        thumbnail_url=gendered_media(ex, "og_image", gender) if valid else None,
        instructions=ordered_steps(ex),
        tags=musclewiki_tags(ex, filters),
        source="musclewiki",
    )


async def musclewiki_exercises(filters: FitnessFilters) -> List[ExerciseResult]:
    if filters.type != "workout" or not filters.muscle_group:
        return []
    muscle_id = MUSCLE_IDS.get(filters.muscle_group.lower())
    if not muscle_id:
        return []

    try:
        data = await fetch_exercises(muscle_id, limit=MUSCLEWIKI_LIMIT)
    except Exception as e:
        logger.warning(f"[FITNESS] MuscleWiki fetch failed: {e}")
        return []

    named = [ex for ex in data.get("results") or [] if isinstance(ex, dict) and ex.get("name")]
    results = await asyncio.gather(
        *(_from_musclewiki_entry(ex, filters) for ex in named),
        return_exceptions=True,
    )
    exercises = []
    for ex, result in zip(named, results):
        if isinstance(result, Exception):
            logger.error(f"[FITNESS] Error validating exercise {ex.get('id')}: {result}")
            continue
        exercises.append(result)
    return exercises


async def _from_ai_entry(ex: Dict[str, Any], idx: int, filters: FitnessFilters, stamp: int) -> Optional[ExerciseResult]:
    name = ex.get("name") or ex.get("title")
    if not name:
        return None

    video_url = ex.get("videoUrl") or ex.get("video") or None
    valid = await validate_video_url(video_url) if video_url else False

    equipment = ex.get("equipment") or filters.equipment or ("None" if filters.type == "stretch" else "Bodyweight")
    target = ex.get("target") or ex.get("muscleGroup") or filters.muscle_group or "Full Body"
    thumbnail = None
    if valid:
        thumbnail = ex.get("thumbnailUrl") or ex.get("thumbnail") or youtube_thumbnail(video_url)

    return ExerciseResult(
        id=f"ai-{stamp}-{idx}",
        name=name,
        target=target,
        primary_muscles=ex.get("primaryMuscles") or [ex.get("target") or filters.muscle_group or "Full Body"],
        secondary_muscles=ex.get("secondaryMuscles") or [],
        equipment=equipment,
        difficulty=ex.get("difficulty") or "Intermediate",
        video_url=video_url if valid else None,
        thumbnail_url=thumbnail,
        gif_url=ex.get("gifUrl") or ex.get("gif") or None,
        instructions=ex.get("instructions") or ex.get("steps") or [],
        tags=ex.get("tags") or ai_tags(filters),
        source="ai",
    )


async def ai_exercises(filters: FitnessFilters) -> List[ExerciseResult]:
    messages = [
        {
            "role": "system",
            "content": (
                f"You are a certified fitness expert who provides personalized {filters.type} "
                "recommendations. Always respond with valid JSON only, no markdown formatting."
            ),
        },
        {"role": "user", "content": build_prompt(filters)},
    ]
    raw = await chat_completion(messages, temperature=0.7)
    if not raw:
        raise ValueError("No response from AI")

    try:
        parsed = json.loads(raw)
    except json.JSONDecodeError:
        raise ValueError(f"LLM returned non-JSON response: {raw!r}")

    if not isinstance(parsed, dict):
        raise ValueError("Invalid response format from AI")
    entries = parsed.get("exercises") or parsed.get("results") or []
    stamp = int(time.time() * 1000)
    results = await asyncio.gather(
        *(_from_ai_entry(ex, idx, filters, stamp) for idx, ex in enumerate(entries) if isinstance(ex, dict)),
        return_exceptions=True,
    )

    exercises = []
    for result in results:
        if isinstance(result, Exception):
            logger.error(f"[FITNESS] Error validating AI exercise: {result}")
            continue
        if result is not None:
            exercises.append(result)
    return exercises


async def recommend(filters: FitnessFilters, ai_available: bool) -> FitnessResponse:
    """
    Raises OpenAINotConfigured when MuscleWiki is not enough and OpenAI is not
    configured; ValueError when the model output cannot be used.
    """
    from_musclewiki = (await musclewiki_exercises(filters))[:MAX_EXERCISES]

    if len(from_musclewiki) >= MIN_MUSCLEWIKI_EXERCISES:
        logger.info(f"[FITNESS] Returning {len(from_musclewiki)} MuscleWiki exercises")
        return FitnessResponse(exercises=from_musclewiki, source="musclewiki", count=len(from_musclewiki))

    if not ai_available:
        raise OpenAINotConfigured()

    from_ai = await ai_exercises(filters)
    combined = (from_musclewiki + from_ai)[:MAX_EXERCISES]
    logger.info(f"[FITNESS] Returning {len(combined)} exercises ({len(from_musclewiki)} from MuscleWiki)")
    return FitnessResponse(
        exercises=combined,
        source="mixed" if from_musclewiki else "ai",
        count=len(combined),
    )
