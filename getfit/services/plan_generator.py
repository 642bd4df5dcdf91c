"""
Personalized 7-day workout and meal plans generated by OpenAI.
"""
import json
import logging
from typing import Any, Dict

from getfit.schemas.fitness import UserInfo
from getfit.services.llm_client import chat_completion

logger = logging.getLogger(__name__)

SYSTEM_PROMPT = (
    "You are a certified fitness and nutrition expert who provides personalized weekly "
    "workout and meal plans. Always respond with valid JSON only, no markdown formatting, "
    "no code blocks."
)


class PlanParseError(ValueError):
    """Model output for a plan could not be used."""


def build_workout_prompt(info: UserInfo) -> str:
    return f"""Generate a 7-day personalized workout plan for a {info.age}-year-old {info.gender}, {info.height} height, {info.weight} weight, goal is {info.goal}, prefers {info.diet_preference} food, has {info.workout_access} access, and can work out for {info.time_per_day} minutes daily.

Output format as JSON object with this exact structure:
{{
  "Monday": {{
    "focus": "Chest + Triceps",
    "exercises": [
      {{
        "name": "Incline Bench Press",
        "sets": "4 x 12",
        "reps": "12",
        "video": "https://youtube.com/watch?v=xyz"
      }}
    ]
  }},
  "Tuesday": {{ ... }},
  "Wednesday": {{ ... }},
  "Thursday": {{ ... }},
  "Friday": {{ ... }},
  "Saturday": {{ ... }},
  "Sunday": {{ ... }}
}}

Requirements:
- Each day should target different muscle groups
- Include 4-6 exercises per day
- Provide sets x reps format
- Include YouTube video links for exercises when possible
- Do not repeat the same workout within 2 days
- Focus on variety and progression
- Adapt exercises based on workout access ({info.workout_access})
- Respect time constraint ({info.time_per_day} minutes)
- Return ONLY valid JSON, no markdown formatting"""


def build_meal_prompt(info: UserInfo) -> str:
    return f"""Generate a 7-day personalized meal plan (3 meals + 1 snack per day) for a {info.age}-year-old {info.gender}, {info.height} height, {info.weight} weight, goal is {info.goal}, prefers {info.diet_preference} food, activity level is {info.activity_level}.

Output format as JSON object with this exact structure:
{{
  "Monday": {{
    "breakfast": {{
      "name": "Oats + Eggs",
      "ingredients": [
        {{ "item": "Rolled Oats", "qty": "1/2 cup" }},
        {{ "item": "Eggs", "qty": "3 boiled" }}
      ],
      "calories": 420,
      "prep": "Boil oats in milk, boil eggs separately"
    }},
    "lunch": {{ ... }},
    "dinner": {{ ... }},
    "snack": {{ ... }},
    "totalCalories": 2000
  }},
  "Tuesday": {{ ... }},
  "Wednesday": {{ ... }},
  "Thursday": {{ ... }},
  "Friday": {{ ... }},
  "Saturday": {{ ... }},
  "Sunday": {{ ... }}
}}

Requirements:
- Include meal name, ingredients with quantities, calories per meal, and cooking/prep method
- Calculate total daily calories based on goal ({info.goal})
- Respect diet preference: {info.diet_preference}
- Ensure nutritional balance
- Provide variety across the week
- Return ONLY valid JSON, no markdown formatting"""


def parse_plan(raw: str, wrapper_key: str, kind: str) -> Dict[str, Any]:
    """
    Parse one plan; a ``{"workoutPlan": {...}}`` style wrapper is unwrapped.
    """
    if not raw:
        raise PlanParseError(f"No {kind} plan generated")
    try:
        data = json.loads(raw)
    except json.JSONDecodeError as e:
        raise PlanParseError(f"Invalid {kind} plan JSON: {e}")
    if not isinstance(data, dict):
        raise PlanParseError(f"Unexpected {kind} plan format")

    plan = data.get(wrapper_key) or data
    if not isinstance(plan, dict):
        raise PlanParseError(f"Unexpected {kind} plan format")
    return plan


async def generate_plans(info: UserInfo) -> Dict[str, Dict[str, Any]]:
    workout_raw = await chat_completion(
        [
            {"role": "system", "content": SYSTEM_PROMPT},
            {"role": "user", "content": build_workout_prompt(info)},
        ],
        temperature=0.7,
    )
    meal_raw = await chat_completion(
        [
            {"role": "system", "content": SYSTEM_PROMPT},
            {"role": "user", "content": build_meal_prompt(info)},
        ],
        temperature=0.7,
    )

    try:
        workout_plan = parse_plan(workout_raw, "workoutPlan", "workout")
        meal_plan = parse_plan(meal_raw, "mealPlan", "meal")
    except PlanParseError:
        logger.error(f"[PLAN] Workout content: {workout_raw!r}")
        logger.error(f"[PLAN] Meal content: {meal_raw!r}")
        raise

    return {"workout_plan": workout_plan, "meal_plan": meal_plan}
