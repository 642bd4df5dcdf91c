"""
Meal photo analysis: identifies food items on an image with an OpenAI vision
model and estimates calories per 100 g for each of them.
"""
import json
import logging
import math
import random
import uuid
from typing import Any, Dict, List, Optional

import anyio

from getfit.core.config import settings
from getfit.schemas.food import (
    PORTION_GRAMS,
    FoodCalories,
    FoodItem,
    MealSummary,
)
from getfit.services.llm_client import chat_completion, is_configured

logger = logging.getLogger(__name__)

PORTION_VALUES = set(PORTION_GRAMS)

MOCK_FOODS: List[Dict[str, Any]] = [
    {"label": "grilled chicken breast", "confidence": 0.92, "portion_guess": "medium", "calories_per_100g": 165},
    {"label": "steamed white rice", "confidence": 0.88, "portion_guess": "large", "calories_per_100g": 130},
    {"label": "steamed broccoli", "confidence": 0.85, "portion_guess": "small", "calories_per_100g": 34},
    {"label": "grilled salmon", "confidence": 0.90, "portion_guess": "medium", "calories_per_100g": 208},
    {"label": "mixed green salad", "confidence": 0.87, "portion_guess": "medium", "calories_per_100g": 20},
    {"label": "scrambled eggs", "confidence": 0.91, "portion_guess": "medium", "calories_per_100g": 147},
    {"label": "whole wheat toast", "confidence": 0.89, "portion_guess": "small", "calories_per_100g": 247},
    {"label": "avocado", "confidence": 0.86, "portion_guess": "small", "calories_per_100g": 160},
    {"label": "banana", "confidence": 0.93, "portion_guess": "medium", "calories_per_100g": 89},
    {"label": "greek yogurt", "confidence": 0.88, "portion_guess": "medium", "calories_per_100g": 59},
    {"label": "pasta with tomato sauce", "confidence": 0.84, "portion_guess": "large", "calories_per_100g": 131},
    {"label": "beef steak", "confidence": 0.89, "portion_guess": "large", "calories_per_100g": 271},
    {"label": "french fries", "confidence": 0.91, "portion_guess": "medium", "calories_per_100g": 312},
    {"label": "caesar salad", "confidence": 0.85, "portion_guess": "medium", "calories_per_100g": 127},
    {"label": "orange juice", "confidence": 0.90, "portion_guess": "medium", "calories_per_100g": 45},
]

SYSTEM_PROMPT = """You are a nutrition analysis AI. Analyze the food image and identify all visible food items.

For each food item, provide:
1. label: A clear, specific name for the food (e.g., "grilled chicken breast" not just "chicken")
2. confidence: Your confidence level from 0 to 1
3. portion_guess: Estimate the portion size as "small", "medium", "large", or "unknown"
4. calories_per_100g: The approximate calories per 100 grams for this food item based on your nutritional knowledge

IMPORTANT: You must respond with ONLY valid JSON in this exact format, no other text:
{
  "foods": [
    {
      "label": "food name",
      "confidence": 0.95,
      "portion_guess": "medium",
      "calories_per_100g": 150
    }
  ]
}

Be accurate with calorie estimates - use your training data on nutrition. If you cannot identify a food clearly, still include it with lower confidence."""

USER_PROMPT = "Analyze this meal image and identify all food items with their nutritional information."


class EmptyModelResponse(ValueError):
    pass


class InvalidModelResponse(ValueError):
    pass


def is_mock_mode() -> bool:
    return settings.mock_mode or not is_configured()


def mock_analysis(rng: Optional[random.Random] = None) -> Dict[str, Any]:
    """2-4 random foods from the fixed list with slightly jittered confidence."""
    rng = rng or random.Random()
    count = rng.randint(2, 4)
    selected = rng.sample(MOCK_FOODS, count)
    return {
        "foods": [
            {**food, "confidence": min(0.99, food["confidence"] + (rng.random() * 0.1 - 0.05))}
            for food in selected
        ]
    }


def to_image_url(image: str) -> str:
    """Bare base64 payloads are sent as a JPEG data URL."""
    if image.startswith("data:") or image.startswith("http"):
        return image
    return f"data:image/jpeg;base64,{image}"


def _normalize_food(raw: Dict[str, Any]) -> Dict[str, Any]:
    portion = str(raw.get("portion_guess") or "unknown").lower()
    if portion not in PORTION_VALUES:
        portion = "unknown"
    try:
        confidence = float(raw.get("confidence", 0) or 0)
    except (TypeError, ValueError):
        confidence = 0.0
    try:
        calories = float(raw.get("calories_per_100g", 0) or 0)
    except (TypeError, ValueError):
        calories = 0.0
    return {
        "label": str(raw.get("label") or "").strip() or "Unknown food",
        "confidence": min(1.0, max(0.0, confidence)),
        "portion_guess": portion,
        "calories_per_100g": max(0.0, calories),
    }


def parse_analysis(raw: str) -> Dict[str, Any]:
    """
    Разбор ответа модели.
    Бросает EmptyModelResponse на пустой ответ, InvalidModelResponse, если нет списка foods,
    и ValueError на не-JSON.
    """
    if not raw:
        raise EmptyModelResponse("No response from OpenAI")
    try:
        data = json.loads(raw)
    except json.JSONDecodeError:
        raise ValueError(f"LLM returned non-JSON response: {raw!r}")

    foods = data.get("foods") if isinstance(data, dict) else None
    if not isinstance(foods, list):
        raise InvalidModelResponse("Invalid response format from OpenAI")

    return {"foods": [_normalize_food(f) for f in foods if isinstance(f, dict)]}


async def analyze_meal_image(image: str) -> Dict[str, Any]:
    if is_mock_mode():
        logger.info("[ANALYZE] Mock mode, returning sample foods")
        if settings.mock_delay_seconds > 0:
            await anyio.sleep(settings.mock_delay_seconds)
        return mock_analysis()

    messages = [
        {"role": "system", "content": SYSTEM_PROMPT},
        {
            "role": "user",
            "content": [
                {
                    "type": "image_url",
                    "image_url": {"url": to_image_url(image), "detail": "high"},
                },
                {"type": "text", "text": USER_PROMPT},
            ],
        },
    ]

    raw = await chat_completion(messages, max_tokens=1000)
    result = parse_analysis(raw)
    logger.info(f"[ANALYZE] Identified {len(result['foods'])} food items")
    return result


# ---------- CALORIES ----------


def item_grams(item: FoodItem) -> float:
    if item.grams is not None:
        return item.grams
    return float(PORTION_GRAMS[item.portion_guess])


def round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def calculate_calories(grams: float, calories_per_100g: float) -> int:
    return round_half_up(grams / 100 * calories_per_100g)


def summarize_meal(foods: List[FoodItem], daily_target: Optional[int] = None) -> MealSummary:
    target = daily_target or settings.daily_calorie_target

    rows = []
    for item in foods:
        grams = item_grams(item)
        rows.append((item, grams, calculate_calories(grams, item.calories_per_100g)))

    total = sum(calories for _, _, calories in rows)
    items = [
        FoodCalories(
            id=item.id or uuid.uuid4().hex[:7],
            label=item.label,
            grams=grams,
            calories_per_100g=item.calories_per_100g,
            calories=calories,
            share=calories / total * 100 if total > 0 else 0.0,
        )
        for item, grams, calories in rows
    ]

    return MealSummary(
        items=items,
        total_calories=total,
        average_calories=round_half_up(total / len(rows)) if rows else 0,
        daily_target=target,
        target_percentage=min(total / target * 100, 100.0),
    )
