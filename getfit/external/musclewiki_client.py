"""
MuscleWiki API client: exercises and stretches by primary muscle.
"""
import logging
from typing import Any, Dict, Optional

import httpx

from getfit.core.config import settings
from getfit.external.errors import UpstreamError

logger = logging.getLogger(__name__)

PROVIDER = "MuscleWiki"

# Stretches category in MuscleWiki
STRETCHES_CATEGORY_ID = 8

MUSCLE_IDS: Dict[str, int] = {
    "chest": 2,
    "back": 7,  # Lats
    "shoulders": 6,
    "biceps": 1,
    "triceps": 5,
    "legs": 3,  # Quads
    "glutes": 9,
    "hamstrings": 8,
    "calves": 11,
    "abs": 12,  # Abdominals
    "traps": 4,
    "forearms": 10,
    "lower back": 13,
}

MUSCLE_GROUPS = [
    {"id": "chest", "label": "Chest", "muscleId": 2},
    {"id": "back", "label": "Back", "muscleId": 7},
    {"id": "shoulders", "label": "Shoulders", "muscleId": 6},
    {"id": "biceps", "label": "Biceps", "muscleId": 1},
    {"id": "triceps", "label": "Triceps", "muscleId": 5},
    {"id": "legs", "label": "Legs", "muscleId": 3},
    {"id": "glutes", "label": "Glutes", "muscleId": 9},
    {"id": "abs", "label": "Core", "muscleId": 12},
]


async def fetch_exercises(
    muscle_id: int,
    limit: int = 20,
    category: Optional[int] = None,
) -> Dict[str, Any]:
    """
    Получить упражнения по основной мышце.

    Возвращает JSON ответа MuscleWiki ({count, next, previous, results}).
    Бросает UpstreamError, если API ответил ошибкой.
    """
    url = f"{settings.musclewiki_base_url}/exercise/exercises/"
    params: Dict[str, Any] = {"muscles_primary": muscle_id, "limit": limit}
    if category is not None:
        params = {"category": category, **params}

    try:
        async with httpx.AsyncClient(timeout=settings.http_timeout) as client:
            resp = await client.get(url, params=params, headers={"Accept": "application/json"})
    except httpx.HTTPError as e:
        logger.error(f"[MUSCLEWIKI] Request failed for muscle {muscle_id}: {e}")
        raise UpstreamError(PROVIDER, 502, f"MuscleWiki request failed: {e}") from e

    if resp.status_code >= 400:
        logger.error(f"[MUSCLEWIKI] API error: {resp.status_code} {resp.reason_phrase}")
        raise UpstreamError(PROVIDER, resp.status_code)

    data = resp.json()
    if not isinstance(data, dict):
        raise UpstreamError(PROVIDER, 502, "Unexpected MuscleWiki response")
    if not isinstance(data.get("results"), list):
        data["results"] = []
    return data


async def fetch_stretches(muscle_id: int, limit: int = 30) -> Dict[str, Any]:
    return await fetch_exercises(muscle_id, limit=limit, category=STRETCHES_CATEGORY_ID)
