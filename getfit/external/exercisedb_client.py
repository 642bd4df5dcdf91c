"""
ExerciseDB (RapidAPI) client: exercises by body part and exercise images.
"""
import logging
from typing import Any, Dict, List, Optional, Tuple
from urllib.parse import quote

import httpx

from getfit.core.config import settings
from getfit.external.errors import UpstreamError

logger = logging.getLogger(__name__)

PROVIDER = "ExerciseDB"

BODY_PARTS = [
    "chest",
    "back",
    "shoulders",
    "upper arms",
    "lower arms",
    "upper legs",
    "lower legs",
    "waist",
    "cardio",
    "neck",
]


def _headers() -> Dict[str, str]:
    return {
        "X-RapidAPI-Key": settings.rapidapi_key or "",
        "X-RapidAPI-Host": settings.rapidapi_host,
    }


async def _get(path: str, params: Optional[Dict[str, Any]] = None) -> httpx.Response:
    url = f"{settings.exercisedb_base_url}{path}"
    try:
        async with httpx.AsyncClient(timeout=settings.http_timeout) as client:
            resp = await client.get(url, params=params, headers=_headers())
    except httpx.HTTPError as e:
        logger.error(f"[EXERCISEDB] Request to {path} failed: {e}")
        raise UpstreamError(PROVIDER, 502, f"ExerciseDB request failed: {e}") from e

    if resp.status_code >= 400:
        logger.error(f"[EXERCISEDB] API error: {resp.status_code} {resp.reason_phrase}")
        raise UpstreamError(PROVIDER, resp.status_code)
    return resp


async def fetch_exercises_by_body_part(body_part: str, limit: int = 50) -> List[Dict[str, Any]]:
    resp = await _get(f"/exercises/bodyPart/{quote(body_part, safe='')}", params={"limit": limit})
    data = resp.json()
    if not isinstance(data, list):
        raise UpstreamError(PROVIDER, 502, "Unexpected ExerciseDB response")
    return data


async def fetch_exercise_image(exercise_id: str) -> Tuple[bytes, str]:
    """Returns image bytes and content type."""
    resp = await _get(f"/image/{exercise_id}")
    content_type = resp.headers.get("content-type") or "image/gif"
    return resp.content, content_type
