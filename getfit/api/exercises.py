"""
Exercise library proxies over MuscleWiki and ExerciseDB.
"""
import logging
from typing import Any, Dict, List

from fastapi import APIRouter, Response

from getfit.external import exercisedb_client, musclewiki_client
from getfit.schemas.exercise import ExerciseList, StretchList
from getfit.services.exercise_library import build_exercise_list, split_stretches

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["exercises"])

LIST_CACHE_CONTROL = "public, max-age=3600"
IMAGE_CACHE_CONTROL = "public, max-age=86400, immutable"


@router.get("/muscle-groups")
def muscle_groups():
    return musclewiki_client.MUSCLE_GROUPS


@router.get("/body-parts")
def body_parts():
    return exercisedb_client.BODY_PARTS


@router.get("/musclewiki/{muscle_id}", response_model=ExerciseList)
async def musclewiki_exercises(muscle_id: int, response: Response):
    data = await musclewiki_client.fetch_exercises(muscle_id)
    response.headers["Cache-Control"] = LIST_CACHE_CONTROL
    return build_exercise_list(data)


@router.get("/stretches/{muscle_id}", response_model=StretchList)
async def stretches(muscle_id: int, response: Response):
    data = await musclewiki_client.fetch_stretches(muscle_id)
    response.headers["Cache-Control"] = LIST_CACHE_CONTROL
    return split_stretches(data)


@router.get("/exercises/image/{exercise_id}")
async def exercise_image(exercise_id: str):
    content, content_type = await exercisedb_client.fetch_exercise_image(exercise_id)
    return Response(
        content=content,
        media_type=content_type,
        headers={"Cache-Control": IMAGE_CACHE_CONTROL},
    )


@router.get("/exercises/{body_part}")
async def exercises_by_body_part(body_part: str, response: Response) -> List[Dict[str, Any]]:
    """
    ExerciseDB exercises for a body part; gifUrl points at our image proxy
    so the RapidAPI key never reaches the client.
    """
    exercises = await exercisedb_client.fetch_exercises_by_body_part(body_part)
    response.headers["Cache-Control"] = LIST_CACHE_CONTROL
    return [{**ex, "gifUrl": f"/api/exercises/image/{ex.get('id')}"} for ex in exercises]
