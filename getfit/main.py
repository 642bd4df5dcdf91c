import logging

from fastapi import FastAPI, HTTPException
from fastapi.responses import JSONResponse

from getfit.api import exercises, schedule, tracker
from getfit.core.config import settings
from getfit.external.errors import UpstreamError
from getfit.schemas.fitness import FitnessFilters, FitnessResponse, PlanResponse, UserInfo
from getfit.schemas.food import AnalyzeRequest, AnalyzeResponse, MealSummary, MealSummaryRequest
from getfit.services import fitness_recommender, llm_client
from getfit.services.llm_client import OpenAINotConfigured
from getfit.services.meal_analyzer import (
    EmptyModelResponse,
    InvalidModelResponse,
    analyze_meal_image,
    is_mock_mode,
    summarize_meal,
)
from getfit.services.plan_generator import PlanParseError, generate_plans

logging.basicConfig(
    level=getattr(logging, settings.log_level.upper(), logging.INFO),
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(title="GetFit API")

app.include_router(schedule.router)
app.include_router(tracker.router)
app.include_router(exercises.router)


@app.exception_handler(UpstreamError)
async def upstream_error_handler(request, exc: UpstreamError):
    return JSONResponse(
        status_code=exc.status_code,
        content={"detail": f"Failed to fetch data from {exc.provider}"},
    )


@app.get("/health")
async def health_check():
    return {
        "status": "ok",
        "app": "GetFit",
        "openai_configured": llm_client.is_configured(),
        "mock_mode": is_mock_mode(),
        "rapidapi_configured": bool(settings.rapidapi_key),
    }


# ---------- MEAL ANALYSIS ----------


@app.post("/api/analyze", response_model=AnalyzeResponse)
async def analyze(payload: AnalyzeRequest):
    """
    Распознать продукты на фото еды и оценить калорийность на 100 г.
    Без ключа OpenAI (или с MOCK_MODE=true) возвращает случайные тестовые данные.
    """
    if not payload.image:
        raise HTTPException(status_code=400, detail="No image provided")

    try:
        return await analyze_meal_image(payload.image)
    except EmptyModelResponse as e:
        logger.error(f"[ANALYZE] {e}")
        raise HTTPException(status_code=500, detail="No response from OpenAI")
    except InvalidModelResponse as e:
        logger.error(f"[ANALYZE] {e}")
        raise HTTPException(status_code=500, detail="Invalid response format from OpenAI")
    except Exception as e:
        logger.error(f"[ANALYZE] Error analyzing image: {e}")
        raise HTTPException(status_code=500, detail="Failed to analyze image")


@app.post("/api/meals/summary", response_model=MealSummary)
async def meal_summary(payload: MealSummaryRequest):
    """
    Калории по каждому продукту и итог по приёму пищи.
    Граммы по умолчанию берутся из portion_guess.
    """
    return summarize_meal(payload.foods, payload.daily_target)


# ---------- PLANS ----------


@app.post("/api/generate-plan", response_model=PlanResponse)
async def generate_plan(payload: UserInfo):
    """
    Сгенерировать недельный план тренировок и питания.
    """
    if not llm_client.is_configured():
        raise HTTPException(status_code=500, detail="OpenAI API key not configured")

    try:
        plans = await generate_plans(payload)
    except PlanParseError as e:
        logger.error(f"[PLAN] Error parsing OpenAI response: {e}")
        return JSONResponse(
            status_code=500,
            content={"detail": "Failed to parse AI response", "details": str(e)},
        )
    except Exception as e:
        logger.error(f"[PLAN] Error generating plan: {e}")
        raise HTTPException(status_code=500, detail="Failed to generate plan")

    return PlanResponse(**plans)


@app.post("/api/age-goal-fitness", response_model=FitnessResponse)
async def age_goal_fitness(payload: FitnessFilters):
    """
    Подбор упражнений или растяжек по возрасту, полу и цели.
    Приоритет: MuscleWiki -> OpenAI fallback.
    """
    if not payload.age_group or not payload.gender or not payload.type:
        raise HTTPException(status_code=400, detail="Age group, gender, and type are required")

    try:
        return await fitness_recommender.recommend(payload, ai_available=llm_client.is_configured())
    except OpenAINotConfigured as e:
        raise HTTPException(status_code=500, detail=str(e))
    except Exception as e:
        logger.error(f"[FITNESS] Error generating fitness plan: {e}")
        raise HTTPException(status_code=500, detail="Failed to generate fitness plan")
