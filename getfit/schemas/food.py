from typing import List, Literal, Optional

from pydantic import BaseModel, Field

PortionGuess = Literal["small", "medium", "large", "unknown"]

PORTION_GRAMS = {
    "small": 100,
    "medium": 150,
    "large": 250,
    "unknown": 150,
}


class AnalyzeRequest(BaseModel):
    # data URL или base64 изображения
    image: Optional[str] = None


class AnalyzedFood(BaseModel):
    label: str
    confidence: float
    portion_guess: PortionGuess
    calories_per_100g: float


class AnalyzeResponse(BaseModel):
    foods: List[AnalyzedFood]


class FoodItem(BaseModel):
    """Food item after the user has reviewed or edited the analysis."""
    id: Optional[str] = None
    label: str
    confidence: float = Field(1.0, ge=0, le=1)
    portion_guess: PortionGuess = "unknown"
    calories_per_100g: float = Field(..., ge=0)
    grams: Optional[float] = Field(None, ge=0)


class MealSummaryRequest(BaseModel):
    foods: List[FoodItem]
    daily_target: Optional[int] = Field(None, gt=0)


class FoodCalories(BaseModel):
    id: str
    label: str
    grams: float
    calories_per_100g: float
    calories: int
    share: float


class MealSummary(BaseModel):
    items: List[FoodCalories]
    total_calories: int
    average_calories: int
    daily_target: int
    target_percentage: float
