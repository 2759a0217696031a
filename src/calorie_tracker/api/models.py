"""Request and response models for the HTTP API."""

from pydantic import BaseModel, Field


class AnalyzeRequest(BaseModel):
    """Meal description to analyze."""

    text: str = Field(max_length=2000)
    slot: str | None = Field(default=None, max_length=100)


class NutritionResponse(BaseModel):
    """Nutrition estimate returned to clients."""

    calories: int
    protein: int
    carbs: int
    fat: int
    explanation: str
    confidence: float
    sources: list[str]


class ErrorResponse(BaseModel):
    """Analysis failure returned to clients."""

    message: str
    code: str
    retryable: bool
