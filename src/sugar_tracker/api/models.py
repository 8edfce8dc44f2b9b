"""Pydantic models for API request payloads."""

from pydantic import BaseModel, Field


class LoginRequest(BaseModel):
    """Login form payload."""

    email: str = ""
    password: str = ""


class RegisterRequest(BaseModel):
    """Registration form payload."""

    username: str = ""
    email: str = ""
    password: str = ""


class FoodRequest(BaseModel):
    """New catalog food."""

    name: str
    sugar_content: float
    is_healthy: bool


class SelectionItem(BaseModel):
    """A catalog food by id, or an inline food with typed-in sugar grams."""

    food_id: str | None = None
    name: str | None = None
    sugar_content: float | str | None = None


class SelectionRequest(BaseModel):
    """Ordered food selection."""

    foods: list[SelectionItem] = Field(default_factory=list)


class PlanRequest(SelectionRequest):
    """Meal plan to save."""

    name: str = ""


class EvaluateRequest(SelectionRequest):
    """Selection to summarize, with an optional food about to be added."""

    candidate: SelectionItem | None = None


class LimitRequest(BaseModel):
    """New daily limit in grams."""

    limit: float
