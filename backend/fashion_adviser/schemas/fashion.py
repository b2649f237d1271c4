import json
from dataclasses import dataclass
from datetime import date, datetime
from enum import Enum
from typing import Any

from pydantic import AliasChoices, BaseModel, Field

# Fallbacks when the dialog does not collect these
DEFAULT_GENERATION = "10代"
DEFAULT_SITUATION = "友達"

# Single top-level key the decision service expects
ENVELOPE_KEY = "FashionAdviserInput"


class InputSchema(str, Enum):
    TRIP = "trip"
    WEATHER = "weather"
    PLAN_DERIVED = "plan_derived"


class AccessToken(BaseModel):
    access_token: str
    token_type: str = "Bearer"
    expires_in: int | None = None

    model_config = {"extra": "ignore"}


class TripInput(BaseModel):
    departure_date: date | datetime  # yyyy-MM-dd or a full ISO timestamp
    destination: str
    goal: str
    gender: str
    generation: str = DEFAULT_GENERATION
    situation: str = DEFAULT_SITUATION


class WeatherInput(BaseModel):
    temperature: int | float
    precipitation: int | float  # percent, 0-100
    goal: str
    gender: str


class PlanInput(TripInput):
    """Trip inputs pulled out of a structured plan object."""

    departure_date: date | datetime = Field(
        validation_alias=AliasChoices("departure_date", "departureDate", "departure"),
    )

    model_config = {"extra": "ignore"}


@dataclass(frozen=True)
class RecommendationRequest:
    schema: InputSchema
    payload: dict

    def body(self) -> dict:
        return {ENVELOPE_KEY: self.payload}

    def to_json(self) -> str:
        return json.dumps(self.body(), ensure_ascii=False)


class RecommendationResponse(BaseModel):
    """Decision service result; exactly one of the two branches is expected."""

    interpretation: Any | None = None
    problems: Any | None = None

    model_config = {"extra": "allow"}

    @property
    def has_problems(self) -> bool:
        # An empty list or object still counts as reported problems
        return self.problems is not None
