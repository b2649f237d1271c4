"""Request builder: maps dialog inputs onto the decision service's JSON envelope.

One builder serves every input variant:

    TRIP          {month, destination, goal, gender, generation, situation}
    WEATHER       {Temperature, Precipitation, Goal, Gender}
    PLAN_DERIVED  same keys as TRIP, read from a structured plan

Key casing differs between variants on the service side, so it is kept as
per-variant configuration instead of being normalised.
"""

import json
import logging
from collections.abc import Mapping
from typing import Any

from fashion_adviser.config import FieldCasing, Settings
from fashion_adviser.schemas.fashion import (
    InputSchema,
    PlanInput,
    RecommendationRequest,
    TripInput,
    WeatherInput,
)

logger = logging.getLogger(__name__)

DEFAULT_CASING: dict[InputSchema, FieldCasing] = {
    InputSchema.TRIP: FieldCasing.LOWER,
    InputSchema.WEATHER: FieldCasing.PASCAL,
    InputSchema.PLAN_DERIVED: FieldCasing.LOWER,
}


def apply_casing(key: str, casing: FieldCasing) -> str:
    if casing == FieldCasing.PASCAL:
        return key[:1].upper() + key[1:]
    return key


class RequestBuilder:
    """Builds a RecommendationRequest for any InputSchema."""

    def __init__(self, casing: Mapping[InputSchema, FieldCasing] | None = None):
        self._casing = {**DEFAULT_CASING, **(casing or {})}

    @classmethod
    def from_settings(cls, settings: Settings) -> "RequestBuilder":
        return cls({
            InputSchema.TRIP: settings.trip_field_casing,
            InputSchema.PLAN_DERIVED: settings.trip_field_casing,
            InputSchema.WEATHER: settings.weather_field_casing,
        })

    def build(self, schema: InputSchema, values: Mapping[str, Any]) -> RecommendationRequest:
        """Build the request body for one variant.

        Unset (None) values are dropped so optional fields fall back to
        their defaults. Raises pydantic.ValidationError when a required
        input is missing or cannot be coerced.
        """
        values = {k: v for k, v in values.items() if v is not None}

        if schema == InputSchema.TRIP:
            fields = self._trip_fields(TripInput.model_validate(values))
        elif schema == InputSchema.WEATHER:
            fields = self._weather_fields(WeatherInput.model_validate(values))
        elif schema == InputSchema.PLAN_DERIVED:
            plan = self._plan_values(values.get("plan", values))
            fields = self._trip_fields(PlanInput.model_validate(plan))
        else:
            raise ValueError(f"Unsupported input schema: {schema}")

        logger.debug(f"Built {schema.value} request")
        casing = self._casing[schema]
        payload = {apply_casing(key, casing): value for key, value in fields.items()}
        return RecommendationRequest(schema=schema, payload=payload)

    @staticmethod
    def _trip_fields(trip: TripInput) -> dict:
        return {
            "month": trip.departure_date.month,
            "destination": trip.destination,
            "goal": trip.goal,
            "gender": trip.gender,
            "generation": trip.generation,
            "situation": trip.situation,
        }

    @staticmethod
    def _weather_fields(weather: WeatherInput) -> dict:
        return {
            "temperature": weather.temperature,
            "precipitation": weather.precipitation,
            "goal": weather.goal,
            "gender": weather.gender,
        }

    @staticmethod
    def _plan_values(plan: Any) -> dict:
        # Dialog variables often arrive as serialized JSON
        if isinstance(plan, (str, bytes)):
            plan = json.loads(plan)
        if not isinstance(plan, Mapping):
            raise ValueError(f"Plan must be an object, got {type(plan).__name__}")
        return {k: v for k, v in plan.items() if v is not None}
