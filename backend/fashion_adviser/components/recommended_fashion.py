"""Recommended-fashion component: token, request, decision service, one transition.

The same component class serves all three input variants; the InputSchema
decides which dialog properties are declared and read.
"""

import json
import logging
from typing import Any

from fashion_adviser.components.base import (
    ComponentContext,
    ComponentDescriptor,
    CustomComponent,
    PropertySpec,
)
from fashion_adviser.exceptions import TransportFailure
from fashion_adviser.schemas.fashion import InputSchema
from fashion_adviser.services.decision_client import RecommendationClient
from fashion_adviser.services.request_builder import RequestBuilder
from fashion_adviser.services.token_client import TokenClient

logger = logging.getLogger(__name__)

SUCCESS = "success"
STATUS_4XX = "status4xx"
STATUS_5XX = "status5xx"

# Dialog property that names the variable receiving the interpretation
RESULT_VARIABLE_PROPERTY = "variable"

COMPONENT_NAMES: dict[InputSchema, str] = {
    InputSchema.TRIP: "getRecommendedFashion",
    InputSchema.WEATHER: "getRecommendedFashionByWeather",
    InputSchema.PLAN_DERIVED: "getRecommendedFashionFromPlan",
}

# dialog property -> (builder input, spec)
INPUT_PROPERTIES: dict[InputSchema, dict[str, tuple[str, PropertySpec]]] = {
    InputSchema.TRIP: {
        "departure": ("departure_date", PropertySpec("string", required=True)),  # yyyy-MM-dd
        "destination": ("destination", PropertySpec("string", required=True)),
        "goal": ("goal", PropertySpec("string", required=True)),
        "gender": ("gender", PropertySpec("string", required=True)),
        "generation": ("generation", PropertySpec("string")),
        "situation": ("situation", PropertySpec("string")),
    },
    InputSchema.WEATHER: {
        "temperature": ("temperature", PropertySpec("double", required=True)),
        "precipitation": ("precipitation", PropertySpec("double", required=True)),
        "goal": ("goal", PropertySpec("string", required=True)),
        "gender": ("gender", PropertySpec("string", required=True)),
    },
    InputSchema.PLAN_DERIVED: {
        "plan": ("plan", PropertySpec("map", required=True)),
    },
}


class RecommendedFashionComponent(CustomComponent):
    """Fetches a fashion recommendation from the decision service.

    Failures never reach the dialog engine: they are logged and the flow
    moves on. With route_status_outcomes enabled, HTTP 4xx/5xx failures go to
    status4xx/status5xx; every other path ends in success.
    """

    def __init__(
        self,
        schema: InputSchema,
        token_client: TokenClient,
        recommendation_client: RecommendationClient,
        builder: RequestBuilder | None = None,
        route_status_outcomes: bool = False,
        name: str | None = None,
    ):
        self._schema = schema
        self._token_client = token_client
        self._recommendation_client = recommendation_client
        self._builder = builder or RequestBuilder()
        self._route_status_outcomes = route_status_outcomes
        self._name = name or COMPONENT_NAMES[schema]

    def describe(self) -> ComponentDescriptor:
        properties = {prop: spec for prop, (_, spec) in INPUT_PROPERTIES[self._schema].items()}
        properties[RESULT_VARIABLE_PROPERTY] = PropertySpec("string")
        actions = (SUCCESS, STATUS_4XX, STATUS_5XX) if self._route_status_outcomes else (SUCCESS,)
        return ComponentDescriptor(
            name=self._name,
            properties=properties,
            supported_actions=actions,
        )

    async def execute(self, context: ComponentContext) -> None:
        action = SUCCESS
        try:
            token = await self._token_client.get_access_token()
            request = self._builder.build(self._schema, self._read_inputs(context))
            recommendation = await self._recommendation_client.get_recommendation(
                token.access_token, request
            )

            if not recommendation.has_problems:
                logger.info(
                    f"{self._name} interpretation: "
                    f"{json.dumps(recommendation.interpretation, ensure_ascii=False)}"
                )
                variable = context.get_property(RESULT_VARIABLE_PROPERTY)
                if variable:
                    context.set_variable(variable, recommendation.interpretation)
            else:
                logger.error(f"{self._name}: decision service reported problems")
                logger.error(json.dumps(recommendation.problems, ensure_ascii=False, indent=2))
        except TransportFailure as e:
            logger.error(f"{self._name} failed: {e} (status={e.status_code})")
            action = self._outcome_for(e)
        except Exception as e:
            logger.error(f"{self._name} failed: {e}")

        context.transition(action)

    def _read_inputs(self, context: ComponentContext) -> dict[str, Any]:
        return {
            field: context.get_property(prop)
            for prop, (field, _) in INPUT_PROPERTIES[self._schema].items()
        }

    def _outcome_for(self, error: TransportFailure) -> str:
        if not self._route_status_outcomes:
            return SUCCESS
        if error.is_client_error:
            return STATUS_4XX
        if error.is_server_error:
            return STATUS_5XX
        return SUCCESS
