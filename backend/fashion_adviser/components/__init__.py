"""Custom components exposed to the dialog engine.

Modules:
    base                 Component contract (describe / execute)
    registry             In-process host: registration, invocation, context
    recommended_fashion  Decision-service backed fashion recommendation
"""

from fashion_adviser.components.recommended_fashion import RecommendedFashionComponent
from fashion_adviser.components.registry import ComponentRegistry
from fashion_adviser.config import Settings
from fashion_adviser.schemas.fashion import InputSchema
from fashion_adviser.services.decision_client import RecommendationClient
from fashion_adviser.services.request_builder import RequestBuilder
from fashion_adviser.services.token_client import TokenClient


def create_registry(
    settings: Settings,
    token_client: TokenClient | None = None,
    recommendation_client: RecommendationClient | None = None,
) -> ComponentRegistry:
    """Register one component per input variant, sharing a single client pair."""
    token_client = token_client or TokenClient(settings)
    recommendation_client = recommendation_client or RecommendationClient(settings)
    builder = RequestBuilder.from_settings(settings)

    registry = ComponentRegistry(closeables=[token_client, recommendation_client])
    for schema in InputSchema:
        registry.register(RecommendedFashionComponent(
            schema,
            token_client,
            recommendation_client,
            builder=builder,
            route_status_outcomes=settings.route_status_outcomes,
        ))
    return registry
