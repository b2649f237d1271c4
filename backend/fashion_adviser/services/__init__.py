"""Outbound clients and request shaping.

Modules:
    token_client      OAuth2 client-credentials token acquisition
    request_builder   Dialog inputs -> decision service JSON envelope
    decision_client   Decision service POST and response parsing

Pipeline:
    TokenClient.get_access_token → RequestBuilder.build
    → RecommendationClient.get_recommendation
"""
