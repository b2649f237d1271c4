"""Decision service client: fetches a fashion recommendation for a built request."""

import logging

import httpx

from fashion_adviser.config import Settings
from fashion_adviser.exceptions import RecommendationRequestError
from fashion_adviser.schemas.fashion import RecommendationRequest, RecommendationResponse

logger = logging.getLogger(__name__)


class RecommendationClient:
    """Adapter for the decision service REST endpoint."""

    def __init__(self, settings: Settings, client: httpx.AsyncClient | None = None):
        self._settings = settings
        self._client = client

    async def _get_client(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = httpx.AsyncClient(timeout=self._settings.http_timeout)
        return self._client

    async def get_recommendation(
        self,
        access_token: str,
        request: RecommendationRequest,
    ) -> RecommendationResponse:
        """POST the request body and parse the JSON reply.

        The reply carries either ``interpretation`` or ``problems``; telling
        them apart is left to the caller.

        Raises:
            RecommendationRequestError on a non-2xx status, a transport error
            or a body that is not a JSON object.
        """
        body = request.to_json()
        logger.debug(f"Decision service request: {body}")

        client = await self._get_client()
        try:
            resp = await client.post(
                self._settings.decision_service_url,
                content=body.encode("utf-8"),
                headers={
                    "Authorization": f"Bearer {access_token}",
                    "Content-Type": "application/json",
                },
            )
            resp.raise_for_status()
            return RecommendationResponse.model_validate(resp.json())
        except httpx.HTTPStatusError as e:
            logger.error(f"Decision service error: HTTP {e.response.status_code}")
            raise RecommendationRequestError(
                "Decision service request failed", status_code=e.response.status_code
            ) from e
        except httpx.RequestError as e:
            logger.error(f"Decision service request error: {e}")
            raise RecommendationRequestError("Decision service request failed") from e
        except ValueError as e:
            logger.error(f"Decision service response unreadable: {e}")
            raise RecommendationRequestError("Decision service request failed") from e

    async def close(self):
        if self._client:
            await self._client.aclose()
            self._client = None
