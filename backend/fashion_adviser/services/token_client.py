"""Identity provider client: OAuth2 client-credentials grant."""

import base64
import logging

import httpx

from fashion_adviser.config import Settings
from fashion_adviser.exceptions import TokenRequestError
from fashion_adviser.schemas.fashion import AccessToken

logger = logging.getLogger(__name__)


class TokenClient:
    """Exchanges the static client credentials for a bearer token.

    A fresh token is requested on every call; nothing is cached.
    """

    def __init__(self, settings: Settings, client: httpx.AsyncClient | None = None):
        self._settings = settings
        self._client = client

    async def _get_client(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = httpx.AsyncClient(timeout=self._settings.http_timeout)
        return self._client

    def _basic_auth(self) -> str:
        raw = f"{self._settings.client_id}:{self._settings.client_secret}"
        return base64.b64encode(raw.encode("utf-8")).decode("ascii")

    async def get_access_token(self) -> AccessToken:
        """Request an access token.

        Raises:
            TokenRequestError on a non-2xx status, a transport error or a
            response without an access_token.
        """
        client = await self._get_client()
        try:
            resp = await client.post(
                self._settings.token_url,
                data={
                    "grant_type": "client_credentials",
                    "scope": self._settings.scope,
                },
                headers={"Authorization": f"Basic {self._basic_auth()}"},
            )
            resp.raise_for_status()
            token = AccessToken.model_validate(resp.json())
        except httpx.HTTPStatusError as e:
            logger.error(f"Token request failed: HTTP {e.response.status_code}")
            raise TokenRequestError(
                "Access token request failed", status_code=e.response.status_code
            ) from e
        except httpx.RequestError as e:
            logger.error(f"Token request error: {e}")
            raise TokenRequestError("Access token request failed") from e
        except ValueError as e:
            logger.error(f"Token response unreadable: {e}")
            raise TokenRequestError("Access token request failed") from e

        logger.debug("Access token acquired")
        return token

    async def close(self):
        if self._client:
            await self._client.aclose()
            self._client = None
