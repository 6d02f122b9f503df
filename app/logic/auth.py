import asyncio
import logging
import time
from typing import Callable, Optional

import httpx
from pydantic import ValidationError

from app.core.exceptions import UpstreamDataError
from app.models.token import AccessToken, TwitchTokenResponse


logger = logging.getLogger(__name__)

TWITCH_TOKEN_URL = "https://id.twitch.tv/oauth2/token"


class TokenCache:
    """
    Holds the Twitch app access token used for IGDB calls.

    The token is fetched lazily with the client-credentials grant and reused
    until its expiry passes. Refreshes run under a lock, so callers that pile
    up behind an expired token share a single exchange.
    """

    def __init__(
        self,
        client: httpx.AsyncClient,
        client_id: str,
        client_secret: str,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self._client = client
        self._client_id = client_id
        self._client_secret = client_secret
        self._clock = clock
        self._token: Optional[AccessToken] = None
        self._lock = asyncio.Lock()

    @property
    def client_id(self) -> str:
        return self._client_id

    @property
    def token(self) -> Optional[AccessToken]:
        return self._token

    async def get_access_token(self) -> str:
        """Return a bearer token that has not expired, refreshing it if needed."""
        token = self._token
        if token and token.is_valid(self._clock()):
            return token.value

        async with self._lock:
            # another caller may have refreshed while we waited
            token = self._token
            if token and token.is_valid(self._clock()):
                return token.value

            self._token = await self._request_token()
            return self._token.value

    def invalidate(self) -> None:
        self._token = None

    async def _request_token(self) -> AccessToken:
        now = self._clock()
        response = await self._client.post(
            TWITCH_TOKEN_URL,
            data={
                "client_id": self._client_id,
                "client_secret": self._client_secret,
                "grant_type": "client_credentials",
            },
        )
        response.raise_for_status()

        try:
            payload = TwitchTokenResponse.model_validate(response.json())
        except (ValueError, ValidationError) as e:
            logger.error(f"Malformed token response from Twitch: {e}")
            raise UpstreamDataError("Malformed token response from Twitch") from e

        logger.info(f"Fetched new Twitch access token, valid for {payload.expires_in:.0f}s")
        return AccessToken(value=payload.access_token, expires_at=now + payload.expires_in)
