# =============================================================================
# core/auth.py  —  Bearer token cache (OAuth2 client-credentials)
# =============================================================================
#
# Petfinder tokens live for about an hour.  TokenCache keeps the current one
# and only goes back to POST /v2/oauth2/token when there is no token yet or
# the cached one has expired.  There is no retry: a failed exchange raises
# AuthenticationError straight away.
# =============================================================================

import asyncio
import logging
import time
from dataclasses import dataclass
from typing import Callable, Optional

import httpx

from core.errors import AuthenticationError

logger = logging.getLogger(__name__)

TOKEN_PATH = "/v2/oauth2/token"


@dataclass(frozen=True)
class BearerToken:
    access_token: str
    expires_at: float          # clock() value after which the token is stale

    def is_valid(self, now: float) -> bool:
        return self.expires_at > now


class TokenCache:
    """Hands out a non-expired bearer token, exchanging credentials on demand.

    Args:
        http: The client used for the token exchange (base_url already set).
        api_key: Petfinder API key (OAuth client id).
        secret_key: Petfinder secret (OAuth client secret).
        clock: Seconds-returning clock; tests pass a fake one.
    """

    def __init__(
        self,
        http: httpx.AsyncClient,
        api_key: str,
        secret_key: str,
        *,
        clock: Callable[[], float] = time.monotonic,
    ):
        self.http = http
        self.api_key = api_key
        self.secret_key = secret_key
        self.clock = clock
        self._token: Optional[BearerToken] = None
        self._lock = asyncio.Lock()

    @property
    def token(self) -> Optional[BearerToken]:
        return self._token

    async def get_token(self) -> str:
        # Overlapping callers wait on the lock, then find the fresh token.
        async with self._lock:
            if self._token is None or not self._token.is_valid(self.clock()):
                self._token = await self._exchange()
            return self._token.access_token

    async def auth_headers(self) -> dict[str, str]:
        return {"Authorization": f"Bearer {await self.get_token()}"}

    async def _exchange(self) -> BearerToken:
        requested_at = self.clock()
        try:
            resp = await self.http.post(
                TOKEN_PATH,
                json={
                    "grant_type": "client_credentials",
                    "client_id": self.api_key,
                    "client_secret": self.secret_key,
                },
            )
            resp.raise_for_status()
            payload = resp.json()
            token = BearerToken(
                access_token=payload["access_token"],
                expires_at=requested_at + float(payload["expires_in"]),
            )
        except (httpx.HTTPError, ValueError, KeyError, TypeError) as e:
            logger.error("Failed to authenticate with Petfinder API: %s", e)
            raise AuthenticationError("Failed to authenticate with Petfinder API") from e

        logger.info("Obtained Petfinder bearer token (expires in %ss)", payload["expires_in"])
        return token
