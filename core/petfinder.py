# =============================================================================
# core/petfinder.py  —  Petfinder API client
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Wraps the three Petfinder endpoints the server needs:
#     - GET /v2/types (+ each type's breeds link) → get_animal_types()
#     - GET /v2/animals                           → search_animals()
#   Every call goes through TokenCache first, so the bearer token is
#   non-expired before any authenticated request.
#
# LIFECYCLE:
#   The client is an explicitly constructed handle, used as an async context
#   manager that owns one httpx.AsyncClient:
#
#       async with PetfinderClient(api_key, secret_key) as petfinder:
#           types = await petfinder.get_animal_types()
#
#   Pass `transport=httpx.MockTransport(...)` to run it without a network.
#
# ERRORS:
#   Transport failures, non-2xx statuses and unparseable payloads are logged
#   and re-raised as PetfinderError (AuthenticationError for the token
#   exchange).  Nothing is retried.
# =============================================================================

import logging
from typing import Any, Callable, Optional

import httpx

from core.auth import TokenCache
from core.errors import PetfinderError
from core.models import Animal, AnimalType, SearchParams, Status

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://api.petfinder.com"
_NOT_OPEN = "use PetfinderClient as an async context manager"

# Applied to every search; caller-supplied values win.
SEARCH_DEFAULTS: dict[str, str | int] = {
    "status": Status.ADOPTABLE.value,
    "distance": 10,
    "limit": 10,
}


class PetfinderClient:
    """Authenticated access to the Petfinder v2 API."""

    def __init__(
        self,
        api_key: str,
        secret_key: str,
        *,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = 10.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        clock: Optional[Callable[[], float]] = None,
    ):
        if not api_key or not secret_key:
            raise ValueError("API key and secret key are required")
        self.api_key = api_key
        self.secret_key = secret_key
        self.base_url = base_url.rstrip("/")
        self.timeout = httpx.Timeout(timeout)
        self._transport = transport
        self._clock = clock
        self._http: Optional[httpx.AsyncClient] = None
        self._tokens: Optional[TokenCache] = None
        self._animal_types: list[AnimalType] = []

    async def __aenter__(self):
        self._http = httpx.AsyncClient(
            base_url=self.base_url,
            timeout=self.timeout,
            headers={"Accept": "application/json"},
            transport=self._transport,
        )
        kwargs = {"clock": self._clock} if self._clock is not None else {}
        self._tokens = TokenCache(self._http, self.api_key, self.secret_key, **kwargs)
        return self

    async def __aexit__(self, exc_type, exc, tb):
        if self._http is not None:
            await self._http.aclose()

    @property
    def tokens(self) -> TokenCache:
        if self._tokens is None:
            raise RuntimeError(_NOT_OPEN)
        return self._tokens

    async def _get(self, path: str, params: Optional[dict[str, Any]] = None) -> dict[str, Any]:
        """Authenticated GET returning the decoded JSON body."""
        if self._http is None:
            raise RuntimeError(_NOT_OPEN)
        headers = await self.tokens.auth_headers()
        resp = await self._http.get(path, params=params, headers=headers)
        resp.raise_for_status()
        return resp.json()

    # -------------------------------------------------------------------------
    # Reference data
    # -------------------------------------------------------------------------
    async def get_animal_types(self) -> list[AnimalType]:
        """Return every animal type with its breeds, fetching them once."""
        if self._animal_types:
            return self._animal_types

        try:
            data = await self._get("/v2/types")
            animal_types = []
            for payload in data["types"]:
                breeds_href = payload["_links"]["breeds"]["href"]
                breeds_data = await self._get(breeds_href)
                breeds = [b["name"] for b in breeds_data.get("breeds", [])]
                animal_types.append(AnimalType.from_api(payload, breeds))
        except (httpx.HTTPError, ValueError, KeyError, TypeError) as e:
            logger.exception("Failed to get animal types")
            raise PetfinderError("Failed to get animal types") from e

        logger.info("Loaded %d animal types", len(animal_types))
        self._animal_types = animal_types
        return self._animal_types

    # -------------------------------------------------------------------------
    # Search
    # -------------------------------------------------------------------------
    async def search_animals(self, params: SearchParams) -> list[Animal]:
        """Search adoptable animals; returns the raw `animals` list."""
        query = {**SEARCH_DEFAULTS, **params.to_query()}
        try:
            data = await self._get("/v2/animals", params=query)
            animals: list[Animal] = data["animals"]
        except (httpx.HTTPError, ValueError, KeyError, TypeError) as e:
            logger.exception("Failed to search animals with %s", query)
            raise PetfinderError(f"Failed to search animals: {e}") from e

        logger.info("Search returned %d animal(s)", len(animals))
        return animals
