import asyncio

import httpx
import pytest

from core.auth import TokenCache
from core.errors import AuthenticationError


def make_cache(api, clock) -> TokenCache:
    http = httpx.AsyncClient(base_url="https://api.petfinder.test", transport=api.transport)
    return TokenCache(http, "key", "secret", clock=clock)


@pytest.mark.asyncio
async def test_token_reused_within_lifetime(petfinder_api, clock):
    api = petfinder_api(expires_in=3600)
    cache = make_cache(api, clock)

    first = await cache.get_token()
    clock.now += 3599
    second = await cache.get_token()

    assert first == second == "token-1"
    assert api.token_requests == 1
    await cache.http.aclose()


@pytest.mark.asyncio
async def test_token_refreshed_after_expiry(petfinder_api, clock):
    api = petfinder_api(expires_in=3600)
    cache = make_cache(api, clock)

    assert await cache.get_token() == "token-1"
    clock.now += 3600
    assert await cache.get_token() == "token-2"
    assert api.token_requests == 2
    await cache.http.aclose()


@pytest.mark.asyncio
async def test_exchange_sends_client_credentials(petfinder_api, clock):
    api = petfinder_api()
    cache = make_cache(api, clock)

    headers = await cache.auth_headers()

    assert headers == {"Authorization": "Bearer token-1"}
    request = api.requests[0]
    assert request.method == "POST"
    assert b'"grant_type": "client_credentials"' in request.content or \
        b'"grant_type":"client_credentials"' in request.content
    assert cache.token.expires_at == clock.now + 3600
    await cache.http.aclose()


@pytest.mark.asyncio
async def test_failed_exchange_raises_authentication_error(petfinder_api, clock):
    api = petfinder_api(auth_status=401)
    cache = make_cache(api, clock)

    with pytest.raises(AuthenticationError):
        await cache.get_token()
    assert cache.token is None
    await cache.http.aclose()


@pytest.mark.asyncio
async def test_overlapping_callers_share_one_exchange(petfinder_api, clock):
    api = petfinder_api(expires_in=3600)
    http = httpx.AsyncClient(base_url="https://api.petfinder.test", transport=api.yielding_transport)
    cache = TokenCache(http, "key", "secret", clock=clock)

    tokens = await asyncio.gather(*(cache.get_token() for _ in range(3)))
    assert tokens == ["token-1"] * 3
    assert api.token_requests == 1

    clock.now += 3600
    tokens = await asyncio.gather(*(cache.get_token() for _ in range(3)))
    assert tokens == ["token-2"] * 3
    assert api.token_requests == 2
    await http.aclose()
