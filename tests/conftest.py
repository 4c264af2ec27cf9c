import asyncio
import json

import httpx
import pytest

from core.models import AnimalType


class FakeClock:
    def __init__(self, now: float = 1000.0):
        self.now = now

    def __call__(self) -> float:
        return self.now


class YieldingTransport(httpx.AsyncBaseTransport):
    """Routes to a handler after giving the event loop a turn, like a real socket."""

    def __init__(self, handler, delay: float = 0.01):
        self.handler = handler
        self.delay = delay

    async def handle_async_request(self, request: httpx.Request) -> httpx.Response:
        await request.aread()
        await asyncio.sleep(self.delay)
        return self.handler(request)


class FakePetfinderAPI:
    """httpx.MockTransport handler imitating the Petfinder v2 endpoints."""

    def __init__(self, animals=None, *, auth_status=200, search_status=200, expires_in=3600):
        self.animals = animals if animals is not None else []
        self.auth_status = auth_status
        self.search_status = search_status
        self.expires_in = expires_in
        self.requests: list[httpx.Request] = []
        self.token_requests = 0

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handle)

    @property
    def yielding_transport(self) -> YieldingTransport:
        return YieldingTransport(self.handle)

    def paths(self) -> list[str]:
        return [r.url.path for r in self.requests]

    def last_search_params(self) -> dict[str, str]:
        searches = [r for r in self.requests if r.url.path == "/v2/animals"]
        return dict(searches[-1].url.params)

    def handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        path = request.url.path

        if path == "/v2/oauth2/token":
            self.token_requests += 1
            if self.auth_status != 200:
                return httpx.Response(self.auth_status, json={"title": "Unauthorized"})
            return httpx.Response(200, json={
                "token_type": "Bearer",
                "expires_in": self.expires_in,
                "access_token": f"token-{self.token_requests}",
            })

        if not request.headers.get("Authorization", "").startswith("Bearer token-"):
            return httpx.Response(401, json={"title": "Unauthorized"})

        if path == "/v2/types":
            return httpx.Response(200, json={"types": [
                {
                    "name": "Dog",
                    "coats": ["Hairless", "Short", "Medium", "Long", "Wire", "Curly"],
                    "colors": ["Black", "Brown / Chocolate", "White / Cream"],
                    "genders": ["Male", "Female"],
                    "_links": {"self": {"href": "/v2/types/dog"},
                               "breeds": {"href": "/v2/types/dog/breeds"}},
                },
                {
                    "name": "Cat",
                    "coats": ["Short", "Long"],
                    "colors": ["Black", "Tabby (Orange / Red)"],
                    "genders": ["Male", "Female"],
                    "_links": {"self": {"href": "/v2/types/cat"},
                               "breeds": {"href": "/v2/types/cat/breeds"}},
                },
            ]})
        if path == "/v2/types/dog/breeds":
            return httpx.Response(200, json={"breeds": [{"name": "Labrador Retriever"}, {"name": "Poodle"}]})
        if path == "/v2/types/cat/breeds":
            return httpx.Response(200, json={"breeds": [{"name": "Siamese"}]})

        if path == "/v2/animals":
            if self.search_status != 200:
                return httpx.Response(self.search_status, json={"title": "Server Error"})
            return httpx.Response(200, content=json.dumps({
                "animals": self.animals,
                "pagination": {"count_per_page": 10, "total_count": len(self.animals),
                               "current_page": 1, "total_pages": 1},
            }))

        return httpx.Response(404, json={"title": "Not Found"})


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def animal_types():
    return [
        AnimalType(
            name="Dog",
            coats=["Short", "Long"],
            colors=["Black", "Brown / Chocolate", "White / Cream"],
            genders=["Male", "Female"],
            breeds=["Labrador Retriever", "Poodle"],
        ),
        AnimalType(
            name="Cat",
            coats=["Short", "Long"],
            colors=["Black", "Tabby (Orange / Red)"],
            genders=["Male", "Female"],
            breeds=["Siamese"],
        ),
    ]


@pytest.fixture
def sample_animal():
    return {
        "id": 77830183,
        "organization_id": "NY123",
        "url": "https://www.petfinder.com/dog/rex-77830183/",
        "type": "Dog",
        "species": "Dog",
        "breeds": {"primary": "Labrador Retriever", "secondary": None, "mixed": False, "unknown": False},
        "age": "Young",
        "gender": "Male",
        "size": "Large",
        "name": "Rex",
        "photos": [{"small": "s.jpg", "medium": "m.jpg", "large": "l.jpg", "full": "f.jpg"}],
        "primary_photo_cropped": {"small": "s.jpg"},
        "videos": [],
        "contact": {"email": "adopt@shelter.org", "phone": "(212) 555-0100"},
        "_links": {"self": {"href": "/v2/animals/77830183"}},
    }


@pytest.fixture
def petfinder_api():
    """Factory for FakePetfinderAPI instances."""
    return FakePetfinderAPI
