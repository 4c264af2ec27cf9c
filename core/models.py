# =============================================================================
# core/models.py  —  Data Models (the "nouns" of the system)
# =============================================================================
#
# These types describe every piece of information that flows between the MCP
# tool, the validator and the Petfinder API:
#
#   - Enumerations for the fixed option sets Petfinder accepts
#   - AnimalType: species reference data used to validate filters
#   - Location: a tagged variant (kind + parts) for the three location shapes
#   - SearchParams: the caller's filter set, rendered into a query mapping
#   - Animal: the upstream record shape (a TypedDict, it is never mutated)
# =============================================================================

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional, TypedDict


# -----------------------------------------------------------------------------
# Enumerations accepted by GET /v2/animals
# -----------------------------------------------------------------------------
class Age(str, Enum):
    BABY = "baby"
    YOUNG = "young"
    ADULT = "adult"
    SENIOR = "senior"


class Gender(str, Enum):
    MALE = "male"
    FEMALE = "female"


class Coat(str, Enum):
    SHORT = "short"
    MEDIUM = "medium"
    LONG = "long"
    WIRE = "wire"
    HAIRLESS = "hairless"
    CURLY = "curly"


class Size(str, Enum):
    SMALL = "small"
    MEDIUM = "medium"
    LARGE = "large"
    XLARGE = "xlarge"


class Status(str, Enum):
    ADOPTABLE = "adoptable"
    PENDING = "pending"
    ADOPTED = "adopted"


class Sort(str, Enum):
    """Sort order; a leading dash reverses it."""

    RECENT = "recent"
    DISTANCE = "distance"
    REVERSED_RECENT = "-recent"
    REVERSED_DISTANCE = "-distance"


# -----------------------------------------------------------------------------
# AnimalType — species reference data
# -----------------------------------------------------------------------------
# Built from GET /v2/types, with `breeds` filled in from each type's
# breeds link.  Populated once per process and only read afterwards.
# -----------------------------------------------------------------------------
@dataclass
class AnimalType:
    """Valid filter values for one species (e.g. "Dog")."""

    name: str
    coats: list[str] = field(default_factory=list)
    colors: list[str] = field(default_factory=list)
    genders: list[str] = field(default_factory=list)
    breeds: list[str] = field(default_factory=list)

    @classmethod
    def from_api(cls, payload: dict[str, Any], breeds: list[str]) -> "AnimalType":
        return cls(
            name=payload["name"],
            coats=list(payload.get("coats") or []),
            colors=list(payload.get("colors") or []),
            genders=list(payload.get("genders") or []),
            breeds=breeds,
        )


# -----------------------------------------------------------------------------
# Location — tagged variant
# -----------------------------------------------------------------------------
class LocationKind(str, Enum):
    CITY_STATE = "city_state"
    COORDINATES = "coordinates"
    ZIPCODE = "zipcode"


_LOCATION_KEYS: dict[LocationKind, tuple[str, ...]] = {
    LocationKind.CITY_STATE: ("city", "state"),
    LocationKind.COORDINATES: ("latitude", "longitude"),
    LocationKind.ZIPCODE: ("zipcode",),
}


@dataclass(frozen=True)
class Location:
    """Where to search, as one of three shapes.

    `parts` holds the values in the order Petfinder expects them:
    (city, state), (latitude, longitude) or (zipcode,).
    """

    kind: LocationKind
    parts: tuple[str, ...]

    @classmethod
    def city_state(cls, city: str, state: str) -> "Location":
        return cls(LocationKind.CITY_STATE, (city, state))

    @classmethod
    def coordinates(cls, latitude: str, longitude: str) -> "Location":
        return cls(LocationKind.COORDINATES, (str(latitude), str(longitude)))

    @classmethod
    def zipcode(cls, code: str) -> "Location":
        return cls(LocationKind.ZIPCODE, (code,))

    @classmethod
    def from_mapping(cls, data: dict[str, Any]) -> "Location":
        """Pick the variant whose key set matches `data` exactly.

        Keys with a None value are ignored.  Raises ValueError for any other
        shape.
        """
        present = {k for k, v in data.items() if v is not None}
        for kind, keys in _LOCATION_KEYS.items():
            if present == set(keys):
                return cls(kind, tuple(str(data[k]) for k in keys))
        raise ValueError(
            "location must be one of {city, state}, {latitude, longitude} "
            f"or {{zipcode}}; got keys {sorted(present)}"
        )

    @property
    def zip_code(self) -> Optional[str]:
        return self.parts[0] if self.kind is LocationKind.ZIPCODE else None

    def to_query(self) -> str:
        """Single string for the `location` query parameter, e.g. "SF, CA"."""
        return ", ".join(self.parts)


# -----------------------------------------------------------------------------
# SearchParams — the caller's filters
# -----------------------------------------------------------------------------
# Values are kept as the caller supplied them (strings for the enum-backed
# fields) so the validator can report unknown values as text.  Only after
# validation does `to_query()` turn them into upstream query parameters.
# -----------------------------------------------------------------------------
_BOOLEAN_FILTERS = (
    "good_with_children",
    "good_with_dogs",
    "good_with_cats",
    "house_trained",
    "declawed",
    "special_needs",
)


@dataclass
class SearchParams:
    """Filters for GET /v2/animals."""

    type: str
    location: Optional[Location] = None
    age: Optional[str] = None
    gender: Optional[str] = None
    coat: Optional[str] = None
    color: Optional[str] = None
    breed: Optional[str] = None
    size: list[str] = field(default_factory=list)

    good_with_children: Optional[bool] = None
    good_with_dogs: Optional[bool] = None
    good_with_cats: Optional[bool] = None
    house_trained: Optional[bool] = None
    declawed: Optional[bool] = None
    special_needs: Optional[bool] = None

    distance: Optional[int] = None
    sort: Optional[str] = None
    before: Optional[str] = None
    after: Optional[str] = None
    status: Optional[str] = None
    limit: Optional[int] = None

    def to_query(self) -> dict[str, str | int]:
        """Render only the filters that were set, in Petfinder's format."""
        query: dict[str, str | int] = {"type": self.type}
        if self.location is not None:
            query["location"] = self.location.to_query()
        for name in ("age", "gender", "coat", "color", "breed", "sort", "before", "after", "status"):
            value = getattr(self, name)
            if value:
                query[name] = value
        if self.size:
            query["size"] = ",".join(self.size)
        for name in _BOOLEAN_FILTERS:
            value = getattr(self, name)
            if value is not None:
                query[name] = "true" if value else "false"
        if self.distance is not None:
            query["distance"] = self.distance
        if self.limit is not None:
            query["limit"] = self.limit
        return query


# -----------------------------------------------------------------------------
# Animal — upstream record (GET /v2/animals -> animals[])
# -----------------------------------------------------------------------------
class AnimalBreeds(TypedDict, total=False):
    primary: Optional[str]
    secondary: Optional[str]
    mixed: bool
    unknown: bool


class AnimalContact(TypedDict, total=False):
    email: Optional[str]
    phone: Optional[str]
    address: dict[str, Optional[str]]


class Animal(TypedDict, total=False):
    id: int
    organization_id: str
    url: str
    type: str
    species: str
    breeds: AnimalBreeds
    colors: dict[str, Optional[str]]
    age: str
    gender: str
    size: str
    coat: Optional[str]
    name: str
    description: Optional[str]
    attributes: dict[str, Optional[bool]]
    environment: dict[str, Optional[bool]]
    tags: list[str]
    contact: AnimalContact
    status: str
    published_at: str
    distance: Optional[float]
    photos: list[dict[str, str]]
    primary_photo_cropped: Optional[dict[str, str]]
    videos: list[dict[str, str]]
