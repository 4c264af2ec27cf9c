# =============================================================================
# core/validation.py  —  Search parameter validation
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Checks a SearchParams against the cached AnimalType reference data and
#   the fixed Petfinder enumerations, before any search request is made.
#
# CONTRACT:
#   validate_search_params() returns None when the parameters are usable, or
#   a human-readable message naming the bad field and the allowed values.
#   Nothing here raises: the LLM gets the message back as text and can fix
#   its next call.  The first failing field wins.
#
# ORDER OF CHECKS:
#   type → zip code → color → breed → age/gender/coat/size/status/sort
#   → before/after → distance/limit
# =============================================================================

import re
from dataclasses import replace
from datetime import datetime
from enum import Enum
from typing import Iterable, Optional

from core.models import Age, AnimalType, Coat, Gender, SearchParams, Size, Sort, Status

ZIP_CODE_RE = re.compile(r"^\d{5}(-\d{4})?$")
_COMPACT_OFFSET_RE = re.compile(r"([+-]\d{2})(\d{2})$")

MAX_DISTANCE_MILES = 500
MAX_LIMIT = 100


def option_guide(options: Iterable[str] | type[Enum]) -> str:
    """Describe an option set for a tool parameter, e.g. "must be one of [a,b]"."""
    if isinstance(options, type) and issubclass(options, Enum):
        values = [member.value for member in options]
    else:
        values = list(options)
    return f"must be one of [{','.join(values)}]"


def match_option(value: str, options: Iterable[str]) -> Optional[str]:
    """Case-insensitive exact match; returns the canonical spelling or None."""
    wanted = value.lower()
    for option in options:
        if option.lower() == wanted:
            return option
    return None


def find_animal_type(name: str, animal_types: list[AnimalType]) -> Optional[AnimalType]:
    wanted = name.lower()
    for animal_type in animal_types:
        if animal_type.name.lower() == wanted:
            return animal_type
    return None


def is_valid_zip_code(code: str) -> bool:
    return bool(ZIP_CODE_RE.match(code))


def is_iso8601(value: str) -> bool:
    """True for date-times like 2019-10-07T19:13:01+00:00 (or ...Z, ...+0000)."""
    if "T" not in value:
        return False
    # Petfinder writes offsets as +0000; fromisoformat wants +00:00 before 3.11.
    normalized = _COMPACT_OFFSET_RE.sub(r"\1:\2", value.replace("Z", "+00:00"))
    try:
        datetime.fromisoformat(normalized)
    except ValueError:
        return False
    return True


def _check_enum(field_name: str, value: Optional[str], enum_cls: type[Enum]) -> Optional[str]:
    if not value:
        return None
    allowed = [member.value for member in enum_cls]
    if match_option(value, allowed) is None:
        return f'Invalid {field_name} "{value}". Available values: {", ".join(allowed)}'
    return None


def validate_search_params(params: SearchParams, animal_types: list[AnimalType]) -> Optional[str]:
    """Return an explanatory message for the first invalid field, or None."""
    animal_type = find_animal_type(params.type, animal_types)
    if animal_type is None:
        available = ", ".join(t.name for t in animal_types)
        return f'Animal type "{params.type}" not found. Available types: {available}'

    zip_code = params.location.zip_code if params.location is not None else None
    if zip_code is not None and not is_valid_zip_code(zip_code):
        return f"Invalid ZIP code: {zip_code}"

    if params.color and match_option(params.color, animal_type.colors) is None:
        return (
            f'Color "{params.color}" is not valid for {params.type}. '
            f'Available colors: {", ".join(animal_type.colors)}'
        )

    if params.breed and match_option(params.breed, animal_type.breeds) is None:
        return (
            f'Breed "{params.breed}" is not valid for {params.type}. '
            f'Available breeds: {", ".join(animal_type.breeds)}'
        )

    for field_name, value, enum_cls in (
        ("age", params.age, Age),
        ("gender", params.gender, Gender),
        ("coat", params.coat, Coat),
        ("status", params.status, Status),
        ("sort", params.sort, Sort),
    ):
        message = _check_enum(field_name, value, enum_cls)
        if message:
            return message

    for size in params.size:
        message = _check_enum("size", size, Size)
        if message:
            return message

    for field_name in ("before", "after"):
        value = getattr(params, field_name)
        if value and not is_iso8601(value):
            return (
                f'Invalid {field_name} "{value}". Must be a valid ISO8601 date-time '
                "string (e.g. 2019-10-07T19:13:01+00:00)"
            )

    if params.distance is not None and not 0 <= params.distance <= MAX_DISTANCE_MILES:
        return f"Invalid distance {params.distance}. Must be between 0 and {MAX_DISTANCE_MILES} miles"

    if params.limit is not None and not 1 <= params.limit <= MAX_LIMIT:
        return f"Invalid limit {params.limit}. Must be between 1 and {MAX_LIMIT}"

    return None


def normalize_search_params(params: SearchParams, animal_types: list[AnimalType]) -> SearchParams:
    """Rewrite already-validated values into Petfinder's canonical spelling.

    Type, color and breed take the casing from the reference data; the
    enum-backed fields are lower-cased.
    """
    animal_type = find_animal_type(params.type, animal_types)
    if animal_type is None:
        raise ValueError(f"unknown animal type {params.type!r}; validate_search_params() must pass first")
    return replace(
        params,
        type=animal_type.name,
        color=match_option(params.color, animal_type.colors) if params.color else params.color,
        breed=match_option(params.breed, animal_type.breeds) if params.breed else params.breed,
        age=params.age.lower() if params.age else params.age,
        gender=params.gender.lower() if params.gender else params.gender,
        coat=params.coat.lower() if params.coat else params.coat,
        status=params.status.lower() if params.status else params.status,
        sort=params.sort.lower() if params.sort else params.sort,
        size=[s.lower() for s in params.size],
    )
