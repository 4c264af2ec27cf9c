# =============================================================================
# core/formatting.py  —  Search results → text for the LLM
# =============================================================================
#
# Photo, video and hypermedia link fields are dropped before the records are
# serialized.  Everything else (breeds, age, environment, contact, url) is
# passed through untouched.
# =============================================================================

import json
from typing import Any

from core.models import Animal
from core.prompts import get_recommendation_prompt

STRIPPED_FIELDS = ("photos", "primary_photo_cropped", "videos", "_links")

NO_RESULTS_MESSAGE = "No adoptable animals found matching your search criteria."


def strip_media(animal: Animal) -> dict[str, Any]:
    """Copy of `animal` without the media/link fields."""
    return {k: v for k, v in animal.items() if k not in STRIPPED_FIELDS}


def format_search_results(animals: list[Animal]) -> str:
    if not animals:
        return NO_RESULTS_MESSAGE
    slim = [strip_media(a) for a in animals]
    return f"{get_recommendation_prompt()}\nAnimals found: {json.dumps(slim)}"
