# =============================================================================
# core/search.py  —  Search executor (validate → call → format)
# =============================================================================
#
# The whole request pipeline behind the `search_adoptable_animals` tool:
#
#   1. validate the parameters against the cached animal types
#      (first failure → explanatory text, no network call)
#   2. normalize them to Petfinder's spelling
#   3. call GET /v2/animals (defaults: status=adoptable, distance=10, limit=10)
#   4. format the results, or report an empty page / upstream failure as text
#
# Every branch returns a string.  Nothing is raised to the MCP layer.
# =============================================================================

import logging
from typing import Protocol

from core.errors import PetfinderError
from core.formatting import format_search_results
from core.models import Animal, AnimalType, SearchParams
from core.validation import normalize_search_params, validate_search_params

logger = logging.getLogger(__name__)

SEARCH_FAILED_PREFIX = "Failed to search for adoptable animals, reason: "


class AnimalSearcher(Protocol):
    async def search_animals(self, params: SearchParams) -> list[Animal]: ...


async def search_adoptable_animals(
    client: AnimalSearcher,
    animal_types: list[AnimalType],
    params: SearchParams,
) -> str:
    """Run one search and return the text the tool hands back to the LLM."""
    error = validate_search_params(params, animal_types)
    if error is not None:
        logger.info("Rejected search parameters: %s", error)
        return error

    params = normalize_search_params(params, animal_types)
    try:
        animals = await client.search_animals(params)
    except PetfinderError as e:
        return f"{SEARCH_FAILED_PREFIX}{e}"

    return format_search_results(animals)
