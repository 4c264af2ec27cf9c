# =============================================================================
# tools/mcp_server.py  —  FastMCP Tool Server
# =============================================================================
#
# WHAT THIS FILE DOES:
#   Builds the MCP server that an LLM client talks to over stdio.  It
#   registers:
#     - tool   `search_adoptable_animals`  → core.search
#     - prompt `user_information_collector_for_shelter_email`
#
# HOW IT WORKS (the flow):
#   1. The LLM calls `search_adoptable_animals` with structured filters
#   2. FastMCP validates the argument shapes (pydantic) and calls the
#      function below
#   3. The function turns the arguments into a core SearchParams and hands
#      it to core.search, which validates, searches and formats
#   4. The LLM receives plain text: a validation message, a "no results"
#      message, a failure message, or the recommendation brief + results
#
# The server is built by `build_server(client, animal_types)`.  The Petfinder
# client and the prefetched animal types are passed in; the tool's `type`
# description lists the fetched type names.
# =============================================================================

import logging
import sys
from typing import Annotated, Optional

from fastmcp import FastMCP
from mcp.types import PromptMessage, TextContent
from pydantic import Field

from core import search
from core.models import Age, AnimalType, Coat, Gender, Location, SearchParams, Size, Sort, Status
from core.petfinder import PetfinderClient
from core.prompts import SHELTER_EMAIL_PROMPT
from core.validation import option_guide
from tools.schemas import LocationInput

# =============================================================================
# Logging Setup
# =============================================================================
# Logs go to STDERR: STDOUT carries the MCP JSON-RPC stream.
#
# ANSI colours:
#   - CYAN for incoming requests (tool name + parameters)
#   - GREEN for responses
#   - YELLOW for intermediate status messages
# =============================================================================

_CYAN = "\033[36m"     # Requests (tool calls with params)
_GREEN = "\033[32m"    # Responses
_YELLOW = "\033[33m"   # Status/progress messages
_RESET = "\033[0m"     # Reset to default terminal color

_RESPONSE_PREVIEW_CHARS = 200

logger = logging.getLogger("petfinder.mcp")


def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s [MCP] %(message)s",
        datefmt="%H:%M:%S",
        stream=sys.stderr,
    )


def _log_request(tool_name: str, **params) -> None:
    """Log an incoming tool call with its parameters in CYAN."""
    param_str = ", ".join(f"{k}={v!r}" for k, v in params.items() if v is not None)
    logger.info(f"{_CYAN}{tool_name} called with: {param_str}{_RESET}")


def _log_status(message: str) -> None:
    """Log an intermediate status message in YELLOW."""
    logger.info(f"{_YELLOW}  → {message}{_RESET}")


def _log_response(tool_name: str, result: str) -> str:
    """Log the start of the tool response in GREEN, then return it."""
    preview = result if len(result) <= _RESPONSE_PREVIEW_CHARS else result[:_RESPONSE_PREVIEW_CHARS] + "…"
    logger.info(f"{_GREEN}  ← {tool_name} response ({len(result)} chars): {preview!r}{_RESET}")
    return result


def _split_sizes(size: Optional[str]) -> list[str]:
    if not size:
        return []
    return [s.strip() for s in size.split(",") if s.strip()]


# =============================================================================
# Server factory
# =============================================================================
def build_server(client: PetfinderClient, animal_types: list[AnimalType]) -> FastMCP:
    """Create the FastMCP server bound to one Petfinder client handle."""
    mcp = FastMCP("petfinder-mcp-server")
    type_names = [t.name for t in animal_types]

    # -------------------------------------------------------------------------
    # TOOL: search_adoptable_animals
    # -------------------------------------------------------------------------
    @mcp.tool()
    async def search_adoptable_animals(
        type: Annotated[str, Field(description=option_guide(type_names))],
        location: Annotated[LocationInput, Field(
            description="Where to search: {city, state}, {latitude, longitude} or {zipcode}")],
        age: Annotated[Optional[str], Field(description=option_guide(Age))] = None,
        gender: Annotated[Optional[str], Field(description=option_guide(Gender))] = None,
        coat: Annotated[Optional[str], Field(description=option_guide(Coat))] = None,
        color: Annotated[Optional[str], Field(
            description="Color valid for the chosen animal type")] = None,
        breed: Annotated[Optional[str], Field(
            description="Breed valid for the chosen animal type")] = None,
        size: Annotated[Optional[str], Field(
            description=option_guide(Size) + "; several may be comma-separated")] = None,
        good_with_children: Annotated[Optional[bool], Field(
            description="whether the animal is good with children")] = None,
        good_with_dogs: Annotated[Optional[bool], Field(
            description="whether the animal is good with dogs")] = None,
        good_with_cats: Annotated[Optional[bool], Field(
            description="whether the animal is good with cats")] = None,
        house_trained: Annotated[Optional[bool], Field(
            description="whether the animal is house trained")] = None,
        declawed: Annotated[Optional[bool], Field(
            description="whether the animal is declawed")] = None,
        special_needs: Annotated[Optional[bool], Field(
            description="whether the animal has special needs")] = None,
        distance: Annotated[Optional[int], Field(
            description="distance in miles from the location (default 10, max 500)")] = None,
        sort: Annotated[Optional[Sort], Field(
            description="Attribute to sort by; leading dash requests a reverse-order sort.")] = None,
        before: Annotated[Optional[str], Field(
            description="Must be a valid ISO8601 date-time string (e.g. 2019-10-07T19:13:01+00:00)")] = None,
        after: Annotated[Optional[str], Field(
            description="Must be a valid ISO8601 date-time string (e.g. 2019-10-07T19:13:01+00:00)")] = None,
        status: Annotated[Optional[str], Field(
            description=option_guide(Status) + " (default adoptable)")] = None,
        limit: Annotated[Optional[int], Field(
            description="maximum number of results, 1-100 (default 10)")] = None,
    ) -> str:
        """Search for adoptable animals using the Petfinder API.

        Returns a recommendation brief followed by the matching animals as
        JSON, or a message explaining which parameter was invalid.
        """
        _log_request(
            "search_adoptable_animals",
            type=type, location=location.model_dump(), age=age, gender=gender,
            coat=coat, color=color, breed=breed, size=size,
            good_with_children=good_with_children, good_with_dogs=good_with_dogs,
            good_with_cats=good_with_cats, house_trained=house_trained,
            declawed=declawed, special_needs=special_needs, distance=distance,
            sort=sort, before=before, after=after, status=status, limit=limit,
        )

        params = SearchParams(
            type=type,
            location=Location.from_mapping(location.model_dump()),
            age=age,
            gender=gender,
            coat=coat,
            color=color,
            breed=breed,
            size=_split_sizes(size),
            good_with_children=good_with_children,
            good_with_dogs=good_with_dogs,
            good_with_cats=good_with_cats,
            house_trained=house_trained,
            declawed=declawed,
            special_needs=special_needs,
            distance=distance,
            sort=sort.value if sort is not None else None,
            before=before,
            after=after,
            status=status,
            limit=limit,
        )
        _log_status(f"location → {params.location.to_query()!r}")

        result = await search.search_adoptable_animals(client, animal_types, params)
        return _log_response("search_adoptable_animals", result)

    # -------------------------------------------------------------------------
    # PROMPT: user_information_collector_for_shelter_email
    # -------------------------------------------------------------------------
    @mcp.prompt()
    def user_information_collector_for_shelter_email() -> list[PromptMessage]:
        """Collect some user information before drafting the email to the shelter."""
        _log_request("user_information_collector_for_shelter_email")
        return [
            PromptMessage(
                role="assistant",
                content=TextContent(type="text", text=SHELTER_EMAIL_PROMPT),
            )
        ]

    return mcp
