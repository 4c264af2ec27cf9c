# =============================================================================
# tools/schemas.py  —  Input shapes for the MCP tool
# =============================================================================
#
# FastMCP builds the tool's JSON schema from these pydantic models.  Each
# location shape forbids extra keys, so a payload can only match one member
# of the union.  The tool hands `model_dump()` to core Location.from_mapping.
# =============================================================================

from pydantic import BaseModel, ConfigDict, Field


class CityStateLocation(BaseModel):
    model_config = ConfigDict(extra="forbid")

    city: str = Field(description="City name, e.g. San Francisco")
    state: str = Field(description="Two-letter state code, e.g. CA")


class CoordinatesLocation(BaseModel):
    model_config = ConfigDict(extra="forbid")

    latitude: str = Field(description="Latitude in decimal degrees")
    longitude: str = Field(description="Longitude in decimal degrees")


class ZipcodeLocation(BaseModel):
    model_config = ConfigDict(extra="forbid")

    zipcode: str = Field(description="US ZIP code, e.g. 94105 or 94105-1234")


LocationInput = CityStateLocation | CoordinatesLocation | ZipcodeLocation
