# =============================================================================
# main.py  —  Entry Point for the Petfinder MCP Server
# =============================================================================
#
# HOW TO RUN:
#   python main.py --apiKey <key> --secretKey <secret>
#   (or set PETFINDER_API_KEY / PETFINDER_SECRET_KEY, e.g. in a .env file)
#
# WHAT HAPPENS:
#   1. Loads .env and parses the command line (core/config.py)
#   2. Opens a Petfinder client handle (core/petfinder.py)
#   3. Authenticates and prefetches every animal type with its breeds;
#      a failure here ends the process with exit status 1
#   4. Builds the FastMCP server around that handle (tools/mcp_server.py)
#   5. Serves MCP over stdio until the client disconnects
# =============================================================================

import asyncio
import logging
import sys
from typing import Optional, Sequence

import httpx
from dotenv import load_dotenv

from core.config import Settings, parse_args
from core.errors import PetfinderError
from core.petfinder import PetfinderClient
from tools.mcp_server import build_server, configure_logging

logger = logging.getLogger("petfinder")


async def serve(settings: Settings, *, transport: Optional[httpx.AsyncBaseTransport] = None) -> None:
    """Prefetch reference data and run the stdio MCP server."""
    async with PetfinderClient(
        settings.api_key,
        settings.secret_key,
        base_url=settings.base_url,
        timeout=settings.timeout,
        transport=transport,
    ) as petfinder:
        animal_types = await petfinder.get_animal_types()
        mcp = build_server(petfinder, animal_types)
        logger.info("Server started with %d animal types", len(animal_types))
        await mcp.run_async(transport="stdio")


def main(argv: Optional[Sequence[str]] = None, *,
         transport: Optional[httpx.AsyncBaseTransport] = None) -> None:
    load_dotenv()
    settings = parse_args(argv)
    configure_logging(settings.log_level)
    try:
        asyncio.run(serve(settings, transport=transport))
    except PetfinderError as e:
        logger.error("Startup failed: %s", e)
        sys.exit(1)
    except KeyboardInterrupt:
        logger.info("Aborted.")


if __name__ == "__main__":
    main()
