# =============================================================================
# core/config.py  —  Command-line / environment configuration
# =============================================================================
#
# Credentials come from --apiKey / --secretKey, falling back to the
# PETFINDER_API_KEY / PETFINDER_SECRET_KEY environment variables (main.py
# loads a .env file first).  They are read once at start-up.
# =============================================================================

import argparse
import os
from dataclasses import dataclass
from typing import Optional, Sequence

from core.petfinder import DEFAULT_BASE_URL


@dataclass(frozen=True)
class Settings:
    api_key: str
    secret_key: str
    base_url: str = DEFAULT_BASE_URL
    timeout: float = 10.0
    log_level: str = "INFO"


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(description="Petfinder MCP server (stdio)")
    p.add_argument("--apiKey", dest="api_key", default=os.getenv("PETFINDER_API_KEY"))
    p.add_argument("--secretKey", dest="secret_key", default=os.getenv("PETFINDER_SECRET_KEY"))
    p.add_argument("--base-url", default=os.getenv("PETFINDER_BASE_URL", DEFAULT_BASE_URL))
    p.add_argument("--timeout", type=float, default=float(os.getenv("PETFINDER_TIMEOUT", "10")))
    p.add_argument("--log-level", default=os.getenv("LOG_LEVEL", "INFO"),
                   choices=["DEBUG", "INFO", "WARNING", "ERROR"], type=str.upper)
    return p


def parse_args(argv: Optional[Sequence[str]] = None) -> Settings:
    parser = build_parser()
    args = parser.parse_args(argv)
    if not args.api_key or not args.secret_key:
        parser.error("API key and secret key are required (--apiKey/--secretKey)")
    return Settings(
        api_key=args.api_key,
        secret_key=args.secret_key,
        base_url=args.base_url,
        timeout=args.timeout,
        log_level=args.log_level,
    )
