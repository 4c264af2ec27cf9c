# =============================================================================
# core/errors.py  —  Exceptions raised by the Petfinder client
# =============================================================================
#
# Only the client raises these.  The search executor converts them into text
# for the LLM; main.py lets an AuthenticationError at startup end the process.
# =============================================================================


class PetfinderError(Exception):
    """A Petfinder API call failed (network, HTTP status or bad payload)."""


class AuthenticationError(PetfinderError):
    """Exchanging the API key and secret for a bearer token failed."""
