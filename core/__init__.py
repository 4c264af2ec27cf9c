# =============================================================================
# core/__init__.py
# =============================================================================
# Business logic for the Petfinder MCP server: data models, the Petfinder API
# client with its token cache, parameter validation, result formatting and
# the search pipeline that ties them together.
#
# Nothing in this package imports FastMCP.  The tools/ package wraps these
# functions for MCP; everything here can be driven directly from tests.
# =============================================================================
