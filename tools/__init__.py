# =============================================================================
# tools/__init__.py
# =============================================================================
# FastMCP wrappers around core/.
#
#   - mcp_server.py: server factory, tool + prompt registration, logging
#   - schemas.py:    pydantic shapes for tool arguments
#
# Tools translate arguments into core types, call core, and return text.
# They hold no business logic of their own.
# =============================================================================
