# =============================================================================
# tools/__init__.py
# =============================================================================
# This package contains the FastMCP tool server.
#
# ARCHITECTURAL ROLE:
#   tools/ is the "translation layer" between an MCP host and the lookup
#   logic in core/.  mcp_server.py:
#     1. Imports the async operations from core/pokedex.py
#     2. Wraps each in a FastMCP tool decorator
#     3. Opens the HTTP client each call uses
#     4. Turns every PokedexError into an error-flagged tool result
#
# WHAT TOOLS DO NOT DO:
#   - They do NOT build URLs or parse PokéAPI JSON (that's core/)
#   - They do NOT format text (that's core/)
#   - They do NOT know about Google ADK (any MCP host can use them)
# =============================================================================
