# =============================================================================
# agent/__init__.py
# =============================================================================
# This package contains an optional Google ADK assistant that uses the
# Pokédex tool server.
#
# ARCHITECTURAL ROLE:
#   Any MCP host (Claude Desktop, an IDE, ...) can use tools/mcp_server.py
#   directly.  This package is a ready-made host for the terminal:
#     1. Receives the user's question ("Is Garchomp faster than Salamence?")
#     2. Decides which Pokédex tool(s) answer it
#     3. Calls them over MCP (stdio)
#     4. Explains the result in plain language
#
# WHAT THE AGENT IS NOT:
#   - It is NOT the lookup logic (that's in core/)
#   - It is NOT the tool implementations (that's in tools/)
# =============================================================================
