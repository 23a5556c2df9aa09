# =============================================================================
# core/__init__.py
# =============================================================================
# This package contains ALL lookup logic for the Pokédex tool server.
#
# CRITICAL ARCHITECTURAL RULE:
#   Nothing in this package imports FastMCP, Google ADK, or any orchestration
#   framework.  The only outside world it knows about is PokéAPI, reached
#   through an httpx client that the CALLER hands in.  That means every
#   operation here can be exercised in a test with a fake transport and no
#   network at all.
#
# Layout:
#   config.py      →  environment-driven settings
#   errors.py      →  the error taxonomy every operation raises
#   models.py      →  domain dataclasses (what we show the user)
#   schemas.py     →  pydantic models of PokéAPI's JSON (what we receive)
#   pokeapi.py     →  HTTP fetch + error translation + URL helpers
#   formatting.py  →  capitalization, tenths, table rows
#   pokedex.py     →  the five lookup operations
# =============================================================================
