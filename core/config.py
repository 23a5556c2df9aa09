# =============================================================================
# core/config.py  -  Runtime Settings
# =============================================================================
#
# Every knob is an environment variable with a sensible default, read once at
# import time.  main.py loads a .env file (python-dotenv) BEFORE importing
# anything that reads these, so a local .env works the same as exported vars.
#
#   POKEAPI_BASE_URL     →  where the upstream API lives (override for a mirror)
#   POKEDEX_LOG_LEVEL    →  tool server log level (DEBUG shows every GET)
#   POKEDEX_AGENT_MODEL  →  LiteLlm model string for the optional agent
#
# No timeout setting: upstream calls use httpx's
# transport default.
# =============================================================================

import os

POKEAPI_BASE_URL: str = os.environ.get("POKEAPI_BASE_URL", "https://pokeapi.co/api/v2").rstrip("/")

LOG_LEVEL: str = os.environ.get("POKEDEX_LOG_LEVEL", "INFO").upper()

AGENT_MODEL: str = os.environ.get("POKEDEX_AGENT_MODEL", "openrouter/openai/gpt-4o")

# Result lists are cut to this many entries unless the caller asks otherwise.
DEFAULT_LIMIT: int = 20

# compare_pokemon accepts between MIN and MAX names inclusive.
COMPARE_MIN: int = 2
COMPARE_MAX: int = 6
