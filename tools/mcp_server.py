# =============================================================================
# tools/mcp_server.py  -  FastMCP Tool Server (ALL tools in one place)
# =============================================================================
#
# WHAT THIS FILE DOES:
#   Defines the five MCP tools an assistant host can call.  Each tool is a
#   thin wrapper around a core/pokedex.py operation: it logs the call, opens
#   an HTTP client, awaits the operation, and returns its text.
#
# HOW IT WORKS (the flow):
#   1. The host decides it needs Pokémon data (e.g., "compare these three")
#   2. It calls a tool by name via MCP (e.g., "compare_pokemon")
#   3. FastMCP routes the call to the decorated function below
#   4. The function calls core/ logic, which talks to PokéAPI
#   5. The host receives a single text block, or an error-flagged one
#
# ERROR CONTRACT:
#   No tool ever lets an exception escape to the host.  Known failures
#   (PokedexError: not found, upstream error, validation) are re-raised as
#   FastMCP's ToolError with a per-tool prefix, e.g.
#
#       "Error getting pokemon info: Pokémon "pikachuu" not found."
#
#   FastMCP turns a ToolError into a result with isError=True and that
#   message as its text.  Anything else is a bug: it's logged with a
#   traceback and reported as "Unknown error occurred", still flagged.
#
# TOOL NAMING CONVENTIONS:
#   - get_*     → Read-only retrieval of one thing
#   - search_*  → Listing with a limit
#   - compare_* → Several lookups rendered side by side
#   All tools are read-only and idempotent, and say so in their annotations.
#
# RUNNING THIS SERVER:
#     a) Run standalone:  python -m tools.mcp_server   (or: pokedex-mcp)
#     b) Spawned by the ADK agent over stdio (agent/pokedex_agent.py)
# =============================================================================

import logging
import sys
from typing import Awaitable, Callable

from dotenv import load_dotenv
from fastmcp import FastMCP
from fastmcp.exceptions import ToolError

# core.config reads the environment at import time, so a .env file must be
# loaded first.  Variables already set in the environment win.
load_dotenv()

# --- Import core logic ---
# The tools layer depends on core/ and nothing else.
from core import config, pokedex
from core.errors import PokedexError
from core.pokeapi import new_client

# =============================================================================
# Logging Setup
# =============================================================================
# We log to STDERR because the MCP server talks to its host over STDOUT.
# A stray log line on stdout would corrupt the JSON-RPC stream.
#
# ANSI COLOR CODES:
#     - CYAN for incoming requests (tool name + parameters)
#     - GREEN for successful responses
#     - YELLOW for intermediate status messages
#     - RED for failures returned to the host
# =============================================================================

_CYAN = "\033[36m"
_GREEN = "\033[32m"
_YELLOW = "\033[33m"
_RED = "\033[31m"
_RESET = "\033[0m"

logging.basicConfig(
    level=getattr(logging, config.LOG_LEVEL, logging.INFO),
    format="%(asctime)s [MCP] %(message)s",
    datefmt="%H:%M:%S",
    stream=sys.stderr,
)


def _log_request(tool_name: str, **params) -> None:
    """Log an incoming tool call with its parameters in CYAN."""
    param_str = ", ".join(f"{k}={v!r}" for k, v in params.items())
    logging.info(f"{_CYAN}{tool_name} called with: {param_str}{_RESET}")


def _log_status(message: str) -> None:
    """Log an intermediate status message in YELLOW."""
    logging.info(f"{_YELLOW}  → {message}{_RESET}")


def _log_response(tool_name: str, text: str) -> str:
    """Log the first line of the tool's text in GREEN, then return the text."""
    first_line = text.split("\n", 1)[0]
    logging.info(f"{_GREEN}  ← {tool_name} response: {first_line}{_RESET}")
    return text


def _log_failure(tool_name: str, message: str) -> None:
    logging.warning(f"{_RED}  ✗ {tool_name} failed: {message}{_RESET}")


# =============================================================================
# Shared call wrapper
# =============================================================================
# Every tool does the same four things around its core/ call, so they live
# here once: log, open a client, translate errors, log the result.
# =============================================================================
Operation = Callable[..., Awaitable[str]]


async def _run_tool(
    tool_name: str,
    failure_prefix: str,
    operation: Operation,
    *args,
    **params,
) -> str:
    _log_request(tool_name, **params)
    try:
        async with new_client() as client:
            _log_status(f"Querying PokéAPI at {config.POKEAPI_BASE_URL}")
            text = await operation(client, *args)
    except PokedexError as exc:
        message = f"{failure_prefix}: {exc}"
        _log_failure(tool_name, message)
        raise ToolError(message) from exc
    except Exception as exc:
        logging.exception(f"Unexpected error in {tool_name}")
        raise ToolError(f"{failure_prefix}: Unknown error occurred") from exc
    return _log_response(tool_name, text)


# =============================================================================
# Create the FastMCP server instance
# =============================================================================
# The name "pokemon_pokedex_mcp" is the server identity hosts see.
mcp = FastMCP("pokemon_pokedex_mcp", version="1.0.0")

_READ_ONLY = {"readOnlyHint": True, "idempotentHint": True, "openWorldHint": True}


# =============================================================================
# TOOL 1: get_pokemon_pokedex_info
# =============================================================================
# The docstring is what the host LLM reads to decide WHEN to call a tool.
# =============================================================================
@mcp.tool(annotations={"title": "Get Pokemon Pokedex Info", **_READ_ONLY})
async def get_pokemon_pokedex_info(name: str) -> str:
    """Get basic Pokédex information about a Pokémon.

    Returns one line with the Pokémon's name, National Pokédex number,
    type(s), height in metres and weight in kilograms, e.g.
    "Pikachu (#25) - Electric type, 0.4m tall, 6kg".

    Args:
        name: The name of the Pokémon to look up (any case; spaces allowed,
              e.g. "Mr. Mime").
    """
    return await _run_tool(
        "get_pokemon_pokedex_info", "Error getting pokemon info",
        pokedex.get_pokemon_info, name,
        name=name,
    )


# =============================================================================
# TOOL 2: search_pokemon_by_type
# =============================================================================
@mcp.tool(annotations={"title": "Search Pokemon By Type", **_READ_ONLY})
async def search_pokemon_by_type(type: str, limit: int = config.DEFAULT_LIMIT) -> str:
    """List Pokémon that have a given type.

    WHEN TO CALL THIS: the user asks for examples of a type ("which Pokémon
    are Fire type?").  Results are in PokéAPI's order, not ranked.

    Args:
        type: Type name, e.g. "fire", "water", "dragon".
        limit: Maximum number of Pokémon to list (default 20, must be > 0).

    Returns:
        "Found N Fire type Pokemon:" followed by one "• Name (#id)" line each.
    """
    return await _run_tool(
        "search_pokemon_by_type", "Error searching pokemon by type",
        pokedex.search_pokemon_by_type, type, limit,
        type=type, limit=limit,
    )


# =============================================================================
# TOOL 3: search_pokemon_by_generation
# =============================================================================
@mcp.tool(annotations={"title": "Search Pokemon By Generation", **_READ_ONLY})
async def search_pokemon_by_generation(generation: int, limit: int = config.DEFAULT_LIMIT) -> str:
    """List Pokémon species introduced in a given game generation.

    Args:
        generation: Generation number, 1 (Red/Blue) through 9 (Scarlet/Violet).
        limit: Maximum number of Pokémon to list (default 20, must be > 0).

    Returns:
        "Found N Generation G Pokemon:" followed by one "• Name (#id)" line each.
        An unknown generation is reported as not found.
    """
    return await _run_tool(
        "search_pokemon_by_generation", "Error searching pokemon by generation",
        pokedex.search_pokemon_by_generation, generation, limit,
        generation=generation, limit=limit,
    )


# =============================================================================
# TOOL 4: get_pokemon_evolution_chain
# =============================================================================
# Three PokéAPI calls under the hood (pokemon → species → evolution chain).
# The error message names the step that failed.
# =============================================================================
@mcp.tool(annotations={"title": "Get Pokemon Evolution Chain", **_READ_ONLY})
async def get_pokemon_evolution_chain(name: str) -> str:
    """Show the full evolution family of a Pokémon as an indented tree.

    Works from any member of the family: "ivysaur" shows Bulbasaur →
    Ivysaur → Venusaur.  Branching families (e.g. Eevee) list every branch
    at the same indent.

    Args:
        name: The name of any Pokémon in the family.
    """
    return await _run_tool(
        "get_pokemon_evolution_chain", "Error getting evolution chain",
        pokedex.get_evolution_chain, name,
        name=name,
    )


# =============================================================================
# TOOL 5: compare_pokemon
# =============================================================================
@mcp.tool(annotations={"title": "Compare Pokemon", **_READ_ONLY})
async def compare_pokemon(pokemon: list[str]) -> str:
    """Compare the base stats of 2 to 6 Pokémon side by side.

    WHEN TO CALL THIS: the user wants to know which of several Pokémon is
    faster, bulkier, or stronger overall.  One call replaces several
    get_pokemon_pokedex_info calls.

    Args:
        pokemon: Between 2 and 6 Pokémon names, in the order to show them.

    Returns:
        A fixed-width table with columns Name, Type, HP, ATK, DEF, SPA, SPD,
        SPE and Total (sum of the six stats).  If any name can't be found,
        no table is returned and the error names that Pokémon.
    """
    return await _run_tool(
        "compare_pokemon", "Error comparing pokemon",
        pokedex.compare_pokemon, pokemon,
        pokemon=pokemon,
    )


# =============================================================================
# Server entry point
# =============================================================================
def main() -> None:
    """Run the server over stdio (the default MCP transport)."""
    mcp.run()


if __name__ == "__main__":
    main()
