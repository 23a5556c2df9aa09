# =============================================================================
# agent/pokedex_agent.py  -  Google ADK Agent Configuration
# =============================================================================
#
# WHAT THIS FILE DOES:
#   Builds the ADK agent that answers Pokémon questions by calling the
#   Pokédex tool server.
#
# HOW IT FITS TOGETHER:
#
#   ┌──────────────────────────────────────────────────────────┐
#   │                     Google ADK Agent                     │
#   │  system prompt  ──▶  LLM via LiteLlm  ──▶  MCPToolset    │
#   └──────────────────────────────────────────────────────────┘
#                                                   │ stdio
#                                                   ▼
#                                     ┌─────────────────────────┐
#                                     │  FastMCP server         │
#                                     │  (tools/mcp_server.py)  │
#                                     └─────────────────────────┘
#                                                   │ HTTPS
#                                                   ▼
#                                     ┌─────────────────────────┐
#                                     │  PokéAPI                │
#                                     └─────────────────────────┘
#
# MCP CONNECTION:
#   ADK starts the tool server as a subprocess and talks to it over
#   stdin/stdout.  We launch it with the SAME interpreter that runs the
#   agent (sys.executable), the project root as working directory, and a
#   copy of our environment.  The MCP stdio client otherwise passes only a
#   short whitelist of variables, which would drop POKEAPI_BASE_URL etc.
#
# MODEL:
#   LiteLlm accepts any provider/model string.  The default
#   ("openrouter/openai/gpt-4o") reads OPENROUTER_API_KEY from the
#   environment.  Override with POKEDEX_AGENT_MODEL, e.g.
#     - "openrouter/openai/gpt-4o-mini"
#     - "openrouter/anthropic/claude-3.5-sonnet"
#     - "openrouter/google/gemini-2.0-flash-001"
# =============================================================================

import os
import sys

from google.adk.agents import Agent
from google.adk.models.lite_llm import LiteLlm
from google.adk.tools.mcp_tool import MCPToolset
from mcp import StdioServerParameters

from agent.prompt import get_pokedex_prompt
from core import config


def create_agent() -> Agent:
    """Create the Pokédex assistant agent.

    Returns:
        A configured Google ADK Agent whose only tools are the five
        Pokédex tools served by tools/mcp_server.py.
    """
    project_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))

    mcp_tools = MCPToolset(
        connection_params=StdioServerParameters(
            command=sys.executable,
            args=["-m", "tools.mcp_server"],
            cwd=project_root,
            env=dict(os.environ),
        ),
    )

    agent = Agent(
        name="pokedex_assistant",                  # Used in logs and traces
        model=LiteLlm(model=config.AGENT_MODEL),
        instruction=get_pokedex_prompt(),
        tools=[mcp_tools],
    )

    return agent
