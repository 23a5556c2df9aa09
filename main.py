# =============================================================================
# main.py  -  Terminal Front End for the Pokédex Assistant
# =============================================================================
#
# HOW TO RUN:
#   python main.py
#
#   (Other MCP hosts can use the tools directly: `python -m tools.mcp_server`
#    or the `pokedex-mcp` script.)
#
# ONE QUESTION, ONE ask():
#   ask() sends the trainer's question to the agent and walks the event
#   stream.  Each Pokédex lookup the agent makes is echoed as a pair of
#   lines, the call and the first line the tool answered with:
#
#     🔎 get_pokemon_pokedex_info(name='pikachu')
#        ↳ Pikachu (#25) - Electric type, 0.4m tall, 6kg
#     🔎 compare_pokemon(pokemon=['pikachu', 'missingno'])
#        ✗ Error comparing pokemon: Pokémon "missingno" not found.
#
#   The last text part the model produces is returned as the answer.
#
# REPL:
#   run_agent() owns the ADK Runner and one in-memory session, so follow-up
#   questions ("and what does it evolve into?") keep their context.
# =============================================================================

import asyncio

from dotenv import load_dotenv

# core.config reads POKEDEX_* at import and LiteLlm reads its API key on init.
load_dotenv()

from google.adk.runners import Runner
from google.adk.sessions import InMemorySessionService
from google.genai import types

from agent.pokedex_agent import create_agent

APP_NAME = "pokedex_assistant"
USER_ID = "trainer"
QUIT_WORDS = ("quit", "exit", "q")
RULE = "-" * 70


def describe_call(function_call) -> str:
    """Render a tool call the way a Python caller would write it."""
    args = ", ".join(f"{key}={value!r}" for key, value in (function_call.args or {}).items())
    return f"{function_call.name}({args})"


def result_text(response) -> tuple[str, bool]:
    """Pull the text and the error flag out of an MCP tool response.

    ADK hands back the tool result as a dict.  MCP tools answer with
    {"content": [{"type": "text", "text": ...}], "isError": ...}; anything
    else (an ADK-side failure, say) is shown as-is.
    """
    if not isinstance(response, dict):
        return str(response), False
    content = response.get("content")
    if isinstance(content, list):
        texts = [item.get("text", "") for item in content if isinstance(item, dict)]
        return "\n".join(t for t in texts if t), bool(response.get("isError"))
    if "error" in response:
        return str(response["error"]), True
    return str(response), False


def show_tool_result(function_response) -> None:
    text, is_error = result_text(function_response.response)
    first_line = text.split("\n", 1)[0] if text else "(empty result)"
    marker = "✗" if is_error else "↳"
    print(f"     {marker} {first_line}")


async def ask(runner, session_id: str, question: str, user_id: str = USER_ID) -> str:
    """Send one question to the agent, echoing its Pokédex lookups.

    Returns:
        The agent's final text, or "" when the model never produced any.
    """
    message = types.Content(role="user", parts=[types.Part(text=question)])
    answer = ""

    async for event in runner.run_async(
        user_id=user_id,
        session_id=session_id,
        new_message=message,
    ):
        if not (event.content and event.content.parts):
            continue
        for part in event.content.parts:
            if getattr(part, "function_call", None):
                print(f"  🔎 {describe_call(part.function_call)}")
            if getattr(part, "function_response", None):
                show_tool_result(part.function_response)
            if getattr(part, "text", None):
                answer = part.text

    return answer


async def run_agent():
    """Run the Pokédex assistant interactively until the trainer quits."""
    print("=" * 70)
    print("  POKÉDEX ASSISTANT  (Google ADK + FastMCP + PokéAPI)")
    print("=" * 70)

    session_service = InMemorySessionService()
    runner = Runner(agent=create_agent(), app_name=APP_NAME, session_service=session_service)
    session = await session_service.create_session(app_name=APP_NAME, user_id=USER_ID)

    print("Ask about any Pokémon: stats, types, generations, evolutions.")
    print(f"Type {' / '.join(QUIT_WORDS)} to leave.")

    while True:
        try:
            question = input("\n🧑 Trainer: ").strip()
        except (EOFError, KeyboardInterrupt):
            question = "quit"
        if question.lower() in QUIT_WORDS:
            print("\n👋 Goodbye!")
            return
        if not question:
            continue

        print(RULE)
        answer = await ask(runner, session.id, question)
        print(RULE)
        print(f"\n📖 Pokédex:\n\n{answer}" if answer else "\n⚠️  The agent gave no answer.")


if __name__ == "__main__":
    asyncio.run(run_agent())
