"""Tests for main.ask – one question through a scripted runner."""
import asyncio
from types import SimpleNamespace

import main


def _part(text=None, function_call=None, function_response=None):
    return SimpleNamespace(text=text, function_call=function_call, function_response=function_response)


def _event(*parts):
    return SimpleNamespace(content=SimpleNamespace(parts=list(parts)))


def _call(name, /, **args):
    return SimpleNamespace(name=name, args=args)


def _mcp_result(text, is_error=False):
    return SimpleNamespace(response={"content": [{"type": "text", "text": text}], "isError": is_error})


class ScriptedRunner:
    """Replays a fixed list of events and records what it was sent."""

    def __init__(self, events):
        self.events = events
        self.calls = []

    async def run_async(self, user_id, session_id, new_message):
        self.calls.append((user_id, session_id, new_message))
        for event in self.events:
            yield event


def _ask(runner, question="tell me about pikachu"):
    return asyncio.run(main.ask(runner, "session-1", question))


class TestAsk:
    def test_question_sent_as_user_content(self):
        runner = ScriptedRunner([])
        _ask(runner, "Is Eevee a normal type?")
        user_id, session_id, message = runner.calls[0]
        assert (user_id, session_id) == (main.USER_ID, "session-1")
        assert message.role == "user"
        assert message.parts[0].text == "Is Eevee a normal type?"

    def test_returns_last_text(self):
        runner = ScriptedRunner([
            _event(_part(text="Let me look that up.")),
            _event(_part(function_call=_call("get_pokemon_pokedex_info", name="pikachu"))),
            _event(_part(function_response=_mcp_result("Pikachu (#25) - Electric type, 0.4m tall, 6kg"))),
            _event(_part(text="Pikachu is an Electric type.")),
        ])
        assert _ask(runner) == "Pikachu is an Electric type."

    def test_lookups_echoed_with_first_result_line(self, capsys):
        runner = ScriptedRunner([
            _event(_part(function_call=_call("search_pokemon_by_type", type="fire", limit=2))),
            _event(_part(function_response=_mcp_result(
                "Found 2 Fire type Pokemon:\n• Charmander (#4)\n• Charmeleon (#5)"))),
            _event(_part(text="Charmander and Charmeleon.")),
        ])
        _ask(runner)
        out = capsys.readouterr().out
        assert "🔎 search_pokemon_by_type(type='fire', limit=2)" in out
        assert "↳ Found 2 Fire type Pokemon:" in out
        assert "Charmander (#4)" not in out

    def test_tool_error_marked(self, capsys):
        runner = ScriptedRunner([
            _event(_part(function_call=_call("compare_pokemon", pokemon=["pikachu", "missingno"]))),
            _event(_part(function_response=_mcp_result(
                'Error comparing pokemon: Pokémon "missingno" not found.', is_error=True))),
        ])
        assert _ask(runner) == ""
        out = capsys.readouterr().out
        assert "compare_pokemon(pokemon=['pikachu', 'missingno'])" in out
        assert '✗ Error comparing pokemon: Pokémon "missingno" not found.' in out

    def test_events_without_content_skipped(self):
        runner = ScriptedRunner([
            SimpleNamespace(content=None),
            _event(),
            _event(_part(text="Done.")),
        ])
        assert _ask(runner) == "Done."


class TestResultText:
    def test_joins_text_items(self):
        response = {"content": [{"type": "text", "text": "a"}, {"type": "text", "text": "b"}]}
        assert main.result_text(response) == ("a\nb", False)

    def test_adk_error_dict(self):
        assert main.result_text({"error": "tool crashed"}) == ("tool crashed", True)

    def test_describe_call_without_args(self):
        assert main.describe_call(_call("get_pokemon_evolution_chain")) == "get_pokemon_evolution_chain()"
