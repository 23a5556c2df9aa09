"""
Shared fixtures for the test suite.

The ``api`` fixture is an in-process fake of PokéAPI built on
httpx.MockTransport: canned JSON documents keyed by URL path, a 404 for
anything unknown, and a log of every path requested.
"""
import asyncio
import sys
from pathlib import Path
from urllib.parse import urlparse

import httpx
import pytest

# Ensure project root is importable
ROOT = Path(__file__).resolve().parent.parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from core import config  # noqa: E402
from core.pokeapi import new_client  # noqa: E402

BASE = config.POKEAPI_BASE_URL
_BASE_PATH = urlparse(BASE).path


# ---------------------------------------------------------------------------
# Document builders (only the fields the code reads, plus a little noise)
# ---------------------------------------------------------------------------
STAT_NAMES = ["hp", "attack", "defense", "special-attack", "special-defense", "speed"]


def pokemon_doc(pid, name, types, stats, height, weight, species_id=None):
    return {
        "id": pid,
        "name": name,
        "height": height,
        "weight": weight,
        "base_experience": 64,
        "types": [
            {"slot": i + 1, "type": {"name": t, "url": f"{BASE}/type/{t}/"}}
            for i, t in enumerate(types)
        ],
        "stats": [
            {"base_stat": value, "effort": 0, "stat": {"name": stat, "url": f"{BASE}/stat/{i + 1}/"}}
            for i, (stat, value) in enumerate(zip(STAT_NAMES, stats))
        ],
        "species": {
            "name": name,
            "url": f"{BASE}/pokemon-species/{species_id or pid}/",
        },
        "moves": [],
    }


def species_doc(name, chain_id):
    return {
        "name": name,
        "evolution_chain": {"url": f"{BASE}/evolution-chain/{chain_id}/"},
    }


def chain_link(name, pid, *children):
    return {
        "is_baby": False,
        "species": {"name": name, "url": f"{BASE}/pokemon-species/{pid}/"},
        "evolution_details": [],
        "evolves_to": list(children),
    }


def listing(kind, entries):
    return [{"name": name, "url": f"{BASE}/{kind}/{pid}/"} for name, pid in entries]


FIRE_MEMBERS = [
    ("charmander", 4), ("charmeleon", 5), ("charizard", 6), ("vulpix", 37),
    ("ninetales", 38), ("growlithe", 58), ("arcanine", 59),
]

GEN1_SPECIES = [
    ("bulbasaur", 1), ("charmander", 4), ("ivysaur", 2), ("squirtle", 7),
    ("venusaur", 3), ("pikachu", 25),
]


# ---------------------------------------------------------------------------
# Fake PokéAPI
# ---------------------------------------------------------------------------
class FakePokeAPI:
    def __init__(self):
        self.routes = {}
        self.requested = []

    def add(self, path, body, status=200):
        self.routes[path] = (status, body)

    def fail(self, path, exc_type, message="boom"):
        self.routes[path] = exc_type(message)

    def _handler(self, request: httpx.Request) -> httpx.Response:
        path = request.url.path[len(_BASE_PATH):]
        self.requested.append(path)
        route = self.routes.get(path)
        if route is None:
            return httpx.Response(404, text="Not Found")
        if isinstance(route, Exception):
            raise type(route)(str(route), request=request)
        status, body = route
        if isinstance(body, str):
            return httpx.Response(status, text=body)
        return httpx.Response(status, json=body)

    def client(self) -> httpx.AsyncClient:
        return new_client(transport=httpx.MockTransport(self._handler))

    def call(self, operation, *args):
        """Run one core operation against this fake and return its result."""
        async def _go():
            async with self.client() as client:
                return await operation(client, *args)
        return asyncio.run(_go())


@pytest.fixture
def api():
    fake = FakePokeAPI()

    fake.add("/pokemon/bulbasaur", pokemon_doc(1, "bulbasaur", ["grass", "poison"], [45, 49, 49, 65, 65, 45], 7, 69))
    fake.add("/pokemon/ivysaur", pokemon_doc(2, "ivysaur", ["grass", "poison"], [60, 62, 63, 80, 80, 60], 10, 130))
    fake.add("/pokemon/pikachu", pokemon_doc(25, "pikachu", ["electric"], [35, 55, 40, 50, 50, 90], 4, 60))
    fake.add("/pokemon/raichu", pokemon_doc(26, "raichu", ["electric"], [60, 90, 55, 90, 80, 110], 8, 300))
    fake.add("/pokemon/charizard", pokemon_doc(6, "charizard", ["fire", "flying"], [78, 84, 78, 109, 85, 100], 17, 905))
    fake.add("/pokemon/mr-mime", pokemon_doc(122, "mr-mime", ["psychic", "fairy"], [40, 45, 65, 100, 120, 90], 13, 545))
    fake.add("/pokemon/eevee", pokemon_doc(133, "eevee", ["normal"], [55, 55, 50, 45, 65, 55], 3, 65))

    fake.add("/pokemon-species/1/", species_doc("bulbasaur", 1))
    fake.add("/pokemon-species/2/", species_doc("ivysaur", 1))
    fake.add("/pokemon-species/133/", species_doc("eevee", 67))
    fake.add("/evolution-chain/1/", {
        "id": 1,
        "chain": chain_link("bulbasaur", 1, chain_link("ivysaur", 2, chain_link("venusaur", 3))),
    })
    fake.add("/evolution-chain/67/", {
        "id": 67,
        "chain": chain_link(
            "eevee", 133,
            chain_link("vaporeon", 134),
            chain_link("jolteon", 135),
            chain_link("flareon", 136),
        ),
    })

    fake.add("/type/fire", {
        "id": 10,
        "name": "fire",
        "pokemon": [{"slot": 1, "pokemon": p} for p in listing("pokemon", FIRE_MEMBERS)],
    })
    fake.add("/generation/1", {
        "id": 1,
        "name": "generation-i",
        "pokemon_species": listing("pokemon-species", GEN1_SPECIES),
    })

    return fake
