# =============================================================================
# core/pokedex.py  -  The Lookup Operations
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Implements the five lookups the tool server exposes.  Each one:
#     1. validates/normalizes its arguments (no request on bad input)
#     2. fetches what it needs from PokéAPI, one GET at a time
#     3. returns a ready-to-show text block
#
#   On failure each raises a PokedexError subclass.  Turning that into an
#   error-flagged tool result is the tool layer's job, not ours.
#
# THE OPERATIONS:
#   get_pokemon_info              →  one line: name, dex #, types, size
#   search_pokemon_by_type        →  header + bulleted list
#   search_pokemon_by_generation  →  header + bulleted list
#   get_evolution_chain           →  header + indented tree (3 GETs)
#   compare_pokemon               →  fixed-width stat table (2–6 GETs)
#
# CONCURRENCY:
#   Multi-request operations await their GETs strictly in sequence.  Nothing
#   here fans out with asyncio.gather, and nothing is shared between calls.
# =============================================================================

import re

import httpx

from core import config
from core.errors import ValidationError
from core.formatting import (
    COMPARE_COLUMNS,
    COMPARE_SEPARATOR,
    bullet,
    capitalize,
    join_types,
    table_row,
    tenths,
)
from core.models import ComparisonRow, EvolutionNode, ListingEntry
from core.pokeapi import (
    fetch,
    generation_url,
    pokemon_url,
    to_base_stats,
    to_evolution_tree,
    to_listing,
    to_record,
    type_url,
)
from core.schemas import (
    EvolutionChainPayload,
    GenerationPayload,
    PokemonPayload,
    SpeciesPayload,
    TypePayload,
)

_WHITESPACE = re.compile(r"\s+")
# PokéAPI slugs drop these: "Mr. Mime" → "mr-mime", "Farfetch'd" → "farfetchd".
_DROPPED_CHARS = re.compile(r"[.'’]")


# =============================================================================
# Argument normalization
# =============================================================================
def to_slug(name: str) -> str:
    """Normalize a Pokémon name the way PokéAPI spells it in URLs.

    Lower-cases, drops periods and apostrophes, and joins words with hyphens:

        >>> to_slug("Mr. Mime")
        'mr-mime'
        >>> to_slug("pikachu")
        'pikachu'

    Raises:
        ValidationError: if nothing is left after normalizing.
    """
    slug = _DROPPED_CHARS.sub("", name.strip().lower())
    slug = _WHITESPACE.sub("-", slug.strip())
    if not slug:
        raise ValidationError("Pokémon name must not be empty.")
    return slug


def _check_limit(limit: int) -> None:
    if limit <= 0:
        raise ValidationError(f"limit must be a positive integer (got {limit}).")


def _pokemon_context(name: str) -> str:
    return f'Pokémon "{name}"'


# =============================================================================
# get_pokemon_info
# =============================================================================
async def get_pokemon_info(client: httpx.AsyncClient, name: str) -> str:
    """One-line summary: "Pikachu (#25) - Electric type, 0.4m tall, 6kg"."""
    slug = to_slug(name)
    payload = await fetch(client, pokemon_url(slug), _pokemon_context(name), PokemonPayload)
    pokemon = to_record(payload)

    return (
        f"{capitalize(pokemon.name)} (#{pokemon.id}) - "
        f"{join_types(pokemon.types)} type, "
        f"{tenths(pokemon.height)}m tall, {tenths(pokemon.weight)}kg"
    )


# =============================================================================
# search_pokemon_by_type / search_pokemon_by_generation
# =============================================================================
# Both render the same way: a "Found N ..." header, then one bullet per
# entry in the order PokéAPI lists them.  Only the source differs.
# =============================================================================
def _render_listing(header: str, entries: list[ListingEntry]) -> str:
    lines = [header]
    lines.extend(bullet(f"{capitalize(e.name)} (#{e.id})") for e in entries)
    return "\n".join(lines)


async def search_pokemon_by_type(
    client: httpx.AsyncClient,
    type_name: str,
    limit: int = config.DEFAULT_LIMIT,
) -> str:
    """List Pokémon of one type, at most ``limit`` of them."""
    _check_limit(limit)
    type_slug = type_name.strip().lower()
    if not type_slug:
        raise ValidationError("Type name must not be empty.")

    payload = await fetch(client, type_url(type_slug), f'Type "{type_name}"', TypePayload)
    entries = to_listing([member.pokemon for member in payload.pokemon], limit)

    header = f"Found {len(entries)} {capitalize(type_slug)} type Pokemon:"
    return _render_listing(header, entries)


async def search_pokemon_by_generation(
    client: httpx.AsyncClient,
    generation: int,
    limit: int = config.DEFAULT_LIMIT,
) -> str:
    """List species introduced in a generation, at most ``limit`` of them.

    Generations run 1–9 today, but only the lower bound is checked here.
    An unknown generation comes back from PokéAPI as a 404, which is
    reported like any other "not found".
    """
    _check_limit(limit)
    if generation < 1:
        raise ValidationError(f"generation must be a positive integer (got {generation}).")

    payload = await fetch(
        client, generation_url(generation), f"Generation {generation}", GenerationPayload
    )
    entries = to_listing(payload.pokemon_species, limit)

    header = f"Found {len(entries)} Generation {generation} Pokemon:"
    return _render_listing(header, entries)


# =============================================================================
# get_evolution_chain
# =============================================================================
# Three dependent GETs:
#   /pokemon/{slug}        →  species URL
#   species URL            →  evolution-chain URL
#   evolution-chain URL    →  the tree
# Each has its own context label so a failure says WHICH step broke.
# =============================================================================
def render_evolution_tree(node: EvolutionNode, depth: int = 0) -> list[str]:
    """Pre-order walk: a node, then each child's subtree, in upstream order."""
    lines = [bullet(capitalize(node.species_name), depth)]
    for child in node.children:
        lines.extend(render_evolution_tree(child, depth + 1))
    return lines


async def get_evolution_chain(client: httpx.AsyncClient, name: str) -> str:
    slug = to_slug(name)

    pokemon = await fetch(client, pokemon_url(slug), _pokemon_context(name), PokemonPayload)
    if pokemon.species is None:
        raise ValidationError(f"PokéAPI returned no species for {_pokemon_context(name)}")

    species = await fetch(
        client, pokemon.species.url, f'Species for "{name}"', SpeciesPayload
    )
    chain = await fetch(
        client, species.evolution_chain.url, f'Evolution chain for "{name}"',
        EvolutionChainPayload,
    )

    tree = to_evolution_tree(chain.chain)
    lines = [f"Evolution chain for {capitalize(pokemon.name)}:"]
    lines.extend(render_evolution_tree(tree))
    return "\n".join(lines)


# =============================================================================
# compare_pokemon
# =============================================================================
def render_comparison(rows: list[ComparisonRow]) -> str:
    names, widths = zip(*COMPARE_COLUMNS)
    lines = [table_row([*names, "Total"], widths), COMPARE_SEPARATOR]
    for row in rows:
        cells = [capitalize(row.name), row.types, *row.stats.as_row(), row.total]
        lines.append(table_row(cells, widths))
    return "\n".join(lines)


async def compare_pokemon(client: httpx.AsyncClient, names: list[str]) -> str:
    """Side-by-side base stats for 2–6 Pokémon, in the order given.

    Every name is validated before the first request goes out.  Fetches
    then run one after another; the first failure aborts the comparison,
    so a partial table is never returned.
    """
    if not config.COMPARE_MIN <= len(names) <= config.COMPARE_MAX:
        raise ValidationError(
            f"Provide between {config.COMPARE_MIN} and {config.COMPARE_MAX} "
            f"Pokémon to compare (got {len(names)})."
        )
    slugs = [to_slug(name) for name in names]

    rows = []
    for name, slug in zip(names, slugs):
        context = _pokemon_context(name)
        payload = await fetch(client, pokemon_url(slug), context, PokemonPayload)
        stats = to_base_stats(payload, context)
        rows.append(ComparisonRow(
            name=payload.name,
            id=payload.id,
            types=join_types(slot.type.name for slot in payload.types),
            stats=stats,
            total=stats.total,
        ))

    return render_comparison(rows)
