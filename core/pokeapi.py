# =============================================================================
# core/pokeapi.py  -  PokéAPI Client & Error Translator
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   One job: turn "GET this URL" into either a validated pydantic object or
#   one of the three errors in core/errors.py.
#
#     200 + good JSON     →  schema instance
#     404                 →  NotFoundError(context)
#     other non-2xx       →  UpstreamError(context, status_code)
#     no response at all  →  UpstreamError(context, "network")
#     200 + wrong shape   →  ValidationError
#
#   It also owns the small conversions from wire schemas to the domain
#   dataclasses in core/models.py, and the URL helpers.
#
# WHAT IT DOES NOT DO:
#   No retries, no caching, no timeout override.  Each fetch is one GET.
#
# THE CLIENT IS PASSED IN:
#   Every function takes an httpx.AsyncClient from the caller.  The tool
#   server opens one per tool call (new_client()); tests pass one built on
#   httpx.MockTransport so no real request is ever made.
# =============================================================================

import logging
from typing import Optional, TypeVar
from urllib.parse import quote

import httpx
import pydantic

from core import config
from core.errors import NotFoundError, UpstreamError, ValidationError
from core.models import BaseStats, EvolutionNode, ListingEntry, PokemonRecord
from core.schemas import ChainLink, NamedResource, PokemonPayload

logger = logging.getLogger(__name__)

SchemaT = TypeVar("SchemaT", bound=pydantic.BaseModel)


def new_client(transport: Optional[httpx.AsyncBaseTransport] = None) -> httpx.AsyncClient:
    """Build the async HTTP client used for one tool invocation."""
    return httpx.AsyncClient(
        transport=transport,
        headers={"Accept": "application/json"},
        follow_redirects=True,
    )


# =============================================================================
# URL helpers
# =============================================================================
# Names are caller input.  They are escaped as ONE path segment so "?", "#"
# and "/" cannot turn into a query, a fragment or another resource.
def pokemon_url(slug: str) -> str:
    return f"{config.POKEAPI_BASE_URL}/pokemon/{quote(slug, safe='')}"


def type_url(type_name: str) -> str:
    return f"{config.POKEAPI_BASE_URL}/type/{quote(type_name, safe='')}"


def generation_url(generation: int) -> str:
    return f"{config.POKEAPI_BASE_URL}/generation/{generation}"


def resource_id(url: str) -> int:
    """Extract the numeric id from a PokéAPI detail URL.

    Detail URLs end in a slash: ".../pokemon/25/".  Splitting on "/" leaves
    an empty trailing segment, so we take the last NON-empty one.
    """
    segments = [s for s in url.split("/") if s]
    if not segments or not segments[-1].isdigit():
        raise ValidationError(f"Unexpected resource URL from PokéAPI: {url!r}")
    return int(segments[-1])


# =============================================================================
# fetch: the single point where HTTP meets the error taxonomy
# =============================================================================
async def fetch(
    client: httpx.AsyncClient,
    url: str,
    context: str,
    schema: type[SchemaT],
) -> SchemaT:
    """GET ``url`` and validate the JSON body against ``schema``.

    Args:
        client: The httpx client to send the request with.
        url: Fully-formed upstream URL.
        context: Human-readable label for error messages,
                 e.g. 'Pokémon "pikachu"' or 'Generation 3'.
        schema: The pydantic model the body must match.

    Raises:
        NotFoundError: upstream answered 404.
        UpstreamError: any other error status, or a network failure.
        ValidationError: the body is not JSON or doesn't match ``schema``.
    """
    logger.debug("GET %s (%s)", url, context)
    try:
        response = await client.get(url)
    except httpx.RequestError as exc:
        detail = str(exc) or type(exc).__name__
        raise UpstreamError(context, "network", detail) from exc

    if response.status_code == 404:
        raise NotFoundError(context)
    if not response.is_success:
        raise UpstreamError(context, response.status_code)

    try:
        body = response.json()
    except ValueError as exc:
        raise ValidationError(f"PokéAPI returned malformed JSON for {context}") from exc

    try:
        return schema.model_validate(body)
    except pydantic.ValidationError as exc:
        problems = "; ".join(
            f"{'.'.join(str(part) for part in err['loc']) or '<root>'}: {err['msg']}"
            for err in exc.errors()
        )
        raise ValidationError(
            f"PokéAPI returned unexpected data for {context}: {problems}"
        ) from exc


# =============================================================================
# Wire → domain conversions
# =============================================================================
def to_record(payload: PokemonPayload) -> PokemonRecord:
    return PokemonRecord(
        id=payload.id,
        name=payload.name,
        height=payload.height,
        weight=payload.weight,
        types=[slot.type.name for slot in payload.types],
    )


def to_listing(resources: list[NamedResource], limit: int) -> list[ListingEntry]:
    """Convert upstream listing entries, keeping upstream order, cut to ``limit``."""
    return [ListingEntry(name=r.name, id=resource_id(r.url)) for r in resources[:limit]]


def to_base_stats(payload: PokemonPayload, context: str) -> BaseStats:
    # PokéAPI always lists stats as hp, attack, defense, sp. attack,
    # sp. defense, speed, so we read them by position.
    if len(payload.stats) < 6:
        raise ValidationError(
            f"PokéAPI returned {len(payload.stats)} base stats for {context}, expected 6"
        )
    values = [s.base_stat for s in payload.stats[:6]]
    return BaseStats(*values)


def to_evolution_tree(link: ChainLink) -> EvolutionNode:
    return EvolutionNode(
        species_name=link.species.name,
        children=[to_evolution_tree(child) for child in link.evolves_to],
    )
