# =============================================================================
# core/schemas.py  -  PokéAPI Wire Schemas
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Declares the JSON shapes we rely on from PokéAPI as pydantic models.
#   core/pokeapi.py validates every response body against one of these
#   before anything else touches it.
#
# ONLY WHAT WE READ:
#   A /pokemon document is ~300KB of moves, sprites and game indices.  We
#   declare the handful of fields the formatters use and let pydantic ignore
#   the rest (its default for extra fields).  A renamed or retyped field
#   fails validation here and surfaces as a ValidationError naming the
#   lookup.
#
# Reference: https://pokeapi.co/docs/v2
# =============================================================================

from typing import Optional

from pydantic import BaseModel, Field


class NamedResource(BaseModel):
    """PokéAPI's {name, url} pointer to another resource."""

    name: str
    url: str


class ResourceLink(BaseModel):
    """An unnamed pointer: just {url}.  Used for species → evolution chain."""

    url: str


# -----------------------------------------------------------------------------
# /pokemon/{name}
# -----------------------------------------------------------------------------
class PokemonTypeSlot(BaseModel):
    slot: Optional[int] = None
    type: NamedResource


class PokemonStat(BaseModel):
    base_stat: int
    stat: NamedResource


class PokemonPayload(BaseModel):
    id: int = Field(gt=0)
    name: str
    height: int = Field(ge=0)
    weight: int = Field(ge=0)
    types: list[PokemonTypeSlot] = Field(min_length=1)
    stats: list[PokemonStat] = Field(default_factory=list)
    species: Optional[NamedResource] = None


# -----------------------------------------------------------------------------
# /type/{name}
# -----------------------------------------------------------------------------
class TypeMember(BaseModel):
    slot: Optional[int] = None
    pokemon: NamedResource


class TypePayload(BaseModel):
    id: Optional[int] = None
    name: str
    pokemon: list[TypeMember]


# -----------------------------------------------------------------------------
# /generation/{n}
# -----------------------------------------------------------------------------
class GenerationPayload(BaseModel):
    id: int
    name: str
    pokemon_species: list[NamedResource]


# -----------------------------------------------------------------------------
# /pokemon-species/{id} and /evolution-chain/{id}
# -----------------------------------------------------------------------------
class SpeciesPayload(BaseModel):
    name: str
    evolution_chain: ResourceLink


class ChainLink(BaseModel):
    """One node of an evolution chain; evolves_to holds its children."""

    species: NamedResource
    evolves_to: list["ChainLink"] = Field(default_factory=list)


ChainLink.model_rebuild()


class EvolutionChainPayload(BaseModel):
    id: Optional[int] = None
    chain: ChainLink
