# =============================================================================
# core/models.py  -  Domain Models (what the user is shown)
# =============================================================================
#
# These dataclasses are the request-scoped values the lookup operations build
# from PokéAPI's JSON and then render as text.  None of them outlive a single
# tool call.
#
# RELATION TO core/schemas.py:
#   core/schemas.py mirrors PokéAPI's wire format, nesting and all
#   (types[0].type.name, stats[3].base_stat, ...).  The models here are the
#   flattened shapes the formatters consume.  The conversions from one to
#   the other live in core/pokeapi.py.
# =============================================================================

from dataclasses import dataclass, field


# -----------------------------------------------------------------------------
# PokemonRecord: one Pokémon, flattened
# -----------------------------------------------------------------------------
@dataclass
class PokemonRecord:
    """A single Pokémon as returned by /pokemon/{name}."""

    id: int                            # National dex number, always > 0
    name: str                          # Upstream slug, e.g. "mr-mime"
    height: int                        # Decimetres (PokéAPI's unit)
    weight: int                        # Hectograms (PokéAPI's unit)
    types: list[str] = field(default_factory=list)
    # Types in slot order: ["grass", "poison"].  Never empty.


# -----------------------------------------------------------------------------
# ListingEntry: one line of a type or generation search
# -----------------------------------------------------------------------------
# A search result is just list[ListingEntry] in upstream order.  The id comes
# from the last path segment of the entry's detail URL, so no extra request
# is needed per entry.
# -----------------------------------------------------------------------------
@dataclass
class ListingEntry:
    name: str
    id: int


# -----------------------------------------------------------------------------
# EvolutionNode: a node in an evolution tree
# -----------------------------------------------------------------------------
# Branching is normal (Eevee has eight children), so this is a tree, not a
# list.  Leaves simply have no children.
# -----------------------------------------------------------------------------
@dataclass
class EvolutionNode:
    species_name: str
    children: list["EvolutionNode"] = field(default_factory=list)


@dataclass
class BaseStats:
    """The six base stats, in PokéAPI's fixed order."""

    hp: int
    attack: int
    defense: int
    special_attack: int
    special_defense: int
    speed: int

    @property
    def total(self) -> int:
        return (self.hp + self.attack + self.defense
                + self.special_attack + self.special_defense + self.speed)

    def as_row(self) -> list[int]:
        return [self.hp, self.attack, self.defense,
                self.special_attack, self.special_defense, self.speed]


# -----------------------------------------------------------------------------
# ComparisonRow: one row of the compare_pokemon table
# -----------------------------------------------------------------------------
@dataclass
class ComparisonRow:
    name: str                          # Upstream slug
    id: int
    types: str                         # Already joined: "Grass, Poison"
    stats: BaseStats
    total: int                         # stats.total, stored so the row is self-contained
