# =============================================================================
# core/formatting.py  -  Text Helpers
# =============================================================================
#
# Small, pure string functions shared by the lookup operations.  Everything
# the user reads passes through here, so the rules live in one place:
#
#   capitalize()    →  "mr-mime" → "Mr-mime"  (first letter only)
#   tenths()        →  7 → "0.7", 60 → "6", 35 → "3.5"
#   table_row()     →  fixed-width, left-justified columns
# =============================================================================

from typing import Iterable

# Column widths for the compare_pokemon table.  The last column (Total) is
# never padded.
COMPARE_COLUMNS: list[tuple[str, int]] = [
    ("Name", 15),
    ("Type", 20),
    ("HP", 5),
    ("ATK", 5),
    ("DEF", 5),
    ("SPA", 5),
    ("SPD", 5),
    ("SPE", 5),
]
COMPARE_SEPARATOR = "-" * 80


def capitalize(text: str) -> str:
    """Upper-case the first character and leave the rest untouched.

    str.capitalize() would also lower-case the rest, which we don't want.
    """
    return text[:1].upper() + text[1:]


def join_types(types: Iterable[str]) -> str:
    return ", ".join(capitalize(t) for t in types)


def tenths(value: int) -> str:
    """Render an integer count of tenths as a decimal with no trailing ".0".

    PokéAPI gives height in decimetres and weight in hectograms; dividing by
    ten yields metres and kilograms with at most one decimal place.
    """
    whole, tenth = divmod(value, 10)
    return str(whole) if tenth == 0 else f"{whole}.{tenth}"


def table_row(cells: Iterable[object], widths: Iterable[int]) -> str:
    """Left-justify each cell to its width; any cell past the widths is appended as-is."""
    cells = [str(c) for c in cells]
    widths = list(widths)
    padded = [cell.ljust(width) for cell, width in zip(cells, widths)]
    return "".join(padded + cells[len(widths):])


def bullet(text: str, depth: int = 0) -> str:
    return f"{'  ' * depth}• {text}"
