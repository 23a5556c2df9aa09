# =============================================================================
# core/errors.py  -  Error Taxonomy
# =============================================================================
#
# Every failure an operation can hit is one of three kinds:
#
#   ValidationError  →  the caller's input is out of range, or PokéAPI sent
#                       back JSON that doesn't match the shape we expect
#   NotFoundError    →  PokéAPI answered 404 for the thing we asked about
#   UpstreamError    →  any other HTTP error status, or the request never
#                       got an answer (DNS, timeout, connection refused)
#
# All three share PokedexError so the tool layer can catch exactly "errors we
# know how to explain" and let genuine bugs show up as bugs.
#
# The str() of each error is the human-readable message that ends up in the
# tool result.  "context" is a label like 'Pokémon "pikachu"' or
# 'Generation 3' so the message says WHICH lookup failed.
# =============================================================================

from typing import Union


class PokedexError(Exception):
    """Base class for every error an operation reports to the caller."""


class ValidationError(PokedexError):
    """Input or upstream data failed a shape/range check."""


class NotFoundError(PokedexError):
    """PokéAPI returned 404 for a named entity."""

    def __init__(self, context: str):
        self.context = context
        super().__init__(f"{context} not found.")


class UpstreamError(PokedexError):
    """PokéAPI failed with a non-404 status, or the network call failed.

    ``status`` is the HTTP status code, or the string ``"network"`` when no
    response arrived at all.  For network failures the original exception is
    chained as ``__cause__`` and its text is kept in the message.
    """

    def __init__(self, context: str, status: Union[int, str], detail: str = ""):
        self.context = context
        self.status = status
        if status == "network":
            message = f"Failed to fetch {context}: network error ({detail})"
        else:
            message = f"Failed to fetch {context}: HTTP {status}"
        super().__init__(message)
