"""Deck repository interface.

A deck is addressed by its id, ``category/[sub/]name``, which is derived from
where the deck lives and never stored inside it. The merge engine, the notes
pipeline and the catalog scanner only talk to this interface.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from studydeck_core.utils.jsonio import ParseResult

DECK_SUFFIX = ".json"


def make_deck_id(segments: list[str] | tuple[str, ...], name: str) -> str:
    """Join category segments and a deck name into a deck id."""
    return "/".join([*segments, name])


def split_deck_id(deck_id: str) -> tuple[str, str]:
    """Split a deck id into ``(parent, name)``."""
    parent, _, name = deck_id.rpartition("/")
    return parent, name


def deck_sort_key(deck_id: str) -> tuple[str, bool, str]:
    """Order decks by category, category-level decks before subfolder decks."""
    category, _, rest = deck_id.partition("/")
    return category, "/" in rest, rest


class DeckRepository(ABC):
    """Storage for flashcard decks."""

    @abstractmethod
    def list(self) -> list[str]:
        """Return every deck id, ordered with ``deck_sort_key``."""

    @abstractmethod
    def read(self, deck_id: str) -> ParseResult:
        """Read the decoded content of a deck.

        Args:
            deck_id: Deck to read

        Returns:
            ParseResult with the decoded JSON, or the reason it failed
        """

    @abstractmethod
    def write(self, deck_id: str, entries: list[dict[str, Any]]) -> None:
        """Replace a deck with ``entries``, creating it if needed.

        Raises:
            OSError: If the deck cannot be persisted
        """

    def location(self, deck_id: str) -> str:
        """Relative path of the deck, used for catalog links."""
        return f"{deck_id}{DECK_SUFFIX}"
