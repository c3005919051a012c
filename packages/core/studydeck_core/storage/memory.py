"""In-memory deck repository used by tests and dry runs."""

from __future__ import annotations

from typing import Any

from studydeck_core.storage.base import DeckRepository, deck_sort_key
from studydeck_core.utils.jsonio import ParseResult, dump_json, parse_json


class InMemoryDeckRepository(DeckRepository):
    """Keeps serialized decks in a dict, exactly as they would be on disk."""

    def __init__(self, decks: dict[str, Any] | None = None) -> None:
        self._raw: dict[str, str] = {}
        self.writes: list[str] = []
        for deck_id, content in (decks or {}).items():
            self._raw[deck_id] = dump_json(content)

    def put_raw(self, deck_id: str, text: str) -> None:
        """Store undecoded text, e.g. to simulate a corrupted deck."""
        self._raw[deck_id] = text

    def raw(self, deck_id: str) -> str:
        return self._raw[deck_id]

    def list(self) -> list[str]:
        return sorted(self._raw, key=deck_sort_key)

    def read(self, deck_id: str) -> ParseResult:
        if deck_id not in self._raw:
            return ParseResult.failure("missing deck")
        return parse_json(self._raw[deck_id])

    def write(self, deck_id: str, entries: list[dict[str, Any]]) -> None:
        self._raw[deck_id] = dump_json(entries)
        self.writes.append(deck_id)
