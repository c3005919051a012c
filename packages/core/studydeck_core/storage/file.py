"""Deck repository backed by a flashcards directory tree."""

from __future__ import annotations

from pathlib import Path
from typing import Any

from studydeck_core.storage.base import (
    DECK_SUFFIX,
    DeckRepository,
    deck_sort_key,
    make_deck_id,
)
from studydeck_core.utils.jsonio import ParseResult, read_json, write_json
from studydeck_core.utils.logging import get_logger

logger = get_logger(__name__)


def _is_deck_file(path: Path) -> bool:
    return (
        path.is_file()
        and not path.name.startswith(".")
        and path.name.lower().endswith(DECK_SUFFIX)
    )


def _deck_name(path: Path) -> str:
    return path.name[: -len(DECK_SUFFIX)]


class FileDeckRepository(DeckRepository):
    """Decks stored as ``<root>/<category>/[<sub>/]<name>.json``.

    Only two levels are walked: JSON files directly under a category
    directory, and JSON files one subfolder deeper. Files at the root itself
    (such as the catalog) are not decks.
    """

    def __init__(self, root: str | Path) -> None:
        self.root = Path(root)
        self._paths: dict[str, Path] = {}

    def list(self) -> list[str]:
        self._paths = {}
        if not self.root.is_dir():
            return []

        for category_dir in sorted(p for p in self.root.iterdir() if p.is_dir()):
            for path in sorted(category_dir.iterdir()):
                if _is_deck_file(path):
                    deck_id = make_deck_id([category_dir.name], _deck_name(path))
                    self._paths[deck_id] = path
            for sub_dir in sorted(p for p in category_dir.iterdir() if p.is_dir()):
                for path in sorted(sub_dir.iterdir()):
                    if _is_deck_file(path):
                        deck_id = make_deck_id(
                            [category_dir.name, sub_dir.name], _deck_name(path)
                        )
                        self._paths[deck_id] = path

        return sorted(self._paths, key=deck_sort_key)

    def path_for(self, deck_id: str) -> Path:
        """Filesystem path of a deck, existing or not."""
        known = self._paths.get(deck_id)
        if known is not None:
            return known
        *parents, name = deck_id.split("/")
        return self.root.joinpath(*parents, f"{name}{DECK_SUFFIX}")

    def read(self, deck_id: str) -> ParseResult:
        return read_json(self.path_for(deck_id))

    def write(self, deck_id: str, entries: list[dict[str, Any]]) -> None:
        path = self.path_for(deck_id)
        write_json(path, entries)
        self._paths[deck_id] = path
        logger.debug(f"Wrote deck {deck_id} ({len(entries)} entries) to {path}")

    def location(self, deck_id: str) -> str:
        return self.path_for(deck_id).relative_to(self.root).as_posix()
