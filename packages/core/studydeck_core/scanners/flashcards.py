"""Flashcard store scanner: rebuild the deck catalog."""

from pathlib import Path

from studydeck_core.schemas.cards import count_valid_cards
from studydeck_core.schemas.index import DeckCatalogEntry
from studydeck_core.storage.base import DeckRepository
from studydeck_core.utils.jsonio import write_json
from studydeck_core.utils.logging import get_logger, log_exceptions, log_skipped

logger = get_logger(__name__)


class FlashcardScanner:
    """Lists every deck with its number of valid cards.

    Ids, titles and paths come only from where a deck is stored: a deck at
    ``Cloud/AWS/S3.json`` has id ``Cloud/AWS/S3`` and title
    ``Cloud / AWS / S3``.
    """

    def __init__(
        self,
        repository: DeckRepository,
        output_path: str | Path,
        url_prefix: str = "/data/flashcards",
    ) -> None:
        self.repository = repository
        self.output_path = Path(output_path)
        self.url_prefix = url_prefix.rstrip("/")

    def build_catalog(self) -> list[DeckCatalogEntry]:
        """Build the catalog without writing it."""
        catalog: list[DeckCatalogEntry] = []
        for deck_id in self.repository.list():
            loaded = self.repository.read(deck_id)
            if not loaded.ok:
                log_skipped(logger, "flashcards-scan", deck_id, loaded.error or "")
                continue
            # null, false, 0 and "" are not decks; an empty list is
            if not loaded.value and not isinstance(loaded.value, (list, dict)):
                log_skipped(logger, "flashcards-scan", deck_id, "empty deck")
                continue
            catalog.append(
                DeckCatalogEntry(
                    id=deck_id,
                    title=" / ".join(deck_id.split("/")),
                    path=f"{self.url_prefix}/{self.repository.location(deck_id)}",
                    count=count_valid_cards(loaded.value),
                )
            )
        return catalog

    @log_exceptions(logger)
    def scan(self) -> list[DeckCatalogEntry]:
        """Rebuild the catalog and overwrite the output file.

        Returns:
            Catalog entries in deck order

        Raises:
            OSError: If the output cannot be written
        """
        catalog = self.build_catalog()
        write_json(self.output_path, [entry.model_dump() for entry in catalog])
        logger.info(
            f"[flashcards-scan] Wrote {self.output_path} ({len(catalog)} decks)"
        )
        return catalog
