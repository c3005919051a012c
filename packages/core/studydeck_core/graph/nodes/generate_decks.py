"""Generate node: write one deck per markdown note."""

from collections.abc import Callable
from typing import Any

from studydeck_core.extract.markdown import extract_cards
from studydeck_core.graph.config import PipelineConfig
from studydeck_core.schemas.document import NoteDocument
from studydeck_core.storage.base import DeckRepository
from studydeck_core.utils.logging import get_logger, log_skipped

logger = get_logger(__name__)


def create_generate_decks_node(
    repository: DeckRepository,
    config: PipelineConfig,
) -> Callable[[dict[str, Any]], dict[str, Any]]:
    """Create a node that extracts cards from every discovered note.

    Args:
        repository: Deck storage to write into
        config: Pipeline configuration

    Returns:
        Node function
    """
    prefix = config.notes_url_prefix.rstrip("/")

    def generate_decks_node(state: dict[str, Any]) -> dict[str, Any]:
        """Extract cards per note and write the non-empty decks.

        Args:
            state: Pipeline state with documents

        Returns:
            Updated state with decks_written, cards_written and errors for
            notes that could not be read
        """
        documents: list[NoteDocument] = state.get("documents", [])
        decks_written: list[str] = []
        cards_written = 0
        errors: list[str] = []

        for document in documents:
            try:
                markdown = document.path.read_text(encoding="utf-8")
            except (OSError, UnicodeDecodeError) as e:
                log_skipped(logger, "notes->flashcards", document.path, str(e))
                errors.append(f"Unreadable note {document.relative_path}: {e}")
                continue
            if not markdown:
                continue

            cards = extract_cards(
                markdown,
                f"{prefix}/{document.relative_path}",
                config.extraction,
            )
            if not cards:
                continue

            repository.write(document.deck_id, [card.to_entry() for card in cards])
            decks_written.append(document.deck_id)
            cards_written += len(cards)
            logger.info(
                f"[notes->flashcards] Wrote {document.deck_id} ({len(cards)} cards)"
            )

        return {
            **state,
            "decks_written": decks_written,
            "cards_written": cards_written,
            "errors": errors,
            "current_step": "generate_decks",
            "progress": 70,
        }

    return generate_decks_node
