"""Task for generating flashcard decks from notes and question banks."""

from __future__ import annotations

from typing import Any

import structlog
from studydeck_core.graph import PipelineConfig, run_pipeline
from studydeck_core.storage import FileDeckRepository

from runner.config import Settings

logger = structlog.get_logger()


def run_flashcard_generation(settings: Settings) -> dict[str, Any]:
    """Write one deck per note, then merge question-derived cards into decks."""
    logger.info(
        "flashcard_generation_started",
        notes_root=str(settings.notes_root),
        categories_root=str(settings.categories_root),
        flashcards_root=str(settings.flashcards_root),
    )

    config = PipelineConfig(
        notes_url_prefix=settings.notes_url_prefix,
        categories_url_prefix=settings.categories_url_prefix,
    )
    state = run_pipeline(
        settings.notes_root,
        settings.categories_root,
        FileDeckRepository(settings.flashcards_root),
        config,
    )

    merge_results = state.get("merge_results", [])
    summary = {
        "kind": "generate_flashcards",
        "decks": len(state.get("decks_written", [])),
        "cards": state.get("cards_written", 0),
        "merged_cards": sum(result.added for result in merge_results),
        "unmatched_banks": sum(1 for result in merge_results if result.skipped),
        "errors": len(state.get("errors", [])),
    }
    logger.info("flashcard_generation_completed", **summary)
    return summary
