"""Tasks that rebuild the index files."""

from __future__ import annotations

from typing import Any

import structlog
from studydeck_core.scanners import FlashcardScanner, NotesScanner, QuestionScanner
from studydeck_core.storage import FileDeckRepository

from runner.config import Settings

logger = structlog.get_logger()


def scan_questions(settings: Settings) -> dict[str, Any]:
    """Rebuild the question index."""
    index = QuestionScanner(settings.categories_root, settings.index_file).scan()
    total = sum(
        summary.count
        for subcategories in index.categories.values()
        for summary in subcategories.values()
    )
    logger.info(
        "question_index_written",
        path=str(settings.index_file),
        categories=len(index.categories),
        questions=total,
    )
    return {
        "kind": "scan_questions",
        "categories": len(index.categories),
        "questions": total,
    }


def scan_flashcards(settings: Settings) -> dict[str, Any]:
    """Rebuild the deck catalog."""
    scanner = FlashcardScanner(
        FileDeckRepository(settings.flashcards_root),
        settings.catalog_file,
        url_prefix=settings.flashcards_url_prefix,
    )
    catalog = scanner.scan()
    cards = sum(entry.count for entry in catalog)
    logger.info(
        "deck_catalog_written",
        path=str(settings.catalog_file),
        decks=len(catalog),
        cards=cards,
    )
    return {"kind": "scan_flashcards", "decks": len(catalog), "cards": cards}


def scan_notes(settings: Settings) -> dict[str, Any]:
    """Rebuild the notes index."""
    scanner = NotesScanner(
        settings.notes_root,
        settings.notes_index_file,
        url_prefix=settings.notes_url_prefix,
    )
    index = scanner.scan()
    notes = sum(
        len(entries) for groups in index.notes.values() for entries in groups.values()
    )
    logger.info(
        "notes_index_written", path=str(settings.notes_index_file), notes=notes
    )
    return {"kind": "scan_notes", "notes": notes}
