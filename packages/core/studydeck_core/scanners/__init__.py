"""Scanners that rebuild the derived index files from stored content."""

from studydeck_core.scanners.flashcards import FlashcardScanner
from studydeck_core.scanners.notes import NotesScanner, list_markdown
from studydeck_core.scanners.questions import QuestionScanner, count_questions

__all__ = [
    "FlashcardScanner",
    "NotesScanner",
    "QuestionScanner",
    "count_questions",
    "list_markdown",
]
