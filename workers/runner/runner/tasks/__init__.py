"""Tasks the runner can dispatch."""

from runner.tasks.generate_flashcards import run_flashcard_generation
from runner.tasks.scan_index import scan_flashcards, scan_notes, scan_questions

__all__ = [
    "run_flashcard_generation",
    "scan_flashcards",
    "scan_notes",
    "scan_questions",
]
