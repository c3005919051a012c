"""Data schemas for the pipeline.

This module exports the schemas shared by the scanners, extractors and the
merge engine: stored cards and questions, and the derived index files.
"""

from studydeck_core.schemas.cards import (
    Card,
    CardCandidate,
    count_valid_cards,
    is_valid_card,
)
from studydeck_core.schemas.document import NoteDocument
from studydeck_core.schemas.index import (
    DeckCatalogEntry,
    NoteEntry,
    NotesIndex,
    QuestionIndex,
    SubcategorySummary,
)
from studydeck_core.schemas.questions import Question, parse_question, valid_questions

__all__ = [
    # Cards
    "Card",
    "CardCandidate",
    "count_valid_cards",
    "is_valid_card",
    # Notes
    "NoteDocument",
    # Questions
    "Question",
    "parse_question",
    "valid_questions",
    # Derived indexes
    "DeckCatalogEntry",
    "NoteEntry",
    "NotesIndex",
    "QuestionIndex",
    "SubcategorySummary",
]
