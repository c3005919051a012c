"""studydeck-core: turn study notes and question banks into flashcard decks.

This package mines term/definition flashcards from markdown notes and from
multiple-choice question explanations, and rebuilds the index files that
browsing clients read.

Pipeline:
    Notes are scanned, each note becomes one deck, then decks are enriched
    with cards derived from the question banks.

    >>> from studydeck_core import FileDeckRepository, run_pipeline
    >>> repo = FileDeckRepository("app/data/flashcards")
    >>> state = run_pipeline("notes", "categories", repo)

Scanners:
    QuestionScanner, FlashcardScanner and NotesScanner rebuild the question
    index, deck catalog and notes index from scratch on every run.
"""

from studydeck_core.extract import extract_card, extract_cards, score
from studydeck_core.graph import PipelineConfig, build_pipeline_graph, run_pipeline
from studydeck_core.merge import DeckMerger, MergeResult, merge_question_banks
from studydeck_core.scanners import FlashcardScanner, NotesScanner, QuestionScanner
from studydeck_core.schemas.cards import Card
from studydeck_core.schemas.questions import Question
from studydeck_core.storage import (
    DeckRepository,
    FileDeckRepository,
    InMemoryDeckRepository,
)

__version__ = "0.1.0"

__all__ = [
    # Pipeline
    "build_pipeline_graph",
    "run_pipeline",
    "PipelineConfig",
    # Extraction
    "extract_cards",
    "extract_card",
    "score",
    # Merge
    "DeckMerger",
    "MergeResult",
    "merge_question_banks",
    # Scanners
    "FlashcardScanner",
    "NotesScanner",
    "QuestionScanner",
    # Storage
    "DeckRepository",
    "FileDeckRepository",
    "InMemoryDeckRepository",
    # Schemas
    "Card",
    "Question",
]
