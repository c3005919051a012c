"""Storage for decks and question banks."""

from studydeck_core.storage.base import (
    DeckRepository,
    make_deck_id,
    split_deck_id,
)
from studydeck_core.storage.file import FileDeckRepository
from studydeck_core.storage.memory import InMemoryDeckRepository
from studydeck_core.storage.questions import (
    QUESTION_BANK_FILENAME,
    QuestionBank,
    iter_question_banks,
)

__all__ = [
    "DeckRepository",
    "FileDeckRepository",
    "InMemoryDeckRepository",
    "make_deck_id",
    "split_deck_id",
    "QUESTION_BANK_FILENAME",
    "QuestionBank",
    "iter_question_banks",
]
