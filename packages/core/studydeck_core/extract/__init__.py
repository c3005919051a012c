"""Card extraction from markdown notes and question banks."""

from studydeck_core.extract.config import ExtractionConfig
from studydeck_core.extract.markdown import extract_cards, rank_candidates
from studydeck_core.extract.questions import extract_card, find_term
from studydeck_core.extract.scoring import score
from studydeck_core.extract.strategies import (
    DEFAULT_STRATEGIES,
    declarative_sentences,
    heading_definitions,
    inline_definitions,
)

__all__ = [
    "ExtractionConfig",
    "extract_cards",
    "rank_candidates",
    "extract_card",
    "find_term",
    "score",
    "DEFAULT_STRATEGIES",
    "declarative_sentences",
    "heading_definitions",
    "inline_definitions",
]
