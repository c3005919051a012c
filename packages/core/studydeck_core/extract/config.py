"""Extraction limits and thresholds."""

from dataclasses import dataclass


@dataclass(frozen=True)
class ExtractionConfig:
    """Limits and thresholds used while mining cards."""

    # Ranking
    max_cards_per_document: int = 50
    markdown_min_score: int = 0  # Candidates scoring <= this are dropped
    question_min_score: int = 1  # Question-derived text is noisier

    # Inline "Term: definition" lines
    inline_max_length: int = 320

    # Heading followed by a paragraph
    heading_max_lines: int = 5
    heading_max_length: int = 260

    # "X is ..." first sentences
    sentence_max_length: int = 240

    # Card ids
    max_id_length: int = 80
