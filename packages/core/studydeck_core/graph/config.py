"""Configuration helpers for the LangGraph pipeline.

``PipelineConfig`` controls the notes-to-flashcards graph. Extraction limits
live in ``ExtractionConfig`` and are re-exported here for convenience.
"""

from dataclasses import dataclass, field

from studydeck_core.extract.config import ExtractionConfig


@dataclass(frozen=True)
class PipelineConfig:
    """Configuration for the notes-to-flashcards pipeline."""

    extraction: ExtractionConfig = field(default_factory=ExtractionConfig)

    # URL prefixes written into card ``source`` fields
    notes_url_prefix: str = "/notes"
    categories_url_prefix: str = "/categories"

    # Skip the question-bank enrichment phase
    merge_questions: bool = True


__all__ = ["ExtractionConfig", "PipelineConfig"]
