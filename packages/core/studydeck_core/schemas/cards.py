"""Flashcard schemas."""

from typing import Any

from pydantic import BaseModel, Field


class Card(BaseModel):
    """A single term/definition study unit as stored in a deck file."""

    id: str = Field(..., description="Slug of the term")
    term: str = Field(..., description="Front side")
    definition: str = Field(..., description="Back side")
    source: str = Field(..., description="Path of the note or question bank")

    def to_entry(self) -> dict[str, Any]:
        """Serialize for a deck file, keeping the stored key order."""
        return self.model_dump()


class CardCandidate(BaseModel):
    """A scored (term, definition) pair that has not become a card yet."""

    term: str = Field(..., description="Candidate term")
    definition: str = Field(..., description="Candidate definition")
    score: int = Field(0, description="Heuristic quality score")


def is_valid_card(entry: Any) -> bool:
    """Whether a raw deck entry counts as a card.

    Only ``term`` and ``definition`` are checked; both must be strings that
    are not blank. Any other keys, including a missing ``id``, are tolerated.
    """
    if not isinstance(entry, dict):
        return False
    term = entry.get("term")
    definition = entry.get("definition")
    if not isinstance(term, str) or not term.strip():
        return False
    return isinstance(definition, str) and bool(definition.strip())


def count_valid_cards(entries: Any) -> int:
    """Count valid cards in a decoded deck file; non-lists count zero."""
    if not isinstance(entries, list):
        return 0
    return sum(1 for entry in entries if is_valid_card(entry))
