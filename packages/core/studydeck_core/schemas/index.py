"""Schemas for the derived index and catalog files."""

from pydantic import BaseModel, ConfigDict, Field


class SubcategorySummary(BaseModel):
    """Question count for one subcategory."""

    count: int = Field(0, ge=0, description="Number of valid questions")


class QuestionIndex(BaseModel):
    """Category -> subcategory -> summary mapping, rebuilt on every scan."""

    model_config = ConfigDict(populate_by_name=True)

    categories: dict[str, dict[str, SubcategorySummary]] = Field(
        default_factory=dict, description="Per-category subcategory summaries"
    )
    generated_at: str = Field(..., alias="generatedAt", description="ISO timestamp")


class DeckCatalogEntry(BaseModel):
    """Read-only projection of a deck for browsing."""

    id: str = Field(..., description="category[/sub]/name")
    title: str = Field(..., description="Segments joined with ' / '")
    path: str = Field(..., description="URL path of the deck file")
    count: int = Field(0, ge=0, description="Number of valid cards")


class NoteEntry(BaseModel):
    """A markdown note listed in the notes index."""

    title: str = Field(..., description="Filename without extension")
    path: str = Field(..., description="URL path of the note")


class NotesIndex(BaseModel):
    """Category -> group -> notes mapping, rebuilt on every scan."""

    model_config = ConfigDict(populate_by_name=True)

    notes: dict[str, dict[str, list[NoteEntry]]] = Field(
        default_factory=dict, description="Per-category note groups"
    )
    generated_at: str = Field(..., alias="generatedAt", description="ISO timestamp")
