"""Note document schema."""

from pathlib import Path

from pydantic import BaseModel, Field


class NoteDocument(BaseModel):
    """A markdown note that becomes one deck."""

    path: Path = Field(..., description="Absolute path of the markdown file")
    relative_path: str = Field(..., description="POSIX path below the notes root")
    segments: list[str] = Field(..., description="Category and optional subsection")
    deck_name: str = Field(..., description="Deck name derived from the filename")

    @property
    def deck_id(self) -> str:
        return "/".join([*self.segments, self.deck_name])
