"""Runner configuration settings."""

from pathlib import Path

from pydantic import model_validator
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Runner configuration loaded from environment variables.

    Every location defaults to the conventional layout below
    ``project_root``; each one can be overridden on its own.
    """

    project_root: Path = Path(".")

    # Source trees
    categories_root: Path | None = None
    notes_root: Path | None = None

    # Generated data
    data_dir: Path | None = None
    flashcards_root: Path | None = None
    index_file: Path | None = None
    catalog_file: Path | None = None
    notes_index_file: Path | None = None

    # URL prefixes stored in catalog entries and card sources
    flashcards_url_prefix: str = "/data/flashcards"
    notes_url_prefix: str = "/notes"
    categories_url_prefix: str = "/categories"

    log_level: str = "INFO"

    model_config = {
        "env_prefix": "STUDYDECK_",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
    }

    @model_validator(mode="after")
    def _fill_default_locations(self) -> "Settings":
        root = self.project_root
        if self.categories_root is None:
            self.categories_root = root / "categories"
        if self.notes_root is None:
            self.notes_root = root / "notes"
        if self.data_dir is None:
            self.data_dir = root / "app" / "data"
        if self.flashcards_root is None:
            self.flashcards_root = self.data_dir / "flashcards"
        if self.index_file is None:
            self.index_file = self.data_dir / "index.json"
        if self.catalog_file is None:
            self.catalog_file = self.flashcards_root / "index.json"
        if self.notes_index_file is None:
            self.notes_index_file = self.data_dir / "notes_index.json"
        return self


settings = Settings()
