"""Question bank locations under the categories tree."""

from collections.abc import Iterator
from dataclasses import dataclass
from pathlib import Path

from studydeck_core.utils.jsonio import ParseResult, read_json

QUESTION_BANK_FILENAME = "questions.json"


@dataclass(frozen=True)
class QuestionBank:
    """A ``categories/<category>/<subcategory>/questions.json`` file."""

    category: str
    subcategory: str
    path: Path

    def load(self) -> ParseResult:
        return read_json(self.path)

    def url(self, prefix: str = "/categories") -> str:
        """Path used as the ``source`` of cards derived from this bank."""
        return f"{prefix}/{self.category}/{self.subcategory}/{QUESTION_BANK_FILENAME}"


def list_subdirs(path: Path) -> list[Path]:
    """Sorted child directories of ``path``."""
    return sorted(p for p in path.iterdir() if p.is_dir())


def iter_question_banks(categories_root: str | Path) -> Iterator[QuestionBank]:
    """Yield every question bank, category by category.

    Subcategory directories without a bank file are skipped silently. A
    missing root yields nothing.
    """
    root = Path(categories_root)
    if not root.is_dir():
        return
    for category_dir in list_subdirs(root):
        for sub_dir in list_subdirs(category_dir):
            bank_path = sub_dir / QUESTION_BANK_FILENAME
            if bank_path.is_file():
                yield QuestionBank(category_dir.name, sub_dir.name, bank_path)
