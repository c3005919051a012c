"""Question store scanner: rebuild the question index from the categories tree."""

from pathlib import Path

from studydeck_core.scanners.base import Clock, iso_timestamp, utc_now
from studydeck_core.schemas.index import QuestionIndex, SubcategorySummary
from studydeck_core.schemas.questions import valid_questions
from studydeck_core.storage.questions import QUESTION_BANK_FILENAME, list_subdirs
from studydeck_core.utils.jsonio import read_json, write_json
from studydeck_core.utils.logging import get_logger, log_exceptions, log_skipped

logger = get_logger(__name__)


def count_questions(entries: object) -> int:
    """Count the entries of a decoded bank that are valid questions."""
    return len(valid_questions(entries))


class QuestionScanner:
    """Walks ``<root>/<category>/<subcategory>/questions.json``.

    Every category directory gets an entry, even without banks. A bank that
    cannot be parsed is reported with a count of zero and left on disk.
    """

    def __init__(
        self,
        categories_root: str | Path,
        output_path: str | Path,
        clock: Clock = utc_now,
    ) -> None:
        self.categories_root = Path(categories_root)
        self.output_path = Path(output_path)
        self.clock = clock

    def build_index(self) -> QuestionIndex:
        """Build the index without writing it."""
        self.categories_root.mkdir(parents=True, exist_ok=True)

        categories: dict[str, dict[str, SubcategorySummary]] = {}
        for category_dir in list_subdirs(self.categories_root):
            summaries = categories.setdefault(category_dir.name, {})
            for sub_dir in list_subdirs(category_dir):
                bank_path = sub_dir / QUESTION_BANK_FILENAME
                if not bank_path.is_file():
                    continue
                loaded = read_json(bank_path)
                if not loaded.ok:
                    log_skipped(logger, "scan", bank_path, loaded.error or "invalid")
                count = count_questions(loaded.value_or([]))
                summaries[sub_dir.name] = SubcategorySummary(count=count)

        return QuestionIndex(
            categories=categories, generated_at=iso_timestamp(self.clock())
        )

    @log_exceptions(logger)
    def scan(self) -> QuestionIndex:
        """Rebuild the index and overwrite the output file.

        Returns:
            The index that was written

        Raises:
            OSError: If the root cannot be read or the output written
        """
        index = self.build_index()
        write_json(self.output_path, index.model_dump(by_alias=True))
        logger.info(f"[scan] Wrote {self.output_path}")
        return index
