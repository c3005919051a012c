"""Notes scanner: list every markdown note by category and subsection."""

from pathlib import Path

from studydeck_core.scanners.base import Clock, iso_timestamp, utc_now
from studydeck_core.schemas.index import NoteEntry, NotesIndex
from studydeck_core.storage.questions import list_subdirs
from studydeck_core.utils.jsonio import write_json
from studydeck_core.utils.logging import get_logger, log_exceptions

logger = get_logger(__name__)

# Group for notes stored directly under a category
ROOT_GROUP = "General"
MARKDOWN_SUFFIX = ".md"


def list_markdown(directory: Path) -> list[Path]:
    """Sorted markdown files directly inside ``directory``."""
    return sorted(
        p
        for p in directory.iterdir()
        if p.is_file() and p.name.lower().endswith(MARKDOWN_SUFFIX)
    )


def note_title(path: Path) -> str:
    return path.name[: -len(MARKDOWN_SUFFIX)]


class NotesScanner:
    """Walks ``<root>/<category>/[<subsection>/]*.md``."""

    def __init__(
        self,
        notes_root: str | Path,
        output_path: str | Path,
        url_prefix: str = "/notes",
        clock: Clock = utc_now,
    ) -> None:
        self.notes_root = Path(notes_root)
        self.output_path = Path(output_path)
        self.url_prefix = url_prefix.rstrip("/")
        self.clock = clock

    def _entry(self, path: Path) -> NoteEntry:
        relative = path.relative_to(self.notes_root).as_posix()
        return NoteEntry(title=note_title(path), path=f"{self.url_prefix}/{relative}")

    def build_index(self) -> NotesIndex:
        """Build the index without writing it."""
        self.notes_root.mkdir(parents=True, exist_ok=True)

        notes: dict[str, dict[str, list[NoteEntry]]] = {}
        for category_dir in list_subdirs(self.notes_root):
            groups = notes.setdefault(category_dir.name, {})
            root_files = list_markdown(category_dir)
            if root_files:
                groups[ROOT_GROUP] = [self._entry(p) for p in root_files]
            for sub_dir in list_subdirs(category_dir):
                groups[sub_dir.name] = [self._entry(p) for p in list_markdown(sub_dir)]

        return NotesIndex(notes=notes, generated_at=iso_timestamp(self.clock()))

    @log_exceptions(logger)
    def scan(self) -> NotesIndex:
        """Rebuild the notes index and overwrite the output file."""
        index = self.build_index()
        write_json(self.output_path, index.model_dump(by_alias=True))
        logger.info(f"[notes-scan] Wrote {self.output_path}")
        return index
