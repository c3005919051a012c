"""Discover node: find the markdown notes to turn into decks."""

from pathlib import Path
from typing import Any

from studydeck_core.scanners.notes import list_markdown
from studydeck_core.schemas.document import NoteDocument
from studydeck_core.storage.questions import list_subdirs
from studydeck_core.utils.logging import get_logger
from studydeck_core.utils.text import title_from_filename

logger = get_logger(__name__)


def discover_notes(notes_root: str | Path) -> list[NoteDocument]:
    """Walk the notes tree two levels deep.

    Notes directly under a category come first, then notes in each
    subsection folder. A missing root yields no documents.

    Args:
        notes_root: Root of the notes tree

    Returns:
        Documents in walk order
    """
    root = Path(notes_root)
    if not root.is_dir():
        return []

    documents: list[NoteDocument] = []

    def _add(path: Path, segments: list[str]) -> None:
        documents.append(
            NoteDocument(
                path=path,
                relative_path=path.relative_to(root).as_posix(),
                segments=segments,
                deck_name=title_from_filename(path.name),
            )
        )

    for category_dir in list_subdirs(root):
        for path in list_markdown(category_dir):
            _add(path, [category_dir.name])
        for sub_dir in list_subdirs(category_dir):
            for path in list_markdown(sub_dir):
                _add(path, [category_dir.name, sub_dir.name])

    return documents


def discover_node(state: dict[str, Any]) -> dict[str, Any]:
    """Collect note documents from ``notes_root``.

    Args:
        state: Pipeline state with notes_root

    Returns:
        Updated state with documents
    """
    notes_root = state.get("notes_root")
    documents = discover_notes(notes_root) if notes_root else []
    logger.info(f"Discovered {len(documents)} markdown notes under {notes_root}")

    return {
        **state,
        "documents": documents,
        "current_step": "discover_notes",
        "progress": 10,
    }
