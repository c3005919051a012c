"""Build the notes-to-flashcards graph."""

from pathlib import Path
from typing import Annotated, Any, TypedDict

from langgraph.graph import END, StateGraph

from studydeck_core.graph.config import PipelineConfig
from studydeck_core.merge import MergeResult
from studydeck_core.schemas.document import NoteDocument
from studydeck_core.storage.base import DeckRepository
from studydeck_core.utils.logging import get_logger, log_exceptions

logger = get_logger(__name__)


def _keep_last_str(existing: str | None, incoming: str | None) -> str | None:
    """Keep the latest value for progress tracking fields."""
    return incoming if incoming else existing


def _keep_max_int(existing: int, incoming: int) -> int:
    """Keep the maximum value for progress fields."""
    return max(existing or 0, incoming or 0)


def _merge_errors(existing: list[str], incoming: list[str]) -> list[str]:
    """Combine error lists, deduplicating."""
    if not existing:
        return list(incoming or [])
    if not incoming:
        return list(existing)
    return list(dict.fromkeys([*existing, *incoming]))


class NotesPipelineState(TypedDict, total=False):
    """State passed through the notes pipeline."""

    notes_root: str
    categories_root: str
    documents: list[NoteDocument]
    decks_written: list[str]
    cards_written: int
    merge_results: list[MergeResult]
    current_step: Annotated[str, _keep_last_str]
    progress: Annotated[int, _keep_max_int]
    errors: Annotated[list[str], _merge_errors]


def build_pipeline_graph(
    repository: DeckRepository,
    config: PipelineConfig | None = None,
) -> Any:
    """Build the pipeline that generates decks from notes, then enriches them.

    Args:
        repository: Deck storage the nodes write into
        config: Optional pipeline configuration

    Returns:
        Compiled StateGraph ready for invocation
    """
    from studydeck_core.graph.nodes import discover, generate_decks, merge_questions

    resolved_config = config or PipelineConfig()

    graph = StateGraph(NotesPipelineState)

    graph.add_node("discover_notes", discover.discover_node)
    graph.add_node(
        "generate_decks",
        generate_decks.create_generate_decks_node(repository, resolved_config),
    )
    graph.add_node(
        "merge_questions",
        merge_questions.create_merge_questions_node(repository, resolved_config),
    )

    graph.set_entry_point("discover_notes")
    graph.add_edge("discover_notes", "generate_decks")
    graph.add_edge("generate_decks", "merge_questions")
    graph.add_edge("merge_questions", END)

    return graph.compile()


@log_exceptions(logger)
def run_pipeline(
    notes_root: str | Path | None,
    categories_root: str | Path | None,
    repository: DeckRepository,
    config: PipelineConfig | None = None,
) -> NotesPipelineState:
    """Generate decks from notes and merge question-derived cards into them.

    Args:
        notes_root: Root of the notes tree
        categories_root: Root of the questions tree
        repository: Deck storage
        config: Optional pipeline configuration

    Returns:
        Final pipeline state

    Raises:
        OSError: If a deck cannot be written
    """
    graph = build_pipeline_graph(repository, config)
    result: NotesPipelineState = graph.invoke(
        {
            "notes_root": str(notes_root) if notes_root else "",
            "categories_root": str(categories_root) if categories_root else "",
            "errors": [],
        }
    )
    logger.info(
        f"[notes->flashcards] Done. Decks: {len(result.get('decks_written', []))}, "
        f"Cards: {result.get('cards_written', 0)}, "
        f"Unreadable notes: {len(result.get('errors', []))}"
    )
    return result
