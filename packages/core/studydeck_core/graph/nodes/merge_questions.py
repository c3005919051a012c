"""Merge node: enrich the generated decks from question banks."""

from collections.abc import Callable
from typing import Any

from studydeck_core.graph.config import PipelineConfig
from studydeck_core.merge import MergeResult, merge_question_banks
from studydeck_core.storage.base import DeckRepository


def create_merge_questions_node(
    repository: DeckRepository,
    config: PipelineConfig,
) -> Callable[[dict[str, Any]], dict[str, Any]]:
    """Create a node that merges question-derived cards into existing decks.

    Args:
        repository: Deck storage holding the decks to enrich
        config: Pipeline configuration

    Returns:
        Node function
    """

    def merge_questions_node(state: dict[str, Any]) -> dict[str, Any]:
        """Run the merge engine over every question bank.

        Args:
            state: Pipeline state with categories_root

        Returns:
            Updated state with merge_results
        """
        categories_root = state.get("categories_root")
        results: list[MergeResult] = []
        if categories_root and config.merge_questions:
            results = merge_question_banks(
                categories_root,
                repository,
                config.extraction,
                url_prefix=config.categories_url_prefix.rstrip("/"),
            )

        return {
            **state,
            "merge_results": results,
            "current_step": "merge_questions",
            "progress": 100,
        }

    return merge_questions_node
