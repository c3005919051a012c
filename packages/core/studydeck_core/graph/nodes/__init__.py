"""Pipeline nodes for the notes-to-flashcards graph.

Nodes run in a fixed order; enrichment needs the decks generated from notes:
    - discover: find markdown notes under the notes root
    - generate_decks: extract cards and write one deck per note
    - merge_questions: merge question-derived cards into existing decks
"""

from studydeck_core.graph.nodes import discover, generate_decks, merge_questions

__all__ = [
    "discover",
    "generate_decks",
    "merge_questions",
]
