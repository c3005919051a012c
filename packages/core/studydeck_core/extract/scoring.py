"""Heuristic quality score for (term, definition) pairs.

The same function ranks markdown candidates and filters question-derived
cards, so it must stay pure: equal arguments always give an equal score.
"""

import re

DEFINITIONAL_VERBS = re.compile(
    r"\b(is|are|means|refers to|represents|defines|describes)\b", re.IGNORECASE
)
META_LANGUAGE = re.compile(
    r"\b(this section|we will|let's|you can|for example)\b", re.IGNORECASE
)


def score(term: str, definition: str) -> int:
    """Score how much ``definition`` reads like a definition of ``term``.

    Args:
        term: Candidate term
        definition: Candidate definition

    Returns:
        Integer score; higher is better, zero or below is unusable
    """
    if not term or not definition:
        return 0

    total = 0

    # Ideal length 40-180 chars
    length = len(definition)
    if 40 <= length <= 180:
        total += 3
    elif 25 <= length <= 220:
        total += 1

    # Term near the start
    first_word = term.lower().split(" ")[0]
    position = definition.lower().find(first_word)
    if position == 0:
        total += 3
    elif 0 < position < 40:
        total += 1

    if DEFINITIONAL_VERBS.search(definition):
        total += 2

    if META_LANGUAGE.search(definition):
        total -= 3

    if definition.endswith("?"):
        total -= 2

    return total
