"""Question-bank extractor: derive a definition card from a quiz question."""

import re

from studydeck_core.extract.config import ExtractionConfig
from studydeck_core.extract.scoring import score
from studydeck_core.schemas.cards import CardCandidate
from studydeck_core.schemas.questions import Question
from studydeck_core.utils.text import clean_text

# Tried in order; the first match supplies the term
TERM_PATTERNS = (
    re.compile(r"^What is\s+(.+?)\?$", re.IGNORECASE),
    re.compile(
        r"^Which of the following (?:best )?describes\s+(.+?)\?$", re.IGNORECASE
    ),
    re.compile(r"^(.+?)\s+(?:is|are|refers to|means)\b", re.IGNORECASE),
)

_TERM_PUNCTUATION = re.compile(r"^[\"'`(]+|[\"'`)]+$")


def find_term(prompt: str) -> str | None:
    """Pull the defined term out of a question prompt, if it names one."""
    text = prompt.strip()
    for pattern in TERM_PATTERNS:
        match = pattern.match(text)
        if match:
            term = clean_text(_TERM_PUNCTUATION.sub("", match.group(1)))
            return term or None
    return None


def extract_card(
    question: Question,
    config: ExtractionConfig | None = None,
) -> CardCandidate | None:
    """Derive a single (term, definition) candidate from a question.

    The explanation is preferred as the definition; without one the correct
    choice is used. Candidates scoring at or below the question threshold
    are rejected.

    Args:
        question: A validated question
        config: Optional extraction limits

    Returns:
        Scored candidate, or None when the question does not define anything
    """
    resolved = config or ExtractionConfig()

    term = find_term(question.question)
    if not term:
        return None

    definition = clean_text(question.explanation or "")
    if not definition:
        definition = clean_text(question.correct_choice)
    if not definition:
        return None

    candidate_score = score(term, definition)
    if candidate_score <= resolved.question_min_score:
        return None
    return CardCandidate(term=term, definition=definition, score=candidate_score)
