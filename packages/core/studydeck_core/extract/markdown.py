"""Markdown extractor: mine flashcards from a note document."""

from collections.abc import Iterable, Sequence
from pathlib import PurePosixPath

from studydeck_core.extract.config import ExtractionConfig
from studydeck_core.extract.scoring import score
from studydeck_core.extract.strategies import DEFAULT_STRATEGIES, Pair, Strategy
from studydeck_core.schemas.cards import Card, CardCandidate
from studydeck_core.utils.text import clean_text, normalize_name, slug_id


def collect_pairs(
    markdown: str,
    config: ExtractionConfig,
    strategies: Sequence[Strategy] = DEFAULT_STRATEGIES,
) -> list[Pair]:
    """Run every strategy over the same text and pool their output."""
    pairs: list[Pair] = []
    for strategy in strategies:
        pairs.extend(strategy(markdown, config))
    return pairs


def rank_candidates(
    pairs: Iterable[Pair],
    config: ExtractionConfig,
) -> list[CardCandidate]:
    """Reduce pooled pairs to the best definition per term.

    Pairs are whitespace-normalized and scored; anything at or below the
    markdown threshold is dropped. Terms are grouped by ``normalize_name``
    and only the highest-scoring definition survives (the earlier pair wins a
    tie). The result is sorted by score, best first, and capped.

    Args:
        pairs: Raw (term, definition) pairs from the strategies
        config: Extraction limits

    Returns:
        Ranked candidates, at most ``config.max_cards_per_document``
    """
    best: dict[str, CardCandidate] = {}
    for raw_term, raw_definition in pairs:
        term = clean_text(raw_term)
        definition = clean_text(raw_definition)
        if not term or not definition:
            continue

        candidate_score = score(term, definition)
        if candidate_score <= config.markdown_min_score:
            continue

        key = normalize_name(term) or term.lower()
        previous = best.get(key)
        if previous is None or candidate_score > previous.score:
            best[key] = CardCandidate(
                term=term, definition=definition, score=candidate_score
            )

    ranked = sorted(best.values(), key=lambda c: c.score, reverse=True)
    return ranked[: config.max_cards_per_document]


def extract_cards(
    markdown: str,
    source: str,
    config: ExtractionConfig | None = None,
    strategies: Sequence[Strategy] = DEFAULT_STRATEGIES,
) -> list[Card]:
    """Extract ranked, deduplicated cards from one markdown document.

    Args:
        markdown: Raw markdown text
        source: Path of the document, stored on each card
        config: Optional extraction limits
        strategies: Strategies to pool, defaults to all three

    Returns:
        Cards ordered best first; empty when nothing qualifies
    """
    resolved = config or ExtractionConfig()
    pairs = collect_pairs(markdown, resolved, strategies)
    candidates = rank_candidates(pairs, resolved)

    fallback_id = slug_id(PurePosixPath(source).stem, resolved.max_id_length)
    return [
        Card(
            id=slug_id(candidate.term, resolved.max_id_length) or fallback_id,
            term=candidate.term,
            definition=candidate.definition,
            source=source,
        )
        for candidate in candidates
    ]
