"""Deck merge engine: enrich existing decks with question-derived cards.

Merging is a set-union keyed by normalized term where the first card seen
wins. The engine only ever extends decks that already exist; a question bank
with no matching deck is skipped.
"""

from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from studydeck_core.extract.config import ExtractionConfig
from studydeck_core.extract.questions import extract_card
from studydeck_core.schemas.cards import Card, CardCandidate
from studydeck_core.schemas.questions import valid_questions
from studydeck_core.storage.base import DeckRepository, split_deck_id
from studydeck_core.storage.questions import iter_question_banks
from studydeck_core.utils.logging import get_logger, log_skipped
from studydeck_core.utils.text import normalize_name, slug_id

logger = get_logger(__name__)


@dataclass(frozen=True)
class MergeResult:
    """What a single merge did."""

    category: str
    subcategory: str
    deck_id: str | None = None
    added: int = 0

    @property
    def skipped(self) -> bool:
        return self.deck_id is None


class DeckMerger:
    """Merges extracted cards into the deck matching a category/subcategory."""

    def __init__(
        self,
        repository: DeckRepository,
        config: ExtractionConfig | None = None,
    ) -> None:
        self.repository = repository
        self.config = config or ExtractionConfig()

    def _decks_by_parent(self) -> dict[str, dict[str, str]]:
        """Map each deck parent to ``{normalized deck name: deck id}``."""
        index: dict[str, dict[str, str]] = {}
        for deck_id in self.repository.list():
            parent, name = split_deck_id(deck_id)
            index.setdefault(parent, {}).setdefault(normalize_name(name), deck_id)
        return index

    def find_deck(self, category: str, subcategory: str) -> str | None:
        """Locate the deck a subcategory's cards belong to.

        Decks directly under the category are searched first, then decks in
        a ``category/subcategory`` folder. Names are compared by
        ``normalize_name``.

        Args:
            category: Question category
            subcategory: Question subcategory

        Returns:
            Deck id, or None when no deck matches
        """
        index = self._decks_by_parent()
        candidates = [subcategory, normalize_name(subcategory)]
        for parent in (category, f"{category}/{subcategory}"):
            decks = index.get(parent, {})
            for name in candidates:
                deck_id = decks.get(normalize_name(name))
                if deck_id:
                    return deck_id
        return None

    def merge(
        self,
        category: str,
        subcategory: str,
        cards: Sequence[CardCandidate | Card],
        source: str,
    ) -> MergeResult:
        """Append cards whose normalized term is not already in the deck.

        The deck is rewritten only when something was added, so merging the
        same cards twice leaves it untouched the second time.

        Args:
            category: Question category
            subcategory: Question subcategory
            cards: Extracted cards or candidates
            source: Path stored as the ``source`` of every appended card

        Returns:
            MergeResult naming the deck and how many cards were added

        Raises:
            OSError: If the deck cannot be written
        """
        deck_id = self.find_deck(category, subcategory)
        if deck_id is None:
            return MergeResult(category, subcategory)

        result = self.repository.read(deck_id)
        if not result.ok:
            log_skipped(logger, "merge", deck_id, f"{result.error}; treating as empty")
        entries: list[Any] = result.value_or([])
        if not isinstance(entries, list):
            entries = []

        seen = {
            normalize_name(entry.get("term"))
            for entry in entries
            if isinstance(entry, dict)
        }
        added = 0
        for card in cards:
            key = normalize_name(card.term)
            if key in seen:
                continue
            seen.add(key)
            entries.append(
                Card(
                    id=slug_id(card.term, self.config.max_id_length),
                    term=card.term,
                    definition=card.definition,
                    source=source,
                ).to_entry()
            )
            added += 1

        if added:
            self.repository.write(deck_id, entries)
            logger.info(f"[merge] Merged {added} question definitions into {deck_id}")
        return MergeResult(category, subcategory, deck_id, added)


def merge_question_banks(
    categories_root: str | Path,
    repository: DeckRepository,
    config: ExtractionConfig | None = None,
    url_prefix: str = "/categories",
) -> list[MergeResult]:
    """Extract definition cards from every question bank and merge them.

    Args:
        categories_root: Root of the questions tree
        repository: Deck storage
        config: Optional extraction limits
        url_prefix: Prefix of the question bank paths stored on cards

    Returns:
        One MergeResult per bank that produced at least one candidate
    """
    merger = DeckMerger(repository, config)
    results: list[MergeResult] = []

    for bank in iter_question_banks(categories_root):
        loaded = bank.load()
        if not loaded.ok:
            log_skipped(logger, "merge", bank.path, loaded.error or "unreadable")
            continue

        candidates = []
        for question in valid_questions(loaded.value):
            candidate = extract_card(question, merger.config)
            if candidate is not None:
                candidates.append(candidate)
        if not candidates:
            continue

        results.append(
            merger.merge(
                bank.category, bank.subcategory, candidates, bank.url(url_prefix)
            )
        )

    skipped = sum(1 for r in results if r.skipped)
    added = sum(r.added for r in results)
    logger.info(
        f"[merge] {len(results)} question banks with definitions, "
        f"{added} cards added, {skipped} without a matching deck"
    )
    return results
