"""Pattern strategies that propose (term, definition) pairs from markdown.

Each strategy is an independent pure function ``(markdown, config) -> pairs``.
They are registered in ``DEFAULT_STRATEGIES`` and pooled by
``studydeck_core.extract.markdown``; scoring and deduplication happen there.
"""

import re
from collections.abc import Callable

from studydeck_core.extract.scoring import DEFINITIONAL_VERBS
from studydeck_core.extract.config import ExtractionConfig
from studydeck_core.utils.text import clean_text, truncate

Pair = tuple[str, str]
Strategy = Callable[[str, ExtractionConfig], list[Pair]]

_EMPHASIS = re.compile(r"[*_`~]")
_LINE_BREAK = re.compile(r"\r?\n")
_PARAGRAPH_BREAK = re.compile(r"\n\s*\n")
_SENTENCE_END = re.compile(r"(?<=[.!?])\s+")

_HEADING = re.compile(r"^(#{1,6})\s+(.+?)\s*$")
_LIST_ITEM = re.compile(r"^[-*+]\s+")
_INLINE_DEFINITION = re.compile(
    r"^[-*+]?\s*([A-Z][A-Za-z0-9 /&()_.:,-]{2,})\s*[:—–-]\s+(.{10,})$"
)
_DECLARATIVE = re.compile(
    r"^([A-Z][A-Za-z0-9 /&()_.,-]{2,}?)\s+(?i:is|are)\s+(.{10,})$"
)

_INLINE_META = re.compile(
    r"\b(this section|we will|in this chapter|example:)\b", re.IGNORECASE
)
_SENTENCE_META = re.compile(r"\b(this section|we will|let's|you can)\b", re.IGNORECASE)


def _strip_emphasis(text: str) -> str:
    return _EMPHASIS.sub("", text)


def inline_definitions(markdown: str, config: ExtractionConfig) -> list[Pair]:
    """Lines such as ``- Idempotence: an operation that ...``."""
    pairs: list[Pair] = []
    for raw in _LINE_BREAK.split(markdown):
        line = _strip_emphasis(raw.strip())
        if not line:
            continue
        match = _INLINE_DEFINITION.match(line)
        if not match:
            continue
        term = clean_text(match.group(1))
        definition = truncate(clean_text(match.group(2)), config.inline_max_length)
        if _INLINE_META.search(definition):
            continue
        if term and definition:
            pairs.append((term, definition))
    return pairs


def heading_definitions(markdown: str, config: ExtractionConfig) -> list[Pair]:
    """A heading followed by a short paragraph that defines it."""
    lines = _LINE_BREAK.split(markdown)
    pairs: list[Pair] = []
    for i, line in enumerate(lines):
        match = _HEADING.match(line)
        if not match:
            continue
        term = clean_text(_strip_emphasis(match.group(2)))

        definition = ""
        for following in lines[i + 1 : i + 1 + config.heading_max_lines]:
            text = following.strip()
            if not text:
                if definition:
                    break
                continue
            if _HEADING.match(text) or _LIST_ITEM.match(text):
                break
            text = _strip_emphasis(text)
            definition = f"{definition} {text}" if definition else text
            if len(definition) > config.heading_max_length:
                break

        definition = clean_text(definition)
        if term and definition and DEFINITIONAL_VERBS.search(definition):
            pairs.append((term, definition))
    return pairs


def declarative_sentences(markdown: str, config: ExtractionConfig) -> list[Pair]:
    """Paragraphs whose first sentence reads ``X is ...`` or ``X are ...``."""
    pairs: list[Pair] = []
    paragraphs = [p.strip() for p in _PARAGRAPH_BREAK.split(markdown) if p.strip()]
    for paragraph in paragraphs:
        sentence = clean_text(_SENTENCE_END.split(paragraph)[0])
        match = _DECLARATIVE.match(sentence)
        if not match:
            continue
        if _SENTENCE_META.search(sentence):
            continue
        term = clean_text(match.group(1))
        definition = truncate(sentence, config.sentence_max_length)
        if term and definition:
            pairs.append((term, definition))
    return pairs


DEFAULT_STRATEGIES: tuple[Strategy, ...] = (
    inline_definitions,
    heading_definitions,
    declarative_sentences,
)
