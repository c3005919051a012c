"""Text normalization helpers shared by extractors, merge and scanners."""

import re

_WHITESPACE = re.compile(r"\s+")
_NON_ALNUM = re.compile(r"[^a-z0-9\s]")
_SLUG_DISALLOWED = re.compile(r"[^a-z0-9 _.,&\-/]")
_SLUG_SEPARATORS = re.compile(r"[\s/]+")
_ORDERING_PREFIX = re.compile(r"^\d+[-_.\s]*")
_WORD_SEPARATORS = re.compile(r"[-_]+")
_MARKDOWN_SUFFIX = re.compile(r"\.md$", re.IGNORECASE)


def clean_text(text: str) -> str:
    """Collapse runs of whitespace and trim."""
    return _WHITESPACE.sub(" ", str(text)).strip()


def normalize_name(name: str | None) -> str:
    """Build the key used to match terms and deck names.

    Lowercases, replaces every non-alphanumeric character with a space and
    collapses whitespace, so ``"CI/CD"`` and ``"ci cd"`` compare equal.
    """
    lowered = str(name or "").lower()
    return clean_text(_NON_ALNUM.sub(" ", lowered))


def slug_id(text: str, max_length: int | None = None) -> str:
    """Turn a term into a hyphenated card id.

    Args:
        text: Source text, usually a card term
        max_length: Optional truncation length

    Returns:
        Lowercase slug, possibly empty
    """
    slug = _SLUG_DISALLOWED.sub("", str(text).lower())
    slug = clean_text(slug)
    slug = _SLUG_SEPARATORS.sub("-", slug)
    if max_length is not None:
        slug = slug[:max_length]
    return slug


def title_from_filename(filename: str) -> str:
    """Derive a deck name from a markdown filename.

    ``"01-intro_to-docker.md"`` becomes ``"Intro To Docker"``. Leading
    ordering prefixes are dropped and separators become spaces. Falls back to
    the bare stem when nothing is left.
    """
    stem = _MARKDOWN_SUFFIX.sub("", filename)
    base = _ORDERING_PREFIX.sub("", stem)
    base = _WORD_SEPARATORS.sub(" ", base).strip()
    if not base:
        return stem
    words = [word[:1].upper() + word[1:] for word in base.split()]
    return " ".join(words)


def truncate(text: str, limit: int, ellipsis: str = "...") -> str:
    """Cut text to ``limit`` characters, ending with an ellipsis when cut."""
    if len(text) <= limit:
        return text
    return text[: limit - len(ellipsis)] + ellipsis
