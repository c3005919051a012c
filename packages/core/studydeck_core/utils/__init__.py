"""Utility functions."""

from studydeck_core.utils.jsonio import ParseResult, read_json, write_json
from studydeck_core.utils.logging import get_logger, log_exceptions, log_skipped
from studydeck_core.utils.text import (
    clean_text,
    normalize_name,
    slug_id,
    title_from_filename,
    truncate,
)

__all__ = [
    "ParseResult",
    "read_json",
    "write_json",
    "get_logger",
    "log_exceptions",
    "log_skipped",
    "clean_text",
    "normalize_name",
    "slug_id",
    "title_from_filename",
    "truncate",
]
