"""JSON file helpers.

Reads never raise for bad content: they return a ``ParseResult`` carrying
either the decoded value or the reason decoding failed, and callers fall back
to an empty default. Writes are whole-file replacements and do raise.
"""

import json
import os
import tempfile
from dataclasses import dataclass
from pathlib import Path
from typing import Any


@dataclass(frozen=True)
class ParseResult:
    """Outcome of reading a JSON document."""

    value: Any = None
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def value_or(self, default: Any) -> Any:
        """Return the decoded value, or ``default`` when parsing failed."""
        return self.value if self.ok else default

    @classmethod
    def failure(cls, reason: str) -> "ParseResult":
        return cls(value=None, error=reason)


def parse_json(raw: str) -> ParseResult:
    """Decode a JSON string into a ``ParseResult``."""
    try:
        return ParseResult(value=json.loads(raw))
    except json.JSONDecodeError as e:
        return ParseResult.failure(f"invalid JSON ({e.msg} at line {e.lineno})")


def read_json(path: str | Path) -> ParseResult:
    """Read and decode a JSON file.

    Args:
        path: File to read

    Returns:
        ParseResult with the decoded value, or the read/decode error
    """
    try:
        raw = Path(path).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        return ParseResult.failure(f"unreadable ({e})")
    return parse_json(raw)


def dump_json(payload: Any) -> str:
    """Serialize a payload the way every output file is written."""
    return json.dumps(payload, indent=2, ensure_ascii=False) + "\n"


def write_json(path: str | Path, payload: Any) -> Path:
    """Atomically replace ``path`` with pretty-printed JSON.

    The content goes to a temporary file in the same directory which is then
    renamed over the target, so readers see either the old or the new file.

    Raises:
        OSError: If the directory cannot be created or the file written
    """
    target = Path(path)
    target.parent.mkdir(parents=True, exist_ok=True)
    fd, tmp_name = tempfile.mkstemp(
        prefix=f".{target.name}.", suffix=".tmp", dir=target.parent
    )
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as handle:
            handle.write(dump_json(payload))
        os.replace(tmp_name, target)
    except BaseException:
        Path(tmp_name).unlink(missing_ok=True)
        raise
    return target
