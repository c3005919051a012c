"""Shared fixtures for building study trees on disk."""

import json
from collections.abc import Callable
from pathlib import Path
from typing import Any

import pytest


def write_json_file(path: Path, payload: Any) -> Path:
    """Write a JSON fixture file, creating parent directories."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(payload, indent=2) + "\n", encoding="utf-8")
    return path


def write_text_file(path: Path, content: str) -> Path:
    """Write a text fixture file, creating parent directories."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")
    return path


@pytest.fixture
def json_file() -> Callable[[Path, Any], Path]:
    """Factory writing JSON fixture files."""
    return write_json_file


@pytest.fixture
def text_file() -> Callable[[Path, str], Path]:
    """Factory writing text fixture files."""
    return write_text_file


@pytest.fixture
def valid_question() -> dict[str, Any]:
    """A question that passes validation."""
    return {
        "question": "What is a load balancer?",
        "choices": ["A component that spreads traffic", "A database", "A cache"],
        "answerIndex": 0,
        "explanation": "A component that distributes traffic across servers.",
        "difficulty": "easy",
    }


@pytest.fixture
def docker_note() -> str:
    """A note with one definition per extraction strategy."""
    return (
        "# Docker\n"
        "\n"
        "Docker is a platform for packaging applications into containers.\n"
        "\n"
        "## Key terms\n"
        "\n"
        "- Image: a read-only template with instructions for creating a container.\n"
        "- Volume: persistent storage that outlives the container it is mounted in.\n"
        "\n"
        "Containers are isolated processes that share the host kernel. "
        "They start fast.\n"
    )
