"""Tests for deck storage."""

import json
from collections.abc import Callable
from pathlib import Path
from typing import Any, get_type_hints

import pytest

from studydeck_core.storage.base import (
    DeckRepository,
    deck_sort_key,
    make_deck_id,
    split_deck_id,
)
from studydeck_core.storage.file import FileDeckRepository
from studydeck_core.storage.memory import InMemoryDeckRepository
from studydeck_core.utils.jsonio import read_json, write_json


class TestDeckIds:
    """Tests for deck id helpers."""

    def test_make_and_split(self) -> None:
        deck_id = make_deck_id(["Cloud", "AWS"], "S3")
        assert deck_id == "Cloud/AWS/S3"
        assert split_deck_id(deck_id) == ("Cloud/AWS", "S3")

    def test_sort_category_level_first(self) -> None:
        ids = ["Cloud/AWS/S3", "Cloud/Basics", "DevOps/Docker"]
        assert sorted(ids, key=deck_sort_key) == [
            "Cloud/Basics",
            "Cloud/AWS/S3",
            "DevOps/Docker",
        ]


class TestFileDeckRepository:
    """Tests for FileDeckRepository."""

    def test_lists_two_levels(
        self, tmp_path: Path, json_file: Callable, text_file: Callable
    ) -> None:
        json_file(tmp_path / "Cloud" / "Basics.json", [])
        json_file(tmp_path / "Cloud" / "AWS" / "S3.json", [])
        json_file(tmp_path / "Cloud" / "AWS" / "Deep" / "Ignored.json", [])
        json_file(tmp_path / "Cloud" / ".hidden.json", [])
        text_file(tmp_path / "Cloud" / "readme.md", "# Cloud\n")
        json_file(tmp_path / "index.json", [])

        assert FileDeckRepository(tmp_path).list() == ["Cloud/Basics", "Cloud/AWS/S3"]

    def test_missing_root(self, tmp_path: Path) -> None:
        assert FileDeckRepository(tmp_path / "absent").list() == []

    def test_write_then_read(self, tmp_path: Path) -> None:
        repository = FileDeckRepository(tmp_path)
        entries = [{"id": "s3", "term": "S3", "definition": "Object storage."}]

        repository.write("Cloud/AWS/S3", entries)

        path = tmp_path / "Cloud" / "AWS" / "S3.json"
        assert json.loads(path.read_text(encoding="utf-8")) == entries
        assert repository.read("Cloud/AWS/S3").value == entries
        assert repository.location("Cloud/AWS/S3") == "Cloud/AWS/S3.json"

    def test_read_invalid(self, tmp_path: Path, text_file: Callable) -> None:
        text_file(tmp_path / "Cloud" / "Bad.json", "not json")
        result = FileDeckRepository(tmp_path).read("Cloud/Bad")

        assert not result.ok
        assert result.value_or([]) == []

    def test_read_missing(self, tmp_path: Path) -> None:
        assert not FileDeckRepository(tmp_path).read("Cloud/None").ok


class TestJsonIO:
    """Tests for the JSON file helpers."""

    def test_write_format(self, tmp_path: Path) -> None:
        path = write_json(tmp_path / "out" / "data.json", {"name": "Café"})

        assert path.read_text(encoding="utf-8") == '{\n  "name": "Café"\n}\n'
        assert [p.name for p in path.parent.iterdir()] == ["data.json"]

    def test_read_roundtrip_failure_reason(self, tmp_path: Path) -> None:
        path = tmp_path / "bad.json"
        path.write_text("[1,", encoding="utf-8")

        result = read_json(path)
        assert result.error is not None
        assert result.error.startswith("invalid JSON")


class TestRepositoryAnnotations:
    """The ``list`` method must not shadow the builtin in annotations."""

    @pytest.mark.parametrize(
        "repository_class",
        [DeckRepository, FileDeckRepository, InMemoryDeckRepository],
    )
    def test_write_hints_resolve(self, repository_class: type) -> None:
        hints = get_type_hints(repository_class.write)
        assert hints["entries"] == list[dict[str, Any]]

    def test_list_hint_resolves(self) -> None:
        assert get_type_hints(FileDeckRepository.list)["return"] == list[str]
