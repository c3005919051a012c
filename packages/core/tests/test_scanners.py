"""Tests for the question, flashcard and notes scanners."""

import json
from collections.abc import Callable
from datetime import datetime, timezone
from pathlib import Path

import pytest

from studydeck_core.scanners.base import iso_timestamp
from studydeck_core.scanners.flashcards import FlashcardScanner
from studydeck_core.scanners.notes import NotesScanner
from studydeck_core.scanners.questions import QuestionScanner, count_questions
from studydeck_core.storage.file import FileDeckRepository

FIXED = datetime(2024, 5, 1, 12, 0, tzinfo=timezone.utc)
STAMP = "2024-05-01T12:00:00.000Z"


def fixed_clock() -> datetime:
    return FIXED


def _card(term: str) -> dict:
    return {"id": term.lower(), "term": term, "definition": f"{term} defined."}


class TestTimestamp:
    """Tests for iso_timestamp()."""

    def test_utc_with_milliseconds(self) -> None:
        assert iso_timestamp(FIXED) == STAMP


class TestQuestionScanner:
    """Tests for the question index."""

    def test_counts_valid_questions(
        self, tmp_path: Path, json_file: Callable, valid_question: dict
    ) -> None:
        root = tmp_path / "categories"
        bank = json_file(
            root / "DevOps" / "Docker" / "questions.json",
            [valid_question, {"question": "no choices"}, valid_question],
        )
        before = bank.read_text(encoding="utf-8")
        output = tmp_path / "data" / "index.json"

        index = QuestionScanner(root, output, clock=fixed_clock).scan()

        assert index.categories["DevOps"]["Docker"].count == 2
        assert json.loads(output.read_text(encoding="utf-8")) == {
            "categories": {"DevOps": {"Docker": {"count": 2}}},
            "generatedAt": STAMP,
        }
        assert bank.read_text(encoding="utf-8") == before

    def test_rescan_is_identical(
        self, tmp_path: Path, json_file: Callable, valid_question: dict
    ) -> None:
        root = tmp_path / "categories"
        json_file(root / "Cloud" / "AWS" / "questions.json", [valid_question])
        output = tmp_path / "index.json"
        scanner = QuestionScanner(root, output, clock=fixed_clock)

        scanner.scan()
        first = output.read_bytes()
        scanner.scan()

        assert output.read_bytes() == first

    def test_category_without_banks(self, tmp_path: Path) -> None:
        root = tmp_path / "categories"
        (root / "Empty" / "NoBank").mkdir(parents=True)

        scanner = QuestionScanner(root, tmp_path / "index.json", fixed_clock)
        index = scanner.build_index()

        assert index.categories == {"Empty": {}}

    def test_invalid_json_counts_zero(self, tmp_path: Path) -> None:
        root = tmp_path / "categories"
        bank = root / "DevOps" / "Broken" / "questions.json"
        bank.parent.mkdir(parents=True)
        bank.write_text("{oops", encoding="utf-8")

        scanner = QuestionScanner(root, tmp_path / "index.json", fixed_clock)
        index = scanner.build_index()

        assert index.categories["DevOps"]["Broken"].count == 0
        assert bank.read_text(encoding="utf-8") == "{oops"

    def test_missing_root_is_created(self, tmp_path: Path) -> None:
        root = tmp_path / "categories"
        output = tmp_path / "index.json"

        index = QuestionScanner(root, output, fixed_clock).scan()

        assert root.is_dir()
        assert index.categories == {}
        assert output.is_file()

    def test_count_questions_non_list(self) -> None:
        assert count_questions({"questions": []}) == 0

    def test_numeric_difficulty_not_counted(self, valid_question: dict) -> None:
        numeric = {**valid_question, "difficulty": 2}
        assert count_questions([valid_question, numeric]) == 1

    def test_unwritable_output_raises(self, tmp_path: Path) -> None:
        output = tmp_path / "index.json"
        output.mkdir()

        with pytest.raises(OSError):
            QuestionScanner(tmp_path / "categories", output, fixed_clock).scan()

        assert output.is_dir()
        assert [p.name for p in tmp_path.iterdir() if p.name.endswith(".tmp")] == []


class TestFlashcardScanner:
    """Tests for the deck catalog."""

    def test_catalog_entries(self, tmp_path: Path, json_file: Callable) -> None:
        root = tmp_path / "flashcards"
        deck = [_card("Bucket"), _card("Object")]
        json_file(root / "Cloud" / "AWS" / "S3.json", deck)
        json_file(root / "Cloud" / "Basics.json", [_card("Region")])
        json_file(root / "index.json", [{"id": "stale"}])
        output = root / "index.json"

        catalog = FlashcardScanner(FileDeckRepository(root), output).scan()

        assert [entry.model_dump() for entry in catalog] == [
            {
                "id": "Cloud/Basics",
                "title": "Cloud / Basics",
                "path": "/data/flashcards/Cloud/Basics.json",
                "count": 1,
            },
            {
                "id": "Cloud/AWS/S3",
                "title": "Cloud / AWS / S3",
                "path": "/data/flashcards/Cloud/AWS/S3.json",
                "count": 2,
            },
        ]
        written = json.loads(output.read_text(encoding="utf-8"))
        assert [entry["id"] for entry in written] == ["Cloud/Basics", "Cloud/AWS/S3"]

    def test_invalid_cards_not_counted(
        self, tmp_path: Path, json_file: Callable
    ) -> None:
        root = tmp_path / "flashcards"
        json_file(
            root / "Cloud" / "Mixed.json",
            [_card("Region"), {"term": " ", "definition": "x"}, {"term": "Zone"}, "x"],
        )

        scanner = FlashcardScanner(FileDeckRepository(root), root / "index.json")
        assert scanner.build_catalog()[0].count == 1

    def test_non_list_deck_counts_zero(
        self, tmp_path: Path, json_file: Callable
    ) -> None:
        root = tmp_path / "flashcards"
        json_file(root / "Cloud" / "Odd.json", {"cards": [_card("Region")]})

        scanner = FlashcardScanner(FileDeckRepository(root), root / "index.json")
        assert scanner.build_catalog()[0].count == 0

    def test_unparsable_deck_skipped(
        self, tmp_path: Path, json_file: Callable, text_file: Callable
    ) -> None:
        root = tmp_path / "flashcards"
        text_file(root / "Cloud" / "Broken.json", "[{")
        json_file(root / "Cloud" / "Good.json", [_card("Region")])

        scanner = FlashcardScanner(FileDeckRepository(root), root / "index.json")
        assert [entry.id for entry in scanner.build_catalog()] == ["Cloud/Good"]

    def test_falsy_deck_skipped(
        self, tmp_path: Path, json_file: Callable
    ) -> None:
        root = tmp_path / "flashcards"
        json_file(root / "Cloud" / "Null.json", None)
        json_file(root / "Cloud" / "Zero.json", 0)
        json_file(root / "Cloud" / "Empty.json", [])

        scanner = FlashcardScanner(FileDeckRepository(root), root / "index.json")
        catalog = scanner.build_catalog()

        assert [(entry.id, entry.count) for entry in catalog] == [("Cloud/Empty", 0)]

    def test_unwritable_output_raises(
        self, tmp_path: Path, json_file: Callable
    ) -> None:
        root = tmp_path / "flashcards"
        json_file(root / "Cloud" / "Good.json", [_card("Region")])
        output = tmp_path / "catalog.json"
        output.mkdir()

        with pytest.raises(OSError):
            FlashcardScanner(FileDeckRepository(root), output).scan()

        assert [p.name for p in tmp_path.iterdir() if p.name.endswith(".tmp")] == []

    def test_custom_prefix(self, tmp_path: Path, json_file: Callable) -> None:
        root = tmp_path / "flashcards"
        json_file(root / "Cloud" / "Good.json", [_card("Region")])

        scanner = FlashcardScanner(
            FileDeckRepository(root), root / "index.json", url_prefix="/decks/"
        )
        assert scanner.build_catalog()[0].path == "/decks/Cloud/Good.json"


class TestNotesScanner:
    """Tests for the notes index."""

    def test_groups_notes(self, tmp_path: Path, text_file: Callable) -> None:
        root = tmp_path / "notes"
        text_file(root / "DevOps" / "overview.md", "# Overview\n")
        text_file(root / "DevOps" / "Containers" / "docker.md", "# Docker\n")
        text_file(root / "DevOps" / "Containers" / "podman.md", "# Podman\n")
        text_file(root / "DevOps" / "Containers" / "notes.txt", "ignored")
        output = tmp_path / "notes_index.json"

        NotesScanner(root, output, clock=fixed_clock).scan()

        assert json.loads(output.read_text(encoding="utf-8")) == {
            "notes": {
                "DevOps": {
                    "General": [
                        {"title": "overview", "path": "/notes/DevOps/overview.md"}
                    ],
                    "Containers": [
                        {
                            "title": "docker",
                            "path": "/notes/DevOps/Containers/docker.md",
                        },
                        {
                            "title": "podman",
                            "path": "/notes/DevOps/Containers/podman.md",
                        },
                    ],
                }
            },
            "generatedAt": STAMP,
        }

    def test_no_general_group_without_root_notes(
        self, tmp_path: Path, text_file: Callable
    ) -> None:
        root = tmp_path / "notes"
        text_file(root / "Cloud" / "AWS" / "s3.md", "# S3\n")

        scanner = NotesScanner(root, tmp_path / "out.json", clock=fixed_clock)
        index = scanner.build_index()

        assert list(index.notes["Cloud"]) == ["AWS"]

    def test_missing_root_is_created(self, tmp_path: Path) -> None:
        root = tmp_path / "notes"

        index = NotesScanner(root, tmp_path / "out.json", clock=fixed_clock).scan()

        assert root.is_dir()
        assert index.notes == {}
