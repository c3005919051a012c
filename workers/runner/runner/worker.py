"""Runner entry point: dispatch pipeline and scan tasks."""

import argparse
import logging
import sys
from collections.abc import Callable, Sequence
from typing import Any

import structlog

from runner.config import Settings, settings
from runner.tasks import (
    run_flashcard_generation,
    scan_flashcards,
    scan_notes,
    scan_questions,
)

logger = structlog.get_logger()

TASKS: dict[str, Callable[[Settings], dict[str, Any]]] = {
    "generate_flashcards": run_flashcard_generation,
    "scan_questions": scan_questions,
    "scan_flashcards": scan_flashcards,
    "scan_notes": scan_notes,
}

# Generation first so the catalog scan sees the decks it wrote
ALL_TASKS = ("generate_flashcards", "scan_questions", "scan_notes", "scan_flashcards")


def configure_logging(level: str) -> None:
    """Apply the configured log level to structlog and the stdlib loggers."""
    numeric = getattr(logging, level.upper(), logging.INFO)
    # Core loggers pin their own level when created
    for name in [*logging.root.manager.loggerDict, "studydeck_core"]:
        if name.startswith("studydeck_core"):
            logging.getLogger(name).setLevel(numeric)
    structlog.configure(wrapper_class=structlog.make_filtering_bound_logger(numeric))


def handle_task(
    payload: dict[str, Any],
    config: Settings | None = None,
) -> list[dict[str, Any]]:
    """Dispatch a task payload to the correct handler.

    Args:
        payload: ``{"kind": <task name or "all">}``
        config: Settings override, defaults to the environment settings

    Returns:
        One summary dict per task that ran
    """
    resolved = config or settings
    kind = payload.get("kind")
    if kind == "all":
        return [TASKS[name](resolved) for name in ALL_TASKS]

    task = TASKS.get(kind) if isinstance(kind, str) else None
    if task is None:
        logger.warning("unknown_task_kind", payload=payload)
        return []
    return [task(resolved)]


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="studydeck-runner",
        description="Generate flashcard decks and rebuild the study index files.",
    )
    parser.add_argument(
        "tasks",
        nargs="*",
        metavar="TASK",
        help=f"Tasks to run in order: {', '.join([*TASKS, 'all'])} (default: all)",
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Main entry point for the runner."""
    parser = build_parser()
    args = parser.parse_args(argv)
    tasks = args.tasks or ["all"]
    unknown = [kind for kind in tasks if kind != "all" and kind not in TASKS]
    if unknown:
        parser.error(f"unknown task(s): {', '.join(unknown)}")
    configure_logging(settings.log_level)

    logger.info(
        "starting_runner", tasks=tasks, project_root=str(settings.project_root)
    )

    for kind in tasks:
        try:
            for summary in handle_task({"kind": kind}):
                logger.info("task_completed", **summary)
        except Exception as exc:
            logger.exception("task_failed", kind=kind, error=str(exc))
            return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
