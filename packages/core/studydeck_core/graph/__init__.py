"""LangGraph pipeline components.

This module exports the notes-to-flashcards pipeline:
    - build_pipeline_graph: compile the discover -> generate -> merge graph
    - run_pipeline: build and invoke it in one call
    - PipelineConfig: pipeline settings
"""

from studydeck_core.graph.build_pipeline_graph import (
    NotesPipelineState,
    build_pipeline_graph,
    run_pipeline,
)
from studydeck_core.graph.config import ExtractionConfig, PipelineConfig

__all__ = [
    # Configuration
    "ExtractionConfig",
    "PipelineConfig",
    # Pipeline
    "build_pipeline_graph",
    "run_pipeline",
    "NotesPipelineState",
]
