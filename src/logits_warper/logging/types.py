"""Data types for the diagnostic logging subsystem."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class WarpRecord:
    """Immutable record of a single warper stage execution.

    Attributes:
        timestamp_ns: Monotonic start time of the stage (nanoseconds).
        stage: Position of the warper within its chain (0-based).
        warper_name: ``name`` of the warper that ran.
        num_in: Number of candidates entering the stage.
        num_out: Number of candidates leaving the stage.
        top_index: Vocabulary index of the first output candidate, or -1 if empty.
        top_score: Score of the first output candidate, or NaN if empty.
        elapsed_ms: Wall time spent in the stage (milliseconds).
    """

    timestamp_ns: int
    stage: int
    warper_name: str
    num_in: int
    num_out: int
    top_index: int
    top_score: float
    elapsed_ms: float
