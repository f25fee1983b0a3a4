"""Diagnostic logger for per-stage warp events.

Uses the standard ``logging`` module with the ``"logits_warper"`` logger.
No ``print()`` statements. Supports three verbosity levels and an
in-memory diagnostic mode for post-hoc analysis.
"""

from __future__ import annotations

import json
import logging
from collections import Counter
from dataclasses import asdict
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from logits_warper.config import WarperConfig
    from logits_warper.logging.types import WarpRecord

logger = logging.getLogger("logits_warper")


class WarpLogger:
    """Per-stage diagnostic logger.

    Log levels:
        ``"none"``: No logging output. Records are still stored if
        ``diagnostic_mode=True``.

        ``"summary"``: One line per stage with candidate counts, the top
        candidate and timing.

        ``"full"``: Full JSON dump of all record fields.

    Diagnostic mode stores all records in memory for post-hoc analysis via
    ``get_diagnostic_data()`` and ``get_summary_stats()``.
    """

    def __init__(self, config: WarperConfig) -> None:
        """Initialize the logger from configuration.

        Args:
            config: Configuration providing ``log_level`` and ``diagnostic_mode``.
        """
        self._log_level = config.log_level
        self._diagnostic_mode = config.diagnostic_mode
        self._records: list[WarpRecord] = []

    def log_warp(self, record: WarpRecord) -> None:
        """Log a single warper stage execution.

        Args:
            record: Immutable record of the stage.
        """
        if self._diagnostic_mode:
            self._records.append(record)

        if self._log_level == "none":
            return

        if self._log_level == "summary":
            logger.info(
                "stage=%d warper=%s in=%d out=%d top=%d score=%.4f elapsed=%.3fms",
                record.stage,
                record.warper_name,
                record.num_in,
                record.num_out,
                record.top_index,
                record.top_score,
                record.elapsed_ms,
            )
        elif self._log_level == "full":
            logger.info("warp_record: %s", json.dumps(asdict(record), default=str))

    def get_diagnostic_data(self) -> list[WarpRecord]:
        """Return all stored records (requires ``diagnostic_mode=True``).

        Returns:
            List of all WarpRecord instances logged so far.
            Empty if diagnostic_mode is False.
        """
        return list(self._records)

    def get_summary_stats(self) -> dict[str, Any]:
        """Compute summary statistics over all stored records.

        Returns:
            Dictionary with aggregate stats, or empty dict if no records.
        """
        if not self._records:
            return {}

        elapsed = [r.elapsed_ms for r in self._records]
        n = len(self._records)
        return {
            "total_steps": n,
            "mean_num_in": sum(r.num_in for r in self._records) / n,
            "mean_num_out": sum(r.num_out for r in self._records) / n,
            "mean_elapsed_ms": sum(elapsed) / n,
            "max_elapsed_ms": max(elapsed),
            "steps_by_warper": dict(Counter(r.warper_name for r in self._records)),
        }
