"""Partition-based selection: average O(n + k log k).

Finds the k-th largest score with ``np.partition`` (introselect), keeps every
score strictly above it plus the earliest entries equal to it, and sorts only
those survivors.
"""

from __future__ import annotations

import numpy as np

from logits_warper.selection.base import SelectionBackend
from logits_warper.selection.registry import SelectionBackendRegistry


@SelectionBackendRegistry.register("partition")
class PartitionSelectionBackend(SelectionBackend):
    """Vectorized top-k for large vocabularies with small k."""

    def select_positions(self, scores: np.ndarray, k: int) -> np.ndarray:
        """Return positions of the top-k scores via a threshold partition.

        Args:
            scores: 1-D float array.
            k: Number of positions to return, ``1 <= k <= len(scores)``.

        Returns:
            Positions ordered by descending score, ties by position.
        """
        n = scores.shape[0]
        threshold = np.partition(scores, n - k)[n - k]

        # At most k - 1 entries beat the threshold, and enough entries equal
        # it to fill the remaining slots.
        above = np.flatnonzero(scores > threshold)
        tied = np.flatnonzero(scores == threshold)[: k - above.size]

        positions = np.concatenate((above, tied))
        positions.sort()
        # Stable sort on ascending positions keeps first-seen order among ties.
        order = np.argsort(-scores[positions], kind="stable")
        result: np.ndarray = positions[order]
        return result
