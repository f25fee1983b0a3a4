"""Full stable sort, truncated to k: O(n log n)."""

from __future__ import annotations

import numpy as np

from logits_warper.selection.base import SelectionBackend
from logits_warper.selection.registry import SelectionBackendRegistry


@SelectionBackendRegistry.register("sort")
class SortSelectionBackend(SelectionBackend):
    """Sort-then-truncate. Cheapest choice when every candidate is kept."""

    def select_positions(self, scores: np.ndarray, k: int) -> np.ndarray:
        # Negating keeps the sort stable while ordering high-to-low; a
        # reversed ascending sort would flip the order of ties.
        order: np.ndarray = np.argsort(-scores, kind="stable")[:k]
        return order
