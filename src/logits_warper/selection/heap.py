"""Bounded-heap selection in pure Python: O(n log k)."""

from __future__ import annotations

import heapq

import numpy as np

from logits_warper.selection.base import SelectionBackend
from logits_warper.selection.registry import SelectionBackendRegistry


@SelectionBackendRegistry.register("heap")
class HeapSelectionBackend(SelectionBackend):
    """Generic fallback using ``heapq.nlargest`` over input positions.

    The key ``(score, -position)`` makes an earlier position win among equal
    scores, matching the other backends.
    """

    def select_positions(self, scores: np.ndarray, k: int) -> np.ndarray:
        values = scores.tolist()
        best = heapq.nlargest(k, range(len(values)), key=lambda i: (values[i], -i))
        return np.asarray(best, dtype=np.intp)
