"""Abstract base class for top-k selection backends."""

from __future__ import annotations

from abc import ABC, abstractmethod

import numpy as np


class SelectionBackend(ABC):
    """Finds the positions of the highest scores in a 1-D array.

    Every backend must honour the same ordering contract so that the choice
    of backend never changes observable output:

    - positions are returned in descending score order;
    - equal scores are ordered by ascending input position, so when a tie
      straddles the cut the earliest entries are kept.
    """

    @abstractmethod
    def select_positions(self, scores: np.ndarray, k: int) -> np.ndarray:
        """Return the input positions of the ``k`` highest scores.

        Args:
            scores: 1-D float array. Must not be modified.
            k: Number of positions to return, ``1 <= k <= len(scores)``.

        Returns:
            1-D integer array of ``k`` positions into ``scores``.
        """
