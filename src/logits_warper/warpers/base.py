"""Base class for logits warpers.

A warper transforms a candidate set into a smaller or reordered candidate
set. Warpers share one input/output shape so they compose into chains.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, ClassVar

from logits_warper.candidates import CandidateSet


class LogitsWarper(ABC):
    """Abstract base class for warpers.

    Subclasses implement ``warp``; ``__call__`` runs it over a full
    vocabulary row.
    """

    name: ClassVar[str] = "warper"

    @abstractmethod
    def warp(self, indices: Any, logits: Any) -> CandidateSet:
        """Transform a candidate set.

        Args:
            indices: 1-D original vocabulary ids.
            logits: 1-D scores parallel to ``indices``.

        Returns:
            The transformed CandidateSet. Every output index must come from
            the input together with its score.
        """

    def __call__(self, logits: Any) -> CandidateSet:
        """Warp a full vocabulary row (indices ``0..vocab_size-1``).

        Args:
            logits: 1-D logit row of shape ``(vocab_size,)``.

        Returns:
            The warped CandidateSet.
        """
        candidates = CandidateSet.from_logits(logits)
        return self.warp(candidates.indices, candidates.scores)
