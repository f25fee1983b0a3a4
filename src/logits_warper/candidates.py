"""Candidate sets: aligned (vocabulary index, score) arrays.

A candidate set is what flows between warpers. Position ``i`` of ``indices``
is the original vocabulary id of ``scores[i]``; that pairing is the one thing
no stage may break.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import numpy as np

from logits_warper.exceptions import CandidateMismatchError


def _to_numpy(values: Any) -> np.ndarray:
    """Convert a sequence, array or tensor to a numpy array without copying.

    Args:
        values: A Python sequence, numpy array, or tensor exposing
            ``detach().cpu().numpy()``.

    Returns:
        Numpy array view (if already host memory) or copy.
    """
    if isinstance(values, np.ndarray):
        return values
    # .cpu() moves device tensors to host memory; no-op on CPU.
    try:
        result: np.ndarray = values.detach().cpu().numpy()
        return result
    except AttributeError:
        return np.asarray(values)


def as_candidate_arrays(indices: Any, scores: Any) -> tuple[np.ndarray, np.ndarray]:
    """Validate and normalize a pair of candidate arrays.

    The returned arrays may be views of the caller's buffers; callers must
    not write into them.

    Args:
        indices: Original vocabulary ids, 1-D and integer.
        scores: Scores parallel to ``indices``, 1-D.

    Returns:
        Tuple of (integer index array, floating-point score array).

    Raises:
        CandidateMismatchError: If either array is not 1-D, the lengths
            differ, or the indices are not integers.
    """
    idx = _to_numpy(indices)
    sc = _to_numpy(scores)

    if idx.ndim != 1 or sc.ndim != 1:
        raise CandidateMismatchError(
            f"Candidate arrays must be 1-D, got indices.ndim={idx.ndim}, scores.ndim={sc.ndim}"
        )
    if idx.shape[0] != sc.shape[0]:
        raise CandidateMismatchError(
            f"Candidate length mismatch: {idx.shape[0]} indices vs {sc.shape[0]} scores"
        )

    # np.asarray([]) is float64; an empty index list is still valid.
    if idx.size == 0:
        idx = idx.astype(np.int64)
    elif idx.dtype.kind not in "iu":
        raise CandidateMismatchError(f"Candidate indices must be integers, got dtype {idx.dtype}")

    if sc.dtype.kind != "f":
        sc = sc.astype(np.float64)

    return idx, sc


@dataclass(frozen=True, slots=True)
class CandidateSet:
    """Aligned candidate indices and scores.

    Attributes:
        indices: 1-D integer array of original vocabulary ids.
        scores: 1-D float array; ``scores[i]`` belongs to ``indices[i]``.
    """

    indices: np.ndarray
    scores: np.ndarray

    def __post_init__(self) -> None:
        if self.indices.ndim != 1 or self.scores.ndim != 1:
            raise CandidateMismatchError("CandidateSet arrays must be 1-D")
        if self.indices.shape[0] != self.scores.shape[0]:
            raise CandidateMismatchError(
                f"CandidateSet length mismatch: {self.indices.shape[0]} indices "
                f"vs {self.scores.shape[0]} scores"
            )

    def __len__(self) -> int:
        return int(self.indices.shape[0])

    @classmethod
    def empty(cls) -> CandidateSet:
        """Return a zero-length candidate set."""
        return cls(
            indices=np.empty(0, dtype=np.int64),
            scores=np.empty(0, dtype=np.float64),
        )

    @classmethod
    def from_logits(cls, logits: Any) -> CandidateSet:
        """Build a candidate set over a full vocabulary row.

        Args:
            logits: 1-D logit row of shape ``(vocab_size,)``.

        Returns:
            CandidateSet with ``indices = arange(vocab_size)`` and a copy of
            the logits as scores.
        """
        scores = _to_numpy(logits)
        if scores.ndim != 1:
            raise CandidateMismatchError(f"Logits must be 1-D, got ndim={scores.ndim}")
        if scores.dtype.kind != "f":
            scores = scores.astype(np.float64)
        return cls(
            indices=np.arange(scores.shape[0], dtype=np.int64),
            scores=scores.copy(),
        )

    def as_tuple(self) -> tuple[np.ndarray, np.ndarray]:
        """Return ``(indices, scores)`` for tuple-unpacking callers."""
        return self.indices, self.scores

    def to_lists(self) -> tuple[list[int], list[float]]:
        """Return the candidate set as plain Python lists."""
        return self.indices.tolist(), self.scores.tolist()
