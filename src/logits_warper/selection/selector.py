"""Top-k selection kernel.

Selects the k highest-scoring entries of a candidate set and returns them,
ordered by descending score, with their original vocabulary indices intact.

Tie rule: equal scores are ranked by input position, first seen wins. The
same input therefore always produces the same output, on every backend.
"""

from __future__ import annotations

import operator
from typing import Any

import numpy as np

from logits_warper.candidates import CandidateSet, as_candidate_arrays
from logits_warper.exceptions import InvalidTopKError
from logits_warper.selection.registry import SelectionBackendRegistry

# Resolved per call: a full sort when everything is kept, else a partition.
AUTO_BACKEND = "auto"


def validate_top_k(k: Any) -> int:
    """Check that *k* is a non-negative integer and return it as ``int``.

    Args:
        k: Requested number of candidates.

    Returns:
        ``k`` as a Python int.

    Raises:
        InvalidTopKError: If *k* is not an integer (bools included) or is negative.
    """
    if isinstance(k, bool):
        raise InvalidTopKError(f"top_k must be an integer, got {k!r}")
    try:
        value = operator.index(k)
    except TypeError as exc:
        raise InvalidTopKError(f"top_k must be an integer, got {k!r}") from exc
    if value < 0:
        raise InvalidTopKError(f"top_k must be >= 0, got {value}")
    return value


class TopKSelector:
    """Stateless top-k selector.

    The backend is fixed at construction; ``select`` depends only on its
    arguments, making the selector safe for concurrent use on independent
    buffers.
    """

    def __init__(self, backend: str = AUTO_BACKEND) -> None:
        """Initialize the selector.

        Args:
            backend: Registered backend name, or ``"auto"``.

        Raises:
            KeyError: If *backend* is neither ``"auto"`` nor registered.
        """
        names = ("partition", "sort") if backend == AUTO_BACKEND else (backend,)
        self._backend_name = backend
        self._backends = {name: SelectionBackendRegistry.build(name) for name in names}

    @property
    def backend_name(self) -> str:
        """The configured backend name (may be ``"auto"``)."""
        return self._backend_name

    def resolve_backend(self, n: int, k: int) -> str:
        """Return the backend name used for an input of *n* entries and effective *k*."""
        if self._backend_name != AUTO_BACKEND:
            return self._backend_name
        return "sort" if k >= n else "partition"

    def select(self, indices: Any, scores: Any, k: int) -> CandidateSet:
        """Select the ``min(k, len(scores))`` highest-scoring candidates.

        Args:
            indices: 1-D original vocabulary ids.
            scores: 1-D scores parallel to ``indices``.
            k: Requested output size. Values above the input length are clamped.

        Returns:
            CandidateSet ordered by descending score. Its arrays are newly
            allocated; the inputs are never modified.

        Raises:
            CandidateMismatchError: If the inputs are not aligned 1-D arrays.
            InvalidTopKError: If *k* is negative or not an integer.
        """
        k = validate_top_k(k)
        idx, sc = as_candidate_arrays(indices, scores)

        n = sc.shape[0]
        effective_k = min(k, n)
        if effective_k == 0:
            return CandidateSet(
                indices=np.empty(0, dtype=idx.dtype),
                scores=np.empty(0, dtype=sc.dtype),
            )

        backend = self._backends[self.resolve_backend(n, effective_k)]
        positions = backend.select_positions(sc, effective_k)

        # Fancy indexing copies, so the result never aliases the inputs.
        return CandidateSet(indices=idx[positions], scores=sc[positions])
