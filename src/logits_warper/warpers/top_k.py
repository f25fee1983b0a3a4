"""Top-k warper: keep only the k highest-scoring candidates."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from logits_warper.config import resolve_config
from logits_warper.selection.selector import AUTO_BACKEND, TopKSelector, validate_top_k
from logits_warper.warpers.base import LogitsWarper

if TYPE_CHECKING:
    from logits_warper.candidates import CandidateSet
    from logits_warper.config import WarperConfig

logger = logging.getLogger("logits_warper")


class TopKLogitsWarper(LogitsWarper):
    """Selects the k most probable candidates, keeping their original indices.

    Output is ordered by descending score with ties broken by input
    position. Scores are passed through unchanged; nothing is renormalized.
    """

    name = "top_k"

    def __init__(self, k: int, backend: str = AUTO_BACKEND) -> None:
        """Initialize the warper.

        Args:
            k: Number of candidates to keep. Clamped to the input size per call.
            backend: Selection backend name, or ``"auto"``.

        Raises:
            InvalidTopKError: If *k* is negative or not an integer.
            KeyError: If *backend* is not registered.
        """
        self._k = validate_top_k(k)
        self._selector = TopKSelector(backend)
        logger.debug("TopKLogitsWarper initialized: k=%d, backend=%s", self._k, backend)

    @classmethod
    def from_config(
        cls,
        config: WarperConfig,
        overrides: dict[str, Any] | None = None,
    ) -> TopKLogitsWarper:
        """Build a warper from configuration.

        Args:
            config: Base configuration providing ``top_k`` and ``selection_backend``.
            overrides: Optional per-call overrides, validated by ``resolve_config``.

        Returns:
            A configured TopKLogitsWarper.

        Raises:
            ConfigValidationError: If an override is invalid.
        """
        resolved = resolve_config(config, overrides)
        return cls(resolved.top_k, backend=resolved.selection_backend)

    @property
    def k(self) -> int:
        """The requested number of candidates."""
        return self._k

    @property
    def backend(self) -> str:
        """The configured selection backend name."""
        return self._selector.backend_name

    def warp(self, indices: Any, logits: Any) -> CandidateSet:
        """Keep the ``min(k, len(logits))`` highest-scoring candidates.

        Args:
            indices: 1-D original vocabulary ids.
            logits: 1-D scores parallel to ``indices``.

        Returns:
            CandidateSet sorted by descending score.

        Raises:
            CandidateMismatchError: If the inputs are not aligned 1-D arrays.
        """
        return self._selector.select(indices, logits, self._k)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(k={self._k}, backend={self.backend!r})"
