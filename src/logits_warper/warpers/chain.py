"""Sequential composition of warpers."""

from __future__ import annotations

import math
import time
from typing import TYPE_CHECKING, Any

from logits_warper.candidates import CandidateSet, as_candidate_arrays
from logits_warper.logging.types import WarpRecord
from logits_warper.warpers.base import LogitsWarper

if TYPE_CHECKING:
    from collections.abc import Iterable

    from logits_warper.logging.logger import WarpLogger


class LogitsWarperChain(LogitsWarper):
    """Applies warpers in order, each consuming the previous stage's output.

    A chain is itself a warper, so chains nest. When a ``WarpLogger`` is
    attached, one ``WarpRecord`` is logged per stage.
    """

    name = "chain"

    def __init__(
        self,
        warpers: Iterable[LogitsWarper],
        sampling_logger: WarpLogger | None = None,
    ) -> None:
        """Initialize the chain.

        Args:
            warpers: Stages, applied first to last.
            sampling_logger: Optional logger receiving one record per stage.
        """
        self._warpers: tuple[LogitsWarper, ...] = tuple(warpers)
        self._logger = sampling_logger

    @property
    def warpers(self) -> tuple[LogitsWarper, ...]:
        """The chain's stages in application order."""
        return self._warpers

    @property
    def sampling_logger(self) -> WarpLogger | None:
        """The diagnostic logger attached to this chain, if any."""
        return self._logger

    def __len__(self) -> int:
        return len(self._warpers)

    def warp(self, indices: Any, logits: Any) -> CandidateSet:
        """Run every stage over the candidate set.

        Args:
            indices: 1-D original vocabulary ids.
            logits: 1-D scores parallel to ``indices``.

        Returns:
            The output of the last stage, or a copy of the input for an
            empty chain.

        Raises:
            CandidateMismatchError: If the inputs are not aligned 1-D arrays.
        """
        idx, sc = as_candidate_arrays(indices, logits)
        candidates = CandidateSet(indices=idx.copy(), scores=sc.copy())

        for stage, warper in enumerate(self._warpers):
            t_start_ns = time.perf_counter_ns()
            num_in = len(candidates)
            candidates = warper.warp(candidates.indices, candidates.scores)

            if self._logger is not None:
                elapsed_ms = (time.perf_counter_ns() - t_start_ns) / 1_000_000.0
                empty = len(candidates) == 0
                self._logger.log_warp(
                    WarpRecord(
                        timestamp_ns=t_start_ns,
                        stage=stage,
                        warper_name=warper.name,
                        num_in=num_in,
                        num_out=len(candidates),
                        top_index=-1 if empty else int(candidates.indices[0]),
                        top_score=math.nan if empty else float(candidates.scores[0]),
                        elapsed_ms=elapsed_ms,
                    )
                )

        return candidates
