"""Diagnostic logging subsystem for logits-warper.

Provides immutable per-stage warp records and a configurable logger
that supports none/summary/full verbosity and in-memory diagnostic mode.
"""

from logits_warper.logging.logger import WarpLogger
from logits_warper.logging.types import WarpRecord

__all__ = [
    "WarpLogger",
    "WarpRecord",
]
