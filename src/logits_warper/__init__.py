"""logits-warper: deterministic top-k selection for token generation.

Given candidate scores and the vocabulary indices they belong to, keeps the
k highest-scoring candidates, ordered by descending score, without losing
track of which token each score belongs to. The top-k warper composes with
other warpers through a shared (indices, scores) interface.
"""

from __future__ import annotations

try:
    from importlib.metadata import PackageNotFoundError, version

    __version__ = version("logits-warper")
except PackageNotFoundError:
    __version__ = "0.0.0"

from logits_warper.candidates import CandidateSet
from logits_warper.config import WarperConfig, resolve_config, validate_overrides
from logits_warper.exceptions import (
    CandidateMismatchError,
    ConfigValidationError,
    InvalidTopKError,
    LogitsWarperError,
)
from logits_warper.selection import SelectionBackendRegistry, TopKSelector
from logits_warper.warpers import LogitsWarper, LogitsWarperChain, TopKLogitsWarper

__all__ = [
    "CandidateMismatchError",
    "CandidateSet",
    "ConfigValidationError",
    "InvalidTopKError",
    "LogitsWarper",
    "LogitsWarperChain",
    "LogitsWarperError",
    "SelectionBackendRegistry",
    "TopKLogitsWarper",
    "TopKSelector",
    "WarperConfig",
    "__version__",
    "resolve_config",
    "validate_overrides",
]
