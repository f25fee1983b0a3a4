"""Warper subsystem for logits-warper.

Chainable stages that transform (indices, scores) candidate sets.
"""

from logits_warper.warpers.base import LogitsWarper
from logits_warper.warpers.chain import LogitsWarperChain
from logits_warper.warpers.top_k import TopKLogitsWarper

__all__ = [
    "LogitsWarper",
    "LogitsWarperChain",
    "TopKLogitsWarper",
]
