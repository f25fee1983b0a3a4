"""Top-k selection subsystem for logits-warper.

A stateless kernel plus interchangeable backends (partition, heap, sort)
that all produce identical, deterministic output.
"""

from logits_warper.selection.base import SelectionBackend
from logits_warper.selection.heap import HeapSelectionBackend
from logits_warper.selection.partition import PartitionSelectionBackend
from logits_warper.selection.registry import SelectionBackendRegistry
from logits_warper.selection.selector import AUTO_BACKEND, TopKSelector, validate_top_k
from logits_warper.selection.sort import SortSelectionBackend

__all__ = [
    "AUTO_BACKEND",
    "HeapSelectionBackend",
    "PartitionSelectionBackend",
    "SelectionBackend",
    "SelectionBackendRegistry",
    "SortSelectionBackend",
    "TopKSelector",
    "validate_top_k",
]
