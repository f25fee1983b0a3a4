"""Exception hierarchy for logits-warper.

All exceptions derive from LogitsWarperError, enabling broad catch patterns
at the application boundary while allowing fine-grained handling internally.
"""


class LogitsWarperError(Exception):
    """Base exception for all logits-warper errors."""


class CandidateMismatchError(LogitsWarperError, ValueError):
    """Candidate indices and scores are not aligned.

    Raised when the two arrays of a candidate set differ in length, are not
    1-D, or when the indices are not integers. Never recovered from: a
    misaligned candidate set would attach scores to the wrong tokens.
    """


class InvalidTopKError(LogitsWarperError, ValueError):
    """The requested top-k count is negative or not an integer."""


class ConfigValidationError(LogitsWarperError):
    """Configuration field validation failed.

    Raised when per-call overrides contain unknown keys, attempt to override
    fields fixed at construction time, or fail type validation.
    """
