"""Configuration system for logits-warper.

Uses pydantic-settings for declarative, layered configuration:
init kwargs -> environment variables (LOGITS_WARPER_*) -> .env file -> field defaults.

Per-call overrides are applied via resolve_config() which creates a new
config instance without mutating the defaults. Logging fields are fixed when
the logger is built and cannot be overridden per call.
"""

from __future__ import annotations

from typing import Any

from pydantic import Field, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from logits_warper.exceptions import ConfigValidationError

# Fields that can be overridden per call.
_PER_CALL_FIELDS: frozenset[str] = frozenset(
    {
        "top_k",
        "selection_backend",
    }
)

# All known config field names (populated after class definition).
_ALL_FIELDS: frozenset[str] = frozenset()


class WarperConfig(BaseSettings):
    """Configuration for logits-warper.

    Resolution order: init kwargs -> env vars (LOGITS_WARPER_*) -> .env file -> defaults.
    """

    model_config = SettingsConfigDict(
        env_prefix="LOGITS_WARPER_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # --- Selection (per-call overridable) ---

    top_k: int = Field(
        default=50,
        ge=0,
        description="Number of highest-scoring candidates to keep",
    )
    selection_backend: str = Field(
        default="auto",
        description="Selection backend: 'auto', 'partition', 'heap', 'sort'",
    )

    # --- Logging (NOT per-call overridable) ---

    log_level: str = Field(
        default="summary",
        description="Logging verbosity: 'none', 'summary', 'full'",
    )
    diagnostic_mode: bool = Field(
        default=False,
        description="Store all warp records in memory for analysis",
    )


_ALL_FIELDS = frozenset(WarperConfig.model_fields.keys())


def validate_overrides(overrides: dict[str, Any]) -> None:
    """Validate override keys without creating a config.

    Args:
        overrides: Mapping of config field names to new values.

    Raises:
        ConfigValidationError: If any key is unknown or non-overridable.
    """
    for key in overrides:
        if key not in _ALL_FIELDS:
            raise ConfigValidationError(f"Unknown config field: '{key}'")
        if key not in _PER_CALL_FIELDS:
            raise ConfigValidationError(
                f"Field '{key}' is fixed at construction and cannot be overridden per call"
            )


def resolve_config(
    defaults: WarperConfig,
    overrides: dict[str, Any] | None,
) -> WarperConfig:
    """Create a new config instance merging defaults with per-call overrides.

    Args:
        defaults: The base configuration loaded from environment.
        overrides: Per-call overrides keyed by field name.

    Returns:
        ``defaults`` itself when there is nothing to override, otherwise a
        new WarperConfig with overrides applied.

    Raises:
        ConfigValidationError: If any key is unknown or non-overridable, or a
            value fails validation.
    """
    if not overrides:
        return defaults

    validate_overrides(overrides)

    # model_copy(update=...) skips validation, so "10" would stay a string
    # and a negative top_k would slip through. model_validate runs the
    # full validator.
    merged = defaults.model_dump()
    merged.update(overrides)
    try:
        return WarperConfig.model_validate(merged)
    except ValidationError as exc:
        raise ConfigValidationError(f"Invalid config override: {exc}") from exc
