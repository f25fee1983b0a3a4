"""Shared pytest fixtures for logits-warper tests.

Provides configuration objects and sample logit arrays that are used
across multiple test modules.
"""

from __future__ import annotations

from collections.abc import Iterator

import numpy as np
import pytest

from logits_warper.config import WarperConfig
from logits_warper.selection.registry import SelectionBackendRegistry


@pytest.fixture(params=["auto", "partition", "heap", "sort"])
def backend_name(request: pytest.FixtureRequest) -> str:
    """Every built-in backend name; selection properties must hold on each."""
    name: str = request.param
    return name


@pytest.fixture
def default_config() -> WarperConfig:
    """Return a WarperConfig with all default values, ignoring any .env file."""
    return WarperConfig(_env_file=None)


@pytest.fixture
def silent_config() -> WarperConfig:
    """Return a config with no logging for noise-free tests."""
    return WarperConfig(_env_file=None, log_level="none")


@pytest.fixture
def diagnostic_config() -> WarperConfig:
    """Return a config with diagnostic mode and full logging enabled."""
    return WarperConfig(_env_file=None, log_level="full", diagnostic_mode=True)


@pytest.fixture
def sample_logits_large_vocab() -> np.ndarray:
    """Return random logits for a larger vocabulary (32000).

    Uses a fixed RNG seed for reproducibility. Simulates a realistic
    LLM logit distribution.
    """
    rng = np.random.default_rng(seed=12345)
    return rng.standard_normal(32000).astype(np.float32)


@pytest.fixture
def sample_logits_tied() -> np.ndarray:
    """Return heavily tied logits: 1000 values drawn from only 5 levels."""
    rng = np.random.default_rng(seed=7)
    return rng.integers(0, 5, size=1000).astype(np.float64)


@pytest.fixture
def registry_snapshot() -> Iterator[None]:
    """Restore the backend registry after a test registers extra backends."""
    saved = dict(SelectionBackendRegistry._registry)
    yield
    SelectionBackendRegistry._registry.clear()
    SelectionBackendRegistry._registry.update(saved)
