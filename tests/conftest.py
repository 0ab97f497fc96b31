"""
Shared test fixtures for the mockrand test suite.

Provides fixtures for:
- Seeded and unseeded generators
- Isolated settings (no leaking MOCKRAND_* environment)
"""

import pytest

from mockrand import Random
from mockrand.config import get_settings


# =============================================================================
# Settings Isolation
# =============================================================================


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch):
    """Clear cached settings and any MOCKRAND_SEED from the outer environment."""
    monkeypatch.delenv("MOCKRAND_SEED", raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


# =============================================================================
# Generators
# =============================================================================


@pytest.fixture
def rand() -> Random:
    """A generator with a fixed seed, so failures are reproducible."""
    return Random.with_seed(42)


@pytest.fixture
def unseeded_rand() -> Random:
    """A generator seeded from entropy, as a caller gets with Random()."""
    return Random()
