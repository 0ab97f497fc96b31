"""
SeededGenerator - Seedable Pseudo-Random Number Generator

TigerStyle: All randomness is seeded and reproducible.
Based on Python's random.Random (Mersenne Twister MT19937).
Not suitable for secrets: use the secrets module for those.
"""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass, field

from .constants import SEED_ENTROPY_MAX
from .errors import InvalidArgumentError

logger = logging.getLogger(__name__)

Seed = int | str


def entropy_seed() -> int:
    """Draw a fresh seed from the operating system entropy source."""
    return random.SystemRandom().randint(0, SEED_ENTROPY_MAX)


def validate_seed(seed: object) -> Seed:
    """Check that a seed is an integer or a string.

    Raises:
        InvalidArgumentError: For bool, float, None or any other type.
    """
    # bool is an int subclass, but True/False as a seed is almost always a bug
    if isinstance(seed, bool) or not isinstance(seed, (int, str)):
        raise InvalidArgumentError(
            f"seed must be an int or a str, got {type(seed).__name__}"
        )
    return seed


@dataclass
class SeededGenerator:
    """Seedable generator of uniform floats in [0, 1).

    TigerStyle:
    - Same seed => same sequence, across processes
    - Each instance owns its state, never the global random module
    - Not thread-safe: one owner at a time
    """

    _seed: Seed = field(default_factory=entropy_seed)
    _rng: random.Random = field(init=False, repr=False)

    def __post_init__(self) -> None:
        """Initialize the MT19937 state from the seed."""
        self.init_seed(self._seed)

    @property
    def seed(self) -> Seed:
        """Get the seed the current sequence started from."""
        return self._seed

    def init_seed(self, seed: Seed) -> None:
        """Reset the state so that future output depends only on ``seed``.

        Integers seed MT19937 directly (the sign is ignored, as in
        ``random.seed``). Strings are hashed with SHA-512, so string seeds
        are stable regardless of PYTHONHASHSEED.

        Raises:
            InvalidArgumentError: If seed is not an int or a str.
        """
        self._seed = validate_seed(seed)
        self._rng = random.Random(self._seed)
        logger.debug(f"Seeded generator with {self._seed!r}")

    def next_float(self) -> float:
        """Generate a uniform float in [0.0, 1.0) with 53 bits of precision."""
        value = self._rng.random()

        # Postcondition
        assert 0.0 <= value < 1.0, f"next_float out of range: {value}"
        return value

    def fork(self) -> SeededGenerator:
        """Create an independent generator seeded from this one.

        Advances this generator by one draw, so forking is itself
        deterministic: same seed, same forks.
        """
        child_seed = self._rng.randint(0, SEED_ENTROPY_MAX)
        logger.debug(f"Forked generator {self._seed!r} -> {child_seed}")
        return SeededGenerator(_seed=child_seed)
