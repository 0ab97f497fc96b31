"""
Random - Seedable Mock Value Generator

TigerStyle: Every value flows from a single SeededGenerator, so one seed
reproduces a whole run of mock data.

Usage:
    random = Random.with_seed(100)
    random.number(100)                       # 14, every run
    random.float({"min": 0.5, "max": 0.99})  # two decimal places
    random.array_element(["red", "green"])
    random.uuid()
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Any, TypeVar

from .config import get_settings
from .constants import (
    ARRAY_ELEMENT_DEFAULT,
    BOOLEAN_THRESHOLD,
    FLOAT_PRECISION_DEFAULT,
    NUMBER_PRECISION_DEFAULT,
    SEED_ENV_VAR,
    UUID_HEX_DIGIT_MAX,
    UUID_HEX_DIGIT_MIN,
    UUID_TEMPLATE,
    UUID_VARIANT_DIGIT_MAX,
    UUID_VARIANT_DIGIT_MIN,
)
from .errors import InvalidArgumentError
from .models import Number, NumericOptions, coerce_options
from .ranges import NumericRange, map_float, map_number
from .rng import Seed, SeededGenerator, entropy_seed

logger = logging.getLogger(__name__)

T = TypeVar("T")

_UUID_HEX_DIGIT = NumericOptions(min=UUID_HEX_DIGIT_MIN, max=UUID_HEX_DIGIT_MAX)
_UUID_VARIANT_DIGIT = NumericOptions(min=UUID_VARIANT_DIGIT_MIN, max=UUID_VARIANT_DIGIT_MAX)


@dataclass
class Random:
    """Deterministic generator of mock values.

    TigerStyle:
    - Same seed => same values, in the same order
    - Options are read, never written
    - Degenerate ranges are clamped, invalid arguments raise

    Not thread-safe: give each thread its own instance (see fork()).
    """

    _generator: SeededGenerator = field(default_factory=SeededGenerator)

    @classmethod
    def with_seed(cls, seed: Seed) -> Random:
        """Create a generator with an explicit seed.

        Args:
            seed: The deterministic seed to use (int or str).
        """
        return cls(_generator=SeededGenerator(_seed=seed))

    @classmethod
    def from_env_or_random(cls) -> Random:
        """Create a generator seeded from MOCKRAND_SEED or from entropy.

        TigerStyle: Always log the seed for reproducibility.
        Replay any run by setting MOCKRAND_SEED=<seed>.
        """
        seed = get_settings().seed

        if seed is not None:
            logger.info(f"mockrand: Using seed from environment: {seed!r}")
        else:
            seed = entropy_seed()
            logger.info(f"mockrand: Generated random seed (replay with {SEED_ENV_VAR}={seed})")

        return cls.with_seed(seed)

    @property
    def seed(self) -> Seed:
        """Get the seed the current sequence started from."""
        return self._generator.seed

    def init_seed(self, seed: Seed) -> None:
        """Reseed, discarding all prior state.

        Raises:
            InvalidArgumentError: If seed is not an int or a str.
        """
        self._generator.init_seed(seed)

    def fork(self) -> Random:
        """Create an independent generator seeded from this one."""
        return Random(_generator=self._generator.fork())

    def array_element(self, array: Sequence[T] | None = None) -> T:
        """Pick a random element of ``array`` (default: 'a', 'b', 'c').

        Raises:
            InvalidArgumentError: If array is not a sequence or is empty.
        """
        if array is None:
            array = ARRAY_ELEMENT_DEFAULT
        if not isinstance(array, Sequence):
            raise InvalidArgumentError(f"array must be a sequence, got {type(array).__name__}")
        if len(array) == 0:
            raise InvalidArgumentError("array must be non-empty")

        bounds = NumericRange(min=0, max=len(array) - 1, precision=1)
        return array[map_number(self._generator.next_float(), bounds)]

    def number(self, options: NumericOptions | dict[str, Any] | Number | None = None) -> Number:
        """Generate a number in [min, max] on the grid min + k * precision.

        Args:
            options: NumericOptions, a mapping of min/max/precision, or a
                bare number used as max. Defaults: min=0, max=99999,
                precision=1.

        Returns:
            An int when min and precision are integral, else a float.

        Raises:
            InvalidArgumentError: If precision <= 0 or a value is not a finite number.
        """
        opts = coerce_options(options, shorthand="max")
        bounds = NumericRange.from_options(opts, NUMBER_PRECISION_DEFAULT)
        return map_number(self._generator.next_float(), bounds)

    def float(self, options: NumericOptions | dict[str, Any] | Number | None = None) -> float:
        """Generate a float in [min, max] rounded to the precision's decimals.

        Args:
            options: NumericOptions, a mapping of min/max/precision, or a
                bare number used as precision. Defaults: min=0, max=99999,
                precision=0.01.

        Raises:
            InvalidArgumentError: If precision <= 0 or a value is not a finite number.
        """
        opts = coerce_options(options, shorthand="precision")
        bounds = NumericRange.from_options(opts, FLOAT_PRECISION_DEFAULT)
        return map_float(self._generator.next_float(), bounds)

    def boolean(self) -> bool:
        """Generate True or False with equal probability."""
        return self._generator.next_float() < BOOLEAN_THRESHOLD

    def uuid(self) -> str:
        """Generate an RFC 4122 version 4 UUID string.

        Every 'x' of the template is an independent hex digit, the version
        nibble is 4 and the variant digit is one of 8, 9, a, b.
        """
        return "".join(self._uuid_char(char) for char in UUID_TEMPLATE)

    def _uuid_char(self, char: str) -> str:
        if char == "x":
            return format(self.number(_UUID_HEX_DIGIT), "x")
        if char == "y":
            return format(self.number(_UUID_VARIANT_DIGIT), "x")
        return char


def create_random(seed: Seed | None = None) -> Random:
    """Create a new generator with optional explicit seed.

    Usage:
        random = create_random()  # Random seed
        random = create_random(12345)  # Explicit seed
    """
    if seed is not None:
        return Random.with_seed(seed)
    return Random()
