"""
mockrand - Deterministic Random Values for Mock Data

Seedable generation of array elements, bounded integers, floats with a
fixed precision, booleans and UUIDv4 strings.

Usage:
    from mockrand import Random

    random = Random.with_seed(100)
    random.number({"min": 0, "max": 1.5, "precision": 0.5})
    random.uuid()

Replay with a seed from the environment:
    MOCKRAND_SEED=12345 python generate_fixtures.py
"""

from .errors import MockRandError, InvalidArgumentError
from .models import NumericOptions
from .rng import SeededGenerator
from .ranges import NumericRange, map_number, map_float, decimal_places, quantize
from .config import Settings, get_settings
from .generator import Random, create_random

__version__ = "0.1.0"
__all__ = [
    # Errors
    "MockRandError",
    "InvalidArgumentError",
    # Options
    "NumericOptions",
    "NumericRange",
    # Primitives
    "SeededGenerator",
    "map_number",
    "map_float",
    "decimal_places",
    "quantize",
    # Config
    "Settings",
    "get_settings",
    # Generator
    "Random",
    "create_random",
]
