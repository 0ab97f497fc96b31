"""
mockrand Constants - TigerStyle

All defaults and limits are explicit, named with units, big-endian naming convention.
Category comes first, specifics last: NUMBER_MAX_DEFAULT not DEFAULT_MAX_NUMBER.
"""

# =============================================================================
# Numeric Range Defaults
# =============================================================================

NUMBER_MIN_DEFAULT: int = 0
NUMBER_MAX_DEFAULT: int = 99_999
NUMBER_PRECISION_DEFAULT: int = 1  # Integer step
FLOAT_PRECISION_DEFAULT: float = 0.01  # Two decimal places

# Extra significant digits for exact decimal grid arithmetic.
RANGE_DECIMAL_GUARD_DIGITS: int = 20

# =============================================================================
# Derived Generators
# =============================================================================

ARRAY_ELEMENT_DEFAULT: tuple[str, ...] = ("a", "b", "c")
BOOLEAN_THRESHOLD: float = 0.5  # next_float() < threshold => True

UUID_TEMPLATE: str = "xxxxxxxx-xxxx-4xxx-yxxx-xxxxxxxxxxxx"
UUID_HEX_DIGIT_MIN: int = 0
UUID_HEX_DIGIT_MAX: int = 15
UUID_VARIANT_DIGIT_MIN: int = 8  # RFC 4122 variant: 10xx => 8, 9, a, b
UUID_VARIANT_DIGIT_MAX: int = 11

# =============================================================================
# Seeding
# =============================================================================

SEED_ENTROPY_MAX: int = 2**63 - 1  # Upper bound for non-deterministic seeds
SEED_ENV_VAR: str = "MOCKRAND_SEED"
