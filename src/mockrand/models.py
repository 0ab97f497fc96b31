"""
mockrand Data Models

NumericOptions is the per-call input of Random.number and Random.float.
It is frozen: normalising defaults always builds new values, so options
passed by a caller are never written back to.
"""

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

from mockrand.constants import NUMBER_MAX_DEFAULT, NUMBER_MIN_DEFAULT
from mockrand.errors import InvalidArgumentError

Number = int | float


class NumericOptions(BaseModel):
    """Bounds and step for numeric generation.

    ``precision`` left as None means "use the default of the operation":
    1 for integers, 0.01 for floats.
    """

    model_config = ConfigDict(
        frozen=True,
        strict=True,
        extra="forbid",
        allow_inf_nan=False,
    )

    min: Number = NUMBER_MIN_DEFAULT
    max: Number = NUMBER_MAX_DEFAULT
    precision: Number | None = None

    @field_validator("precision")
    @classmethod
    def precision_positive(cls, value: Number | None) -> Number | None:
        if value is not None and value <= 0:
            raise ValueError(f"precision must be positive, got {value}")
        return value


def coerce_options(options: Any, *, shorthand: str) -> NumericOptions:
    """Turn any accepted options argument into a NumericOptions.

    Args:
        options: None, a NumericOptions, a mapping with min/max/precision
            keys, or a bare number.
        shorthand: Field a bare number stands for ("max" for integers,
            "precision" for floats).

    Raises:
        InvalidArgumentError: If the argument or any of its values is invalid.
    """
    try:
        if options is None:
            return NumericOptions()
        if isinstance(options, NumericOptions):
            return options
        if isinstance(options, Mapping):
            # Copy first: validation must never see (or touch) caller storage
            return NumericOptions.model_validate(dict(options))
        if isinstance(options, (int, float)) and not isinstance(options, bool):
            return NumericOptions.model_validate({shorthand: options})
    except ValidationError as e:
        raise InvalidArgumentError(f"invalid numeric options: {e}") from e

    raise InvalidArgumentError(
        f"options must be a number, a mapping or NumericOptions, got {type(options).__name__}"
    )
