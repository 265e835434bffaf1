"""Two-stage tool argument validation: schema shape, then multi-value decoding."""

from __future__ import annotations

from .errors import (
    DuplicateValueError,
    EmptyListError,
    InvalidElementError,
    MalformedListError,
    ShapeValidationError,
    TooManyValuesError,
    ToolArgumentError,
)
from .multi_value import MAX_VALUES, MultiValuePolicy, normalize_fields, normalize_multi_value, validate_values
from .quotes import repair_single_quoted
from .shape import validate_shape

__all__ = [
    "DuplicateValueError",
    "EmptyListError",
    "InvalidElementError",
    "MAX_VALUES",
    "MalformedListError",
    "MultiValuePolicy",
    "ShapeValidationError",
    "TooManyValuesError",
    "ToolArgumentError",
    "normalize_fields",
    "normalize_multi_value",
    "repair_single_quoted",
    "validate_shape",
    "validate_values",
]
