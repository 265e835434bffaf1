"""Second validation stage for fields that may carry one value or an encoded list.

Tool schemas only accept strings for these fields. Whether the string is a bare
identifier or a JSON-encoded list is decided here, after shape validation.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Sequence, Union

from .errors import (
    DuplicateValueError,
    EmptyListError,
    InvalidElementError,
    MalformedListError,
    TooManyValuesError,
)
from .quotes import repair_single_quoted

logger = logging.getLogger(__name__)

MAX_VALUES = 50

NormalizedValue = Union[str, List[str]]
ArgumentTransform = Callable[[Dict[str, Any]], Dict[str, Any]]


@dataclass(frozen=True, slots=True)
class MultiValuePolicy:
    """Names a flexible field and the nouns used when reporting on it."""

    field: str
    key: str
    item: str
    items: str
    limit_noun: str
    max_values: int = MAX_VALUES


def _is_bracketed(text: str) -> bool:
    return text.startswith("[") and text.endswith("]")


def _decode_list(text: str, policy: MultiValuePolicy) -> Any:
    try:
        return json.loads(text)
    except RecursionError as exc:
        raise MalformedListError(
            f"Invalid JSON format for {policy.field}: arrays are nested too deeply",
            field=policy.field,
        ) from exc
    except json.JSONDecodeError as exc:
        repaired = repair_single_quoted(text)
        if repaired is not None:
            try:
                decoded = json.loads(repaired)
            except (json.JSONDecodeError, RecursionError):
                pass
            else:
                logger.debug("Repaired single-quoted list for %s", policy.field)
                return decoded
        raise MalformedListError(
            f"Invalid JSON format for {policy.field}: {exc.msg}",
            field=policy.field,
        ) from exc


def validate_values(values: Sequence[Any], policy: MultiValuePolicy) -> List[str]:
    """Apply list policy: element type, non-empty, size bound, uniqueness."""

    if any(not isinstance(value, str) or not value for value in values):
        raise InvalidElementError(
            f"Array must contain only non-empty strings ({policy.field})",
            field=policy.field,
        )
    if not values:
        raise EmptyListError(f"At least one {policy.item} is required", field=policy.field)
    if len(values) > policy.max_values:
        raise TooManyValuesError(
            f"Maximum {policy.max_values} {policy.limit_noun} exceeded (got {len(values)})",
            field=policy.field,
        )

    seen = set()
    for value in values:
        if value in seen:
            raise DuplicateValueError(
                f"Duplicate {policy.items} are not allowed: {value}",
                field=policy.field,
                value=value,
            )
        seen.add(value)
    return list(values)


def normalize_multi_value(value: Union[str, Sequence[str]], policy: MultiValuePolicy) -> NormalizedValue:
    """Return ``value`` unchanged for a single value, or the decoded list of values."""

    if isinstance(value, (list, tuple)):
        return validate_values(value, policy)

    text = value.strip()
    if not _is_bracketed(text):
        return value

    decoded = _decode_list(text, policy)
    if not isinstance(decoded, list):
        raise MalformedListError(f"Invalid JSON format for {policy.field}: expected an array", field=policy.field)
    return validate_values(decoded, policy)


def normalize_fields(*policies: MultiValuePolicy) -> ArgumentTransform:
    """Build a pre-dispatch transform that normalizes each policy's field if present."""

    def transform(record: Dict[str, Any]) -> Dict[str, Any]:
        normalized = dict(record)
        for policy in policies:
            if policy.key in normalized:
                normalized[policy.key] = normalize_multi_value(normalized[policy.key], policy)
        return normalized

    return transform
