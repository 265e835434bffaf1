from __future__ import annotations

from typing import Any, Dict, List, Mapping, Tuple, Type

from pydantic import BaseModel, ValidationError

from .errors import ShapeValidationError


def _violations(schema: Type[BaseModel], exc: ValidationError) -> List[Tuple[str, str]]:
    violations: List[Tuple[str, str]] = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error.get("loc", ())) or schema.__name__
        violations.append((location, error.get("msg", "invalid value")))
    return violations


def validate_shape(schema: Type[BaseModel], arguments: Mapping[str, Any]) -> Dict[str, Any]:
    """Validate ``arguments`` against ``schema`` and return the supplied fields only.

    The returned record is keyed by Python field names. Optional fields the
    caller left out are absent from the record rather than set to ``None``.
    """

    if not isinstance(arguments, Mapping):
        raise ShapeValidationError([(schema.__name__, "arguments must be an object")])
    try:
        model = schema.model_validate(dict(arguments))
    except ValidationError as exc:
        raise ShapeValidationError(_violations(schema, exc)) from exc
    return model.model_dump(exclude_unset=True)
