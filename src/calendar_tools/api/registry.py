from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable, Dict, Iterable, List, Mapping, Optional, Type

from ..validation import ToolArgumentError, validate_shape
from ..validation.multi_value import ArgumentTransform
from ..validation.schemas import ToolArguments

JsonSchema = Dict[str, Any]

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ApiFunction:
    name: str
    func: Callable[..., Any]
    description: str
    category: str
    tags: tuple[str, ...]
    schema: Type[ToolArguments]
    transform: Optional[ArgumentTransform] = None

    @property
    def parameter_schema(self) -> JsonSchema:
        return self.schema.model_json_schema(by_alias=True)

    @property
    def parameters(self) -> Dict[str, JsonSchema]:
        return dict(self.parameter_schema.get("properties", {}))

    def prepare(self, arguments: Mapping[str, Any]) -> Dict[str, Any]:
        """Validate the argument shape, then apply the pre-dispatch transform."""

        record = validate_shape(self.schema, arguments)
        if self.transform is not None:
            record = self.transform(record)
        return record


REGISTRY: Dict[str, ApiFunction] = {}


def register_api(
    name: str,
    *,
    description: str,
    category: str,
    schema: Type[ToolArguments],
    transform: Optional[ArgumentTransform] = None,
    tags: Optional[Iterable[str]] = None,
) -> Callable[[Callable[..., Any]], Callable[..., Any]]:
    def decorator(func: Callable[..., Any]) -> Callable[..., Any]:
        if name in REGISTRY:
            raise ValueError(f"API function '{name}' is already registered.")
        REGISTRY[name] = ApiFunction(
            name=name,
            func=func,
            description=description,
            category=category,
            tags=tuple(tags or ()),
            schema=schema,
            transform=transform,
        )
        return func

    return decorator


def get_api_functions() -> List[ApiFunction]:
    return list(REGISTRY.values())


def get_api_function(name: str) -> ApiFunction:
    if name not in REGISTRY:
        raise KeyError(f"API function '{name}' is not registered.")
    return REGISTRY[name]


def call_api(name: str, /, **arguments: Any) -> Any:
    api_function = get_api_function(name)
    try:
        record = api_function.prepare(arguments)
    except ToolArgumentError as exc:
        logger.info("Rejected arguments for %s: %s", name, exc)
        raise
    return api_function.func(**record)
