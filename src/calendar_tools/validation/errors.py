from __future__ import annotations

from typing import List, Optional, Sequence, Tuple


class ToolArgumentError(ValueError):
    """Raised when tool arguments fail validation or normalization."""

    def __init__(self, message: str, *, field: Optional[str] = None) -> None:
        super().__init__(message)
        self.field = field


class ShapeValidationError(ToolArgumentError):
    """Raised when arguments do not match the declared tool schema."""

    def __init__(self, violations: Sequence[Tuple[str, str]]) -> None:
        self.violations: List[Tuple[str, str]] = list(violations)
        details = "; ".join(f"{field}: {message}" for field, message in self.violations)
        first_field = self.violations[0][0] if self.violations else None
        super().__init__(f"Invalid arguments - {details}", field=first_field)


class MalformedListError(ToolArgumentError):
    """Raised when a bracketed value is neither a JSON array nor a repairable one."""


class InvalidElementError(ToolArgumentError):
    """Raised when a list contains anything other than non-empty strings."""


class EmptyListError(ToolArgumentError):
    """Raised when a list carries no values."""


class TooManyValuesError(ToolArgumentError):
    """Raised when a list exceeds the configured maximum."""


class DuplicateValueError(ToolArgumentError):
    """Raised when a list repeats a value."""

    def __init__(self, message: str, *, field: Optional[str] = None, value: str) -> None:
        super().__init__(message, field=field)
        self.value = value
