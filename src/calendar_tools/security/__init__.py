"""Transport guards for the HTTP endpoints."""

from __future__ import annotations

from .bearer import validate_bearer_token
from .middleware import TransportGuardMiddleware
from .origin import is_localhost_origin

__all__ = ["TransportGuardMiddleware", "is_localhost_origin", "validate_bearer_token"]
