from __future__ import annotations

import hmac
from typing import Mapping, Optional

BEARER_PREFIX = "Bearer "


def _header(headers: Mapping[str, str], name: str) -> Optional[str]:
    value = headers.get(name)
    if value is not None:
        return value
    for key, candidate in headers.items():
        if key.lower() == name:
            return candidate
    return None


def validate_bearer_token(headers: Mapping[str, str], secret: Optional[str]) -> bool:
    """Check the ``authorization`` header against the configured secret.

    When no secret is configured every request is accepted. This open mode is
    intended for local use only; set ``MCP_AUTH_TOKEN`` to require a token.
    The ``Bearer `` prefix is optional and matched case-sensitively with a
    single space.
    """

    if not secret:
        return True

    value = _header(headers, "authorization")
    if not value:
        return False

    token = value[len(BEARER_PREFIX):] if value.startswith(BEARER_PREFIX) else value
    return hmac.compare_digest(token.encode("utf-8"), secret.encode("utf-8"))
