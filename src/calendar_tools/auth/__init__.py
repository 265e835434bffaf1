"""OAuth client credential loading."""

from __future__ import annotations

from .credentials import (
    CredentialsNotFoundError,
    InvalidCredentialsError,
    load_credentials,
    parse_oauth_credentials,
)

__all__ = ["CredentialsNotFoundError", "InvalidCredentialsError", "load_credentials", "parse_oauth_credentials"]
