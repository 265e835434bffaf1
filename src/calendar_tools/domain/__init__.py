"""Domain models shared across the tool and auth layers."""

from __future__ import annotations

from .models import OAuthClientCredentials

__all__ = ["OAuthClientCredentials"]
