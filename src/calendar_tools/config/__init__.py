"""Configuration models and helpers."""

from __future__ import annotations

from .settings import AppSettings, LoggingSettings, OAuthSettings, ServerSettings, get_settings

__all__ = ["AppSettings", "LoggingSettings", "OAuthSettings", "ServerSettings", "get_settings"]
