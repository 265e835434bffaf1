from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from platformdirs import user_config_dir, user_log_dir

load_dotenv()

APP_NAME = "calendar-tools"
APP_AUTHOR = "CalendarTools"
DEFAULT_CREDENTIALS_FILE = "gcp-oauth.keys.json"


@dataclass(frozen=True)
class ServerSettings:
    host: str
    api_port: int
    mcp_port: int
    auth_token: Optional[str]

    @property
    def auth_enabled(self) -> bool:
        """Without ``MCP_AUTH_TOKEN`` every caller is accepted (local open mode)."""

        return bool(self.auth_token)


@dataclass(frozen=True)
class OAuthSettings:
    credentials_json: Optional[str]
    credentials_path: Optional[Path]
    default_credentials_path: Path


@dataclass(frozen=True)
class LoggingSettings:
    level: str
    log_dir: Path


@dataclass(frozen=True)
class AppSettings:
    server: ServerSettings
    oauth: OAuthSettings
    logging: LoggingSettings


def _int_from_env(name: str, default: int) -> int:
    raw = os.getenv(name)
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _optional_env(name: str) -> Optional[str]:
    value = os.getenv(name)
    return value if value else None


@lru_cache(maxsize=1)
def get_settings() -> AppSettings:
    server = ServerSettings(
        host=os.getenv("CALENDAR_TOOLS_HOST", "127.0.0.1"),
        api_port=_int_from_env("CALENDAR_TOOLS_API_PORT", 8000),
        mcp_port=_int_from_env("CALENDAR_TOOLS_MCP_PORT", 3000),
        auth_token=_optional_env("MCP_AUTH_TOKEN"),
    )

    credentials_path = _optional_env("GOOGLE_OAUTH_CREDENTIALS")
    oauth = OAuthSettings(
        credentials_json=_optional_env("GOOGLE_OAUTH_CREDENTIALS_JSON"),
        credentials_path=Path(credentials_path).expanduser() if credentials_path else None,
        default_credentials_path=Path(user_config_dir(APP_NAME, APP_AUTHOR)) / DEFAULT_CREDENTIALS_FILE,
    )

    logging_settings = LoggingSettings(
        level=os.getenv("CALENDAR_TOOLS_LOG_LEVEL", "INFO").upper(),
        log_dir=Path(os.getenv("CALENDAR_TOOLS_LOG_DIR") or user_log_dir(APP_NAME, APP_AUTHOR)),
    )

    return AppSettings(server=server, oauth=oauth, logging=logging_settings)
