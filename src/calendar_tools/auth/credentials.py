from __future__ import annotations

import json
import logging
from typing import Any, Mapping, Optional

from ..config import OAuthSettings
from ..domain import OAuthClientCredentials

logger = logging.getLogger(__name__)

# Google "Desktop app" downloads nest under "installed", "Web application" under "web".
CREDENTIAL_SHAPES = ("installed", "web", None)


class InvalidCredentialsError(ValueError):
    """Raised when an OAuth client payload is not JSON or lacks client_id/client_secret."""


class CredentialsNotFoundError(FileNotFoundError):
    """Raised when no OAuth client credentials source is available."""


def _extract(candidate: Any) -> Optional[OAuthClientCredentials]:
    if not isinstance(candidate, Mapping):
        return None
    client_id = candidate.get("client_id")
    client_secret = candidate.get("client_secret")
    if not (isinstance(client_id, str) and client_id and isinstance(client_secret, str) and client_secret):
        return None
    redirect_uris = candidate.get("redirect_uris")
    if isinstance(redirect_uris, list) and all(isinstance(uri, str) for uri in redirect_uris):
        uris = tuple(redirect_uris)
    else:
        uris = ()
    return OAuthClientCredentials(client_id=client_id, client_secret=client_secret, redirect_uris=uris)


def parse_oauth_credentials(raw: str) -> OAuthClientCredentials:
    """Extract the client id and secret from any of the supported payload shapes."""

    try:
        payload = json.loads(raw)
    except (TypeError, json.JSONDecodeError) as exc:
        raise InvalidCredentialsError("Invalid credentials format: payload is not valid JSON") from exc

    if isinstance(payload, Mapping):
        for key in CREDENTIAL_SHAPES:
            credentials = _extract(payload if key is None else payload.get(key))
            if credentials is not None:
                return credentials

    raise InvalidCredentialsError(
        "Invalid credentials format: expected client_id and client_secret "
        "at the top level or under 'installed' or 'web'"
    )


def load_credentials(settings: OAuthSettings) -> OAuthClientCredentials:
    """Resolve the configured credentials source and normalize it.

    Sources are checked in order: the inline JSON value, the explicit file
    path, then the default file in the user config directory.
    """

    if settings.credentials_json:
        logger.debug("Loading OAuth credentials from GOOGLE_OAUTH_CREDENTIALS_JSON")
        return parse_oauth_credentials(settings.credentials_json)

    path = settings.credentials_path or settings.default_credentials_path
    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise CredentialsNotFoundError(
            f"OAuth credentials not found at {path}. Set GOOGLE_OAUTH_CREDENTIALS_JSON "
            "or point GOOGLE_OAUTH_CREDENTIALS at a client secrets file."
        ) from exc

    logger.debug("Loading OAuth credentials from %s", path)
    return parse_oauth_credentials(raw)
