from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Tuple


@dataclass(frozen=True, slots=True)
class OAuthClientCredentials:
    """Canonical OAuth client record handed to the authorization flow."""

    client_id: str
    client_secret: str
    redirect_uris: Tuple[str, ...] = ()

    def to_record(self) -> Dict[str, Any]:
        record: Dict[str, Any] = {"client_id": self.client_id, "client_secret": self.client_secret}
        if self.redirect_uris:
            record["redirect_uris"] = list(self.redirect_uris)
        return record

    def __repr__(self) -> str:
        return f"OAuthClientCredentials(client_id={self.client_id!r}, client_secret='***')"
