from __future__ import annotations

from typing import Optional
from urllib.parse import urlsplit

LOCAL_HOSTS = frozenset({"localhost", "127.0.0.1"})
LOCAL_SCHEMES = frozenset({"http", "https"})


def is_localhost_origin(origin: Optional[str]) -> bool:
    """Return True only for ``http(s)://localhost[:port]`` or ``http(s)://127.0.0.1[:port]``.

    The host is compared as a parsed field, so ``localhost.attacker.com`` and
    ``127.0.0.1.attacker.com`` are rejected. Other loopback addresses are
    rejected as well. Never raises.
    """

    if not isinstance(origin, str) or not origin:
        return False
    try:
        parts = urlsplit(origin)
        # Accessing .port validates it; out-of-range or non-numeric ports raise.
        parts.port
    except ValueError:
        return False

    if parts.scheme not in LOCAL_SCHEMES:
        return False
    if parts.username is not None or parts.password is not None:
        return False
    if parts.path or parts.query or parts.fragment:
        return False
    return parts.hostname in LOCAL_HOSTS
