from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from ..config import AppSettings, get_settings
from .calendar import CalendarProvider, CalendarProviderNotConfiguredError


@dataclass(slots=True)
class ServiceContext:
    """Aggregate root for services to share settings and the calendar provider."""

    settings: AppSettings = field(default_factory=get_settings)
    provider: Optional[CalendarProvider] = None

    def require_provider(self) -> CalendarProvider:
        if self.provider is None:
            raise CalendarProviderNotConfiguredError("No calendar provider is configured.")
        return self.provider
