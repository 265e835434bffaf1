"""Application services sitting between the tools and the calendar provider."""

from __future__ import annotations

from .calendar import CalendarProvider, CalendarProviderNotConfiguredError, CalendarService
from .context import ServiceContext

__all__ = ["CalendarProvider", "CalendarProviderNotConfiguredError", "CalendarService", "ServiceContext"]
