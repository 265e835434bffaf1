from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Dict, List, Optional, Protocol, Sequence

if TYPE_CHECKING:
    from .context import ServiceContext


class CalendarProviderNotConfiguredError(RuntimeError):
    """Raised when a tool runs before a calendar provider has been installed."""


class CalendarProvider(Protocol):
    """Calendar backend the tools delegate to, e.g. a Google Calendar API client."""

    def list_calendars(self, *, account: Optional[str]) -> List[Dict[str, Any]]: ...

    def list_events(
        self,
        *,
        account: Optional[str],
        calendar_ids: Sequence[str],
        time_min: Optional[str],
        time_max: Optional[str],
        time_zone: Optional[str],
    ) -> List[Dict[str, Any]]: ...

    def search_events(
        self,
        *,
        account: Optional[str],
        calendar_ids: Sequence[str],
        query: str,
        time_min: Optional[str],
        time_max: Optional[str],
    ) -> List[Dict[str, Any]]: ...


@dataclass(slots=True)
class CalendarService:
    context: "ServiceContext"

    def list_calendars(self, *, account: Optional[str] = None) -> List[Dict[str, Any]]:
        return self.context.require_provider().list_calendars(account=account)

    def list_events(
        self,
        calendar_ids: Sequence[str],
        *,
        account: Optional[str] = None,
        time_min: Optional[str] = None,
        time_max: Optional[str] = None,
        time_zone: Optional[str] = None,
    ) -> List[Dict[str, Any]]:
        return self.context.require_provider().list_events(
            account=account,
            calendar_ids=calendar_ids,
            time_min=time_min,
            time_max=time_max,
            time_zone=time_zone,
        )

    def search_events(
        self,
        calendar_ids: Sequence[str],
        query: str,
        *,
        account: Optional[str] = None,
        time_min: Optional[str] = None,
        time_max: Optional[str] = None,
    ) -> List[Dict[str, Any]]:
        return self.context.require_provider().search_events(
            account=account,
            calendar_ids=calendar_ids,
            query=query,
            time_min=time_min,
            time_max=time_max,
        )
