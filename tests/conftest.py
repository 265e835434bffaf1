"""Shared fixtures for the calendar tools test suite."""

from __future__ import annotations

from typing import Any, Dict, List, Optional, Sequence

import pytest

from calendar_tools.api import api_state


class RecordingProvider:
    """In-memory calendar provider that records every call it receives."""

    def __init__(self) -> None:
        self.calls: List[Dict[str, Any]] = []

    def list_calendars(self, *, account: Optional[str]) -> List[Dict[str, Any]]:
        self.calls.append({"method": "list_calendars", "account": account})
        return [{"id": "primary", "summary": "Primary"}]

    def list_events(
        self,
        *,
        account: Optional[str],
        calendar_ids: Sequence[str],
        time_min: Optional[str],
        time_max: Optional[str],
        time_zone: Optional[str],
    ) -> List[Dict[str, Any]]:
        self.calls.append(
            {
                "method": "list_events",
                "account": account,
                "calendar_ids": list(calendar_ids),
                "time_min": time_min,
                "time_max": time_max,
                "time_zone": time_zone,
            }
        )
        return [{"id": f"evt-{calendar_id}", "calendarId": calendar_id} for calendar_id in calendar_ids]

    def search_events(
        self,
        *,
        account: Optional[str],
        calendar_ids: Sequence[str],
        query: str,
        time_min: Optional[str],
        time_max: Optional[str],
    ) -> List[Dict[str, Any]]:
        self.calls.append(
            {
                "method": "search_events",
                "account": account,
                "calendar_ids": list(calendar_ids),
                "query": query,
            }
        )
        return []


@pytest.fixture
def provider():
    recording = RecordingProvider()
    api_state.install_provider(recording)
    yield recording
    api_state.install_provider(None)


@pytest.fixture
def list_events_args() -> Dict[str, Any]:
    return {
        "calendarId": "primary",
        "timeMin": "2024-01-01T00:00:00",
        "timeMax": "2024-01-02T00:00:00",
    }
