from __future__ import annotations

from typing import Any, Dict, List, Optional, Union

from ..validation import MultiValuePolicy, normalize_fields
from ..validation.schemas import ListCalendarsArguments, ListEventsArguments, SearchEventsArguments
from .registry import register_api
from .state import api_state

CALENDAR_IDS = MultiValuePolicy(
    field="calendarId",
    key="calendar_id",
    item="calendar ID",
    items="calendar IDs",
    limit_noun="calendars",
)
STRICT_PARAMETERS_NOTE = " Parameters not listed in the schema are rejected, not ignored."


def _calendar_ids(calendar_id: Union[str, List[str]]) -> List[str]:
    return [calendar_id] if isinstance(calendar_id, str) else list(calendar_id)


@register_api(
    "list_calendars",
    description="List the calendars available to the selected account." + STRICT_PARAMETERS_NOTE,
    category="calendar",
    schema=ListCalendarsArguments,
    tags=("calendar", "read"),
)
def list_calendars(account: Optional[str] = None) -> Dict[str, Any]:
    calendars = api_state.calendar.list_calendars(account=account)
    return {"account": account, "calendars": calendars}


@register_api(
    "list_events",
    description=(
        "List events from one or more calendars. Pass a single calendar ID, or up to 50 "
        "as a JSON array string such as '[\"primary\", \"work@example.com\"]'."
        + STRICT_PARAMETERS_NOTE
    ),
    category="calendar",
    schema=ListEventsArguments,
    transform=normalize_fields(CALENDAR_IDS),
    tags=("calendar", "events", "read"),
)
def list_events(
    calendar_id: Union[str, List[str]],
    account: Optional[str] = None,
    time_min: Optional[str] = None,
    time_max: Optional[str] = None,
    time_zone: Optional[str] = None,
) -> Dict[str, Any]:
    calendar_ids = _calendar_ids(calendar_id)
    events = api_state.calendar.list_events(
        calendar_ids,
        account=account,
        time_min=time_min,
        time_max=time_max,
        time_zone=time_zone,
    )
    return {"calendar_ids": calendar_ids, "events": events}


@register_api(
    "search_events",
    description="Search events by free text across one or more calendars." + STRICT_PARAMETERS_NOTE,
    category="calendar",
    schema=SearchEventsArguments,
    transform=normalize_fields(CALENDAR_IDS),
    tags=("calendar", "events", "search"),
)
def search_events(
    calendar_id: Union[str, List[str]],
    query: str,
    account: Optional[str] = None,
    time_min: Optional[str] = None,
    time_max: Optional[str] = None,
) -> Dict[str, Any]:
    calendar_ids = _calendar_ids(calendar_id)
    events = api_state.calendar.search_events(
        calendar_ids,
        query,
        account=account,
        time_min=time_min,
        time_max=time_max,
    )
    return {"calendar_ids": calendar_ids, "query": query, "events": events}
