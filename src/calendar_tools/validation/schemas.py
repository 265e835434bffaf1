"""Argument schemas for the calendar tools.

Flexible fields such as ``calendarId`` are declared as plain strings: a list of
calendars arrives JSON-encoded inside the string and is decoded afterwards by
:mod:`calendar_tools.validation.multi_value`. Native JSON arrays are rejected
here.
"""

from __future__ import annotations

from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, StringConstraints

ACCOUNT_ID_PATTERN = r"^[a-z0-9_-]{1,64}$"

AccountId = Annotated[str, StringConstraints(strict=True, pattern=ACCOUNT_ID_PATTERN)]
FlexibleString = Annotated[str, StringConstraints(strict=True, min_length=1)]
PlainString = Annotated[str, StringConstraints(strict=True)]


class ToolArguments(BaseModel):
    """Base for tool schemas: only the camelCase wire names are accepted, unknown fields are rejected."""

    # Optional fields default to None but an explicit null is still a type error.
    # Python field names such as calendar_id count as unknown fields.
    model_config = ConfigDict(extra="forbid")


class ListCalendarsArguments(ToolArguments):
    account: AccountId = Field(default=None, description="Account nickname to use, e.g. 'work'.")


class ListEventsArguments(ToolArguments):
    account: AccountId = Field(default=None, description="Account nickname to use, e.g. 'work'.")
    calendar_id: FlexibleString = Field(
        alias="calendarId",
        description=(
            "Calendar ID, or several as a JSON array string, "
            "e.g. '[\"primary\", \"work@example.com\"]'. Up to 50 calendars."
        ),
    )
    time_min: PlainString = Field(default=None, alias="timeMin", description="Lower bound for event end time.")
    time_max: PlainString = Field(default=None, alias="timeMax", description="Upper bound for event start time.")
    time_zone: PlainString = Field(default=None, alias="timeZone", description="IANA time zone for the response.")


class SearchEventsArguments(ToolArguments):
    account: AccountId = Field(default=None, description="Account nickname to use, e.g. 'work'.")
    calendar_id: FlexibleString = Field(
        alias="calendarId",
        description="Calendar ID, or several as a JSON array string.",
    )
    query: FlexibleString = Field(description="Free text matched against event fields.")
    time_min: PlainString = Field(default=None, alias="timeMin", description="Lower bound for event end time.")
    time_max: PlainString = Field(default=None, alias="timeMax", description="Upper bound for event start time.")


class NoArguments(ToolArguments):
    pass
