"""End-to-end tool flow: schema validation, pre-dispatch transform, dispatch."""

from __future__ import annotations

import json

import pytest

from calendar_tools.api import call_api, get_api_function
from calendar_tools.api.registry import register_api
from calendar_tools.services import CalendarProviderNotConfiguredError
from calendar_tools.validation import (
    DuplicateValueError,
    EmptyListError,
    InvalidElementError,
    MalformedListError,
    ShapeValidationError,
    TooManyValuesError,
)
from calendar_tools.validation.schemas import NoArguments


def test_prepare_keeps_single_calendar_id_as_string(list_events_args):
    record = get_api_function("list_events").prepare(list_events_args)
    assert record["calendar_id"] == "primary"


def test_prepare_decodes_json_array(list_events_args):
    record = get_api_function("list_events").prepare(
        {**list_events_args, "calendarId": '["primary", "work@example.com"]'}
    )
    assert record["calendar_id"] == ["primary", "work@example.com"]


def test_prepare_decodes_single_quoted_array(list_events_args):
    record = get_api_function("list_events").prepare(
        {**list_events_args, "calendarId": "['primary', 'nathan@brand.ai']"}
    )
    assert record["calendar_id"] == ["primary", "nathan@brand.ai"]


def test_prepare_preserves_account(list_events_args):
    record = get_api_function("list_events").prepare(
        {**list_events_args, "account": "personal", "calendarId": '["primary", "work@example.com"]'}
    )
    assert record["account"] == "personal"
    assert record["calendar_id"] == ["primary", "work@example.com"]


def test_prepare_leaves_account_absent(list_events_args):
    record = get_api_function("list_events").prepare(list_events_args)
    assert "account" not in record


@pytest.mark.parametrize(
    ("calendar_id", "error", "message"),
    [
        ("[]", EmptyListError, "At least one calendar ID is required"),
        (json.dumps(["calendar"] * 51), TooManyValuesError, "Maximum 50 calendars exceeded"),
        ('["primary", "primary"]', DuplicateValueError, "Duplicate calendar IDs"),
        ('["primary", "missing-quote}]', MalformedListError, "Invalid JSON format for calendarId"),
        ('["primary", 123, null]', InvalidElementError, "Array must contain only non-empty strings"),
    ],
)
def test_call_api_rejects_invalid_lists(provider, list_events_args, calendar_id, error, message):
    with pytest.raises(error, match=message):
        call_api("list_events", **{**list_events_args, "calendarId": calendar_id})
    assert provider.calls == []


def test_call_api_rejects_native_array(provider, list_events_args):
    with pytest.raises(ShapeValidationError):
        call_api("list_events", **{**list_events_args, "calendarId": ["primary", "work@example.com"]})
    assert provider.calls == []


def test_call_api_rejects_deeply_nested_list(provider, list_events_args):
    nested = "[" * 100_000 + "]" * 100_000
    with pytest.raises(MalformedListError, match="Invalid JSON format for calendarId"):
        call_api("list_events", **{**list_events_args, "calendarId": nested})
    assert provider.calls == []


@pytest.mark.parametrize("tool", ["list_events", "search_events"])
def test_call_api_rejects_python_field_names(provider, tool):
    with pytest.raises(ShapeValidationError, match="calendar_id"):
        call_api(tool, calendar_id="primary", query="standup")
    assert provider.calls == []


@pytest.mark.parametrize("tool", ["list_calendars", "list_events", "search_events"])
def test_tool_descriptions_state_unknown_parameters_are_rejected(tool):
    assert "rejected, not ignored" in get_api_function(tool).description


def test_call_api_dispatches_calendar_list(provider, list_events_args):
    result = call_api(
        "list_events",
        **{**list_events_args, "account": "work", "calendarId": "['primary', 'team@example.com']"},
    )
    assert result["calendar_ids"] == ["primary", "team@example.com"]
    assert [event["calendarId"] for event in result["events"]] == ["primary", "team@example.com"]
    assert provider.calls == [
        {
            "method": "list_events",
            "account": "work",
            "calendar_ids": ["primary", "team@example.com"],
            "time_min": "2024-01-01T00:00:00",
            "time_max": "2024-01-02T00:00:00",
            "time_zone": None,
        }
    ]


def test_call_api_wraps_single_calendar_id(provider, list_events_args):
    result = call_api("list_events", **list_events_args)
    assert result["calendar_ids"] == ["primary"]
    assert provider.calls[0]["calendar_ids"] == ["primary"]


def test_search_events_normalizes_calendar_ids(provider):
    result = call_api("search_events", calendarId='["a@example.com", "b@example.com"]', query="standup")
    assert result["query"] == "standup"
    assert provider.calls[0]["calendar_ids"] == ["a@example.com", "b@example.com"]


def test_list_calendars_passes_account(provider):
    result = call_api("list_calendars", account="work")
    assert result["calendars"] == [{"id": "primary", "summary": "Primary"}]
    assert provider.calls == [{"method": "list_calendars", "account": "work"}]


def test_call_api_without_provider(list_events_args):
    with pytest.raises(CalendarProviderNotConfiguredError):
        call_api("list_events", **list_events_args)


def test_unknown_tool_raises_key_error():
    with pytest.raises(KeyError):
        call_api("does_not_exist")


def test_duplicate_registration_is_rejected():
    with pytest.raises(ValueError, match="already registered"):
        register_api("list_events", description="dup", category="calendar", schema=NoArguments)(lambda: None)


def test_list_available_tools_reports_wire_parameters():
    tools = {tool["name"]: tool for tool in call_api("list_available_tools")["tools"]}
    assert {"list_calendars", "list_events", "search_events", "list_available_tools"} <= set(tools)
    assert "calendarId" in tools["list_events"]["parameters"]
    assert tools["list_events"]["parameters"]["calendarId"]["type"] == "string"


def test_parameter_schema_requires_calendar_id():
    schema = get_api_function("list_events").parameter_schema
    assert schema["required"] == ["calendarId"]
    assert schema["additionalProperties"] is False
