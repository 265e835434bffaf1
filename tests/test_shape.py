"""Schema-stage validation of tool arguments."""

from __future__ import annotations

import pytest

from calendar_tools.validation import ShapeValidationError, validate_shape
from calendar_tools.validation.schemas import ListCalendarsArguments, ListEventsArguments


def test_accepts_single_account_string(list_events_args):
    record = validate_shape(ListEventsArguments, {**list_events_args, "account": "work"})
    assert record["account"] == "work"


@pytest.mark.parametrize("account", ["personal", "work-2", "team_a", "a" * 64])
def test_accepts_account_ids_matching_pattern(account):
    assert validate_shape(ListCalendarsArguments, {"account": account}) == {"account": account}


@pytest.mark.parametrize(
    "account",
    [
        ["work", "personal"],
        "INVALID_UPPERCASE",
        "has space",
        "dots.not.allowed",
        "",
        "a" * 65,
        42,
        None,
    ],
)
def test_rejects_invalid_account(list_events_args, account):
    with pytest.raises(ShapeValidationError) as excinfo:
        validate_shape(ListEventsArguments, {**list_events_args, "account": account})
    assert excinfo.value.field == "account"


def test_omitted_account_stays_absent(list_events_args):
    record = validate_shape(ListEventsArguments, list_events_args)
    assert "account" not in record
    assert "time_zone" not in record


def test_single_calendar_id_string(list_events_args):
    record = validate_shape(ListEventsArguments, list_events_args)
    assert record["calendar_id"] == "primary"


@pytest.mark.parametrize(
    "calendar_id",
    [
        '["primary", "work@example.com"]',
        "['primary', 'nathan@brand.ai']",
        '["primary", "missing-quote}]',
    ],
)
def test_encoded_lists_pass_through_as_strings(list_events_args, calendar_id):
    record = validate_shape(ListEventsArguments, {**list_events_args, "calendarId": calendar_id})
    assert record["calendar_id"] == calendar_id


@pytest.mark.parametrize("calendar_id", [["primary", "work@example.com"], [], 7, None])
def test_rejects_non_string_calendar_id(list_events_args, calendar_id):
    with pytest.raises(ShapeValidationError) as excinfo:
        validate_shape(ListEventsArguments, {**list_events_args, "calendarId": calendar_id})
    assert excinfo.value.field == "calendarId"
    assert "calendarId" in str(excinfo.value)


def test_missing_calendar_id_is_reported():
    with pytest.raises(ShapeValidationError) as excinfo:
        validate_shape(ListEventsArguments, {"timeMin": "2024-01-01T00:00:00"})
    assert ("calendarId", "Field required") in excinfo.value.violations


def test_reports_every_violation():
    with pytest.raises(ShapeValidationError) as excinfo:
        validate_shape(ListEventsArguments, {"account": "BAD", "calendarId": ["x"]})
    fields = {field for field, _ in excinfo.value.violations}
    assert fields == {"account", "calendarId"}


def test_rejects_unknown_fields(list_events_args):
    with pytest.raises(ShapeValidationError):
        validate_shape(ListEventsArguments, {**list_events_args, "maxResults": 10})


def test_rejects_non_mapping_arguments():
    with pytest.raises(ShapeValidationError):
        validate_shape(ListEventsArguments, ["primary"])


@pytest.mark.parametrize(
    ("python_name", "wire_name"),
    [("calendar_id", "calendarId"), ("time_min", "timeMin"), ("time_zone", "timeZone")],
)
def test_rejects_python_field_names(list_events_args, python_name, wire_name):
    with pytest.raises(ShapeValidationError) as excinfo:
        validate_shape(ListEventsArguments, {**list_events_args, python_name: list_events_args.get(wire_name, "UTC")})
    assert (python_name, "Extra inputs are not permitted") in excinfo.value.violations
