from datetime import date

import pytest
from pydantic_core import PydanticCustomError

from tracker_activities_api.app.core.dates import format_date, matches_iso_format, parse_iso_date
from tracker_activities_api.app.core.errors import InvalidParameterError
from tracker_activities_api.app.core.validation import MAX_SQL_INTEGER, parse_params, positive_int, to_int
from tracker_activities_api.app.schemas.activity import ActivityCreate


@pytest.mark.parametrize(
    "value, expected",
    [(7, 7), ("12", 12), (" 3 ", 3), ("-4", -4), (5.0, 5), (5.5, None), ("1e3", None), ("", None), (True, None), (None, None)],
)
def test_to_int(value, expected):
    assert to_int(value) == expected


def test_date_helpers():
    assert matches_iso_format("2024-12-01")
    assert not matches_iso_format("2024-12-1")
    assert not matches_iso_format("2024-12-01\n")
    assert parse_iso_date("2024-02-30") is None
    assert format_date("2024-12-01") == "01/12/2024"
    assert format_date(date(2025, 1, 9)) == "09/01/2025"
    assert format_date(None) is None


def test_parse_params_returns_cleaned_values():
    params = parse_params(
        ActivityCreate,
        {"id": "3", "name": " Lab ", "date": "2024-03-01", "description": ""},
    )
    assert params.id_subject == 3
    assert params.name == "Lab"
    assert params.description is None


def test_parse_params_reports_first_violation_only():
    with pytest.raises(InvalidParameterError) as exc_info:
        parse_params(ActivityCreate, {"id": "1", "name": " ", "date": "01-03-2024"})
    assert exc_info.value.message == "The date parameter must use the YYYY-MM-DD format"
    assert exc_info.value.status_code == 400


def test_parse_params_with_no_input():
    with pytest.raises(InvalidParameterError) as exc_info:
        parse_params(ActivityCreate, None)
    assert "required" in exc_info.value.message


def test_positive_int_stays_within_sqlite_range():
    assert positive_int(str(MAX_SQL_INTEGER), "id") == MAX_SQL_INTEGER
    with pytest.raises(PydanticCustomError):
        positive_int(str(MAX_SQL_INTEGER + 1), "id")
