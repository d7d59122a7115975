"""Tests for preferences and filter configuration."""

import json

import pytest

from course_scheduler.config import (
    DEFAULT_TIME_OF_DAY_ORDER,
    CourseFilter,
    Preferences,
    load_preferences,
    normalize_limit,
    parse_search_mode,
    parse_time_range,
)
from course_scheduler.exceptions import InvalidPreferenceError
from course_scheduler.models import SearchMode, StatusFilter, TimeOfDayBucket


class TestPreferences:
    """Tests for Preferences dataclass."""

    def test_defaults(self):
        preferences = Preferences()

        assert preferences.max_units == ""
        assert preferences.max_gap_hours == ""
        assert preferences.preferred_time_of_day_order == DEFAULT_TIME_OF_DAY_ORDER
        assert preferences.minimize_days_on_campus is False
        assert preferences.search_mode == SearchMode.PARTIAL

    def test_from_dict_camel_case(self):
        preferences = Preferences.from_dict(
            {
                "maxUnits": "21",
                "maxClassGapHours": 2,
                "preferredTimeOfDayOrder": ["evening", "morning"],
                "minimizeDaysOnCampus": True,
                "scheduleSearchMode": "fast",
            }
        )

        assert preferences.max_units == "21"
        assert preferences.max_gap_hours == "2"
        assert preferences.preferred_time_of_day_order == (
            TimeOfDayBucket.EVENING,
            TimeOfDayBucket.MORNING,
        )
        assert preferences.minimize_days_on_campus is True
        assert preferences.search_mode == SearchMode.FAST

    def test_order_as_comma_string(self):
        preferences = Preferences.from_dict({"preferred_time_of_day_order": "Afternoon, any"})
        assert preferences.preferred_time_of_day_order == (
            TimeOfDayBucket.AFTERNOON,
            TimeOfDayBucket.ANY,
        )

    def test_empty_limits_are_unbounded(self):
        preferences = Preferences.from_dict({"max_units": "", "max_gap_hours": None})
        assert preferences.max_units == ""
        assert preferences.max_gap_hours == ""

    def test_from_empty_dict_uses_defaults(self):
        assert Preferences.from_dict({}) == Preferences()

    def test_order_given_as_enum_members(self):
        preferences = Preferences.from_dict(
            {"preferred_time_of_day_order": [TimeOfDayBucket.EVENING, "morning"]}
        )
        assert preferences.preferred_time_of_day_order == (
            TimeOfDayBucket.EVENING,
            TimeOfDayBucket.MORNING,
        )

    @pytest.mark.parametrize(
        "value, expected",
        [("false", False), ("no", False), ("true", True), ("Yes", True), (True, True), (0, False)],
    )
    def test_minimize_days_flag(self, value, expected):
        preferences = Preferences.from_dict({"minimizeDaysOnCampus": value})
        assert preferences.minimize_days_on_campus is expected

    def test_unknown_bucket(self):
        with pytest.raises(InvalidPreferenceError) as exc_info:
            Preferences.from_dict({"preferred_time_of_day_order": ["morning", "night"]})
        assert exc_info.value.field == "preferred_time_of_day_order"

    def test_repeated_bucket(self):
        with pytest.raises(InvalidPreferenceError):
            Preferences.from_dict({"preferred_time_of_day_order": ["morning", "morning"]})

    def test_unknown_search_mode(self):
        with pytest.raises(InvalidPreferenceError):
            Preferences.from_dict({"search_mode": "genetic"})

    def test_round_trip(self):
        preferences = Preferences(max_units="18", minimize_days_on_campus=True)
        assert Preferences.from_dict(preferences.to_dict()) == preferences


class TestNormalizeLimit:
    """Tests for normalize_limit function."""

    def test_numbers_and_strings(self):
        assert normalize_limit("max_units", 18) == "18"
        assert normalize_limit("max_units", " 1.5 ") == "1.5"

    def test_unbounded(self):
        assert normalize_limit("max_units", None) == ""
        assert normalize_limit("max_units", "  ") == ""

    @pytest.mark.parametrize("value", ["-1", "abc", -3])
    def test_invalid(self, value):
        with pytest.raises(InvalidPreferenceError):
            normalize_limit("max_units", value)


def test_parse_search_mode_accepts_enum_and_text():
    assert parse_search_mode(SearchMode.EXHAUSTIVE) == SearchMode.EXHAUSTIVE
    assert parse_search_mode(" Fast ") == SearchMode.FAST


class TestLoadPreferences:
    """Tests for load_preferences function."""

    def test_load(self, tmp_path):
        path = tmp_path / "preferences.json"
        path.write_text(json.dumps({"maxUnits": "15", "searchMode": "exhaustive"}))

        preferences = load_preferences(path)

        assert preferences.max_units == "15"
        assert preferences.search_mode == SearchMode.EXHAUSTIVE
        assert preferences.preferred_time_of_day_order == DEFAULT_TIME_OF_DAY_ORDER

    def test_not_an_object(self, tmp_path):
        path = tmp_path / "preferences.json"
        path.write_text("[1, 2]")

        with pytest.raises(InvalidPreferenceError):
            load_preferences(path)


class TestCourseFilter:
    """Tests for CourseFilter dataclass."""

    def test_defaults(self):
        course_filter = CourseFilter()

        assert course_filter.status == StatusFilter.OPEN
        assert course_filter.require_available_slots
        assert not course_filter.section_types

    def test_unknown_section_type(self):
        with pytest.raises(InvalidPreferenceError):
            CourseFilter(section_types=frozenset({"AP9"}))


class TestParseTimeRange:
    """Tests for parse_time_range function."""

    def test_24h(self):
        assert parse_time_range("07:30-09:00") == ("07:30", "09:00")

    def test_12h(self):
        assert parse_time_range("7:30AM-1:00PM") == ("07:30", "13:00")

    @pytest.mark.parametrize("value", ["09:00-07:00", "07:30", "7-9", "a-b-c"])
    def test_invalid(self, value):
        with pytest.raises(InvalidPreferenceError):
            parse_time_range(value)
