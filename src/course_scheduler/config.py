"""Generation preferences and candidate filter configuration."""

import json
import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Self

from .constants import SECTION_TYPE_SUFFIXES, TIME_24H_PATTERN
from .exceptions import InvalidPreferenceError
from .models import (
    DayCode,
    SearchMode,
    StatusFilter,
    TimeOfDayBucket,
    as_bool,
    parse_unit_value,
)
from .normalization import normalize_time_12h

DEFAULT_TIME_OF_DAY_ORDER = (
    TimeOfDayBucket.MORNING,
    TimeOfDayBucket.AFTERNOON,
    TimeOfDayBucket.EVENING,
    TimeOfDayBucket.ANY,
)

# camelCase keys used by the web preference record
_PREFERENCE_KEY_ALIASES = {
    "maxUnits": "max_units",
    "maxGapHours": "max_gap_hours",
    "maxClassGapHours": "max_gap_hours",
    "preferredTimeOfDayOrder": "preferred_time_of_day_order",
    "minimizeDaysOnCampus": "minimize_days_on_campus",
    "searchMode": "search_mode",
    "scheduleSearchMode": "search_mode",
}


def normalize_limit(field_name: str, value: Any) -> str:
    """Normalize a numeric limit given as number or string.

    Args:
        field_name: Preference name (for error messages)
        value: Limit value; None or "" means unbounded

    Returns:
        The limit as a string, "" when unbounded

    Raises:
        InvalidPreferenceError: If the value is not a non-negative number
    """
    if value is None or (isinstance(value, str) and not value.strip()):
        return ""

    number = parse_unit_value(value)
    if number is None or number < 0:
        raise InvalidPreferenceError(field_name, value, "a non-negative number or empty")

    return str(value).strip()


@dataclass(frozen=True)
class Preferences:
    """User preferences driving schedule generation.

    Attributes:
        max_units: Total units cap as a numeric string, "" for no cap
        max_gap_hours: Longest allowed same-day gap in hours, "" for no cap
        preferred_time_of_day_order: Buckets from most to least preferred
        minimize_days_on_campus: Prefer schedules with fewer campus days
        search_mode: Strategy used by the dispatcher
    """

    max_units: str = ""
    max_gap_hours: str = ""
    preferred_time_of_day_order: tuple[TimeOfDayBucket, ...] = DEFAULT_TIME_OF_DAY_ORDER
    minimize_days_on_campus: bool = False
    search_mode: SearchMode = SearchMode.PARTIAL

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Self:
        """Create validated preferences from a record.

        Accepts snake_case keys and the camelCase keys of the web record.
        Missing keys take their defaults.

        Raises:
            InvalidPreferenceError: If a value fails validation
        """
        record = {_PREFERENCE_KEY_ALIASES.get(key, key): value for key, value in data.items()}

        order = record.get("preferred_time_of_day_order", DEFAULT_TIME_OF_DAY_ORDER)
        if isinstance(order, str):
            order = [item for item in order.split(",") if item.strip()]

        return cls(
            max_units=normalize_limit("max_units", record.get("max_units")),
            max_gap_hours=normalize_limit("max_gap_hours", record.get("max_gap_hours")),
            preferred_time_of_day_order=parse_time_of_day_order(order),
            minimize_days_on_campus=as_bool(record.get("minimize_days_on_campus", False)),
            search_mode=parse_search_mode(record.get("search_mode", SearchMode.PARTIAL)),
        )

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "max_units": self.max_units,
            "max_gap_hours": self.max_gap_hours,
            "preferred_time_of_day_order": [b.value for b in self.preferred_time_of_day_order],
            "minimize_days_on_campus": self.minimize_days_on_campus,
            "search_mode": self.search_mode.value,
        }


def parse_time_of_day_order(values: Any) -> tuple[TimeOfDayBucket, ...]:
    """Validate a preferred time-of-day order.

    Raises:
        InvalidPreferenceError: On unknown or repeated buckets
    """
    buckets: list[TimeOfDayBucket] = []
    for value in values:
        try:
            bucket = TimeOfDayBucket(str(getattr(value, "value", value)).strip().lower())
        except ValueError:
            raise InvalidPreferenceError(
                "preferred_time_of_day_order",
                value,
                f"one of {', '.join(b.value for b in TimeOfDayBucket)}",
            ) from None
        if bucket in buckets:
            raise InvalidPreferenceError(
                "preferred_time_of_day_order", value, "each bucket at most once"
            )
        buckets.append(bucket)
    return tuple(buckets)


def parse_search_mode(value: Any) -> SearchMode:
    """Validate a search mode name.

    Raises:
        InvalidPreferenceError: On unknown mode
    """
    try:
        return SearchMode(str(getattr(value, "value", value)).strip().lower())
    except ValueError:
        raise InvalidPreferenceError(
            "search_mode", value, f"one of {', '.join(m.value for m in SearchMode)}"
        ) from None


def load_preferences(path: Path) -> Preferences:
    """Load preferences from a JSON file.

    Args:
        path: Path to a JSON object with preference keys

    Returns:
        Validated Preferences

    Raises:
        InvalidPreferenceError: If the file content is not a valid record
    """
    with open(path, encoding="utf-8") as f:
        data = json.load(f)

    if not isinstance(data, dict):
        raise InvalidPreferenceError("preferences", type(data).__name__, "a JSON object")

    return Preferences.from_dict(data)


@dataclass(frozen=True)
class CourseFilter:
    """Which catalog sections are eligible for generation.

    Attributes:
        status: Keep open, closed or all sections
        require_available_slots: Drop sections with no remaining seats
        section_types: Allowed section type suffixes; empty allows all
        excluded_days: Sections meeting on any of these days are dropped
        excluded_time_ranges: ("HH:MM", "HH:MM") ranges sections must avoid
    """

    status: StatusFilter = StatusFilter.OPEN
    require_available_slots: bool = True
    section_types: frozenset[str] = field(default_factory=frozenset)
    excluded_days: frozenset[DayCode] = field(default_factory=frozenset)
    excluded_time_ranges: tuple[tuple[str, str], ...] = ()

    def __post_init__(self) -> None:
        unknown = set(self.section_types) - set(SECTION_TYPE_SUFFIXES)
        if unknown:
            raise InvalidPreferenceError(
                "section_types", sorted(unknown), f"any of {', '.join(SECTION_TYPE_SUFFIXES)}"
            )


def parse_time_range(value: str) -> tuple[str, str]:
    """Parse an exclusion range such as "07:30-09:00" or "7:30AM-9:00AM".

    Raises:
        InvalidPreferenceError: If the range is malformed
    """
    parts = [part.strip() for part in value.split("-")]
    if len(parts) != 2:
        raise InvalidPreferenceError("excluded_time_ranges", value, "START-END")

    bounds = []
    for part in parts:
        normalized = normalize_time_12h(part)
        if normalized is None and re.match(TIME_24H_PATTERN, part):
            normalized = part
        if normalized is None:
            raise InvalidPreferenceError("excluded_time_ranges", value, "HH:MM or h:mmAM/PM")
        bounds.append(normalized)

    if not bounds[0] < bounds[1]:
        raise InvalidPreferenceError("excluded_time_ranges", value, "start before end")

    return bounds[0], bounds[1]
