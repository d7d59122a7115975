"""Normalization of the day, time and room fragments of schedule strings."""

import re

from .constants import (
    DAY_CODE_PATTERN,
    DAY_NAME_ALIASES,
    DAY_TOKEN_PATTERN,
    ROOM_PREFIX_PATTERN,
    TIME_12H_PATTERN,
)
from .models import DayCode


def normalize_time_12h(value: str) -> str | None:
    """Convert a 12-hour boundary to zero-padded 24-hour form.

    Examples: "9:00AM" -> "09:00", "12:30PM" -> "12:30", "12:00AM" -> "00:00".

    Args:
        value: Boundary text such as "9:00AM" or "1:30 pm"

    Returns:
        "HH:MM" string, or None if the value is not a valid 12-hour time
    """
    if not isinstance(value, str):
        return None

    match = re.match(TIME_12H_PATTERN, value.strip())
    if not match:
        return None

    hour = int(match.group(1))
    minute = int(match.group(2))
    meridiem = match.group(3).upper()

    if not 1 <= hour <= 12 or minute > 59:
        return None

    if meridiem == "AM":
        hour = 0 if hour == 12 else hour
    else:
        hour = 12 if hour == 12 else hour + 12

    return f"{hour:02d}:{minute:02d}"


def parse_day_token(token: str) -> frozenset[DayCode] | None:
    """Expand one day token into day codes.

    A token is either a run of compact codes ("M", "MWF", "TTH", "SU") or a
    spelled-out name ("Mon", "Thu"). Matching is case-insensitive.

    Args:
        token: A single "/"-separated day token

    Returns:
        Set of day codes, or None if the token is not a day token
    """
    cleaned = token.strip().upper()
    if not cleaned:
        return None

    if cleaned in DAY_NAME_ALIASES:
        return frozenset({DayCode(DAY_NAME_ALIASES[cleaned])})

    if not re.fullmatch(DAY_TOKEN_PATTERN, cleaned):
        return None

    return frozenset(DayCode(code) for code in re.findall(DAY_CODE_PATTERN, cleaned))


def normalize_room(room: str | None) -> str | None:
    """Clean up a room fragment.

    Strips the "Room#" prefix some catalogs use and collapses whitespace.

    Args:
        room: Raw room text

    Returns:
        Cleaned room name, or None if nothing is left
    """
    if not room:
        return None

    cleaned = re.sub(ROOM_PREFIX_PATTERN, "", room.strip(), flags=re.IGNORECASE)
    cleaned = " ".join(cleaned.split())

    return cleaned or None


def time_to_hours(value: str) -> float:
    """Convert "HH:MM" to fractional hours (e.g. "13:30" -> 13.5)."""
    hours, minutes = value.split(":")
    return int(hours) + int(minutes) / 60
