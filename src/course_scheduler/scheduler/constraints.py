"""Hard constraint evaluators and schedule aggregates."""

from collections import defaultdict
from collections.abc import Iterable, Sequence

from ..config import Preferences
from ..constants import NON_CAMPUS_ROOMS
from ..models import Course, DayCode, parse_unit_value
from ..normalization import time_to_hours
from .conflicts import is_schedule_conflict_free, meeting_slots


def total_units(courses: Iterable[Course]) -> float:
    """Sum of credited units; non-numeric values count as 0."""
    return sum(course.unit_value for course in courses)


def unique_subjects(courses: Iterable[Course]) -> int:
    """Number of distinct subjects in a schedule."""
    return len({course.subject for course in courses})


def exceeds_max_units(courses: Sequence[Course], max_units: str | None) -> bool:
    """Check whether the total units go over the cap.

    Args:
        courses: Candidate schedule
        max_units: Cap as a numeric string; "" or None means no cap

    Returns:
        True if the total is strictly greater than the cap
    """
    if not max_units:
        return False

    limit = parse_unit_value(max_units)
    if limit is None:
        return False

    return total_units(courses) > limit


def exceeds_max_gap(courses: Sequence[Course], max_gap_hours: str | None) -> bool:
    """Check whether any same-day gap between meetings is too long.

    For each day, meetings of all courses are sorted by start time and the
    gap between one meeting's end and the next meeting's start is compared
    with the limit. Days with a single meeting have no gap.

    Args:
        courses: Candidate schedule
        max_gap_hours: Limit in hours as a numeric string; "" or None means no limit

    Returns:
        True if some gap is strictly longer than the limit
    """
    if not max_gap_hours:
        return False

    limit = parse_unit_value(max_gap_hours)
    if limit is None:
        return False

    day_meetings: dict[DayCode, list[tuple[str, str]]] = defaultdict(list)
    for course in courses:
        for slot in meeting_slots(course):
            if not slot.has_times:
                continue
            for day in slot.days:
                day_meetings[day].append((slot.start_time, slot.end_time))

    for meetings in day_meetings.values():
        meetings.sort()
        for (_, previous_end), (next_start, _) in zip(meetings, meetings[1:]):
            gap = time_to_hours(next_start) - time_to_hours(previous_end)
            if gap > limit:
                return True

    return False


def count_campus_days(courses: Iterable[Course]) -> int:
    """Count distinct days with at least one on-campus meeting.

    Meetings in rooms named "online" or "TBA" (any case) or without a room
    do not require being on campus.
    """
    campus_days: set[DayCode] = set()
    for course in courses:
        for slot in meeting_slots(course):
            room = (slot.room or "").strip().lower()
            if room not in NON_CAMPUS_ROOMS:
                campus_days.update(slot.days)
    return len(campus_days)


def is_feasible(courses: Sequence[Course], preferences: Preferences) -> bool:
    """Check every hard constraint: no conflicts, units cap and gap limit."""
    return (
        is_schedule_conflict_free(courses)
        and not exceeds_max_units(courses, preferences.max_units)
        and not exceeds_max_gap(courses, preferences.max_gap_hours)
    )
