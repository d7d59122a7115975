"""Time conflict detection between course sections.

Courses whose schedule is TBA, empty or unparseable never conflict with
anything: they are treated as schedule-agnostic.
"""

import re
from collections.abc import Iterable, Sequence

from ..constants import TIME_24H_PATTERN
from ..models import Course, ParsedSchedule, TimeSlot
from ..parser import parse_schedule


def check_time_overlap(start1: str, end1: str, start2: str, end2: str) -> bool:
    """Check whether two "HH:MM" ranges overlap.

    Ranges are half-open, so back-to-back meetings (end1 == start2) do not
    overlap.

    Returns:
        True if the ranges overlap; False if they don't or if any argument
        is not an "HH:MM" string
    """
    for value in (start1, end1, start2, end2):
        if not isinstance(value, str) or not re.match(TIME_24H_PATTERN, value):
            return False
    return start1 < end2 and start2 < end1


def slots_conflict(slot1: TimeSlot, slot2: TimeSlot) -> bool:
    """Check whether two slots share a day and overlap in time."""
    if not slot1.shares_day_with(slot2):
        return False
    if not (slot1.has_times and slot2.has_times):
        return False
    return check_time_overlap(slot1.start_time, slot1.end_time, slot2.start_time, slot2.end_time)


def meeting_slots(course: Course) -> tuple[TimeSlot, ...]:
    """Slots of a course's parsed schedule; empty for TBA or unparseable."""
    parsed: ParsedSchedule | None = parse_schedule(course.schedule)
    if parsed is None or not parsed.has_meetings:
        return ()
    return parsed.all_time_slots


def courses_conflict(course1: Course, course2: Course) -> bool:
    """Check whether any meeting of one course overlaps a meeting of the other."""
    slots1 = meeting_slots(course1)
    if not slots1:
        return False
    slots2 = meeting_slots(course2)
    return any(slots_conflict(a, b) for a in slots1 for b in slots2)


def conflicts_with_any(course: Course, selected: Iterable[Course]) -> bool:
    """Check whether a candidate conflicts with any already selected course."""
    if not meeting_slots(course):
        return False
    return any(courses_conflict(course, other) for other in selected)


def is_schedule_conflict_free(courses: Sequence[Course]) -> bool:
    """Check that no two courses in the set overlap on a shared day.

    Empty and single-course sets are always conflict-free.
    """
    for i in range(len(courses)):
        for j in range(i + 1, len(courses)):
            if courses_conflict(courses[i], courses[j]):
                return False
    return True


def find_conflicting_courses(course: Course, others: Iterable[Course]) -> list[Course]:
    """List the courses in `others` whose meetings overlap `course`.

    The course itself (same key) is skipped.
    """
    return [
        other
        for other in others
        if other.key != course.key and courses_conflict(course, other)
    ]


def find_conflicts(courses: Sequence[Course]) -> list[tuple[Course, Course]]:
    """List every conflicting pair of courses, in input order."""
    return [
        (courses[i], courses[j])
        for i in range(len(courses))
        for j in range(i + 1, len(courses))
        if courses_conflict(courses[i], courses[j])
    ]
