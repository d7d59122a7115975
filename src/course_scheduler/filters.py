"""Candidate selection and grouping ahead of schedule generation."""

import logging
from collections.abc import Iterable

from .config import CourseFilter
from .models import Course, CoursesBySubject, StatusFilter
from .scheduler.conflicts import check_time_overlap, meeting_slots

logger = logging.getLogger(__name__)


def _matches_status(course: Course, status: StatusFilter) -> bool:
    if status == StatusFilter.OPEN:
        return not course.is_closed
    if status == StatusFilter.CLOSED:
        return course.is_closed
    return True


def _hits_exclusions(course: Course, course_filter: CourseFilter) -> bool:
    """Check whether any meeting falls on an excluded day or time range.

    TBA and unparseable schedules never hit an exclusion.
    """
    for slot in meeting_slots(course):
        if not slot.days.isdisjoint(course_filter.excluded_days):
            return True
        if not slot.has_times:
            continue
        for range_start, range_end in course_filter.excluded_time_ranges:
            if check_time_overlap(slot.start_time, slot.end_time, range_start, range_end):
                return True
    return False


def filter_courses_for_generation(
    courses: Iterable[Course], course_filter: CourseFilter | None = None
) -> list[Course]:
    """Select the sections eligible for schedule generation.

    Applies, in order: the open/closed status filter, the available seats
    check, the section type filter and the day/time exclusions.

    Args:
        courses: Catalog sections
        course_filter: Filter settings; defaults keep open sections with seats

    Returns:
        Eligible courses in input order
    """
    course_filter = course_filter or CourseFilter()
    eligible: list[Course] = []
    dropped = 0

    for course in courses:
        keep = (
            _matches_status(course, course_filter.status)
            and not (course_filter.require_available_slots and course.available_slots <= 0)
            and not (
                course_filter.section_types
                and course.section_type not in course_filter.section_types
            )
            and not _hits_exclusions(course, course_filter)
        )
        if keep:
            eligible.append(course)
        else:
            dropped += 1

    logger.debug(f"Kept {len(eligible)} candidate sections, dropped {dropped}")
    return eligible


def group_courses_by_subject(courses: Iterable[Course]) -> CoursesBySubject:
    """Group sections by subject code.

    Subjects appear in first-seen order and each subject keeps its sections
    in input order, which keeps the search strategies deterministic.
    """
    grouped: CoursesBySubject = {}
    for course in courses:
        grouped.setdefault(course.subject, []).append(course)
    return grouped
