"""Tests for time conflict detection."""

import pytest

from course_scheduler.scheduler.conflicts import (
    check_time_overlap,
    conflicts_with_any,
    courses_conflict,
    find_conflicting_courses,
    find_conflicts,
    is_schedule_conflict_free,
    meeting_slots,
)


class TestCheckTimeOverlap:
    """Tests for check_time_overlap function."""

    @pytest.mark.parametrize(
        "a, b, c, d, expected",
        [
            ("09:00", "10:00", "09:30", "10:30", True),
            ("09:00", "12:00", "10:00", "11:00", True),
            ("09:00", "10:00", "10:00", "11:00", False),
            ("09:00", "10:00", "13:00", "14:00", False),
            ("09:00", "10:00", "09:00", "10:00", True),
        ],
    )
    def test_overlap_is_symmetric(self, a, b, c, d, expected):
        assert check_time_overlap(a, b, c, d) is expected
        assert check_time_overlap(c, d, a, b) is expected

    @pytest.mark.parametrize(
        "start, middle, end",
        [("08:00", "09:00", "10:00"), ("00:00", "12:00", "23:59"), ("13:15", "13:16", "13:17")],
    )
    def test_shared_boundary_never_overlaps(self, start, middle, end):
        assert not check_time_overlap(start, middle, middle, end)

    @pytest.mark.parametrize(
        "args",
        [
            ("9:00", "10:00", "09:30", "10:30"),
            ("09:00AM", "10:00", "09:30", "10:30"),
            (None, "10:00", "09:30", "10:30"),
            ("09:00", "10:00", "", "10:30"),
        ],
    )
    def test_invalid_arguments(self, args):
        assert check_time_overlap(*args) is False


class TestCoursesConflict:
    """Tests for pairwise course conflicts."""

    def test_overlap_on_shared_day(self, make_course):
        a = make_course("1", "A", "M/W | 9:00AM-10:30AM | R1")
        b = make_course("2", "B", "W | 10:00AM-11:00AM | R2")

        assert courses_conflict(a, b)
        assert courses_conflict(b, a)

    def test_same_time_different_days(self, make_course):
        a = make_course("1", "A", "M/W | 9:00AM-10:30AM | R1")
        b = make_course("2", "B", "T/TH | 9:00AM-10:30AM | R2")

        assert not courses_conflict(a, b)

    def test_back_to_back(self, make_course):
        a = make_course("1", "A", "M | 9:00AM-10:00AM | R1")
        b = make_course("2", "B", "M | 10:00AM-11:00AM | R1")

        assert not courses_conflict(a, b)

    def test_second_slot_conflicts(self, make_course):
        hybrid = make_course("1", "A", "M | 9:00AM-10:00AM | R1 + F | 1:00PM-3:00PM | R1")
        friday = make_course("2", "B", "F | 2:00PM-4:00PM | R2")

        assert courses_conflict(hybrid, friday)

    @pytest.mark.parametrize("schedule", ["TBA", "", "whenever"])
    def test_schedule_agnostic_courses(self, make_course, schedule):
        agnostic = make_course("1", "A", schedule)
        busy = make_course("2", "B", "M/T/W/TH/F/S/SU | 12:00AM-11:59PM | R1")

        assert meeting_slots(agnostic) == ()
        assert not courses_conflict(agnostic, busy)
        assert not courses_conflict(busy, agnostic)

    def test_conflicts_with_any(self, make_course):
        selected = [
            make_course("1", "A", "M | 9:00AM-10:00AM | R1"),
            make_course("2", "B", "T | 9:00AM-10:00AM | R1"),
        ]

        assert conflicts_with_any(make_course("3", "C", "T | 9:30AM-11:00AM | R1"), selected)
        assert not conflicts_with_any(make_course("4", "D", "W | 9:30AM-11:00AM | R1"), selected)
        assert not conflicts_with_any(make_course("5", "E", "TBA"), selected)


class TestIsScheduleConflictFree:
    """Tests for is_schedule_conflict_free function."""

    def test_empty_and_single(self, make_course):
        assert is_schedule_conflict_free([])
        assert is_schedule_conflict_free([make_course("1", "A", "M | 9:00AM-10:00AM | R1")])

    def test_conflicting_pair_anywhere(self, make_course):
        courses = [
            make_course("1", "A", "M | 9:00AM-10:00AM | R1"),
            make_course("2", "B", "T | 9:00AM-10:00AM | R1"),
            make_course("3", "C", "T | 9:59AM-11:00AM | R1"),
        ]

        assert not is_schedule_conflict_free(courses)
        assert is_schedule_conflict_free(courses[:2])


class TestConflictReporting:
    """Tests for find_conflicting_courses and find_conflicts."""

    def test_find_conflicting_courses_skips_itself(self, make_course):
        course = make_course("1", "A", "M | 9:00AM-10:00AM | R1")
        clash = make_course("2", "B", "M | 9:30AM-10:30AM | R1")
        free = make_course("3", "C", "M | 10:30AM-11:30AM | R1")

        assert find_conflicting_courses(course, [course, clash, free]) == [clash]

    def test_find_conflicts(self, make_course):
        a = make_course("1", "A", "M | 9:00AM-10:00AM | R1")
        b = make_course("2", "B", "M | 9:30AM-10:30AM | R1")
        c = make_course("3", "C", "M | 10:15AM-11:00AM | R1")

        assert find_conflicts([a, b, c]) == [(a, b), (b, c)]
