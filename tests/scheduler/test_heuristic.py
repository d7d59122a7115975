"""Tests for the greedy heuristic search."""

from course_scheduler.config import Preferences
from course_scheduler.models import TimeOfDayBucket
from course_scheduler.scheduler.conflicts import is_schedule_conflict_free
from course_scheduler.scheduler.heuristic import generate_heuristic_schedule


class TestGenerateHeuristicSchedule:
    """Tests for generate_heuristic_schedule function."""

    def test_it_scenario(self, it_courses_by_subject):
        result = generate_heuristic_schedule(it_courses_by_subject, Preferences())

        assert [course.id for course in result.best_schedule] == ["1", "3"]
        assert result.best_score == 206

    def test_prefers_time_of_day(self, make_course):
        grouped = {
            "A": [
                make_course("1", "A", "M | 9:00AM-10:00AM | R1"),
                make_course("2", "A", "M | 6:00PM-7:00PM | R1"),
            ]
        }
        evening_first = Preferences(
            preferred_time_of_day_order=(TimeOfDayBucket.EVENING, TimeOfDayBucket.MORNING)
        )

        assert generate_heuristic_schedule(grouped, Preferences()).best_schedule[0].id == "1"
        assert generate_heuristic_schedule(grouped, evening_first).best_schedule[0].id == "2"

    def test_input_order_breaks_ties(self, make_course):
        grouped = {
            "A": [
                make_course("1", "A", "T | 9:00AM-10:00AM | R1"),
                make_course("2", "A", "M | 9:00AM-10:00AM | R1"),
            ]
        }

        assert generate_heuristic_schedule(grouped, Preferences()).best_schedule[0].id == "1"

    def test_minimize_days_prefers_existing_days(self, make_course):
        grouped = {
            "A": [make_course("1", "A", "M | 8:00AM-9:00AM | R1")],
            "B": [
                make_course("2", "B", "T | 9:00AM-10:00AM | R1"),
                make_course("3", "B", "M | 9:00AM-10:00AM | R1"),
            ],
        }

        result = generate_heuristic_schedule(grouped, Preferences(minimize_days_on_campus=True))

        assert [c.id for c in result.best_schedule] == ["1", "3"]
        assert result.best_campus_days == 1

    def test_skips_subject_without_fit(self, make_course):
        grouped = {
            "A": [make_course("1", "A", "M | 9:00AM-10:00AM | R1")],
            "B": [make_course("2", "B", "M | 9:30AM-10:30AM | R1")],
            "C": [make_course("3", "C", "W | 9:00AM-10:00AM | R1")],
        }

        result = generate_heuristic_schedule(grouped, Preferences())

        assert [c.id for c in result.best_schedule] == ["1", "3"]

    def test_respects_units_cap(self, make_course):
        grouped = {
            "A": [make_course("1", "A", "M | 9:00AM-10:00AM | R1", units="3")],
            "B": [
                make_course("2", "B", "T | 9:00AM-10:00AM | R1", units="4"),
                make_course("3", "B", "W | 1:00PM-2:00PM | R1", units="2"),
            ],
        }

        result = generate_heuristic_schedule(grouped, Preferences(max_units="5"))

        assert [c.id for c in result.best_schedule] == ["1", "3"]

    def test_respects_gap_limit(self, make_course):
        grouped = {
            "A": [make_course("1", "A", "M | 8:00AM-9:00AM | R1")],
            "B": [make_course("2", "B", "M | 5:00PM-6:00PM | R1")],
        }

        result = generate_heuristic_schedule(grouped, Preferences(max_gap_hours="3"))

        assert [c.id for c in result.best_schedule] == ["1"]

    def test_nothing_fits(self, it_courses_by_subject):
        result = generate_heuristic_schedule(it_courses_by_subject, Preferences(max_units="1"))

        assert result.is_empty
        assert result.best_score == 0

    def test_many_subjects(self, make_course):
        days = ["M", "T", "W", "TH", "F"]

        def schedule(i, j):
            hour = 7 + i % 5
            return f"{days[(i + j) % 5]} | {hour}:00AM-{hour}:50AM | R{j}"

        grouped = {
            f"S{i}": [make_course(f"{i}-{j}", f"S{i}", schedule(i, j)) for j in range(3)]
            for i in range(30)
        }

        result = generate_heuristic_schedule(grouped, Preferences())

        assert is_schedule_conflict_free(result.best_schedule)
        subjects = [course.subject for course in result.best_schedule]
        assert len(subjects) == len(set(subjects))
        assert len(subjects) > 0
