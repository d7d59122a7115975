"""Exhaustive ("full coverage") schedule search."""

import logging
from collections.abc import Iterator

from ..config import Preferences
from ..models import Course, CoursesBySubject
from .conflicts import conflicts_with_any
from .constants import SMALL_N_THRESHOLD_PARTIAL
from .constraints import exceeds_max_gap, exceeds_max_units
from .models import ScheduleGenerationResult, ScheduleScore
from .scoring import score_schedule

logger = logging.getLogger(__name__)


def iter_conflict_free_combinations(courses_by_subject: CoursesBySubject) -> Iterator[list[Course]]:
    """Lazily enumerate every conflict-free combination of sections.

    Covers every subset of subjects (the empty one included) combined with
    every choice of one section per included subject. Branches are cut as
    soon as a section conflicts with the sections already chosen, so
    conflicting combinations are never produced. For each subject the
    sections are tried in input order before the subject is skipped, which
    keeps the enumeration order deterministic.

    Args:
        courses_by_subject: Candidate sections per subject

    Yields:
        Lists of courses, at most one per subject
    """
    subjects = list(courses_by_subject)

    def extend(index: int, selected: list[Course]) -> Iterator[list[Course]]:
        if index == len(subjects):
            yield list(selected)
            return

        for course in courses_by_subject[subjects[index]]:
            if conflicts_with_any(course, selected):
                continue
            selected.append(course)
            yield from extend(index + 1, selected)
            selected.pop()

        # Leave this subject out
        yield from extend(index + 1, selected)

    yield from extend(0, [])


def generate_exhaustive_best_schedule(
    courses_by_subject: CoursesBySubject, preferences: Preferences
) -> ScheduleGenerationResult:
    """Find the best schedule by trying every combination.

    Feasible combinations are ranked by score (courses * 100 + units), then
    by lowest time preference score, then by fewest campus days when
    minimizing them. The first combination found wins exact ties, so
    repeated calls on the same input return the same schedule.

    Runtime is exponential in the number of subjects.

    Args:
        courses_by_subject: Candidate sections per subject
        preferences: Constraints and ranking preferences

    Returns:
        ScheduleGenerationResult; empty with score 0 if nothing fits
    """
    subject_count = len(courses_by_subject)
    if subject_count > SMALL_N_THRESHOLD_PARTIAL:
        logger.warning(
            f"Exhaustive search over {subject_count} subjects may be very slow; "
            "consider partial or fast mode"
        )

    logger.info(f"Starting exhaustive search over {subject_count} subjects")

    best_courses: list[Course] = []
    best_score: ScheduleScore | None = None
    evaluated = 0

    for combination in iter_conflict_free_combinations(courses_by_subject):
        if exceeds_max_units(combination, preferences.max_units):
            continue
        if exceeds_max_gap(combination, preferences.max_gap_hours):
            continue

        evaluated += 1
        score = score_schedule(combination, preferences)
        if score.is_better_than(best_score, preferences.minimize_days_on_campus):
            best_score = score
            best_courses = combination

    logger.info(f"Evaluated {evaluated} feasible combinations")

    if not best_courses:
        return ScheduleGenerationResult.empty()

    return ScheduleGenerationResult.from_score(best_courses, best_score)
