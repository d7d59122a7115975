"""Greedy heuristic schedule search for large subject counts."""

import logging

from ..config import Preferences
from ..models import Course, CoursesBySubject
from .conflicts import conflicts_with_any
from .constraints import count_campus_days, exceeds_max_gap, exceeds_max_units
from .models import ScheduleGenerationResult
from .scoring import score_schedule, score_schedule_by_time_preference

logger = logging.getLogger(__name__)


def generate_heuristic_schedule(
    courses_by_subject: CoursesBySubject, preferences: Preferences
) -> ScheduleGenerationResult:
    """Build a schedule in one greedy pass over the subjects.

    Subjects are visited in input order. For each subject, the candidates
    that don't conflict with the sections already accepted and keep the
    units cap and gap limit satisfied are compared by time preference score
    (then by campus days when minimizing them, then by input order), and the
    best one is accepted. A subject with no such candidate is skipped. There
    is no backtracking.

    Args:
        courses_by_subject: Candidate sections per subject
        preferences: Constraints and ranking preferences

    Returns:
        ScheduleGenerationResult; empty with score 0 if nothing fits
    """
    logger.info(f"Starting heuristic search over {len(courses_by_subject)} subjects")

    order = preferences.preferred_time_of_day_order
    selected: list[Course] = []

    for subject, candidates in courses_by_subject.items():
        best_candidate: Course | None = None
        best_key: tuple[int, int, int] | None = None

        for index, candidate in enumerate(candidates):
            if conflicts_with_any(candidate, selected):
                continue

            trial = [*selected, candidate]
            if exceeds_max_units(trial, preferences.max_units):
                continue
            if exceeds_max_gap(trial, preferences.max_gap_hours):
                continue

            key = (
                score_schedule_by_time_preference([candidate], order),
                count_campus_days(trial) if preferences.minimize_days_on_campus else 0,
                index,
            )
            if best_key is None or key < best_key:
                best_candidate = candidate
                best_key = key

        if best_candidate is None:
            logger.debug(f"No feasible section for subject '{subject}', skipping")
            continue

        selected.append(best_candidate)

    logger.info(f"Heuristic search selected {len(selected)} of {len(courses_by_subject)} subjects")

    if not selected:
        return ScheduleGenerationResult.empty()

    return ScheduleGenerationResult.from_score(selected, score_schedule(selected, preferences))
