"""Randomized ("fast") schedule search."""

import logging
import random

from ..config import Preferences
from ..models import Course, CoursesBySubject
from .conflicts import conflicts_with_any
from .constants import FAST_MAX_ATTEMPTS
from .constraints import is_feasible
from .models import ScheduleGenerationResult, ScheduleScore
from .scoring import score_schedule
from .session import GenerationSession, combination_key

logger = logging.getLogger(__name__)


def _random_greedy_attempt(
    courses_by_subject: CoursesBySubject, rng: random.Random
) -> list[Course]:
    """Pick the first non-conflicting section of each shuffled subject."""
    selected: list[Course] = []
    for candidates in courses_by_subject.values():
        shuffled = list(candidates)
        rng.shuffle(shuffled)
        for course in shuffled:
            if not conflicts_with_any(course, selected):
                selected.append(course)
                break
    return selected


def generate_fast_schedule(
    courses_by_subject: CoursesBySubject,
    preferences: Preferences,
    session: GenerationSession,
    rng: random.Random | None = None,
    max_attempts: int = FAST_MAX_ATTEMPTS,
) -> ScheduleGenerationResult:
    """Find a good schedule by random sampling.

    Each attempt shuffles every subject's sections and greedily accepts the
    first one that doesn't conflict with the attempt so far. Attempts that
    break a hard constraint, or whose combination the session has already
    tried, are discarded. The rest are ranked like the exhaustive search.
    Sampling stops early once an attempt covers every subject.

    Args:
        courses_by_subject: Candidate sections per subject
        preferences: Constraints and ranking preferences
        session: Caller-owned session; tried combinations are recorded in it
        rng: Random source; pass a seeded Random for reproducible results
        max_attempts: Number of random attempts

    Returns:
        ScheduleGenerationResult; empty with score 0 if nothing new fits
    """
    rng = rng or random.Random()
    subject_count = len(courses_by_subject)

    logger.info(f"Starting fast search over {subject_count} subjects ({max_attempts} attempts)")

    best_courses: list[Course] = []
    best_score: ScheduleScore | None = None
    attempts = 0

    for attempts in range(1, max_attempts + 1):
        attempt = _random_greedy_attempt(courses_by_subject, rng)
        if not attempt:
            continue
        if not is_feasible(attempt, preferences):
            continue

        key = combination_key(attempt)
        if session.has_tried(key):
            continue
        session.mark_tried(key)

        score = score_schedule(attempt, preferences)
        if score.is_better_than(best_score, preferences.minimize_days_on_campus):
            best_score = score
            best_courses = attempt

        if len(best_courses) == subject_count:
            break

    logger.info(
        f"Fast search finished after {attempts} attempts with "
        f"{len(best_courses)} of {subject_count} subjects"
    )

    if not best_courses:
        return ScheduleGenerationResult.empty()

    return ScheduleGenerationResult.from_score(best_courses, best_score)
