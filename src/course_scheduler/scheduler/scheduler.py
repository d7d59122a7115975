"""Strategy dispatch for schedule generation."""

import logging
import random

from ..config import Preferences
from ..models import Course, CoursesBySubject, SearchMode
from .constants import SMALL_N_THRESHOLD_PARTIAL
from .exhaustive import generate_exhaustive_best_schedule
from .fast import generate_fast_schedule
from .heuristic import generate_heuristic_schedule
from .models import ScheduleGenerationResult
from .session import GenerationSession

logger = logging.getLogger(__name__)


def generate_partial_schedule(
    courses_by_subject: CoursesBySubject, preferences: Preferences
) -> ScheduleGenerationResult:
    """Use exhaustive search for small inputs and the heuristic otherwise.

    Exhaustive search is used up to SMALL_N_THRESHOLD_PARTIAL subjects.
    """
    if len(courses_by_subject) <= SMALL_N_THRESHOLD_PARTIAL:
        return generate_exhaustive_best_schedule(courses_by_subject, preferences)
    return generate_heuristic_schedule(courses_by_subject, preferences)


def generate_best_partial_schedule(
    courses: list[Course], preferences: Preferences | None = None
) -> list[Course]:
    """Flat-list convenience wrapper around generate_partial_schedule.

    Args:
        courses: Candidate sections of any subjects

    Returns:
        Selected courses; empty if nothing fits
    """
    from ..filters import group_courses_by_subject

    if not courses:
        return []
    result = generate_partial_schedule(
        group_courses_by_subject(courses), preferences or Preferences()
    )
    return result.best_schedule


def generate_schedule(
    courses_by_subject: CoursesBySubject,
    preferences: Preferences | None = None,
    session: GenerationSession | None = None,
    rng: random.Random | None = None,
) -> ScheduleGenerationResult:
    """Run the search strategy selected in the preferences.

    Args:
        courses_by_subject: Candidate sections per subject
        preferences: Constraints, ranking and search mode; defaults apply if None
        session: Session for fast mode deduplication; a throwaway session is
            used if None
        rng: Random source for fast mode

    Returns:
        ScheduleGenerationResult
    """
    preferences = preferences or Preferences()

    if preferences.search_mode == SearchMode.EXHAUSTIVE:
        return generate_exhaustive_best_schedule(courses_by_subject, preferences)

    if preferences.search_mode == SearchMode.FAST:
        return generate_fast_schedule(
            courses_by_subject,
            preferences,
            session if session is not None else GenerationSession(),
            rng=rng,
        )

    return generate_partial_schedule(courses_by_subject, preferences)


class ScheduleGenerator:
    """Generates schedules for one user session.

    Keeps the session (fast mode deduplication and schedule history) and the
    random source between calls.
    """

    def __init__(
        self,
        preferences: Preferences | None = None,
        session: GenerationSession | None = None,
        seed: int | None = None,
    ):
        """
        Initialize the generator.

        Args:
            preferences: Constraints, ranking and search mode
            session: Existing session to continue; a new one is created if None
            seed: Seed for reproducible fast mode results
        """
        self.preferences = preferences or Preferences()
        self.session = session if session is not None else GenerationSession()
        self.rng = random.Random(seed)

    def generate(self, courses_by_subject: CoursesBySubject) -> ScheduleGenerationResult:
        """Generate a schedule and record it in the session history."""
        result = generate_schedule(
            courses_by_subject, self.preferences, session=self.session, rng=self.rng
        )

        if result.is_empty:
            logger.warning("Could not build a schedule with the current constraints")
        else:
            self.session.add_generated_schedule(result.best_schedule)

        return result
