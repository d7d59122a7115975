"""Schedule generation engine.

Builds conflict-free selections of course sections (at most one section per
subject) that respect the units cap and same-day gap limit, ranked by number
of courses and units, time-of-day preference and campus days.

Main entry points:
- generate_schedule: Runs the strategy selected in the preferences
- ScheduleGenerator: Keeps a GenerationSession between calls
- generate_exhaustive_best_schedule, generate_heuristic_schedule,
  generate_fast_schedule: The individual strategies

Usage:
    from course_scheduler.scheduler import ScheduleGenerator

    generator = ScheduleGenerator(preferences)
    result = generator.generate(courses_by_subject)
"""

from .conflicts import (
    check_time_overlap,
    courses_conflict,
    find_conflicting_courses,
    find_conflicts,
    is_schedule_conflict_free,
)
from .constants import FAST_MAX_ATTEMPTS, SCORE_PER_COURSE, SMALL_N_THRESHOLD_PARTIAL
from .constraints import (
    count_campus_days,
    exceeds_max_gap,
    exceeds_max_units,
    is_feasible,
    total_units,
    unique_subjects,
)
from .exhaustive import generate_exhaustive_best_schedule
from .fast import generate_fast_schedule
from .heuristic import generate_heuristic_schedule
from .models import ScheduleGenerationResult, ScheduleScore
from .scheduler import (
    ScheduleGenerator,
    generate_best_partial_schedule,
    generate_partial_schedule,
    generate_schedule,
)
from .scoring import get_time_of_day_bucket, score_schedule, score_schedule_by_time_preference
from .session import GenerationSession, combination_key

__all__ = [
    # Dispatch
    "ScheduleGenerator",
    "generate_schedule",
    "generate_partial_schedule",
    "generate_best_partial_schedule",
    # Strategies
    "generate_exhaustive_best_schedule",
    "generate_heuristic_schedule",
    "generate_fast_schedule",
    # Session
    "GenerationSession",
    "combination_key",
    # Models
    "ScheduleGenerationResult",
    "ScheduleScore",
    # Conflicts
    "check_time_overlap",
    "courses_conflict",
    "find_conflicting_courses",
    "find_conflicts",
    "is_schedule_conflict_free",
    # Constraints
    "count_campus_days",
    "exceeds_max_gap",
    "exceeds_max_units",
    "is_feasible",
    "total_units",
    "unique_subjects",
    # Scoring
    "get_time_of_day_bucket",
    "score_schedule",
    "score_schedule_by_time_preference",
    # Constants
    "FAST_MAX_ATTEMPTS",
    "SCORE_PER_COURSE",
    "SMALL_N_THRESHOLD_PARTIAL",
]
