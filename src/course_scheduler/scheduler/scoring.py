"""Time-of-day preference scoring and schedule ranking."""

from collections.abc import Sequence

from ..config import Preferences
from ..models import Course, TimeOfDayBucket
from .constants import AFTERNOON_START, EVENING_START, SCORE_PER_COURSE
from .conflicts import meeting_slots
from .constraints import count_campus_days, total_units
from .models import ScheduleScore


def get_time_of_day_bucket(time: str | None) -> TimeOfDayBucket:
    """Classify an "HH:MM" start time.

    - None or empty: any
    - before 12:00: morning
    - 12:00 to 16:59: afternoon
    - 17:00 and later: evening
    """
    if not time:
        return TimeOfDayBucket.ANY
    if time < AFTERNOON_START:
        return TimeOfDayBucket.MORNING
    if time < EVENING_START:
        return TimeOfDayBucket.AFTERNOON
    return TimeOfDayBucket.EVENING


def score_schedule_by_time_preference(
    courses: Sequence[Course], order: Sequence[TimeOfDayBucket]
) -> int:
    """Score how well meeting start times match the preferred order.

    Each meeting slot adds the position of its start-time bucket in `order`;
    buckets missing from `order` add nothing. A slot shared by several days
    counts once. Lower is better.
    """
    if not order:
        return 0

    positions = {TimeOfDayBucket(bucket): index for index, bucket in enumerate(order)}
    score = 0
    for course in courses:
        for slot in meeting_slots(course):
            score += positions.get(get_time_of_day_bucket(slot.start_time), 0)
    return score


def score_schedule(courses: Sequence[Course], preferences: Preferences) -> ScheduleScore:
    """Compute the ranking components of a feasible schedule.

    Campus days are only counted when the preferences ask to minimize them.
    """
    return ScheduleScore(
        score=len(courses) * SCORE_PER_COURSE + total_units(courses),
        time_pref_score=score_schedule_by_time_preference(
            courses, preferences.preferred_time_of_day_order
        ),
        campus_days=count_campus_days(courses) if preferences.minimize_days_on_campus else 0,
    )
