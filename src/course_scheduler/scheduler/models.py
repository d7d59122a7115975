"""Data models for schedule generation results."""

from dataclasses import dataclass, field
from typing import Any, Self

from ..models import Course


@dataclass(frozen=True)
class ScheduleScore:
    """Ranking components of a candidate schedule.

    Attributes:
        score: courses * 100 + total units (higher is better)
        time_pref_score: Time-of-day preference score (lower is better)
        campus_days: Distinct campus days (lower is better when minimizing)
    """

    score: float
    time_pref_score: int
    campus_days: int

    def is_better_than(self, other: "ScheduleScore | None", minimize_days: bool) -> bool:
        """Check whether this score strictly outranks another.

        Order: higher score, then lower time preference score, then (only
        when minimizing campus days) fewer campus days. Equal scores are not
        better, so the first candidate found wins ties.
        """
        if other is None:
            return True
        if self.score != other.score:
            return self.score > other.score
        if self.time_pref_score != other.time_pref_score:
            return self.time_pref_score < other.time_pref_score
        if minimize_days:
            return self.campus_days < other.campus_days
        return False


@dataclass
class ScheduleGenerationResult:
    """Best schedule found by a search strategy.

    Attributes:
        best_schedule: Selected courses, at most one per subject
        best_score: courses * 100 + total units; 0 when nothing was found
        best_time_pref_score: Time preference score of the schedule
        best_campus_days: Campus days of the schedule (0 unless minimizing)
    """

    best_schedule: list[Course] = field(default_factory=list)
    best_score: float = 0
    best_time_pref_score: int = 0
    best_campus_days: int = 0

    @classmethod
    def empty(cls) -> Self:
        """Result for when no feasible non-empty schedule exists."""
        return cls()

    @classmethod
    def from_score(cls, courses: list[Course], score: ScheduleScore) -> Self:
        return cls(
            best_schedule=list(courses),
            best_score=score.score,
            best_time_pref_score=score.time_pref_score,
            best_campus_days=score.campus_days,
        )

    @property
    def is_empty(self) -> bool:
        """True if no course was selected."""
        return not self.best_schedule

    @property
    def course_ids(self) -> list[str]:
        return [course.id for course in self.best_schedule]

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "best_score": self.best_score,
            "best_time_pref_score": self.best_time_pref_score,
            "best_campus_days": self.best_campus_days,
            "best_schedule": [course.to_dict() for course in self.best_schedule],
        }
