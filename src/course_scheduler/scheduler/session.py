"""Caller-owned state shared by successive generation calls."""

from collections.abc import Iterable
from dataclasses import dataclass, field

from ..models import Course


def combination_key(courses: Iterable[Course]) -> str:
    """Order-independent signature of a set of courses (sorted ids)."""
    return ",".join(sorted(course.id for course in courses))


@dataclass
class GenerationSession:
    """State of one interactive generation session.

    Independent sessions never share state. The fast strategy records every
    combination it has scored in `tried_combinations`, so later calls with
    the same session never return an identical combination again.

    Attributes:
        tried_combinations: Signatures already produced by the fast strategy
        generated_schedules: Course key lists of schedules shown to the user
        current_index: Index of the schedule currently shown
        generated_count: Number of successful generation calls
    """

    tried_combinations: set[str] = field(default_factory=set)
    generated_schedules: list[list[str]] = field(default_factory=list)
    current_index: int = 0
    generated_count: int = 0

    def has_tried(self, key: str) -> bool:
        return key in self.tried_combinations

    def mark_tried(self, key: str) -> None:
        self.tried_combinations.add(key)

    def add_generated_schedule(self, courses: Iterable[Course]) -> int:
        """Record a generated schedule and make it the current one.

        An identical schedule already in the history is re-selected instead
        of being added twice.

        Returns:
            Index of the schedule in the history
        """
        keys = [course.key for course in courses]
        self.generated_count += 1

        if keys in self.generated_schedules:
            self.current_index = self.generated_schedules.index(keys)
        else:
            self.generated_schedules.append(keys)
            self.current_index = len(self.generated_schedules) - 1

        return self.current_index

    def current_schedule(self) -> list[str] | None:
        """Course keys of the current schedule, or None if there is none."""
        if not self.generated_schedules:
            return None
        return self.generated_schedules[self.current_index]

    def next_schedule(self) -> list[str] | None:
        """Move to the next schedule, wrapping around."""
        if not self.generated_schedules:
            return None
        self.current_index = (self.current_index + 1) % len(self.generated_schedules)
        return self.current_schedule()

    def previous_schedule(self) -> list[str] | None:
        """Move to the previous schedule, wrapping around."""
        if not self.generated_schedules:
            return None
        self.current_index = (self.current_index - 1) % len(self.generated_schedules)
        return self.current_schedule()

    def clear(self) -> None:
        """Forget every generated schedule and tried combination."""
        self.tried_combinations.clear()
        self.generated_schedules.clear()
        self.current_index = 0
        self.generated_count = 0
