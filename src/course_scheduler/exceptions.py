"""Custom exceptions for the course scheduler."""


class SchedulerError(Exception):
    """Base exception for course scheduler errors."""

    pass


class ScheduleParseError(SchedulerError):
    """Schedule string could not be parsed."""

    def __init__(self, raw: str, reason: str):
        self.raw = raw
        self.reason = reason
        super().__init__(f"Cannot parse schedule '{raw}': {reason}")


class AmbiguousScheduleError(ScheduleParseError):
    """Day and time tokens of a slot group cannot be paired."""

    def __init__(self, raw: str, day_count: int, time_count: int):
        self.day_count = day_count
        self.time_count = time_count
        super().__init__(
            raw,
            f"cannot pair {day_count} day token(s) with {time_count} time range(s)",
        )


class InvalidPreferenceError(SchedulerError):
    """Preference value failed validation."""

    def __init__(self, field: str, value: object, expected: str | None = None):
        self.field = field
        self.value = value
        message = f"Invalid value for '{field}': {value!r}"
        if expected:
            message += f". Expected {expected}"
        super().__init__(message)


class CatalogLoadError(SchedulerError):
    """Course catalog file could not be loaded."""

    def __init__(self, path: str, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to load catalog '{path}': {reason}")
