"""Data models for course sections and parsed meeting schedules."""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Any, Self

from .constants import SECTION_TYPE_SUFFIXES, TBA_MARKER

if TYPE_CHECKING:
    from collections.abc import Iterable


class DayCode(str, Enum):
    """Day of the week as written in catalog schedules."""

    MONDAY = "M"
    TUESDAY = "T"
    WEDNESDAY = "W"
    THURSDAY = "TH"
    FRIDAY = "F"
    SATURDAY = "S"
    SUNDAY = "SU"

    @property
    def order(self) -> int:
        """Position of the day within the week (Monday = 0)."""
        return DAY_ORDER.index(self)


DAY_ORDER = [
    DayCode.MONDAY,
    DayCode.TUESDAY,
    DayCode.WEDNESDAY,
    DayCode.THURSDAY,
    DayCode.FRIDAY,
    DayCode.SATURDAY,
    DayCode.SUNDAY,
]


def sort_days(days: "Iterable[DayCode]") -> list[DayCode]:
    """Sort day codes in week order and drop duplicates."""
    return sorted(set(days), key=lambda day: day.order)


class TimeOfDayBucket(str, Enum):
    """Coarse time-of-day classification of a meeting start time."""

    MORNING = "morning"
    AFTERNOON = "afternoon"
    EVENING = "evening"
    ANY = "any"


class SearchMode(str, Enum):
    """Schedule search strategy selected by the user."""

    EXHAUSTIVE = "exhaustive"
    PARTIAL = "partial"
    FAST = "fast"


class StatusFilter(str, Enum):
    """Which sections to consider by open/closed status."""

    ALL = "all"
    OPEN = "open"
    CLOSED = "closed"


@dataclass(frozen=True)
class TimeSlot:
    """One contiguous meeting: a set of days, a time range and a room.

    Attributes:
        days: Non-empty set of days the meeting occurs on
        start_time: Start in 24-hour "HH:MM" form, or None
        end_time: End in 24-hour "HH:MM" form, or None
        room: Room name, or None when unknown
    """

    days: frozenset[DayCode]
    start_time: str | None = None
    end_time: str | None = None
    room: str | None = None

    def __post_init__(self) -> None:
        if not self.days:
            raise ValueError("TimeSlot requires at least one day")
        if self.start_time and self.end_time and not self.start_time < self.end_time:
            raise ValueError(
                f"TimeSlot start {self.start_time} must be before end {self.end_time}"
            )

    @property
    def sorted_days(self) -> list[DayCode]:
        """Days in week order."""
        return sort_days(self.days)

    @property
    def has_times(self) -> bool:
        """True if both boundaries are known."""
        return bool(self.start_time and self.end_time)

    def shares_day_with(self, other: "TimeSlot") -> bool:
        """Check whether two slots meet on at least one common day."""
        return not self.days.isdisjoint(other.days)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "days": [day.value for day in self.sorted_days],
            "start_time": self.start_time,
            "end_time": self.end_time,
            "room": self.room,
        }


class ParsedSchedule(ABC):
    """Common accessors of the parsed schedule variants.

    A parsed schedule is exactly one of TBASchedule, SingleSlotSchedule or
    MultiSlotSchedule. The single-slot style accessors (days, start_time,
    end_time) are derived from the slots rather than stored.
    """

    is_tba: bool = False
    raw_schedule_string: str

    @property
    @abstractmethod
    def all_time_slots(self) -> tuple[TimeSlot, ...]:
        pass

    @property
    def days(self) -> list[DayCode]:
        """Union of the days of every slot, in week order."""
        return sort_days(day for slot in self.all_time_slots for day in slot.days)

    @property
    def representative_days(self) -> list[DayCode]:
        return self.days

    @property
    def start_time(self) -> str | None:
        """Start time of the first slot."""
        slots = self.all_time_slots
        return slots[0].start_time if slots else None

    @property
    def end_time(self) -> str | None:
        """End time of the first slot."""
        slots = self.all_time_slots
        return slots[0].end_time if slots else None

    @property
    def has_meetings(self) -> bool:
        """True if the schedule has at least one fixed meeting."""
        return not self.is_tba and bool(self.all_time_slots)

    @classmethod
    def from_slots(cls, slots: "Iterable[TimeSlot]", raw: str) -> "ParsedSchedule":
        """Build the single- or multi-slot variant for the given slots.

        Raises:
            ValueError: If no slots are given
        """
        slots = tuple(slots)
        if not slots:
            raise ValueError("A parsed schedule needs at least one slot; use TBASchedule")
        if len(slots) == 1:
            return SingleSlotSchedule(slot=slots[0], raw_schedule_string=raw)
        return MultiSlotSchedule(slots=slots, raw_schedule_string=raw)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "is_tba": self.is_tba,
            "raw_schedule_string": self.raw_schedule_string,
            "days": [day.value for day in self.days],
            "start_time": self.start_time,
            "end_time": self.end_time,
            "all_time_slots": [slot.to_dict() for slot in self.all_time_slots],
        }


@dataclass(frozen=True)
class TBASchedule(ParsedSchedule):
    """Section without a fixed meeting time."""

    raw_schedule_string: str = TBA_MARKER
    is_tba = True

    @property
    def all_time_slots(self) -> tuple[TimeSlot, ...]:
        return ()


@dataclass(frozen=True)
class SingleSlotSchedule(ParsedSchedule):
    """Schedule with exactly one meeting slot."""

    slot: TimeSlot
    raw_schedule_string: str = ""

    @property
    def all_time_slots(self) -> tuple[TimeSlot, ...]:
        return (self.slot,)


@dataclass(frozen=True)
class MultiSlotSchedule(ParsedSchedule):
    """Schedule with two or more meeting slots (e.g. hybrid classes)."""

    slots: tuple[TimeSlot, ...]
    raw_schedule_string: str = ""

    def __post_init__(self) -> None:
        if len(self.slots) < 2:
            raise ValueError("MultiSlotSchedule requires at least two slots")

    @property
    def all_time_slots(self) -> tuple[TimeSlot, ...]:
        return self.slots


def parse_unit_value(value: Any) -> float | None:
    """Parse a units value given as a decimal string or number.

    Args:
        value: Units as stored in the catalog ("3", "1.5", 3, None)

    Returns:
        Float value, or None if the value is not numeric
    """
    if value is None or isinstance(value, bool):
        return None
    try:
        number = float(str(value).strip())
    except ValueError:
        return None
    if number != number:  # NaN
        return None
    return number


# camelCase keys produced by the web catalog export
_COURSE_KEY_ALIASES = {
    "subjectTitle": "title",
    "creditedUnits": "credited_units",
    "totalSlots": "total_slots",
    "availableSlots": "available_slots",
    "isClosed": "is_closed",
    "offeringDept": "offering_dept",
}


@dataclass(frozen=True)
class Course:
    """A single section offering of a subject.

    A course is uniquely identified by (id, subject, section). The engine
    treats it as an immutable value and only ever selects subsets of courses.

    Attributes:
        id: Unique identifier of the offering
        subject: Subject code (e.g. "IT 111")
        section: Section name (e.g. "BSIT-1A-AP3")
        title: Full subject title
        schedule: Raw meeting schedule string
        room: Room as listed in the catalog
        units: Units as a decimal string
        credited_units: Credited units, if different from units
        enrolled: Enrolled students
        assessed: Assessed students
        total_slots: Section capacity
        available_slots: Remaining seats (may be zero or negative)
        is_closed: Whether the section is closed
        offering_dept: Department offering the section
    """

    id: str
    subject: str
    section: str = ""
    title: str = ""
    schedule: str = ""
    room: str = ""
    units: str = ""
    credited_units: str | None = None
    enrolled: int = 0
    assessed: int = 0
    total_slots: int = 0
    available_slots: int = 0
    is_closed: bool = False
    offering_dept: str = ""

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Self:
        """Create a Course from a catalog record.

        Accepts snake_case keys as well as the camelCase keys of the web
        catalog export.
        """
        record = {_COURSE_KEY_ALIASES.get(key, key): value for key, value in data.items()}
        credited = record.get("credited_units")
        return cls(
            id=str(record["id"]),
            subject=str(record["subject"]),
            section=str(record.get("section", "") or ""),
            title=str(record.get("title", "") or ""),
            schedule=str(record.get("schedule", "") or ""),
            room=str(record.get("room", "") or ""),
            units=str(record.get("units", "") or ""),
            credited_units=str(credited) if credited not in (None, "") else None,
            enrolled=int(record.get("enrolled", 0) or 0),
            assessed=int(record.get("assessed", 0) or 0),
            total_slots=int(record.get("total_slots", 0) or 0),
            available_slots=int(record.get("available_slots", 0) or 0),
            is_closed=as_bool(record.get("is_closed", False)),
            offering_dept=str(record.get("offering_dept", "") or ""),
        )

    @property
    def key(self) -> str:
        """Compound identity key."""
        return f"{self.id}-{self.subject}-{self.section}"

    @property
    def unit_value(self) -> float:
        """Credited units (falling back to units); 0.0 if not numeric."""
        raw = self.credited_units if self.credited_units is not None else self.units
        value = parse_unit_value(raw)
        return value if value is not None else 0.0

    @property
    def section_type(self) -> str | None:
        """Section type suffix (AP3, AP4, AP5) or None."""
        suffix = self.section.split("-")[-1]
        return suffix if suffix in SECTION_TYPE_SUFFIXES else None

    @property
    def parsed_schedule(self) -> ParsedSchedule | None:
        """Parsed meeting schedule, or None if it cannot be parsed."""
        from .parser import parse_schedule

        return parse_schedule(self.schedule)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "id": self.id,
            "subject": self.subject,
            "section": self.section,
            "title": self.title,
            "schedule": self.schedule,
            "room": self.room,
            "units": self.units,
            "credited_units": self.credited_units,
            "enrolled": self.enrolled,
            "assessed": self.assessed,
            "total_slots": self.total_slots,
            "available_slots": self.available_slots,
            "is_closed": self.is_closed,
            "offering_dept": self.offering_dept,
        }


def as_bool(value: Any) -> bool:
    """Interpret yes/no style catalog and preference flags."""
    if isinstance(value, str):
        return value.strip().lower() in ("yes", "true", "1", "y")
    return bool(value)


CoursesBySubject = dict[str, list[Course]]


@dataclass
class CatalogLoadResult:
    """Courses read from a catalog file.

    Attributes:
        source: Path of the catalog file
        courses: Successfully loaded courses
        warnings: Records that were skipped and why
    """

    source: str
    courses: list[Course] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)

    @property
    def total_courses(self) -> int:
        return len(self.courses)

    @property
    def total_subjects(self) -> int:
        return len({course.subject for course in self.courses})
