"""Course Scheduler - schedule string parsing and timetable generation.

This module parses the meeting schedule strings of university course
catalogs and builds conflict-free personal timetables from candidate
sections, honoring a units cap, a same-day gap limit and time-of-day
preferences.

Example usage:
    from course_scheduler import (
        Preferences,
        ScheduleGenerator,
        filter_courses_for_generation,
        group_courses_by_subject,
        load_catalog,
    )

    catalog = load_catalog("courses.json")
    candidates = filter_courses_for_generation(catalog.courses)

    generator = ScheduleGenerator(Preferences(max_units="21"))
    result = generator.generate(group_courses_by_subject(candidates))

    for course in result.best_schedule:
        print(f"{course.subject} | {course.section} | {course.schedule}")
"""

from .config import CourseFilter, Preferences, load_preferences
from .exceptions import (
    AmbiguousScheduleError,
    CatalogLoadError,
    InvalidPreferenceError,
    ScheduleParseError,
    SchedulerError,
)
from .exporters import CSVExporter, ExcelExporter, JSONExporter, get_exporter
from .filters import filter_courses_for_generation, group_courses_by_subject
from .loader import load_catalog
from .models import (
    CatalogLoadResult,
    Course,
    DayCode,
    MultiSlotSchedule,
    ParsedSchedule,
    SearchMode,
    SingleSlotSchedule,
    StatusFilter,
    TBASchedule,
    TimeOfDayBucket,
    TimeSlot,
)
from .parser import ScheduleParser, parse_schedule
from .scheduler import (
    GenerationSession,
    ScheduleGenerationResult,
    ScheduleGenerator,
    generate_schedule,
)

__version__ = "0.1.0"

__all__ = [
    # Parser
    "ScheduleParser",
    "parse_schedule",
    # Generation
    "ScheduleGenerator",
    "generate_schedule",
    "GenerationSession",
    "ScheduleGenerationResult",
    # Configuration
    "Preferences",
    "CourseFilter",
    "load_preferences",
    # Catalog
    "load_catalog",
    "filter_courses_for_generation",
    "group_courses_by_subject",
    # Models
    "Course",
    "CatalogLoadResult",
    "DayCode",
    "TimeSlot",
    "ParsedSchedule",
    "TBASchedule",
    "SingleSlotSchedule",
    "MultiSlotSchedule",
    "TimeOfDayBucket",
    "SearchMode",
    "StatusFilter",
    # Exporters
    "JSONExporter",
    "CSVExporter",
    "ExcelExporter",
    "get_exporter",
    # Exceptions
    "SchedulerError",
    "ScheduleParseError",
    "AmbiguousScheduleError",
    "InvalidPreferenceError",
    "CatalogLoadError",
]
