"""Test fixtures for course scheduler tests."""

import pytest

from course_scheduler.models import Course


def build_course(
    id: str,
    subject: str,
    schedule: str,
    units: str = "3",
    section: str = "",
    available_slots: int = 10,
    **kwargs,
) -> Course:
    """Build a course with sensible defaults for tests."""
    return Course(
        id=id,
        subject=subject,
        section=section or f"{subject}-{id}",
        schedule=schedule,
        units=units,
        available_slots=available_slots,
        **kwargs,
    )


@pytest.fixture
def make_course():
    """Factory for Course objects."""
    return build_course


@pytest.fixture
def it_courses_by_subject():
    """IT101 with one section; IT102 with a conflicting and a free section."""
    return {
        "IT101": [build_course("1", "IT101", "M/W/F | 9:00AM-10:00AM | ACAD309")],
        "IT102": [
            build_course("2", "IT102", "M/W/F | 9:30AM-10:30AM | ACAD310", section="IT102-A"),
            build_course("3", "IT102", "T/TH | 9:00AM-10:30AM | ACAD311", section="IT102-B"),
        ],
    }


@pytest.fixture
def catalog_records():
    """Catalog records as exported by the web catalog (camelCase keys)."""
    return [
        {
            "id": "101",
            "subject": "IT 111",
            "section": "BSIT-1A-AP4",
            "subjectTitle": "Introduction to Computing",
            "schedule": "M/W | 9:00AM-10:30AM | ACAD309",
            "room": "ACAD309",
            "units": "3",
            "enrolled": 20,
            "assessed": 0,
            "totalSlots": 40,
            "availableSlots": 20,
            "isClosed": False,
            "offeringDept": "CCS",
        },
        {
            "id": "102",
            "subject": "IT 112",
            "section": "BSIT-1A-AP3",
            "subjectTitle": "Computer Programming 1",
            "schedule": "T/TH | 1:00PM-2:30PM | Room#online",
            "room": "online",
            "units": "3",
            "enrolled": 35,
            "assessed": 0,
            "totalSlots": 40,
            "availableSlots": 5,
            "isClosed": False,
            "offeringDept": "CCS",
        },
        {
            "id": "103",
            "subject": "GE 101",
            "section": "BSIT-1A-AP4",
            "subjectTitle": "Understanding the Self",
            "schedule": "TBA",
            "room": "TBA",
            "units": "3",
            "creditedUnits": "2",
            "enrolled": 10,
            "assessed": 0,
            "totalSlots": 40,
            "availableSlots": 30,
            "isClosed": False,
            "offeringDept": "CAS",
        },
    ]
