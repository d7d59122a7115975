"""Constants for the schedule string parser."""

# Literal used by catalogs for sections without a fixed meeting time
TBA_MARKER = "TBA"

# Slot groups are joined by "+" or placed on separate lines
SLOT_GROUP_SEPARATOR_PATTERN = r"\s*(?:\+|\r?\n)\s*"

# Parts of a pipe-separated group: days | times | room
FIELD_SEPARATOR = "|"

# Day tokens are joined by "/"
DAY_TOKEN_SEPARATOR = "/"

# Time ranges are joined by "," or "/"
TIME_RANGE_SEPARATOR_PATTERN = r"\s*[,/]\s*"

# Compact day codes, longest first so "TH" wins over "T" and "SU" over "S"
DAY_CODE_PATTERN = r"TH|SU|M|T|W|F|S"

# Whole day token made only of compact day codes (e.g. "MWF", "TTH")
DAY_TOKEN_PATTERN = rf"(?:{DAY_CODE_PATTERN})+"

# Spelled-out day names accepted as a single day token
DAY_NAME_ALIASES = {
    "MON": "M",
    "TUE": "T",
    "TUES": "T",
    "WED": "W",
    "THU": "TH",
    "THUR": "TH",
    "THURS": "TH",
    "FRI": "F",
    "SAT": "S",
    "SUN": "SU",
}

# 12-hour boundary: "9:00AM", "12:30 pm"
TIME_12H_PATTERN = r"^(\d{1,2}):(\d{2})\s*([AaPp][Mm])$"

# Normalized 24-hour boundary: "09:00"
TIME_24H_PATTERN = r"^\d{2}:\d{2}$"

# One range in the space-separated variant (no spaces allowed inside)
TIME_RANGE_TOKEN = r"\d{1,2}:\d{2}[AaPp][Mm]-\d{1,2}:\d{2}[AaPp][Mm]"

# A run of ranges joined by "," or "/" in the space-separated variant
TIME_TOKEN_PATTERN = rf"^{TIME_RANGE_TOKEN}(?:[,/]{TIME_RANGE_TOKEN})*$"

# Room prefix used by some catalogs ("Room#online")
ROOM_PREFIX_PATTERN = r"^room\s*#\s*"

# Meeting kind suffixes in the space-separated variant
MEETING_KIND_TOKENS = {"LEC", "LAB"}

# Rooms that do not require presence on campus (compared case-insensitively)
NON_CAMPUS_ROOMS = {"online", "tba", ""}

# Section type suffixes (last "-" separated part of a section name)
SECTION_TYPE_SUFFIXES = {
    "AP3": "Online Class",
    "AP4": "Face-to-Face",
    "AP5": "Hybrid (F2F & Online)",
}
