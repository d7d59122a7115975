"""Parser for free-text meeting schedule strings.

Turns catalog schedule strings into normalized time slots. Supported forms:

- Pipe-separated groups: "M/W/F | 9:00AM-10:30AM | ACAD309"
- Several groups joined by "+" or newlines:
  "M/W | 9:00AM-10:30AM | Room#online + F | 9:00AM-12:00PM | ACAD309"
- Space-separated variants: "F 9:00AM-10:30AM RTL313 LEC T 9:00AM-10:30AM RTL313 LEC"
- The literal "TBA"

Example usage:
    from course_scheduler.parser import parse_schedule

    parsed = parse_schedule("TTH | 9:00AM-10:30AM | ACAD309")
    for slot in parsed.all_time_slots:
        print(slot.sorted_days, slot.start_time, slot.end_time, slot.room)
"""

import logging
import re
from dataclasses import dataclass
from functools import lru_cache

from .constants import (
    DAY_TOKEN_SEPARATOR,
    FIELD_SEPARATOR,
    MEETING_KIND_TOKENS,
    SLOT_GROUP_SEPARATOR_PATTERN,
    TBA_MARKER,
    TIME_RANGE_SEPARATOR_PATTERN,
    TIME_TOKEN_PATTERN,
)
from .exceptions import AmbiguousScheduleError, ScheduleParseError
from .models import DayCode, ParsedSchedule, TBASchedule, TimeSlot
from .normalization import normalize_room, normalize_time_12h, parse_day_token

logger = logging.getLogger(__name__)


@dataclass
class _GroupFields:
    """Raw text fields of one slot group before normalization."""

    days: str
    times: str
    room: str | None = None


class ScheduleParser:
    """Parser for catalog meeting schedule strings."""

    def __init__(self, strict_pairing: bool = False):
        """Initialize parser.

        Args:
            strict_pairing: If True, a slot group whose day and time token
                counts cannot be paired raises AmbiguousScheduleError instead
                of giving every time range the full set of days.
        """
        self.strict_pairing = strict_pairing

    def parse(self, raw: object) -> ParsedSchedule | None:
        """Parse a schedule string.

        Args:
            raw: Schedule string from the catalog

        Returns:
            ParsedSchedule, or None if the input is empty or not recognized
        """
        try:
            return self.parse_strict(raw)
        except ScheduleParseError as e:
            logger.debug(str(e))
            return None

    def parse_strict(self, raw: object) -> ParsedSchedule:
        """Parse a schedule string, raising on unrecognized syntax.

        Args:
            raw: Schedule string from the catalog

        Returns:
            ParsedSchedule

        Raises:
            ScheduleParseError: If the string cannot be parsed
        """
        if not isinstance(raw, str) or not raw.strip():
            raise ScheduleParseError(str(raw), "empty schedule")

        text = raw.strip()
        if text.upper() == TBA_MARKER:
            return TBASchedule(raw_schedule_string=raw)

        groups: list[_GroupFields] = []
        for group_text in re.split(SLOT_GROUP_SEPARATOR_PATTERN, text):
            if not group_text.strip():
                raise ScheduleParseError(raw, "empty slot group")
            if FIELD_SEPARATOR in group_text:
                groups.append(self._split_pipe_group(group_text, raw))
            else:
                groups.extend(self._split_spaced_group(group_text, raw))

        # Groups without their own room take the first room mentioned anywhere
        inferred_room = next(
            (room for room in (normalize_room(g.room) for g in groups) if room), None
        )

        slots: list[TimeSlot] = []
        for group in groups:
            group_slots = self._build_slots(group, inferred_room, raw)
            if not group_slots:
                raise ScheduleParseError(raw, f"no valid slots in group '{group.days}'")
            slots.extend(group_slots)

        return ParsedSchedule.from_slots(slots, raw)

    def _split_pipe_group(self, group_text: str, raw: str) -> _GroupFields:
        """Split a "days | times | room" group into its fields."""
        parts = [part.strip() for part in group_text.split(FIELD_SEPARATOR)]
        if len(parts) < 2:
            raise ScheduleParseError(raw, f"group '{group_text}' has no time field")

        room = " ".join(part for part in parts[2:] if part) or None
        return _GroupFields(days=parts[0], times=parts[1], room=room)

    def _split_spaced_group(self, group_text: str, raw: str) -> list[_GroupFields]:
        """Split the space-separated variant into groups.

        Each group starts with a day token immediately followed by a time
        token. The first following token is the room; meeting kinds such as
        LEC or LAB are ignored.
        """
        tokens = group_text.split()
        groups: list[_GroupFields] = []
        current: _GroupFields | None = None

        index = 0
        while index < len(tokens):
            token = tokens[index]
            next_token = tokens[index + 1] if index + 1 < len(tokens) else ""

            if self._is_day_text(token) and re.match(TIME_TOKEN_PATTERN, next_token):
                current = _GroupFields(days=token, times=next_token)
                groups.append(current)
                index += 2
                continue

            if current is None:
                raise ScheduleParseError(raw, f"unexpected token '{token}'")

            if current.room is None and token.upper() not in MEETING_KIND_TOKENS:
                current.room = token
            index += 1

        if not groups:
            raise ScheduleParseError(raw, "no day/time pairs found")

        return groups

    def _is_day_text(self, text: str) -> bool:
        return all(
            parse_day_token(token) is not None for token in text.split(DAY_TOKEN_SEPARATOR)
        )

    def _build_slots(
        self, group: _GroupFields, inferred_room: str | None, raw: str
    ) -> list[TimeSlot]:
        """Pair the day tokens and time ranges of one group into slots.

        - One time range: a single slot covering every day of the group
        - Equal counts: day token i pairs with time range i
        - Otherwise: every time range gets the union of all days

        Overlap, gap and campus-day checks see the same meetings as with one
        slot per day, but time preference scoring counts the shared slot once.
        """
        if not group.days:
            raise ScheduleParseError(raw, "missing days")

        day_sets: list[frozenset[DayCode]] = []
        for token in group.days.split(DAY_TOKEN_SEPARATOR):
            days = parse_day_token(token)
            if days is None:
                raise ScheduleParseError(raw, f"invalid day token '{token.strip()}'")
            day_sets.append(days)

        time_tokens = [
            token for token in re.split(TIME_RANGE_SEPARATOR_PATTERN, group.times.strip()) if token
        ]
        ranges = [self._parse_range(token, raw) for token in time_tokens]
        if not ranges:
            return []

        room = normalize_room(group.room) or inferred_room
        all_days = frozenset().union(*day_sets)

        if len(ranges) == 1:
            start, end = ranges[0]
            return [TimeSlot(days=all_days, start_time=start, end_time=end, room=room)]

        if len(day_sets) == len(ranges):
            return [
                TimeSlot(days=days, start_time=start, end_time=end, room=room)
                for days, (start, end) in zip(day_sets, ranges)
            ]

        if self.strict_pairing:
            raise AmbiguousScheduleError(raw, len(day_sets), len(ranges))

        logger.debug(
            f"Ambiguous pairing of {len(day_sets)} day token(s) and {len(ranges)} "
            f"time range(s) in '{raw}'; using all days for every range"
        )
        return [
            TimeSlot(days=all_days, start_time=start, end_time=end, room=room)
            for start, end in ranges
        ]

    def _parse_range(self, token: str, raw: str) -> tuple[str, str]:
        """Parse "9:00AM-10:30AM" into ("09:00", "10:30")."""
        boundaries = token.split("-")
        if len(boundaries) != 2:
            raise ScheduleParseError(raw, f"invalid time range '{token}'")

        start = normalize_time_12h(boundaries[0])
        end = normalize_time_12h(boundaries[1])
        if start is None or end is None:
            raise ScheduleParseError(raw, f"invalid time boundary in '{token}'")
        if not start < end:
            raise ScheduleParseError(raw, f"time range '{token}' ends before it starts")

        return start, end


_default_parser = ScheduleParser()


@lru_cache(maxsize=4096)
def _parse_cached(raw: str) -> ParsedSchedule | None:
    return _default_parser.parse(raw)


def parse_schedule(raw: object) -> ParsedSchedule | None:
    """Parse a schedule string with the default parser.

    Results are memoized per string. Never raises.

    Args:
        raw: Schedule string from the catalog

    Returns:
        ParsedSchedule, or None if the input is empty or not recognized
    """
    if not isinstance(raw, str):
        return None
    return _parse_cached(raw)
