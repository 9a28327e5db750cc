# SPDX-License-Identifier: MIT

import re

import pendulum

from opus.exceptions import FieldValidationError
from opus.model import priority as priority_parser
from opus.model import status as status_parser
from opus.model.priority import Priority
from opus.model.status import Status
from opus.time import datetime_from_str_utc

MESSAGE_NAME_CONSTRAINTS = "Task name should not be blank"
MESSAGE_TAG_CONSTRAINTS = (
    "Tags should be a single word of letters, digits, '-' or '_'"
)
MESSAGE_DEADLINE_CONSTRAINTS = (
    "Deadline accepts YYYY-MM-DD, HH:mm, now, today, yesterday, tomorrow, "
    "or a day offset like 1, -1"
)

TAG_PATTERN = re.compile(r"^[\w-]+$")


def parse_name(name: str) -> str:
    trimmed = name.strip()
    if not trimmed:
        raise FieldValidationError("name", MESSAGE_NAME_CONSTRAINTS)
    return trimmed


def parse_priority(priority: str) -> Priority:
    return priority_parser.parse_user_input_string(priority)


def parse_status(status: str) -> Status:
    return status_parser.parse_user_input_string(status)


def parse_note(note: str) -> str:
    return note.strip()


def parse_tag(tag: str) -> str:
    trimmed = tag.strip()
    if not TAG_PATTERN.match(trimmed):
        raise FieldValidationError("tag", MESSAGE_TAG_CONSTRAINTS)
    return trimmed


def parse_tags(tags: list[str]) -> set[str]:
    """
    Parse every value supplied for the tag prefix.

    A single empty value (a bare "t/") means "no tags" and yields an empty set.
    An empty value next to real tags is rejected like any other invalid tag.
    """
    if len(tags) == 1 and tags[0].strip() == "":
        return set()
    return {parse_tag(tag) for tag in tags}


def parse_deadline(deadline: str) -> pendulum.DateTime:
    value = deadline.strip()

    # Match YYYY-MM-DD format (with optional time component)
    if re.match(r"^\d{4}-\d{2}-\d{2}", value):
        try:
            return datetime_from_str_utc(value)
        except (OverflowError, ValueError):
            raise FieldValidationError("deadline", MESSAGE_DEADLINE_CONSTRAINTS)

    # Match (H)H:mm format (time only, use today's date)
    time_match = re.match(r"^(\d{1,2}):(\d{2})$", value)
    if time_match:
        hour = int(time_match.group(1))
        minute = int(time_match.group(2))
        if hour > 23:
            raise FieldValidationError(
                "deadline", f"Hour must be between 0 and 23, got {hour}"
            )
        if minute > 59:
            raise FieldValidationError(
                "deadline", f"Minute must be between 0 and 59, got {minute}"
            )
        return (
            pendulum.today("local")
            .set(hour=hour, minute=minute, second=0, microsecond=0)
            .in_tz("UTC")
        )

    # Match numeric input for relative days (e.g., "1", "-1", "365")
    if re.match(r"^-?\d+$", value):
        try:
            return pendulum.today("local").add(days=int(value)).in_tz("UTC")
        except (OverflowError, ValueError):
            # Offsets that land outside the supported calendar range
            raise FieldValidationError("deadline", MESSAGE_DEADLINE_CONSTRAINTS)

    match value:
        case "now" | "n":
            return pendulum.now("UTC")
        case "today" | "t":
            return pendulum.today("local").in_tz("UTC")
        case "yesterday" | "y":
            return pendulum.yesterday("local").in_tz("UTC")
        case "tomorrow" | "o":
            return pendulum.tomorrow("local").in_tz("UTC")

    raise FieldValidationError("deadline", MESSAGE_DEADLINE_CONSTRAINTS)
