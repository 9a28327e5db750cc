# SPDX-License-Identifier: MIT

from enum import Enum

from opus.exceptions import FieldValidationError

PRIORITY_NONE = "none"
PRIORITY_HIGH = "hi"
PRIORITY_MEDIUM = "mid"
PRIORITY_LOW = "low"

MESSAGE_PRIORITY_CONSTRAINTS = (
    f"Priority can only be {PRIORITY_NONE}, {PRIORITY_HIGH}, "
    f"{PRIORITY_MEDIUM} or {PRIORITY_LOW}"
)


class Priority(Enum):
    """
    Task priority.

    The enum value is the persisted form (e.g. "HIGH"). str() gives the
    token a user types (e.g. "hi").
    """

    NONE = "NONE"
    LOW = "LOW"
    MEDIUM = "MEDIUM"
    HIGH = "HIGH"

    def __str__(self) -> str:
        return to_user_input_string(self)


_USER_INPUT_TO_PRIORITY: dict[str, Priority] = {
    PRIORITY_NONE: Priority.NONE,
    PRIORITY_HIGH: Priority.HIGH,
    PRIORITY_MEDIUM: Priority.MEDIUM,
    PRIORITY_LOW: Priority.LOW,
}

_PRIORITY_TO_USER_INPUT: dict[Priority, str] = {
    priority: token for token, priority in _USER_INPUT_TO_PRIORITY.items()
}


def is_valid_priority(priority: str) -> bool:
    return priority.strip() in _USER_INPUT_TO_PRIORITY


def parse_user_input_string(priority: str) -> Priority:
    trimmed = priority.strip()
    if trimmed not in _USER_INPUT_TO_PRIORITY:
        raise FieldValidationError("priority", MESSAGE_PRIORITY_CONSTRAINTS)
    return _USER_INPUT_TO_PRIORITY[trimmed]


def parse_persisted_string(priority: str) -> Priority:
    try:
        return Priority(priority.strip())
    except ValueError:
        raise FieldValidationError(
            "priority", f"Unknown persisted priority: '{priority}'"
        )


def to_user_input_string(priority: Priority) -> str:
    return _PRIORITY_TO_USER_INPUT[priority]
