# SPDX-License-Identifier: MIT

from enum import Enum
from typing import Optional

from opus.exceptions import FieldValidationError

STATUS_COMPLETE = "complete"
STATUS_INCOMPLETE = "incomplete"

MESSAGE_STATUS_CONSTRAINTS = (
    f"Status can only be {STATUS_COMPLETE} or {STATUS_INCOMPLETE}"
)


class Status(Enum):
    COMPLETE = "COMPLETE"
    INCOMPLETE = "INCOMPLETE"

    def __str__(self) -> str:
        return self.value.lower()


def parse_user_input_string(status: str) -> Status:
    match status.strip().lower():
        case "complete":
            return Status.COMPLETE
        case "incomplete":
            return Status.INCOMPLETE
    raise FieldValidationError("status", MESSAGE_STATUS_CONSTRAINTS)


def parse_persisted_string(status: str) -> Status:
    try:
        return Status(status.strip())
    except ValueError:
        raise FieldValidationError("status", f"Unknown persisted status: '{status}'")


def toggle(status: Optional[Status]) -> Status:
    if status is Status.COMPLETE:
        return Status.INCOMPLETE
    return Status.COMPLETE
