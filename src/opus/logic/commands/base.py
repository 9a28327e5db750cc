# SPDX-License-Identifier: MIT

from abc import ABC, abstractmethod
from typing import Any, Optional, TypedDict

from opus.exceptions import CommandExecutionError
from opus.repository.task import TaskRepository

MESSAGE_INVALID_COMMAND_FORMAT = "Invalid command format!\n{usage}"
MESSAGE_UNKNOWN_COMMAND = "Unknown command"
MESSAGE_INVALID_TASK_DISPLAYED_INDEX = "The task index provided is invalid"
MESSAGE_ALREADY_EXECUTED = "This command has already been executed"


class CommandResult(TypedDict):
    message: str
    payload: Optional[dict[str, Any]]


def command_result(
    message: str, payload: Optional[dict[str, Any]] = None
) -> CommandResult:
    return {"message": message, "payload": payload}


class Command(ABC):
    """
    A single parsed user command.

    A command is built with already validated arguments and applied once to a
    TaskRepository. Failures raise CommandExecutionError and leave the
    repository untouched.
    """

    COMMAND_WORD: str
    MESSAGE_USAGE: str

    def __init__(self) -> None:
        self._executed = False

    @property
    def is_executed(self) -> bool:
        return self._executed

    def execute(self, repository: TaskRepository) -> CommandResult:
        if self._executed:
            raise CommandExecutionError(MESSAGE_ALREADY_EXECUTED)
        self._executed = True
        return self.apply(repository)

    @abstractmethod
    def apply(self, repository: TaskRepository) -> CommandResult: ...


def resolve_index(repository: TaskRepository, filtered_index: int) -> int:
    position = repository.real_position(filtered_index)
    if position is None:
        raise CommandExecutionError(MESSAGE_INVALID_TASK_DISPLAYED_INDEX)
    return position
