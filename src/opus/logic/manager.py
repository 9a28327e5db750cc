# SPDX-License-Identifier: MIT

import logging
from typing import Optional

from opus.exceptions import CommandExecutionError, ParseFormatError
from opus.logic.commands.base import CommandResult
from opus.logic.parse import parse_command
from opus.model.task import Task
from opus.repository.storage import TaskStorage
from opus.repository.task import TaskRepository

logger = logging.getLogger(__name__)


class LogicManager:
    """
    The only owner of the task repository.

    Callers hand in raw command text and get a CommandResult back; they never
    touch the repository directly, so every change goes through a command.
    """

    def __init__(
        self, repository: TaskRepository, storage: Optional[TaskStorage] = None
    ) -> None:
        self._repository = repository
        self._storage = storage

    def execute(self, command_text: str) -> CommandResult:
        logger.debug("user command: %s", command_text)
        try:
            command = parse_command(command_text)
            result = command.execute(self._repository)
        except ParseFormatError as e:
            logger.info("rejected command %r: %s", command_text, e)
            raise
        except CommandExecutionError as e:
            logger.info("command %r failed: %s", command_text, e)
            raise
        logger.debug("result: %s", result["message"])
        return result

    def get_filtered_tasks(self) -> list[Task]:
        return self._repository.get_filtered_tasks()

    def flush(self) -> bool:
        if self._storage is not None and self._repository.is_dirty:
            self._storage.save_tasks(self._repository.get_all_tasks())
            self._repository.is_dirty = False
            return True
        return False

    def start_sync(self) -> None:
        if self._repository.sync is not None:
            self._repository.sync.start_sync()
            self._repository.push_all_to_sync()

    def stop_sync(self) -> None:
        if self._repository.sync is not None:
            self._repository.sync.stop_sync()
