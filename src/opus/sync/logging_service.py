# SPDX-License-Identifier: MIT

import logging

from opus.model.task import Task
from opus.sync.sync import SyncService

logger = logging.getLogger(__name__)


class LoggingSyncService(SyncService):
    """
    Local stand-in used when no external sync backend is configured.

    Every forwarded operation is written to the log instead of a remote service.
    """

    def add_task(self, task: Task) -> None:
        logger.info("sync add: %s %s", task["id"], task["name"])

    def delete_task(self, task: Task) -> None:
        logger.info("sync delete: %s %s", task["id"], task["name"])

    def update_task(self, task: Task) -> None:
        logger.info("sync update: %s %s", task["id"], task["name"])

    def update_task_list(self, tasks: list[Task]) -> None:
        logger.info("sync update list: %d tasks", len(tasks))

    def start(self) -> None:
        logger.debug("logging sync service started")

    def stop(self) -> None:
        logger.debug("logging sync service stopped")
