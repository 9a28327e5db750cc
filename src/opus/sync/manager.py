# SPDX-License-Identifier: MIT

import logging
from contextlib import contextmanager
from types import TracebackType
from typing import Iterator, Optional

from opus.exceptions import SyncUnavailableError
from opus.model.task import Task
from opus.sync.sync import Sync, SyncService

logger = logging.getLogger(__name__)


class SyncManager(Sync):
    """
    Forwards task notifications to a SyncService.

    The manager keeps no task state. It is only active between start_sync()
    and stop_sync(); notifications outside that window raise
    SyncUnavailableError. Connection failures of the service (any OSError)
    are reported as SyncUnavailableError too. It can also be used as a
    context manager:

        with SyncManager(service) as sync:
            sync.add_task(task)
    """

    def __init__(self, service: SyncService) -> None:
        self.service = service
        self._active = False

    @property
    def is_active(self) -> bool:
        return self._active

    def __enter__(self) -> "SyncManager":
        self.start_sync()
        return self

    def __exit__(
        self,
        exc_type: Optional[type[BaseException]],
        exc_value: Optional[BaseException],
        traceback: Optional[TracebackType],
    ) -> None:
        self.stop_sync()

    def add_task(self, task: Task) -> None:
        self.__ensure_active()
        with self.__service_errors():
            self.service.add_task(task)

    def delete_task(self, task: Task) -> None:
        self.__ensure_active()
        with self.__service_errors():
            self.service.delete_task(task)

    def update_task(self, task: Task) -> None:
        self.__ensure_active()
        with self.__service_errors():
            self.service.update_task(task)

    def update_task_list(self, tasks: list[Task]) -> None:
        self.__ensure_active()
        with self.__service_errors():
            self.service.update_task_list(tasks)

    def get_task_list_from_sync(self) -> Optional[list[Task]]:
        # Sync is push-only: nothing is pulled back from the service.
        return None

    def start_sync(self) -> None:
        if self._active:
            return
        with self.__service_errors():
            self.service.start()
        self._active = True
        logger.info("sync started with %s", type(self.service).__name__)

    def stop_sync(self) -> None:
        if not self._active:
            return
        self._active = False
        try:
            with self.__service_errors():
                self.service.stop()
        except SyncUnavailableError as e:
            logger.warning("sync service did not stop cleanly: %s", e)
        logger.info("sync stopped")

    def __ensure_active(self) -> None:
        if not self._active:
            raise SyncUnavailableError("Sync has not been started")

    @contextmanager
    def __service_errors(self) -> Iterator[None]:
        try:
            yield
        except OSError as e:
            raise SyncUnavailableError(str(e) or type(e).__name__) from e
