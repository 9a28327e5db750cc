# SPDX-License-Identifier: MIT

from abc import ABC, abstractmethod
from typing import Optional

from opus.model.task import Task


class Sync(ABC):
    """Capability the task repository notifies after every successful mutation."""

    @abstractmethod
    def add_task(self, task: Task) -> None: ...

    @abstractmethod
    def delete_task(self, task: Task) -> None: ...

    @abstractmethod
    def update_task(self, task: Task) -> None: ...

    @abstractmethod
    def update_task_list(self, tasks: list[Task]) -> None: ...

    @abstractmethod
    def get_task_list_from_sync(self) -> Optional[list[Task]]: ...

    @abstractmethod
    def start_sync(self) -> None: ...

    @abstractmethod
    def stop_sync(self) -> None: ...


class SyncService(ABC):
    """
    External service that mirrors tasks. Implementations own the connection.

    Connection failures may surface as any OSError (ConnectionError,
    TimeoutError, ...); SyncManager reports them as SyncUnavailableError.
    """

    @abstractmethod
    def add_task(self, task: Task) -> None: ...

    @abstractmethod
    def delete_task(self, task: Task) -> None: ...

    @abstractmethod
    def update_task(self, task: Task) -> None: ...

    @abstractmethod
    def update_task_list(self, tasks: list[Task]) -> None: ...

    @abstractmethod
    def start(self) -> None: ...

    @abstractmethod
    def stop(self) -> None: ...
