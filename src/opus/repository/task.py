# SPDX-License-Identifier: MIT

import logging
from copy import deepcopy
from typing import Callable, Optional, TypeAlias

from opus.exceptions import SyncUnavailableError
from opus.model.task import Task, generate_entity_id, is_same_task
from opus.sync.sync import Sync
from opus.time import now_utc

logger = logging.getLogger(__name__)

TaskPredicate: TypeAlias = Callable[[Task], bool]


class TaskRepository:
    """
    In-memory task list shared by all commands.

    Positions passed to the mutating methods are zero-based positions in the
    full list. Commands translate the one-based index the user sees in the
    filtered view with real_position().

    Every successful mutation records an undo snapshot, marks the repository
    dirty and notifies the sync (if any). A sync that cannot be reached is
    logged and never rolls the mutation back.
    """

    def __init__(
        self, tasks: Optional[list[Task]] = None, sync: Optional[Sync] = None
    ) -> None:
        self._tasks: list[Task] = deepcopy(tasks) if tasks is not None else []
        self._filter: Optional[TaskPredicate] = None
        self._undo_stack: list[list[Task]] = []
        self._redo_stack: list[list[Task]] = []
        self.sync = sync
        self.is_dirty = False

    def load_tasks(self, tasks: list[Task]) -> None:
        self._tasks = deepcopy(tasks)
        self._filter = None
        self._undo_stack.clear()
        self._redo_stack.clear()
        self.is_dirty = False

    def get_all_tasks(self) -> list[Task]:
        return deepcopy(self._tasks)

    def get_filtered_tasks(self) -> list[Task]:
        return [
            deepcopy(self._tasks[position]) for position in self.__filtered_positions()
        ]

    def real_position(self, filtered_index: int) -> Optional[int]:
        """Position in the full list of the task shown at a one-based filtered index."""
        positions = self.__filtered_positions()
        if filtered_index < 1 or filtered_index > len(positions):
            return None
        return positions[filtered_index - 1]

    def get_task(self, position: int) -> Task:
        return deepcopy(self._tasks[position])

    def has_task(self, task: Task, exclude_position: Optional[int] = None) -> bool:
        return any(
            is_same_task(existing, task)
            for position, existing in enumerate(self._tasks)
            if position != exclude_position
        )

    def add_task(self, task: Task) -> Task:
        self.__record_undo()

        new_task = deepcopy(task)
        new_task["id"] = generate_entity_id()
        self._tasks.append(new_task)
        self._filter = None

        self.__notify(lambda sync: sync.add_task(deepcopy(new_task)))
        return deepcopy(new_task)

    def update_task(self, position: int, task: Task) -> Task:
        self.__record_undo()

        updated_task = deepcopy(task)
        updated_task["id"] = self._tasks[position]["id"]
        updated_task["updated"] = now_utc()
        self._tasks[position] = updated_task

        self.__notify(lambda sync: sync.update_task(deepcopy(updated_task)))
        return deepcopy(updated_task)

    def delete_task(self, position: int) -> Task:
        self.__record_undo()

        deleted_task = self._tasks.pop(position)

        self.__notify(lambda sync: sync.delete_task(deepcopy(deleted_task)))
        return deleted_task

    def clear_tasks(self) -> None:
        self.__record_undo()

        self._tasks = []
        self._filter = None

        self.__notify(lambda sync: sync.update_task_list([]))

    def set_filter(self, predicate: TaskPredicate) -> None:
        self._filter = predicate

    def clear_filter(self) -> None:
        self._filter = None

    def can_undo(self) -> bool:
        return len(self._undo_stack) > 0

    def can_redo(self) -> bool:
        return len(self._redo_stack) > 0

    def undo(self) -> None:
        self._redo_stack.append(self._tasks)
        self.__restore(self._undo_stack.pop())

    def redo(self) -> None:
        self._undo_stack.append(self._tasks)
        self.__restore(self._redo_stack.pop())

    def push_all_to_sync(self) -> None:
        self.__notify(lambda sync: sync.update_task_list(self.get_all_tasks()))

    def __restore(self, tasks: list[Task]) -> None:
        self._tasks = tasks
        self._filter = None
        self.is_dirty = True
        self.__notify(lambda sync: sync.update_task_list(self.get_all_tasks()))

    def __record_undo(self) -> None:
        self._undo_stack.append(deepcopy(self._tasks))
        self._redo_stack.clear()
        self.is_dirty = True

    def __filtered_positions(self) -> list[int]:
        return [
            position
            for position, task in enumerate(self._tasks)
            if self._filter is None or self._filter(task)
        ]

    def __notify(self, notification: Callable[[Sync], None]) -> None:
        if self.sync is None:
            return
        try:
            notification(self.sync)
        except SyncUnavailableError as e:
            logger.warning("sync unavailable, change kept locally: %s", e)
