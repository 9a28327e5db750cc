# SPDX-License-Identifier: MIT

import logging
from pathlib import Path
from typing import Any, cast

from yaml import dump, load

try:
    from yaml import CDumper as Dumper
    from yaml import CLoader as Loader
except ImportError:
    from yaml import Dumper, Loader  # type: ignore[assignment]

from opus import time
from opus.exceptions import StorageFormatError
from opus.model import priority as priority_model
from opus.model import status as status_model
from opus.model.task import Task

logger = logging.getLogger(__name__)


class TaskStorage:
    """
    Reads and writes the ordered task list as a single YAML document:

        tasks:
          - id: ...
            name: Buy milk
            priority: HIGH
            ...
    """

    def __init__(self, path: Path) -> None:
        self.path = path

    def load_tasks(self) -> list[Task]:
        if not self.path.is_file():
            return []
        data = load(self.path.read_text(), Loader=Loader)
        if data is None:
            return []
        if not isinstance(data, dict) or not isinstance(
            data.get("tasks") or [], list
        ):
            logger.error("unexpected task file layout in %s", self.path)
            raise StorageFormatError(
                f"{self.path} must be a mapping with a 'tasks' list"
            )
        try:
            tasks = [
                self.__convert_task_for_deserialization(raw_task)
                for raw_task in data.get("tasks") or []
            ]
        except (AttributeError, KeyError, TypeError, ValueError) as e:
            logger.error("malformed task in %s: %s", self.path, e)
            raise StorageFormatError(f"{self.path} holds a malformed task: {e}") from e
        logger.debug("loaded %d tasks from %s", len(tasks), self.path)
        return tasks

    def save_tasks(self, tasks: list[Task]) -> None:
        data = {
            "tasks": [self.__convert_task_for_serialization(task) for task in tasks]
        }
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text(dump(data, Dumper=Dumper, sort_keys=False))
        except OSError:
            logger.exception("could not save tasks to %s", self.path)
            raise
        logger.debug("saved %d tasks to %s", len(tasks), self.path)

    def __convert_task_for_serialization(self, task: Task) -> dict[str, Any]:
        return {
            "id": task["id"],
            "name": task["name"],
            "priority": task["priority"].value,
            "status": task["status"].value if task["status"] is not None else None,
            "note": task["note"],
            "deadline": time.datetime_to_iso_str_optional(task["deadline"]),
            "tags": sorted(task["tags"]),
            "created": time.datetime_to_iso_str(task["created"]),
            "updated": time.datetime_to_iso_str(task["updated"]),
        }

    def __convert_task_for_deserialization(self, task: dict[str, Any]) -> Task:
        status = task.get("status")
        return cast(
            Task,
            {
                "id": task.get("id"),
                "name": task["name"],
                "priority": priority_model.parse_persisted_string(task["priority"]),
                "status": (
                    status_model.parse_persisted_string(status)
                    if status is not None
                    else None
                ),
                "note": task.get("note"),
                "deadline": time.datetime_from_str_optional(task.get("deadline")),
                "tags": set(task.get("tags") or []),
                "created": time.datetime_from_str(task["created"]),
                "updated": time.datetime_from_str(task["updated"]),
            },
        )
