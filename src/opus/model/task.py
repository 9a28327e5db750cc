# SPDX-License-Identifier: MIT

import uuid
from copy import deepcopy
from typing import Optional, TypeAlias, TypedDict

import pendulum

from opus.model.priority import Priority
from opus.model.status import Status
from opus.time import datetime_to_local_date_str

EntityId: TypeAlias = str


def generate_entity_id() -> EntityId:
    return str(uuid.uuid4())


class Task(TypedDict):
    id: Optional[EntityId]
    name: str
    priority: Priority
    status: Optional[Status]
    note: Optional[str]
    deadline: Optional[pendulum.DateTime]
    tags: set[str]
    created: pendulum.DateTime
    updated: pendulum.DateTime


class EditTaskDescriptor(TypedDict, total=False):
    """
    Partial update of a Task.

    A missing key leaves the field untouched. A key mapped to None clears an
    optional field, and an empty tag set clears the tags.
    """

    name: str
    priority: Priority
    status: Optional[Status]
    note: Optional[str]
    deadline: Optional[pendulum.DateTime]
    tags: set[str]


DEFINING_FIELDS = ("name", "priority", "status", "note", "deadline", "tags")


def is_same_task(task: Task, other: Task) -> bool:
    """Two tasks are duplicates when every defining field is equal."""
    return all(
        task[field] == other[field]  # type: ignore[literal-required]
        for field in DEFINING_FIELDS
    )


def is_any_field_edited(descriptor: EditTaskDescriptor) -> bool:
    return len(descriptor) > 0


def apply_edit(task: Task, descriptor: EditTaskDescriptor) -> Task:
    edited_task = deepcopy(task)
    edited_task.update(deepcopy(descriptor))  # type: ignore[typeddict-item]
    return edited_task


def describe_task(task: Task) -> str:
    parts = [task["name"], f"Priority: {task['priority']}"]
    if task["status"] is not None:
        parts.append(f"Status: {task['status']}")
    if task["note"] is not None:
        parts.append(f"Note: {task['note']}")
    if task["deadline"] is not None:
        parts.append(f"Deadline: {datetime_to_local_date_str(task['deadline'])}")
    if task["tags"]:
        parts.append(f"Tags: {', '.join(sorted(task['tags']))}")
    return " ".join(parts)
