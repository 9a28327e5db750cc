# SPDX-License-Identifier: MIT

from copy import deepcopy
from typing import Optional

import pendulum

from opus.exceptions import CommandExecutionError
from opus.logic.commands.base import (
    Command,
    CommandResult,
    command_result,
    resolve_index,
)
from opus.model import status as status_model
from opus.model.priority import Priority
from opus.model.status import Status
from opus.model.task import (
    EditTaskDescriptor,
    apply_edit,
    describe_task,
    is_any_field_edited,
)
from opus.repository.task import TaskRepository
from opus.template.task import get_task_template

MESSAGE_DUPLICATE_TASK = "This task already exists in the task manager"


class AddCommand(Command):
    COMMAND_WORD = "add"
    MESSAGE_USAGE = (
        "add: Adds a task to the task manager.\n"
        "Parameters: NAME [p/PRIORITY] [s/STATUS] [n/NOTE] [d/DEADLINE] [t/TAG]...\n"
        "Example: add Buy milk p/hi d/2024-01-01 t/errand"
    )
    MESSAGE_SUCCESS = "New task added: {task}"

    def __init__(
        self,
        name: str,
        priority: Optional[Priority] = None,
        status: Optional[Status] = None,
        note: Optional[str] = None,
        deadline: Optional[pendulum.DateTime] = None,
        tags: Optional[set[str]] = None,
    ) -> None:
        super().__init__()
        task = get_task_template()
        task["name"] = name
        if priority is not None:
            task["priority"] = priority
        task["status"] = status
        task["note"] = note
        task["deadline"] = deadline
        task["tags"] = set(tags) if tags is not None else set()
        self.task_to_add = task

    def apply(self, repository: TaskRepository) -> CommandResult:
        if repository.has_task(self.task_to_add):
            raise CommandExecutionError(MESSAGE_DUPLICATE_TASK)
        added_task = repository.add_task(self.task_to_add)
        return command_result(
            self.MESSAGE_SUCCESS.format(task=describe_task(added_task))
        )


class EditCommand(Command):
    COMMAND_WORD = "edit"
    MESSAGE_USAGE = (
        "edit: Edits the task identified by the index number used in the last "
        "task listing. Supplied fields overwrite existing values. A lone empty t/ "
        "clears the tags; an empty t/ next to other tags is an invalid tag. "
        "An empty n/, s/ or d/ clears that field.\n"
        "Parameters: INDEX [NAME] [p/PRIORITY] [s/STATUS] [n/NOTE] [d/DEADLINE] "
        "[t/TAG]...\n"
        "Example: edit 1 p/mid n/after lunch"
    )
    MESSAGE_SUCCESS = "Edited task: {task}"
    MESSAGE_NOT_EDITED = "At least one field to edit must be provided."

    def __init__(self, filtered_index: int, descriptor: EditTaskDescriptor) -> None:
        super().__init__()
        assert filtered_index > 0
        self.filtered_index = filtered_index
        self.descriptor: EditTaskDescriptor = deepcopy(descriptor)

    def apply(self, repository: TaskRepository) -> CommandResult:
        position = resolve_index(repository, self.filtered_index)
        if not is_any_field_edited(self.descriptor):
            raise CommandExecutionError(self.MESSAGE_NOT_EDITED)

        edited_task = apply_edit(repository.get_task(position), self.descriptor)
        if repository.has_task(edited_task, exclude_position=position):
            raise CommandExecutionError(MESSAGE_DUPLICATE_TASK)

        updated_task = repository.update_task(position, edited_task)
        return command_result(
            self.MESSAGE_SUCCESS.format(task=describe_task(updated_task))
        )


class ScheduleCommand(Command):
    COMMAND_WORD = "schedule"
    MESSAGE_USAGE = (
        "schedule: Sets the deadline of the task identified by the index number "
        "used in the last task listing.\n"
        "Parameters: INDEX d/DEADLINE\n"
        "Example: schedule 2 d/tomorrow"
    )
    MESSAGE_SUCCESS = "Task is scheduled successfully"

    def __init__(self, filtered_index: int, deadline: pendulum.DateTime) -> None:
        super().__init__()
        assert filtered_index > 0
        self.filtered_index = filtered_index
        self.descriptor: EditTaskDescriptor = {"deadline": deadline}

    def apply(self, repository: TaskRepository) -> CommandResult:
        edit_command = EditCommand(self.filtered_index, self.descriptor)
        edit_command.execute(repository)
        return command_result(self.MESSAGE_SUCCESS)


class MarkCommand(Command):
    COMMAND_WORD = "mark"
    MESSAGE_USAGE = (
        "mark: Toggles the task identified by the index number used in the last "
        "task listing between complete and incomplete.\n"
        "Parameters: INDEX\n"
        "Example: mark 1"
    )
    MESSAGE_SUCCESS = "Marked task as {status}: {name}"

    def __init__(self, filtered_index: int) -> None:
        super().__init__()
        assert filtered_index > 0
        self.filtered_index = filtered_index

    def apply(self, repository: TaskRepository) -> CommandResult:
        position = resolve_index(repository, self.filtered_index)
        task = repository.get_task(position)
        new_status = status_model.toggle(task["status"])

        edit_command = EditCommand(self.filtered_index, {"status": new_status})
        edit_command.execute(repository)
        return command_result(
            self.MESSAGE_SUCCESS.format(status=new_status, name=task["name"])
        )


class DeleteCommand(Command):
    COMMAND_WORD = "delete"
    MESSAGE_USAGE = (
        "delete: Deletes the task identified by the index number used in the "
        "last task listing.\n"
        "Parameters: INDEX\n"
        "Example: delete 1"
    )
    MESSAGE_SUCCESS = "Deleted task: {task}"

    def __init__(self, filtered_index: int) -> None:
        super().__init__()
        assert filtered_index > 0
        self.filtered_index = filtered_index

    def apply(self, repository: TaskRepository) -> CommandResult:
        position = resolve_index(repository, self.filtered_index)
        deleted_task = repository.delete_task(position)
        return command_result(
            self.MESSAGE_SUCCESS.format(task=describe_task(deleted_task))
        )
