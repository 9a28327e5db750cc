# SPDX-License-Identifier: MIT

import pytest

from opus.exceptions import CommandExecutionError
from opus.logic.commands.base import (
    MESSAGE_ALREADY_EXECUTED,
    MESSAGE_INVALID_TASK_DISPLAYED_INDEX,
)
from opus.logic.commands.task import (
    MESSAGE_DUPLICATE_TASK,
    AddCommand,
    DeleteCommand,
    EditCommand,
    MarkCommand,
)
from opus.logic.parse import parse_command
from opus.model.priority import Priority
from opus.model.status import Status
from opus.model.task import describe_task, is_same_task
from opus.repository.task import TaskRepository
from opus.time import datetime_to_local_date_str

from fakes import make_task, typical_tasks


def run(repository: TaskRepository, command_text: str) -> str:
    return parse_command(command_text).execute(repository)["message"]


def assert_only_changed(
    repository: TaskRepository, position: int, expected_task: dict
) -> None:
    """Task at position matches expected_task and every other task is untouched."""
    tasks = repository.get_all_tasks()
    expected_tasks = typical_tasks()
    expected_tasks[position] = expected_task  # type: ignore[assignment]

    assert len(tasks) == len(expected_tasks)
    for task, expected in zip(tasks, expected_tasks):
        assert is_same_task(task, expected)


def test_add_scenario() -> None:
    repository = TaskRepository()

    message = run(repository, "add Buy milk p/hi d/2024-01-01")

    tasks = repository.get_all_tasks()
    assert len(tasks) == 1
    task = tasks[0]
    assert task["id"] is not None
    assert task["name"] == "Buy milk"
    assert task["priority"] is Priority.HIGH
    assert datetime_to_local_date_str(task["deadline"]) == "2024-01-01"
    assert task["status"] is None
    assert task["note"] is None
    assert task["tags"] == set()
    assert message == AddCommand.MESSAGE_SUCCESS.format(task=describe_task(task))


def test_add_duplicate_fails_without_mutation(repository: TaskRepository) -> None:
    before = repository.get_all_tasks()

    with pytest.raises(CommandExecutionError) as exc_info:
        run(repository, "add Finish report p/hi t/work")

    assert str(exc_info.value) == MESSAGE_DUPLICATE_TASK
    assert repository.get_all_tasks() == before
    assert not repository.can_undo()


def test_add_same_name_with_different_fields_is_not_a_duplicate(
    repository: TaskRepository,
) -> None:
    run(repository, "add Finish report p/low t/work")

    assert len(repository.get_all_tasks()) == 6


def test_edit_all_fields_specified(repository: TaskRepository) -> None:
    run(repository, "edit 1 Bobby p/low s/complete n/Block 123 d/2024-03-01 t/husband")

    task = repository.get_task(0)
    assert task["name"] == "Bobby"
    assert task["priority"] is Priority.LOW
    assert task["status"] is Status.COMPLETE
    assert task["note"] == "Block 123"
    assert datetime_to_local_date_str(task["deadline"]) == "2024-03-01"
    assert task["tags"] == {"husband"}


def test_edit_not_all_fields_specified(repository: TaskRepository) -> None:
    run(repository, "edit 2 t/sweetie t/bestie")

    expected = typical_tasks()[1]
    expected["tags"] = {"sweetie", "bestie"}
    assert_only_changed(repository, 1, expected)


def test_edit_clear_tags(repository: TaskRepository) -> None:
    run(repository, "edit 2 t/")

    expected = typical_tasks()[1]
    expected["tags"] = set()
    assert_only_changed(repository, 1, expected)


def test_edit_keeps_identity(repository: TaskRepository) -> None:
    task_id = repository.get_task(2)["id"]

    run(repository, "edit 3 Call Alice tonight")

    assert repository.get_task(2)["id"] == task_id
    assert repository.get_task(2)["name"] == "Call Alice tonight"


def test_find_then_edit(repository: TaskRepository) -> None:
    run(repository, "find Elle")

    message = run(repository, "edit 1 Plan Belle party")

    expected = typical_tasks()[4]
    expected["name"] = "Plan Belle party"
    assert_only_changed(repository, 4, expected)
    assert message == EditCommand.MESSAGE_SUCCESS.format(
        task=describe_task(repository.get_task(4))
    )


def test_edit_invalid_index(repository: TaskRepository) -> None:
    with pytest.raises(CommandExecutionError) as exc_info:
        run(repository, "edit 8 Bobby")
    assert str(exc_info.value) == MESSAGE_INVALID_TASK_DISPLAYED_INDEX


def test_edit_index_outside_filtered_view(repository: TaskRepository) -> None:
    run(repository, "find Elle")

    with pytest.raises(CommandExecutionError):
        run(repository, "edit 2 p/hi")


@pytest.mark.parametrize("command_text", ["edit 1", "edit 1    "])
def test_edit_no_fields_specified(
    repository: TaskRepository, command_text: str
) -> None:
    with pytest.raises(CommandExecutionError) as exc_info:
        run(repository, command_text)
    assert str(exc_info.value) == EditCommand.MESSAGE_NOT_EDITED
    assert not repository.is_dirty


def test_edit_duplicate_task(repository: TaskRepository) -> None:
    before = repository.get_all_tasks()

    with pytest.raises(CommandExecutionError) as exc_info:
        run(repository, "edit 3 Finish report p/hi t/work")

    assert str(exc_info.value) == MESSAGE_DUPLICATE_TASK
    assert repository.get_all_tasks() == before


def test_edit_to_itself_is_not_a_duplicate(repository: TaskRepository) -> None:
    run(repository, "edit 1 Finish report")

    assert repository.get_task(0)["name"] == "Finish report"


def test_edit_command_copies_descriptor() -> None:
    descriptor = {"tags": {"home"}}
    command = EditCommand(1, descriptor)  # type: ignore[arg-type]
    descriptor["tags"].add("work")

    assert command.descriptor == {"tags": {"home"}}


def test_schedule_sets_deadline_only(repository: TaskRepository) -> None:
    message = run(repository, "schedule 3 d/2024-05-05")

    expected = typical_tasks()[2]
    task = repository.get_task(2)
    expected["deadline"] = task["deadline"]
    assert datetime_to_local_date_str(task["deadline"]) == "2024-05-05"
    assert_only_changed(repository, 2, expected)
    assert message == "Task is scheduled successfully"


def test_schedule_shares_edit_failures(repository: TaskRepository) -> None:
    with pytest.raises(CommandExecutionError) as exc_info:
        run(repository, "schedule 9 d/today")
    assert str(exc_info.value) == MESSAGE_INVALID_TASK_DISPLAYED_INDEX


def test_mark_toggles_status(repository: TaskRepository) -> None:
    message = run(repository, "mark 4")
    assert repository.get_task(3)["status"] is Status.COMPLETE
    assert message == MarkCommand.MESSAGE_SUCCESS.format(
        status="complete", name="Read book"
    )

    run(repository, "mark 4")
    assert repository.get_task(3)["status"] is Status.INCOMPLETE

    # A task without a status becomes complete
    run(repository, "mark 3")
    assert repository.get_task(2)["status"] is Status.COMPLETE


def test_delete(repository: TaskRepository) -> None:
    deleted = repository.get_task(1)

    message = run(repository, "delete 2")

    names = [task["name"] for task in repository.get_all_tasks()]
    assert "Buy groceries" not in names
    assert len(names) == 4
    assert message == DeleteCommand.MESSAGE_SUCCESS.format(task=describe_task(deleted))


def test_delete_uses_filtered_index(repository: TaskRepository) -> None:
    run(repository, "find alice")
    run(repository, "delete 1")

    names = [task["name"] for task in repository.get_all_tasks()]
    assert names == ["Finish report", "Buy groceries", "Read book", "Plan Elle party"]


def test_delete_invalid_index(repository: TaskRepository) -> None:
    with pytest.raises(CommandExecutionError) as exc_info:
        DeleteCommand(6).execute(repository)
    assert str(exc_info.value) == MESSAGE_INVALID_TASK_DISPLAYED_INDEX
    assert len(repository.get_all_tasks()) == 5


def test_add_command_built_directly() -> None:
    repository = TaskRepository()
    task = make_task("Water plants", priority=Priority.LOW, tags=["home"])

    AddCommand(name="Water plants", priority=Priority.LOW, tags={"home"}).execute(
        repository
    )

    assert is_same_task(repository.get_task(0), task)


def test_command_executes_only_once(repository: TaskRepository) -> None:
    command = parse_command("add Water plants")
    command.execute(repository)

    with pytest.raises(CommandExecutionError) as exc_info:
        command.execute(repository)

    assert str(exc_info.value) == MESSAGE_ALREADY_EXECUTED
    assert command.is_executed
    assert len(repository.get_all_tasks()) == 6
