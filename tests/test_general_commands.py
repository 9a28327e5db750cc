# SPDX-License-Identifier: MIT

import pytest

from opus.exceptions import CommandExecutionError
from opus.logic.commands.general import (
    ALL_COMMANDS,
    ClearCommand,
    ExitCommand,
    HelpCommand,
    RedoCommand,
    SyncCommand,
    UndoCommand,
)
from opus.logic.commands.task import AddCommand, DeleteCommand
from opus.repository.task import TaskRepository
from opus.sync.manager import SyncManager

from fakes import (
    DisconnectingSyncService,
    RecordingSyncService,
    UnreachableSyncService,
    typical_tasks,
)


def names(repository: TaskRepository) -> list[str]:
    return [task["name"] for task in repository.get_all_tasks()]


def test_clear(repository: TaskRepository) -> None:
    result = ClearCommand().execute(repository)

    assert result["message"] == ClearCommand.MESSAGE_SUCCESS
    assert repository.get_all_tasks() == []
    assert repository.is_dirty


def test_undo_and_redo(repository: TaskRepository) -> None:
    original = names(repository)
    DeleteCommand(1).execute(repository)
    AddCommand(name="Water plants").execute(repository)
    after = names(repository)

    UndoCommand().execute(repository)
    UndoCommand().execute(repository)
    assert names(repository) == original

    RedoCommand().execute(repository)
    RedoCommand().execute(repository)
    assert names(repository) == after


def test_undo_clear(repository: TaskRepository) -> None:
    ClearCommand().execute(repository)

    UndoCommand().execute(repository)

    assert len(repository.get_all_tasks()) == 5


def test_new_change_discards_redo(repository: TaskRepository) -> None:
    DeleteCommand(1).execute(repository)
    UndoCommand().execute(repository)

    AddCommand(name="Water plants").execute(repository)

    with pytest.raises(CommandExecutionError) as exc_info:
        RedoCommand().execute(repository)
    assert str(exc_info.value) == RedoCommand.MESSAGE_NOTHING_TO_REDO


def test_nothing_to_undo(repository: TaskRepository) -> None:
    with pytest.raises(CommandExecutionError) as exc_info:
        UndoCommand().execute(repository)
    assert str(exc_info.value) == UndoCommand.MESSAGE_NOTHING_TO_UNDO


def test_sync_on_pushes_every_task() -> None:
    service = RecordingSyncService()
    repository = TaskRepository(typical_tasks(), sync=SyncManager(service))

    result = SyncCommand(True).execute(repository)

    assert result["message"] == SyncCommand.MESSAGE_SYNC_ON
    assert service.started
    assert service.operations() == ["update_list"]
    assert len(service.calls[0][1]) == 5  # type: ignore[arg-type]


def test_sync_off(
    synced_repository: TaskRepository, sync_service: RecordingSyncService
) -> None:
    result = SyncCommand(False).execute(synced_repository)

    assert result["message"] == SyncCommand.MESSAGE_SYNC_OFF
    assert not sync_service.started

    # Changes made while sync is off stay local
    AddCommand(name="Water plants").execute(synced_repository)
    assert sync_service.calls == []


def test_sync_not_configured(repository: TaskRepository) -> None:
    with pytest.raises(CommandExecutionError) as exc_info:
        SyncCommand(True).execute(repository)
    assert str(exc_info.value) == SyncCommand.MESSAGE_NOT_CONFIGURED


def test_sync_unreachable() -> None:
    repository = TaskRepository(
        typical_tasks(), sync=SyncManager(UnreachableSyncService())
    )

    with pytest.raises(CommandExecutionError) as exc_info:
        SyncCommand(True).execute(repository)

    assert str(exc_info.value).startswith("Sync service is unavailable")
    assert not repository.sync.is_active  # type: ignore[union-attr]


def test_help_lists_every_command(repository: TaskRepository) -> None:
    result = HelpCommand().execute(repository)

    assert result["payload"] == {"help": True}
    for command in ALL_COMMANDS:
        assert command.MESSAGE_USAGE in result["message"]


def test_exit(repository: TaskRepository) -> None:
    result = ExitCommand().execute(repository)

    assert result["payload"] == {"exit": True}
    assert not repository.is_dirty


def test_sync_on_with_refused_connection() -> None:
    service = DisconnectingSyncService(fail_on_start=True)
    repository = TaskRepository(typical_tasks(), sync=SyncManager(service))

    with pytest.raises(CommandExecutionError) as exc_info:
        SyncCommand(True).execute(repository)

    assert str(exc_info.value) == SyncCommand.MESSAGE_UNAVAILABLE.format(
        reason="connection refused"
    )


def test_add_succeeds_when_sync_connection_drops() -> None:
    sync = SyncManager(DisconnectingSyncService())
    sync.start_sync()
    repository = TaskRepository(typical_tasks(), sync=sync)

    result = AddCommand(name="Water plants").execute(repository)

    assert result["message"].startswith("New task added: Water plants")
    assert "Water plants" in names(repository)
