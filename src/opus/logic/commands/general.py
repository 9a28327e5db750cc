# SPDX-License-Identifier: MIT

from opus.exceptions import CommandExecutionError, SyncUnavailableError
from opus.logic.commands.base import Command, CommandResult, command_result
from opus.logic.commands.task import (
    AddCommand,
    DeleteCommand,
    EditCommand,
    MarkCommand,
    ScheduleCommand,
)
from opus.logic.commands.view import FindCommand, ListCommand
from opus.repository.task import TaskRepository


class ClearCommand(Command):
    COMMAND_WORD = "clear"
    MESSAGE_USAGE = "clear: Deletes every task.\nExample: clear"
    MESSAGE_SUCCESS = "Task manager has been cleared!"

    def apply(self, repository: TaskRepository) -> CommandResult:
        repository.clear_tasks()
        return command_result(self.MESSAGE_SUCCESS)


class UndoCommand(Command):
    COMMAND_WORD = "undo"
    MESSAGE_USAGE = "undo: Reverts the last change to the task list.\nExample: undo"
    MESSAGE_SUCCESS = "Undid the last change"
    MESSAGE_NOTHING_TO_UNDO = "There is nothing to undo"

    def apply(self, repository: TaskRepository) -> CommandResult:
        if not repository.can_undo():
            raise CommandExecutionError(self.MESSAGE_NOTHING_TO_UNDO)
        repository.undo()
        return command_result(self.MESSAGE_SUCCESS)


class RedoCommand(Command):
    COMMAND_WORD = "redo"
    MESSAGE_USAGE = "redo: Re-applies the last undone change.\nExample: redo"
    MESSAGE_SUCCESS = "Redid the last undone change"
    MESSAGE_NOTHING_TO_REDO = "There is nothing to redo"

    def apply(self, repository: TaskRepository) -> CommandResult:
        if not repository.can_redo():
            raise CommandExecutionError(self.MESSAGE_NOTHING_TO_REDO)
        repository.redo()
        return command_result(self.MESSAGE_SUCCESS)


class SyncCommand(Command):
    COMMAND_WORD = "sync"
    MESSAGE_USAGE = (
        "sync: Starts or stops mirroring tasks to the sync service.\n"
        "Parameters: on|off\n"
        "Example: sync on"
    )
    MESSAGE_SYNC_ON = "Sync started"
    MESSAGE_SYNC_OFF = "Sync stopped"
    MESSAGE_NOT_CONFIGURED = "No sync service is configured"
    MESSAGE_UNAVAILABLE = "Sync service is unavailable: {reason}"

    def __init__(self, enable: bool) -> None:
        super().__init__()
        self.enable = enable

    def apply(self, repository: TaskRepository) -> CommandResult:
        if repository.sync is None:
            raise CommandExecutionError(self.MESSAGE_NOT_CONFIGURED)

        if not self.enable:
            repository.sync.stop_sync()
            return command_result(self.MESSAGE_SYNC_OFF)

        try:
            repository.sync.start_sync()
        except SyncUnavailableError as e:
            raise CommandExecutionError(self.MESSAGE_UNAVAILABLE.format(reason=e))
        repository.push_all_to_sync()
        return command_result(self.MESSAGE_SYNC_ON)


class HelpCommand(Command):
    COMMAND_WORD = "help"
    MESSAGE_USAGE = "help: Shows program usage instructions.\nExample: help"

    def apply(self, repository: TaskRepository) -> CommandResult:
        usages = [command.MESSAGE_USAGE for command in ALL_COMMANDS]
        return command_result("\n\n".join(usages), {"help": True})


class ExitCommand(Command):
    COMMAND_WORD = "exit"
    MESSAGE_USAGE = "exit: Exits the program.\nExample: exit"
    MESSAGE_SUCCESS = "Exiting Opus as requested ..."

    def apply(self, repository: TaskRepository) -> CommandResult:
        return command_result(self.MESSAGE_SUCCESS, {"exit": True})


ALL_COMMANDS: list[type[Command]] = [
    AddCommand,
    EditCommand,
    ScheduleCommand,
    MarkCommand,
    DeleteCommand,
    FindCommand,
    ListCommand,
    ClearCommand,
    UndoCommand,
    RedoCommand,
    SyncCommand,
    HelpCommand,
    ExitCommand,
]
