# SPDX-License-Identifier: MIT

"""Exceptions raised by the command layer and the sync interface."""


class OpusError(Exception):
    """Base exception for Opus errors."""

    pass


class ParseFormatError(OpusError):
    """Raised when command input is malformed or a positional argument is missing."""

    pass


class FieldValidationError(ParseFormatError):
    """Raised when a supplied field value breaks its domain rule."""

    def __init__(self, field: str, message: str) -> None:
        super().__init__(message)
        self.field = field


class CommandExecutionError(OpusError):
    """Raised when a command cannot be applied to the current task list."""

    pass


class SyncUnavailableError(OpusError):
    """Raised when the sync service cannot be reached."""

    pass


class StorageFormatError(OpusError):
    """Raised when the task file cannot be read as a task list."""

    pass
