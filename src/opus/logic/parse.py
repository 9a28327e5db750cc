# SPDX-License-Identifier: MIT

import re
from typing import Callable, Optional, TypeAlias

from opus.exceptions import ParseFormatError
from opus.logic import validate
from opus.logic.commands.base import (
    MESSAGE_INVALID_COMMAND_FORMAT,
    MESSAGE_UNKNOWN_COMMAND,
    Command,
)
from opus.logic.commands.general import (
    ClearCommand,
    ExitCommand,
    HelpCommand,
    RedoCommand,
    SyncCommand,
    UndoCommand,
)
from opus.logic.commands.task import (
    AddCommand,
    DeleteCommand,
    EditCommand,
    MarkCommand,
    ScheduleCommand,
)
from opus.logic.commands.view import FindCommand, ListCommand
from opus.logic.tokenize import (
    PREFIX_DEADLINE,
    PREFIX_NOTE,
    PREFIX_PRIORITY,
    PREFIX_STATUS,
    PREFIX_TAG,
    ArgumentTokenizer,
)
from opus.model.task import EditTaskDescriptor

CommandParser: TypeAlias = Callable[[str], Command]

BASIC_COMMAND_FORMAT = re.compile(
    r"^\s*(?P<command_word>\S+)(?P<arguments>.*)$", re.DOTALL
)
INDEX_FORMAT = re.compile(r"^\d+$")

TASK_PREFIXES = (
    PREFIX_PRIORITY,
    PREFIX_STATUS,
    PREFIX_NOTE,
    PREFIX_DEADLINE,
    PREFIX_TAG,
)


def invalid_format(usage: str) -> ParseFormatError:
    return ParseFormatError(MESSAGE_INVALID_COMMAND_FORMAT.format(usage=usage))


def parse_index(index: Optional[str], usage: str) -> int:
    """Parse a one-based index. Bounds are checked when the command executes."""
    if index is None:
        raise invalid_format(usage)
    trimmed = index.strip()
    if not INDEX_FORMAT.match(trimmed) or int(trimmed) == 0:
        raise invalid_format(usage)
    return int(trimmed)


def parse_add(args: str) -> Command:
    tokenizer = ArgumentTokenizer(*TASK_PREFIXES)
    tokenizer.tokenize(args)

    preamble = tokenizer.get_preamble()
    if preamble is None:
        raise invalid_format(AddCommand.MESSAGE_USAGE)

    priority = tokenizer.get_value(PREFIX_PRIORITY)
    status = tokenizer.get_value(PREFIX_STATUS)
    note = tokenizer.get_value(PREFIX_NOTE)
    deadline = tokenizer.get_value(PREFIX_DEADLINE)
    tags = tokenizer.get_all_values(PREFIX_TAG)

    return AddCommand(
        name=validate.parse_name(preamble),
        priority=validate.parse_priority(priority) if priority is not None else None,
        status=validate.parse_status(status) if status else None,
        note=validate.parse_note(note) if note else None,
        deadline=validate.parse_deadline(deadline) if deadline else None,
        tags=validate.parse_tags(tags) if tags is not None else set(),
    )


def parse_edit(args: str) -> Command:
    tokenizer = ArgumentTokenizer(*TASK_PREFIXES)
    tokenizer.tokenize(args)

    preamble = tokenizer.get_preamble()
    if preamble is None:
        raise invalid_format(EditCommand.MESSAGE_USAGE)
    index_and_name = preamble.split(maxsplit=1)
    index = parse_index(index_and_name[0], EditCommand.MESSAGE_USAGE)

    descriptor: EditTaskDescriptor = {}
    if len(index_and_name) > 1:
        descriptor["name"] = validate.parse_name(index_and_name[1])

    priority = tokenizer.get_value(PREFIX_PRIORITY)
    if priority is not None:
        descriptor["priority"] = validate.parse_priority(priority)

    # An empty value clears the optional fields below.
    status = tokenizer.get_value(PREFIX_STATUS)
    if status is not None:
        descriptor["status"] = validate.parse_status(status) if status else None

    note = tokenizer.get_value(PREFIX_NOTE)
    if note is not None:
        descriptor["note"] = validate.parse_note(note) if note else None

    deadline = tokenizer.get_value(PREFIX_DEADLINE)
    if deadline is not None:
        descriptor["deadline"] = validate.parse_deadline(deadline) if deadline else None

    tags = tokenizer.get_all_values(PREFIX_TAG)
    if tags is not None:
        descriptor["tags"] = validate.parse_tags(tags)

    return EditCommand(index, descriptor)


def parse_schedule(args: str) -> Command:
    tokenizer = ArgumentTokenizer(PREFIX_DEADLINE)
    tokenizer.tokenize(args)

    index = parse_index(tokenizer.get_preamble(), ScheduleCommand.MESSAGE_USAGE)
    deadline = tokenizer.get_value(PREFIX_DEADLINE)
    if not deadline:
        raise invalid_format(ScheduleCommand.MESSAGE_USAGE)

    return ScheduleCommand(index, validate.parse_deadline(deadline))


def parse_delete(args: str) -> Command:
    return DeleteCommand(parse_index(args, DeleteCommand.MESSAGE_USAGE))


def parse_mark(args: str) -> Command:
    return MarkCommand(parse_index(args, MarkCommand.MESSAGE_USAGE))


def parse_find(args: str) -> Command:
    keywords = args.split()
    if not keywords:
        raise invalid_format(FindCommand.MESSAGE_USAGE)
    return FindCommand(keywords)


def parse_sync(args: str) -> Command:
    match args.strip().lower():
        case "on":
            return SyncCommand(enable=True)
        case "off":
            return SyncCommand(enable=False)
    raise invalid_format(SyncCommand.MESSAGE_USAGE)


COMMAND_PARSERS: dict[str, CommandParser] = {
    AddCommand.COMMAND_WORD: parse_add,
    EditCommand.COMMAND_WORD: parse_edit,
    ScheduleCommand.COMMAND_WORD: parse_schedule,
    DeleteCommand.COMMAND_WORD: parse_delete,
    MarkCommand.COMMAND_WORD: parse_mark,
    FindCommand.COMMAND_WORD: parse_find,
    SyncCommand.COMMAND_WORD: parse_sync,
    ListCommand.COMMAND_WORD: lambda args: ListCommand(),
    ClearCommand.COMMAND_WORD: lambda args: ClearCommand(),
    UndoCommand.COMMAND_WORD: lambda args: UndoCommand(),
    RedoCommand.COMMAND_WORD: lambda args: RedoCommand(),
    HelpCommand.COMMAND_WORD: lambda args: HelpCommand(),
    ExitCommand.COMMAND_WORD: lambda args: ExitCommand(),
}


def parse_command(user_input: str) -> Command:
    """
    Parse a full command line such as "edit 2 p/hi" into a command object.

    Raises:
        ParseFormatError: If the input is blank, the command word is unknown
            or the arguments do not match the command's format.
        FieldValidationError: If a supplied field value is invalid.
    """
    match = BASIC_COMMAND_FORMAT.match(user_input)
    if match is None:
        raise invalid_format(HelpCommand.MESSAGE_USAGE)

    parser = COMMAND_PARSERS.get(match.group("command_word"))
    if parser is None:
        raise ParseFormatError(MESSAGE_UNKNOWN_COMMAND)

    return parser(match.group("arguments"))
