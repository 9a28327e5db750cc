# SPDX-License-Identifier: MIT

from opus.logic.commands.base import Command, CommandResult, command_result
from opus.model.task import Task
from opus.repository.task import TaskRepository

MESSAGE_TASKS_LISTED_OVERVIEW = "{count} tasks listed!"


class KeywordPredicate:
    """
    Match tasks whose name contains one of the keywords as a whole word, or
    that carry one of the keywords as a tag. Matching ignores case.
    """

    def __init__(self, keywords: list[str]) -> None:
        self.keywords = [keyword.lower() for keyword in keywords]

    def __call__(self, task: Task) -> bool:
        name_words = {word.lower() for word in task["name"].split()}
        tags = {tag.lower() for tag in task["tags"]}
        return any(
            keyword in name_words or keyword in tags for keyword in self.keywords
        )


class FindCommand(Command):
    COMMAND_WORD = "find"
    MESSAGE_USAGE = (
        "find: Finds all tasks whose names contain any of the specified keywords "
        "or that are tagged with one of them (case-insensitive) and displays them "
        "as a list with index numbers.\n"
        "Parameters: KEYWORD [MORE_KEYWORDS]...\n"
        "Example: find milk errand"
    )

    def __init__(self, keywords: list[str]) -> None:
        super().__init__()
        self.predicate = KeywordPredicate(keywords)

    def apply(self, repository: TaskRepository) -> CommandResult:
        repository.set_filter(self.predicate)
        count = len(repository.get_filtered_tasks())
        return command_result(MESSAGE_TASKS_LISTED_OVERVIEW.format(count=count))


class ListCommand(Command):
    COMMAND_WORD = "list"
    MESSAGE_USAGE = "list: Lists all tasks.\nExample: list"
    MESSAGE_SUCCESS = "Listed all tasks"

    def apply(self, repository: TaskRepository) -> CommandResult:
        repository.clear_filter()
        return command_result(self.MESSAGE_SUCCESS)
