"""
Commands that can be run against the address book model
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path

from bae_tools.addressbook.book import Model
from bae_tools.addressbook.person import Person
from bae_tools.compare import compare
from bae_tools.constants import DEFAULT_DATA_DIR, DEFAULT_FILENAME, SNAPSHOT_SUFFIX
from bae_tools.enums import Format
from bae_tools.export.reader import read_and_flatten
from bae_tools.export.util import extract_headers
from bae_tools.export.writer import write_file

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CommandResult:
    feedback: str
    success: bool = True


class Command:
    def execute(self, model: Model) -> CommandResult:
        raise NotImplementedError


@dataclass(frozen=True)
class ListCommand(Command):
    COMMAND_WORD = "list"
    MESSAGE_SUCCESS = "Listed all persons"

    def execute(self, model: Model) -> CommandResult:
        model.update_filtered_persons(None)
        return CommandResult(self.MESSAGE_SUCCESS)


@dataclass(frozen=True)
class FilterCommand(Command):
    """
    Shows persons whose name contains `name` and who have every tag in `tags`
    """

    COMMAND_WORD = "filter"
    MESSAGE_USAGE = (
        "filter: Filters persons by name and/or tag names.\n"
        "Example: filter n\\alice t\\friends t\\colleagues"
    )
    MESSAGE_SUCCESS = "{count} persons listed!"

    name: str = ""
    tags: frozenset[str] = field(default_factory=frozenset)

    def matches(self, person: Person) -> bool:
        if self.name and self.name.lower() not in person.name.lower():
            return False
        names = {t.name for t in person.tags}
        return self.tags <= names

    def execute(self, model: Model) -> CommandResult:
        model.update_filtered_persons(self.matches)
        count = len(model.filtered_persons)
        return CommandResult(self.MESSAGE_SUCCESS.format(count=count))


@dataclass(frozen=True)
class AdvFilterCommand(Command):
    """
    Shows persons having a tag named `tag_name` whose value satisfies
    `<value> <operator> <tag_value>`
    """

    COMMAND_WORD = "filteradv"
    MESSAGE_USAGE = (
        "filteradv: Filters persons by comparing a tag's value. Operators: "
        "=, !=, >, <, >=, <=\n"
        "Example: filteradv friend >= 1"
    )
    MESSAGE_NO_CONTACT_FOUND = "No contact found!"

    tag_name: str
    operator: str
    tag_value: str

    @staticmethod
    def construct_success_message(tag_name: str, operator: str, tag_value: str) -> str:
        return f"Filtered contacts with tag '{tag_name} {operator} {tag_value}'"

    def matches(self, person: Person) -> bool:
        return any(
            compare(self.operator, tag, self.tag_value)
            for tag in person.tags_named(self.tag_name)
        )

    def execute(self, model: Model) -> CommandResult:
        model.update_filtered_persons(self.matches)
        if not model.filtered_persons:
            return CommandResult(self.MESSAGE_NO_CONTACT_FOUND)

        return CommandResult(
            self.construct_success_message(self.tag_name, self.operator, self.tag_value)
        )


@dataclass(frozen=True)
class ExportCommand(Command):
    """
    Exports the address book snapshot on disk as CSV or TXT. The snapshot is read
    rather than the model, so changes that haven't been saved yet aren't exported.
    """

    COMMAND_WORD = "export"
    MESSAGE_USAGE = (
        "export: Exports the address book in CSV or TXT format.\n"
        "Example: export format\\csv or export format\\txt"
    )
    SUCCESS_MESSAGE = (
        "The address book has been exported to {path} in the specified format."
    )
    FAILURE_MESSAGE = "Error exporting address book to {format}"

    format: Format
    data_dir: Path = DEFAULT_DATA_DIR
    progress: bool = field(default=False, compare=False)

    @property
    def snapshot_path(self) -> Path:
        return self.data_dir / f"{DEFAULT_FILENAME}{SNAPSHOT_SUFFIX}"

    def execute(self, model: Model) -> CommandResult:
        failure = CommandResult(
            self.FAILURE_MESSAGE.format(format=self.format.value), success=False
        )
        if self.format is Format.UNSUPPORTED:
            return failure

        try:
            records = read_and_flatten(self.snapshot_path)
            headers = extract_headers(records)
            path = write_file(
                records,
                headers,
                self.data_dir / DEFAULT_FILENAME,
                self.format,
                progress=self.progress,
            )
        except (OSError, ValueError) as e:
            logger.debug(f"Export to {self.format.value} failed: {e}")
            return failure

        return CommandResult(self.SUCCESS_MESSAGE.format(path=path))
