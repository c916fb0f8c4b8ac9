"""
BA€ address book shell

Runs a single command, e.g. `bae filteradv friend ">=" 1` or `bae export format\\csv`,
or starts an interactive shell when no command is given.
"""

from argparse import ArgumentParser, Namespace
from pathlib import Path

from colorama import Fore, Style

from bae_tools.addressbook.book import AddressBook, Model
from bae_tools.cli.common import add_common_args, setup_logging
from bae_tools.commands import CommandResult, ExportCommand
from bae_tools.constants import DEFAULT_FILENAME, SNAPSHOT_SUFFIX
from bae_tools.parser import ParseError, parse_command
from bae_tools.version import VERSION


def main() -> None:
    args = parse_args()
    setup_logging(args)

    try:
        data_dir = Path(args.data_dir)
        model = load_model(data_dir)
        if args.command:
            run(model, " ".join(args.command), data_dir, progress=True)
        else:
            repl(model, data_dir)
    except Exception as e:
        if not args.v:
            print(e)
        else:
            raise


def parse_args() -> Namespace:
    parser = ArgumentParser(description=__doc__)
    add_common_args(parser)
    parser.add_argument("--version", action="version", version=VERSION)
    parser.add_argument(
        "command",
        nargs="*",
        help="Command to run, e.g. filteradv friend >= 1. Starts a shell if omitted",
    )
    return parser.parse_args()


def load_model(data_dir: Path) -> Model:
    path = Path(data_dir, DEFAULT_FILENAME + SNAPSHOT_SUFFIX)
    try:
        book = AddressBook.from_file(path)
    except OSError:
        raise RuntimeError(f"Could not open {path}. Does the address book exist?")
    return Model(book)


def run(model: Model, line: str, data_dir: Path, progress: bool = False) -> bool:
    """
    Run a single command line against the model and print the outcome. Returns False
    if the command couldn't be parsed or failed.
    """
    try:
        command = parse_command(line, data_dir=data_dir, progress=progress)
    except ParseError as e:
        print_error(str(e))
        return False

    result = command.execute(model)
    print_result(result)
    if result.success and not isinstance(command, ExportCommand):
        for i, person in enumerate(model.filtered_persons, start=1):
            print(f"{i}. {person}")
    return result.success


def repl(model: Model, data_dir: Path) -> None:
    """
    Enter a REPL shell with the address book
    """
    print("Press Enter or Ctrl-D to quit")
    while True:
        try:
            line = input(">>> ").strip()
        except EOFError:
            break
        if line == "":
            break

        run(model, line, data_dir)


def print_result(result: CommandResult) -> None:
    if result.success:
        print(Fore.GREEN + result.feedback + Style.RESET_ALL)
    else:
        print_error(result.feedback)


def print_error(message: str) -> None:
    print(Fore.RED + message + Style.RESET_ALL)


if __name__ == "__main__":
    main()
