"""
Parse command lines like `filteradv friend >= 1` into commands
"""

import logging

from bae_tools.addressbook.tag import Tag
from bae_tools.commands import (
    AdvFilterCommand,
    Command,
    ExportCommand,
    FilterCommand,
    ListCommand,
)
from bae_tools.enums import Format, Operator

logger = logging.getLogger(__name__)

NAME_PREFIX = "n\\"
TAG_PREFIX = "t\\"
FORMAT_PREFIX = "format\\"

OPERATORS = {o.value for o in Operator}


class ParseError(ValueError):
    """
    The command line doesn't match what the command expects
    """


def parse_command(line: str, **export_kwargs) -> Command:
    """
    Parse a command line. Any extra keyword args are passed along to ExportCommand.
    """
    word, _, args = line.strip().partition(" ")
    args = args.strip()
    logger.debug(f"Parsing command {word!r} with args {args!r}")

    if word == AdvFilterCommand.COMMAND_WORD:
        return parse_adv_filter(args)
    elif word == FilterCommand.COMMAND_WORD:
        return parse_filter(args)
    elif word == ListCommand.COMMAND_WORD:
        return ListCommand()
    elif word == ExportCommand.COMMAND_WORD:
        return parse_export(args, **export_kwargs)
    else:
        raise ParseError(f"Unknown command: {word}")


def parse_adv_filter(args: str) -> AdvFilterCommand:
    parts = args.split(maxsplit=2)
    if len(parts) != 3:
        raise ParseError(f"Invalid command format!\n{AdvFilterCommand.MESSAGE_USAGE}")

    tag_name, operator, value = parts
    if not Tag.is_valid_name(tag_name):
        raise ParseError(f"Tag names should be alphanumeric: '{tag_name}'")
    if operator not in OPERATORS:
        raise ParseError(
            f"Invalid operator: {operator}\n{AdvFilterCommand.MESSAGE_USAGE}"
        )

    return AdvFilterCommand(tag_name, operator, value.strip())


def parse_filter(args: str) -> FilterCommand:
    """
    Parse `n\\<name> t\\<tag> t\\<tag>...`. The name may only be given once, tags any
    number of times.
    """
    names = []
    tags = set()
    # Which prefix the current word belongs to
    current = None
    for token in args.split():
        if token.startswith(NAME_PREFIX):
            names.append(token[len(NAME_PREFIX) :])
            current = NAME_PREFIX
        elif token.startswith(TAG_PREFIX):
            tag_name = token[len(TAG_PREFIX) :]
            if not tag_name:
                raise ParseError(
                    f"Invalid command format!\n{FilterCommand.MESSAGE_USAGE}"
                )
            if not Tag.is_valid_name(tag_name):
                raise ParseError(f"Tag names should be alphanumeric: '{tag_name}'")
            tags.add(tag_name)
            current = TAG_PREFIX
        elif current == NAME_PREFIX:
            # Names can have spaces in them
            names[-1] += " " + token
        else:
            raise ParseError(f"Invalid command format!\n{FilterCommand.MESSAGE_USAGE}")

    if len(names) > 1:
        raise ParseError(f"Name given more than once\n{FilterCommand.MESSAGE_USAGE}")

    name = names[0].strip() if names else ""
    if not name and not tags:
        raise ParseError(f"Invalid command format!\n{FilterCommand.MESSAGE_USAGE}")

    return FilterCommand(name, frozenset(tags))


def parse_export(args: str, **kwargs) -> ExportCommand:
    if not args.startswith(FORMAT_PREFIX):
        raise ParseError(f"Invalid command format!\n{ExportCommand.MESSAGE_USAGE}")

    keyword = args[len(FORMAT_PREFIX) :].strip()
    return ExportCommand(Format.match(keyword), **kwargs)
