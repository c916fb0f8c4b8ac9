import logging
from argparse import ArgumentParser, Namespace

from bae_tools.constants import DEFAULT_DATA_DIR


def add_common_args(parser: ArgumentParser) -> None:
    parser.add_argument(
        "-v",
        help="Verbose mode",
        action="store_true",
    )
    parser.add_argument(
        "-d",
        "--data-dir",
        help=f"Directory holding the address book, default: {DEFAULT_DATA_DIR}",
        default=DEFAULT_DATA_DIR,
    )


def setup_logging(args: Namespace) -> None:
    if args.v:
        logging.basicConfig(level=logging.DEBUG)
