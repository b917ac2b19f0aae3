"""Command line interface."""
import argparse
from typing import List, Optional

from . import __version__
from .config import Config
from .errors import CLIUsageError


class _StoreOnce(argparse.Action):
    """Store an option value, rejecting a second occurrence of the option."""

    def __call__(self, parser, namespace, values, option_string=None):
        if getattr(namespace, self.dest, None) is not None:
            parser.error(f"argument {option_string} may only be given once")
        setattr(namespace, self.dest, values)


class DocmanArgumentParser(argparse.ArgumentParser):
    """Parser that raises CLIUsageError instead of exiting the process."""

    def error(self, message: str):
        raise CLIUsageError(message)


def build_parser() -> DocmanArgumentParser:
    parser = DocmanArgumentParser(
        prog="docman",
        description="Append a reference list for the [id] citations of a text document.",
    )
    parser.add_argument(
        "-c", dest="bibliography", metavar="BIBLIOGRAPHY", action=_StoreOnce,
        help="JSON file holding the citation records",
    )
    parser.add_argument(
        "-o", dest="output", metavar="OUTPUT", action=_StoreOnce,
        help="write the result to OUTPUT instead of standard output",
    )
    parser.add_argument(
        "document", metavar="DOCUMENT",
        help=f"text document to process, or '{Config.STDIN_SENTINEL}' for standard input",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """
    Parse command line arguments.

    Raises:
        CLIUsageError: On unknown, repeated or incomplete arguments
    """
    return build_parser().parse_args(argv)
