"""Main entry point for docman."""
import sys
from typing import List, Optional

from .api import DocmanAPI
from .cli import build_parser, parse_args
from .config import Config
from .errors import CLIUsageError, DocmanError
from .files import load_bibliography, read_text, write_text
from .formatting import assemble
from .utils.logging_setup import log_error, log_operation, setup_logging


def main(argv: Optional[List[str]] = None) -> int:
    """Run docman and return the process exit status."""
    setup_logging(Config.LOG_LEVEL, Config.LOG_FILE or None)

    try:
        args = parse_args(argv)
    except CLIUsageError as e:
        build_parser().print_usage(sys.stderr)
        print(f"docman: error: {e}", file=sys.stderr)
        return e.exit_code

    try:
        resolver = DocmanAPI()
        bibliography = load_bibliography(args.bibliography, resolver)
        log_operation("Bibliography loaded", f"{len(bibliography)} entries")

        document = read_text(args.document)
        output = assemble(document, bibliography)

        write_text(args.output, output)
        log_operation("Document written", args.output or "standard output")
    except DocmanError as e:
        log_error(type(e).__name__, str(e))
        print(f"docman: error: {e}", file=sys.stderr)
        return e.exit_code

    return 0


def run() -> None:
    sys.exit(main())


if __name__ == "__main__":
    run()
