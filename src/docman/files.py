"""Reading inputs and writing the assembled document."""
import logging
import sys
from typing import List, Optional

from .api import MetadataResolver
from .config import Config
from .errors import InputUnavailable, OutputUnavailable
from .importers import get_importer_for_file
from .models import Citation
from .utils.error_handling import file_operation_handler

logger = logging.getLogger(__name__)


@file_operation_handler(InputUnavailable)
def read_text(path: str) -> str:
    """Read a whole file, or standard input when ``path`` is the stdin sentinel."""
    if path == Config.STDIN_SENTINEL:
        logger.info("Reading document from standard input")
        return sys.stdin.read()
    with open(path, "r", encoding="utf-8") as f:
        return f.read()


@file_operation_handler(OutputUnavailable)
def write_text(path: Optional[str], content: str) -> None:
    """Write ``content`` to ``path``, or to standard output when no path is given."""
    if path is None:
        sys.stdout.write(content)
        sys.stdout.flush()
        return
    with open(path, "w", encoding="utf-8") as f:
        f.write(content)
    logger.info(f"Wrote {len(content)} characters to {path}")


def load_bibliography(path: Optional[str], resolver: Optional[MetadataResolver] = None) -> List[Citation]:
    """Load the bibliography file at ``path``; no path means an empty bibliography."""
    if path is None:
        logger.info("No bibliography given")
        return []
    content = read_text(path)
    return get_importer_for_file(path, resolver).parse(content)
