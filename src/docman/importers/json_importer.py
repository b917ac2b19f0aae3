"""JSON importer for bibliography files."""
import json
import logging
from typing import List

from ..bibliography import build_bibliography
from ..errors import MalformedStructuredInput
from ..models import Citation
from .base import ReferenceImporter

logger = logging.getLogger(__name__)


class JSONImporter(ReferenceImporter):
    """Parses a JSON document of any shape and collects the records in it."""

    def parse(self, content: str) -> List[Citation]:
        try:
            data = json.loads(content)
        except json.JSONDecodeError as e:
            logger.error(f"Bibliography is not valid JSON: {e}")
            raise MalformedStructuredInput(
                f"invalid JSON at line {e.lineno}, column {e.colno}: {e.msg}"
            ) from e
        except RecursionError as e:
            # json's decoder recurses once per nesting level
            logger.error(f"Bibliography is nested too deeply to decode: {e}")
            raise MalformedStructuredInput("invalid JSON: nested too deeply to decode") from e
        return build_bibliography(data, self.resolver)
