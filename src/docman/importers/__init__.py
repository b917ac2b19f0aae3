from typing import Optional

from ..api import MetadataResolver
from .base import ReferenceImporter
from .json_importer import JSONImporter


def get_importer_for_file(filename: str, resolver: Optional[MetadataResolver] = None) -> ReferenceImporter:
    """Factory to get the importer for a bibliography file.

    JSON is the only bibliography format, whatever the file extension.
    """
    return JSONImporter(resolver)


__all__ = ["ReferenceImporter", "JSONImporter", "get_importer_for_file"]
