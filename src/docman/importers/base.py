"""Base class for bibliography importers."""
from abc import ABC, abstractmethod
from typing import List, Optional

from ..api import MetadataResolver
from ..models import Citation


class ReferenceImporter(ABC):
    """Abstract base class for importing a bibliography from file content."""

    def __init__(self, resolver: Optional[MetadataResolver] = None):
        self.resolver = resolver

    @abstractmethod
    def parse(self, content: str) -> List[Citation]:
        """Parse string content into a list of Citations."""
        pass
