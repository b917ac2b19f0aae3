"""Pytest configuration and fixtures."""
import sys
from pathlib import Path
from typing import Any, Dict, Generator, List
from unittest.mock import MagicMock, patch

import pytest

# Make the src layout importable without installing the package
SRC_DIR = Path(__file__).parent.parent / "src"
if str(SRC_DIR) not in sys.path:
    sys.path.insert(0, str(SRC_DIR))

from docman.api import MetadataResolver  # noqa: E402
from docman.errors import ExternalResolutionFailure  # noqa: E402


class FakeResolver(MetadataResolver):
    """In-memory resolver recording the lookups it served."""

    def __init__(self, books: Dict[str, Dict[str, str]] = None, titles: Dict[str, str] = None):
        self.books = books or {}
        self.titles = titles or {}
        self.calls: List[str] = []

    def lookup_isbn(self, isbn: str) -> Dict[str, str]:
        self.calls.append(f"isbn:{isbn}")
        if isbn not in self.books:
            raise ExternalResolutionFailure(f"unknown ISBN {isbn}", 404)
        return self.books[isbn]

    def lookup_title(self, url: str) -> str:
        self.calls.append(f"title:{url}")
        if url not in self.titles:
            raise ExternalResolutionFailure(f"unknown URL {url}", 404)
        return self.titles[url]


@pytest.fixture
def article_record() -> Dict[str, Any]:
    """Return a complete article record."""
    return {
        "type": "article",
        "id": "1",
        "title": "T",
        "author": "A",
        "journal": "J",
        "year": 2020,
        "volume": 1,
        "issue": 2,
    }


@pytest.fixture
def resolver() -> FakeResolver:
    """Resolver knowing one book and one page."""
    return FakeResolver(
        books={
            "9780262510875": {
                "author": "Harold Abelson, Gerald Jay Sussman",
                "title": "Structure and Interpretation of Computer Programs",
                "publisher": "MIT Press",
                "year": "1996",
            }
        },
        titles={"https://www.python.org/": "Welcome to Python.org"},
    )


@pytest.fixture
def mock_requests_get() -> Generator[MagicMock, None, None]:
    """Mock for requests.get."""
    with patch("docman.api.requests.get") as mock_get:
        yield mock_get
