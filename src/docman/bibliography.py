"""
Bibliography construction.

The builder walks a parsed tree value (dicts with string keys, lists and
scalars, as produced by ``json.loads`` or any other parser) depth-first and
collects every node it can read as a citation record. A node that cannot be
read as a record is not an error: its children are searched instead, so
records may sit at any depth and inside wrappers that look like records.
"""
import logging
from typing import Any, Callable, Dict, Iterator, List, Optional

from .api import MetadataResolver
from .errors import ExternalResolutionFailure
from .models import Article, Book, Citation, WebPage

logger = logging.getLogger(__name__)

TreeValue = Any

_EXHAUSTED = object()


class RecordSkipped(Exception):
    """Raised inside the builder when a node is not a usable record."""


def _string(record: Dict[str, Any], key: str) -> str:
    value = record.get(key)
    if not isinstance(value, str):
        raise RecordSkipped(f"'{key}' is not a string")
    return value


def _integer(record: Dict[str, Any], key: str) -> int:
    value = record.get(key)
    # bool is an int subclass but never a valid number here
    if not isinstance(value, int) or isinstance(value, bool):
        raise RecordSkipped(f"'{key}' is not an integer")
    return value


def _has_strings(record: Dict[str, Any], *keys: str) -> bool:
    return all(isinstance(record.get(k), str) for k in keys)


class BibliographyBuilder:
    """Builds an ordered list of citations from a parsed tree value."""

    def __init__(self, resolver: Optional[MetadataResolver] = None):
        self.resolver = resolver
        self._factories: Dict[str, Callable[[str, Dict[str, Any]], Citation]] = {
            Book.kind: self._make_book,
            WebPage.kind: self._make_webpage,
            Article.kind: self._make_article,
        }

    def build(self, tree: TreeValue) -> List[Citation]:
        citations: List[Citation] = []
        self._walk(tree, citations)
        logger.info(f"Built bibliography with {len(citations)} entries")
        return citations

    def _walk(self, tree: TreeValue, citations: List[Citation]) -> None:
        # Explicit stack of child iterators: same order as recursion, no recursion limit
        stack: List[Iterator[TreeValue]] = [iter([tree])]
        while stack:
            node = next(stack[-1], _EXHAUSTED)
            if node is _EXHAUSTED:
                stack.pop()
            elif isinstance(node, dict):
                citation = self._interpret(node)
                if citation is not None:
                    citations.append(citation)
                else:
                    stack.append(iter(node.values()))
            elif isinstance(node, list):
                stack.append(iter(node))

    def _interpret(self, node: Dict[str, Any]) -> Optional[Citation]:
        """Read ``node`` as one record, or return None if it is not one."""
        kind = node.get("type")
        citation_id = node.get("id")
        if not isinstance(kind, str) or not isinstance(citation_id, str) or not citation_id:
            return None

        factory = self._factories.get(kind)
        if factory is None:
            logger.debug(f"Ignoring record '{citation_id}' of unknown type '{kind}'")
            return None

        try:
            return factory(citation_id, node)
        except RecordSkipped as e:
            logger.debug(f"Skipping {kind} record '{citation_id}': {e}")
            return None

    def _require_resolver(self, citation_id: str) -> MetadataResolver:
        if self.resolver is None:
            raise ExternalResolutionFailure(
                f"record '{citation_id}' needs a metadata lookup but no resolver is configured"
            )
        return self.resolver

    def _make_book(self, citation_id: str, record: Dict[str, Any]) -> Book:
        year = record.get("year")
        if isinstance(year, int) and not isinstance(year, bool):
            year = str(year)
        if _has_strings(record, "author", "title", "publisher") and isinstance(year, str):
            return Book(citation_id, record["author"], record["title"], record["publisher"], year)

        isbn = _string(record, "isbn")
        logger.info(f"Resolving book '{citation_id}' from ISBN {isbn}")
        meta = self._require_resolver(citation_id).lookup_isbn(isbn)
        return Book(citation_id, meta["author"], meta["title"], meta["publisher"], meta["year"])

    def _make_webpage(self, citation_id: str, record: Dict[str, Any]) -> WebPage:
        url = _string(record, "url")
        title = record.get("title")
        if not isinstance(title, str):
            logger.info(f"Resolving title of webpage '{citation_id}' from {url}")
            title = self._require_resolver(citation_id).lookup_title(url)
        return WebPage(citation_id, title, url)

    def _make_article(self, citation_id: str, record: Dict[str, Any]) -> Article:
        return Article(
            citation_id,
            title=_string(record, "title"),
            author=_string(record, "author"),
            journal=_string(record, "journal"),
            year=_integer(record, "year"),
            volume=_integer(record, "volume"),
            issue=_integer(record, "issue"),
        )


def build_bibliography(tree: TreeValue, resolver: Optional[MetadataResolver] = None) -> List[Citation]:
    """Collect every citation record in ``tree`` in depth-first order."""
    return BibliographyBuilder(resolver).build(tree)
