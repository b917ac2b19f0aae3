"""
Citation marker matching.

A marker is the text between a ``[`` and the ``]`` that follows it, e.g.
``[smith2020]``. Opening and closing brackets are located independently and
paired by position, so markers cannot nest or overlap and every bracket in
the document must belong to a marker. An empty marker ``[]`` names the
empty id, which no entry carries, so it fails resolution.
"""
import logging
from typing import Iterable, List, Sequence

from .errors import MalformedMarkers, UnresolvedCitation
from .models import Citation

logger = logging.getLogger(__name__)


def extract_markers(text: str) -> List[str]:
    """
    Return the ids of all markers in ``text``, in document order.

    Raises:
        MalformedMarkers: If brackets are unbalanced or out of order
    """
    lefts = [i for i, ch in enumerate(text) if ch == "["]
    rights = [i for i, ch in enumerate(text) if ch == "]"]

    if len(lefts) != len(rights):
        raise MalformedMarkers(
            f"unbalanced citation brackets: {len(lefts)} '[' and {len(rights)} ']'"
        )

    ids = []
    for n, (left, right) in enumerate(zip(lefts, rights)):
        if right < left:
            raise MalformedMarkers(f"']' at offset {right} has no opening '['")
        if n + 1 < len(lefts) and lefts[n + 1] < right:
            raise MalformedMarkers(f"citation marker at offset {left} overlaps the next one")
        ids.append(text[left + 1:right])

    logger.debug(f"Extracted {len(ids)} citation markers")
    return ids


def distinct_ids(ids: Iterable[str]) -> List[str]:
    """Sort ids and drop repeats."""
    result: List[str] = []
    for citation_id in sorted(ids):
        if not result or result[-1] != citation_id:
            result.append(citation_id)
    return result


def resolve_citations(ids: Iterable[str], bibliography: Sequence[Citation]) -> List[Citation]:
    """
    Map each distinct id to every bibliography entry carrying it.

    Entries come out ordered by id, then by their position in the
    bibliography when several entries share an id.

    Raises:
        UnresolvedCitation: For the first id (in sorted order) that matches
            no entry
    """
    resolved: List[Citation] = []
    for citation_id in distinct_ids(ids):
        matches = [c for c in bibliography if c.id == citation_id]
        if not matches:
            logger.debug(f"Citation [{citation_id}] has no bibliography entry")
            raise UnresolvedCitation(citation_id)
        if len(matches) > 1:
            logger.warning(f"Citation [{citation_id}] matches {len(matches)} bibliography entries")
        resolved.extend(matches)
    return resolved


def match_citations(text: str, bibliography: Sequence[Citation]) -> List[Citation]:
    """Extract the markers of ``text`` and resolve them against ``bibliography``."""
    return resolve_citations(extract_markers(text), bibliography)
