"""Reference list formatting."""
from typing import Iterable, Sequence

from .matcher import match_citations
from .models import Citation

REFERENCES_SEPARATOR = "\n\nReferences:\n"


def format_references(citations: Iterable[Citation]) -> str:
    """One rendered line per citation, each ending with a newline."""
    return "".join(f"{c.render()}\n" for c in citations)


def render_document(text: str, citations: Iterable[Citation]) -> str:
    """Return the document text followed by its reference list."""
    return text + REFERENCES_SEPARATOR + format_references(citations)


def assemble(text: str, bibliography: Sequence[Citation]) -> str:
    """Resolve the markers of ``text`` and append the matching references."""
    return render_document(text, match_citations(text, bibliography))
