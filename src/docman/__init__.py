"""Citation assembly for plain-text documents."""
__version__ = "1.0.0"

from .bibliography import BibliographyBuilder, build_bibliography
from .formatting import assemble, render_document
from .matcher import match_citations
from .models import Article, Book, Citation, WebPage

__all__ = [
    "Article",
    "BibliographyBuilder",
    "Book",
    "Citation",
    "WebPage",
    "assemble",
    "build_bibliography",
    "match_citations",
    "render_document",
]
