"""Citation data models."""
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import ClassVar, Dict, Type


@dataclass(frozen=True)
class Citation(ABC):
    """One bibliography entry, identified by the id used in document markers."""

    id: str

    kind: ClassVar[str] = ""

    @abstractmethod
    def render(self) -> str:
        """Return the reference-list line for this entry, without a newline."""


@dataclass(frozen=True)
class Book(Citation):
    """A book citation. ``year`` stays text so forms like "forthcoming" survive."""

    author: str
    title: str
    publisher: str
    year: str

    kind: ClassVar[str] = "book"

    def render(self) -> str:
        return f"[{self.id}] book: {self.author}, {self.title}, {self.publisher}, {self.year}"


@dataclass(frozen=True)
class WebPage(Citation):
    """A web page citation."""

    title: str
    url: str

    kind: ClassVar[str] = "webpage"

    def render(self) -> str:
        return f"[{self.id}] webpage: {self.title}. Available at {self.url}"


@dataclass(frozen=True)
class Article(Citation):
    """A journal article citation."""

    title: str
    author: str
    journal: str
    year: int
    volume: int
    issue: int

    kind: ClassVar[str] = "article"

    def render(self) -> str:
        return (
            f"[{self.id}] article: {self.author}, {self.title}, {self.journal}, "
            f"{self.year}, {self.volume}, {self.issue}"
        )


CITATION_TYPES: Dict[str, Type[Citation]] = {
    cls.kind: cls for cls in (Book, WebPage, Article)
}
