"""Exceptions raised by docman.

Every exception here is fatal to a run: it travels up to ``docman.__main__``,
which logs it and turns ``exit_code`` into the process status. Records that
fail validation while the bibliography is being built are not represented
here because they never leave the builder.
"""
from typing import Optional


class DocmanError(Exception):
    """Base exception for fatal docman errors."""

    exit_code = 1

    def __init__(self, message: str):
        self.message = message
        super().__init__(self.message)


class InputUnavailable(DocmanError):
    """The bibliography or the document could not be opened or read."""


class OutputUnavailable(InputUnavailable):
    """The output file could not be written."""


class MalformedStructuredInput(DocmanError):
    """The bibliography source is not a parsable tree value."""


class MalformedMarkers(DocmanError):
    """Citation brackets in the document are unbalanced or overlap."""


class UnresolvedCitation(DocmanError):
    """A marker names an id that no bibliography entry carries."""

    def __init__(self, citation_id: str):
        self.citation_id = citation_id
        super().__init__(f"no bibliography entry for citation [{citation_id}]")


class ExternalResolutionFailure(DocmanError):
    """A metadata lookup failed or returned an unusable response."""

    def __init__(self, message: str, status_code: Optional[int] = None,
                 response_text: Optional[str] = None):
        self.status_code = status_code
        self.response_text = response_text
        super().__init__(message)

    def __str__(self) -> str:
        if self.status_code:
            return f"{self.message} (Status: {self.status_code})"
        return self.message


class CLIUsageError(DocmanError):
    """Malformed command-line flags or arguments."""

    exit_code = 2
