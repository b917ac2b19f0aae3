"""API client classes for the metadata lookup service."""
import logging
from abc import ABC, abstractmethod
from typing import Any, Dict, Optional

import requests

from .config import Config
from .utils.api_utils import encode_uri_component, handle_api_response, require_string_fields
from .utils.error_handling import api_error_handler

logger = logging.getLogger(__name__)

BOOK_FIELDS = ("author", "title", "publisher", "year")


class MetadataResolver(ABC):
    """Looks up the metadata of records that only carry an identifier.

    Implementations raise ExternalResolutionFailure when a lookup fails.
    """

    @abstractmethod
    def lookup_isbn(self, isbn: str) -> Dict[str, str]:
        """Return ``author``, ``title``, ``publisher`` and ``year`` for a book."""

    @abstractmethod
    def lookup_title(self, url: str) -> str:
        """Return the title of the page at ``url``."""


class BaseAPI:
    """Base class for API clients."""
    def __init__(self, base_url: str, timeout: Optional[float] = None,
                 session: Optional[requests.Session] = None):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.session = session

    def _make_request(self, *segments: str) -> Dict[str, Any]:
        """GET ``base_url/segment/...`` and return the decoded JSON object."""
        url = "/".join([self.base_url] + [encode_uri_component(s) for s in segments])
        logger.info(f"Calling metadata API: {url}")
        getter = self.session.get if self.session is not None else requests.get
        response = getter(url, timeout=self.timeout)
        data = handle_api_response(response, "Metadata API")
        logger.debug(f"Metadata API response: {data}")
        return data


class DocmanAPI(BaseAPI, MetadataResolver):
    """Client for the docman lookup service (``/isbn/<isbn>``, ``/title/<url>``)."""
    def __init__(self, base_url: Optional[str] = None, timeout: Optional[float] = None,
                 session: Optional[requests.Session] = None):
        super().__init__(
            base_url or Config.API_ENDPOINT,
            timeout if timeout is not None else Config.REQUEST_TIMEOUT,
            session,
        )

    @api_error_handler
    def lookup_isbn(self, isbn: str) -> Dict[str, str]:
        data = self._make_request("isbn", isbn)
        author = data.get("author")
        if isinstance(author, list) and all(isinstance(a, str) for a in author):
            data["author"] = ", ".join(author)
        if isinstance(data.get("year"), int) and not isinstance(data["year"], bool):
            data["year"] = str(data["year"])
        return require_string_fields(data, BOOK_FIELDS, "Metadata API")

    @api_error_handler
    def lookup_title(self, url: str) -> str:
        data = self._make_request("title", url)
        return require_string_fields(data, ("title",), "Metadata API")["title"]
