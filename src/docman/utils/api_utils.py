"""API utilities for the metadata lookup service."""
import logging
from typing import Any, Dict
from urllib.parse import quote_plus

import requests
from requests import Response

from ..errors import ExternalResolutionFailure

logger = logging.getLogger(__name__)


def encode_uri_component(value: str) -> str:
    """
    Encode a value for use as a single URL path segment.

    Letters, digits and ``-_.~`` are kept, spaces become ``+`` and every
    other byte is percent-encoded, so a URL can be passed as one segment.
    """
    return quote_plus(value, safe="")


def handle_api_response(response: Response, api_name: str = "API") -> Dict[str, Any]:
    """
    Handle API response and raise appropriate exceptions.

    Args:
        response: The response object from requests
        api_name: Name of the API for error messages

    Returns:
        Parsed JSON response

    Raises:
        ExternalResolutionFailure: If the response indicates an error
    """
    try:
        response.raise_for_status()
        data = response.json()
    except requests.exceptions.HTTPError as e:
        status_code = e.response.status_code if e.response is not None else response.status_code
        error_msg = f"{api_name} request failed"
        logger.error(f"{error_msg} (Status: {status_code}): {str(e)}")
        raise ExternalResolutionFailure(error_msg, status_code, str(e)) from e
    except ValueError as e:
        # requests' JSONDecodeError is a ValueError
        error_msg = f"{api_name} returned invalid JSON"
        logger.error(f"{error_msg}: {response.text[:200]}...")
        raise ExternalResolutionFailure(error_msg, response.status_code, response.text) from e

    if not isinstance(data, dict):
        error_msg = f"{api_name} returned an unexpected payload"
        logger.error(f"{error_msg}: {str(data)[:200]}")
        raise ExternalResolutionFailure(error_msg, response.status_code, response.text)
    return data


def require_string_fields(data: Dict[str, Any], fields: tuple, api_name: str = "API") -> Dict[str, str]:
    """Pick ``fields`` out of a response payload, failing if any is not a string."""
    missing = [name for name in fields if not isinstance(data.get(name), str)]
    if missing:
        error_msg = f"{api_name} response is missing {', '.join(missing)}"
        logger.error(error_msg)
        raise ExternalResolutionFailure(error_msg)
    return {name: data[name] for name in fields}
