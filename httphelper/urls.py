"""
URL and query string helpers
"""

from typing import Any
from urllib.parse import parse_qs, urlencode, urlsplit, urlunsplit

from .exceptions import MalformedURLError
from .logging_config import get_module_logger

logger = get_module_logger("urls")


def _parse(api: str):
    """Split a URL, raising MalformedURLError where it cannot be parsed."""
    if any(ord(ch) < 0x20 or ord(ch) == 0x7F for ch in api):
        raise MalformedURLError(api, "invalid control character in URL")

    try:
        parts = urlsplit(api)
        # Port is validated lazily by urllib
        parts.port
    except ValueError as e:
        raise MalformedURLError(api, str(e)) from e

    return parts


def encode_url(api: str, params: dict[str, str]) -> str:
    """
    Add parameters to the query string of a URL

    Existing parameters are kept; a key present in params replaces every
    existing value for that key. The query is re-encoded with sorted keys.

    Args:
        api: Absolute URL, may already carry a query string
        params: Query parameters to set

    Returns:
        The URL with the encoded query

    Raises:
        MalformedURLError: If api cannot be parsed as a URL
    """
    parts = _parse(api)

    query = parse_qs(parts.query, keep_blank_values=True)
    for key, value in params.items():
        query[key] = [value]

    encoded = urlencode(sorted(query.items()), doseq=True)
    url = urlunsplit((parts.scheme, parts.netloc, parts.path, encoded, parts.fragment))
    logger.debug(f"Encoded URL with {len(params)} parameter(s): {parts.scheme}://{parts.netloc}{parts.path}")
    return url


def token_api(api: str, token: str) -> str:
    """Return api with an access_token query parameter"""
    return encode_url(api, {"access_token": token})


def get_query(request: Any, key: str) -> str:
    """
    Read the first value of a query parameter from a request

    Args:
        request: URL string or an object with a ``url`` attribute
            (requests.Request, requests.PreparedRequest, ...)
        key: Query parameter name

    Returns:
        The first value for key, or "" when it is absent
    """
    url = request if isinstance(request, str) else getattr(request, "url", None)
    if not isinstance(url, str):
        return ""

    try:
        values = parse_qs(urlsplit(url).query, keep_blank_values=True).get(key)
    except ValueError:
        return ""

    if values:
        return values[0]
    return ""
