"""
JSON request helpers

POST a serialized payload or GET a URL and decode the JSON answer, optionally
into a caller supplied target.
"""

import json
from typing import Any

import requests

from .config import Config
from .exceptions import DeserializationError, SerializationError
from .http_client import HttpClient, resolve_http_client
from .logging_config import get_module_logger

logger = get_module_logger("json_requests")

JSON_CONTENT_TYPE = "application/json"
JSON_UTF8_CONTENT_TYPE = "application/json; charset=utf-8"


def encode_json(params: Any) -> bytes:
    """
    Serialize a request payload to UTF-8 JSON bytes

    Raises:
        SerializationError: If params cannot be represented as JSON
    """
    try:
        return json.dumps(params, ensure_ascii=False, separators=(",", ":")).encode("utf-8")
    except (TypeError, ValueError) as e:
        payload_type = type(params).__name__
        logger.error(f"Cannot serialize {payload_type} payload: {e}")
        raise SerializationError(
            f"Cannot serialize {payload_type} payload to JSON: {e}", payload_type=payload_type
        ) from e


def decode_json_into(body: bytes, response: Any = None) -> Any:
    """
    Decode a JSON body and optionally fill a response target in place

    Targets:
    - dict: updated with the decoded object
    - list: contents replaced by the decoded array
    - any other object: existing attributes set from matching object keys,
      unknown keys are ignored

    A JSON null body fills nothing and returns None.

    Args:
        body: Raw response body
        response: Optional target to fill

    Returns:
        The decoded JSON value

    Raises:
        DeserializationError: If body is not JSON or does not fit the target
    """
    try:
        value = json.loads(body)
    except ValueError as e:
        logger.error(f"Response body is not valid JSON ({len(body)} bytes): {e}")
        raise DeserializationError(f"Response body is not valid JSON: {e}", body=body) from e

    # JSON null leaves the target untouched
    if response is None or value is None:
        return value

    if isinstance(response, dict):
        if not isinstance(value, dict):
            raise DeserializationError(
                f"Cannot decode JSON {type(value).__name__} into dict", body=body
            )
        response.update(value)
    elif isinstance(response, list):
        if not isinstance(value, list):
            raise DeserializationError(
                f"Cannot decode JSON {type(value).__name__} into list", body=body
            )
        response[:] = value
    else:
        if not isinstance(value, dict):
            raise DeserializationError(
                f"Cannot decode JSON {type(value).__name__} into {type(response).__name__}",
                body=body,
            )
        for key, item in value.items():
            if hasattr(response, key):
                setattr(response, key, item)

    return value


def post_json_with_body(
    url: str,
    params: Any,
    *,
    full_response: bool = False,
    http_client: HttpClient | None = None,
    config_obj: Config | None = None,
) -> tuple[int, bytes] | requests.Response:
    """
    POST params as JSON

    Args:
        url: Target URL
        params: Any JSON serializable payload
        full_response: Return the whole requests.Response (headers, body access)
            instead of (status_code, body). In this mode the content type carries
            a charset and a None payload is sent as an empty body.
        http_client: HTTP client for making requests (optional)
        config_obj: Config used to build a client when http_client is None (optional)

    Returns:
        (status_code, body) or requests.Response when full_response is set

    Raises:
        SerializationError: If params cannot be encoded
        TransportError: If the request could not be completed
    """
    http_client = resolve_http_client(http_client, config_obj)

    if full_response:
        raw = b"" if params is None else encode_json(params)
        content_type = JSON_UTF8_CONTENT_TYPE
    else:
        raw = encode_json(params)
        content_type = JSON_CONTENT_TYPE

    logger.debug(f"POST {url} ({len(raw)} bytes JSON)")
    response = http_client.post(url, headers={"Content-Type": content_type}, data=raw)

    if full_response:
        logger.debug(f"POST {url} -> HTTP {response.status_code}")
        return response

    # Release the connection whatever happens while reading the body
    with response:
        status_code = response.status_code
        body = response.content

    logger.debug(f"POST {url} -> HTTP {status_code} ({len(body)} bytes)")
    return status_code, body


def post_json_with_body2(
    url: str,
    params: Any = None,
    *,
    http_client: HttpClient | None = None,
    config_obj: Config | None = None,
) -> requests.Response:
    """POST params as JSON and return the full response (see post_json_with_body)"""
    return post_json_with_body(
        url, params, full_response=True, http_client=http_client, config_obj=config_obj
    )


def post_json(
    url: str,
    params: Any,
    response: Any = None,
    *,
    http_client: HttpClient | None = None,
    config_obj: Config | None = None,
) -> Any:
    """
    POST params as JSON and decode the JSON answer

    The HTTP status is not inspected; use post_json_with_body for that.

    Args:
        url: Target URL
        params: Any JSON serializable payload
        response: Optional target filled with the decoded body
        http_client: HTTP client for making requests (optional)
        config_obj: Config used to build a client when http_client is None (optional)

    Returns:
        The decoded JSON value
    """
    _, body = post_json_with_body(url, params, http_client=http_client, config_obj=config_obj)
    return decode_json_into(body, response)


def get_json(
    url: str,
    response: Any = None,
    *,
    http_client: HttpClient | None = None,
    config_obj: Config | None = None,
) -> Any:
    """
    GET url and decode the JSON answer

    Args:
        url: Target URL
        response: Optional target filled with the decoded body
        http_client: HTTP client for making requests (optional)
        config_obj: Config used to build a client when http_client is None (optional)

    Returns:
        The decoded JSON value

    Raises:
        TransportError: If the request could not be completed
        DeserializationError: If the body is not JSON or does not fit response
    """
    http_client = resolve_http_client(http_client, config_obj)

    logger.debug(f"GET {url}")
    with http_client.get(url) as resp:
        status_code = resp.status_code
        body = resp.content

    logger.debug(f"GET {url} -> HTTP {status_code} ({len(body)} bytes)")
    return decode_json_into(body, response)
