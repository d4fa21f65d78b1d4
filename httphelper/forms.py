"""
Multipart form upload helpers
"""

from typing import IO, Any

from urllib3 import encode_multipart_formdata

from .config import Config
from .exceptions import UploadIOError
from .http_client import HttpClient, resolve_http_client
from .json_requests import decode_json_into
from .logging_config import get_module_logger

logger = get_module_logger("forms")

FILE_CONTENT_TYPE = "application/octet-stream"


def build_multipart_body(field: str, filename: str, content: bytes) -> tuple[bytes, str]:
    """
    Encode a single file field as multipart/form-data

    The returned body is complete, terminating boundary included.

    Returns:
        (body, content_type) where content_type carries the boundary
    """
    return encode_multipart_formdata({field: (filename, content, FILE_CONTENT_TYPE)})


def post_form(
    url: str,
    field: str,
    filename: str,
    reader: IO[bytes],
    response: Any = None,
    *,
    http_client: HttpClient | None = None,
    config_obj: Config | None = None,
) -> Any:
    """
    Upload the content of reader as a multipart file field and decode the JSON answer

    Args:
        url: Target URL
        field: Form field name
        filename: Filename sent with the part
        reader: Binary stream, read in full before sending
        response: Optional target filled with the decoded body
        http_client: HTTP client for making requests (optional)
        config_obj: Config used to build a client when http_client is None (optional)

    Returns:
        The decoded JSON value

    Raises:
        UploadIOError: If reading from reader or encoding the body fails
        TransportError: If the request could not be completed
        DeserializationError: If the body is not JSON or does not fit response
    """
    http_client = resolve_http_client(http_client, config_obj)

    try:
        content = reader.read()
        if isinstance(content, str):
            content = content.encode("utf-8")
    except (OSError, ValueError) as e:
        logger.error(f"Reading upload content for {filename!r} failed: {e}")
        raise UploadIOError(f"Cannot read upload content for {filename!r}: {e}", filename) from e

    try:
        body, content_type = build_multipart_body(field, filename, content)
    except (TypeError, ValueError) as e:
        raise UploadIOError(f"Cannot build multipart body for {filename!r}: {e}", filename) from e

    logger.debug(f"POST {url} multipart field={field!r} filename={filename!r} ({len(content)} bytes)")
    with http_client.post(url, headers={"Content-Type": content_type}, data=body) as resp:
        status_code = resp.status_code
        resp_body = resp.content

    logger.debug(f"POST {url} -> HTTP {status_code} ({len(resp_body)} bytes)")
    return decode_json_into(resp_body, response)


def post_form_by_file(
    url: str,
    field: str,
    filename: str,
    response: Any = None,
    *,
    http_client: HttpClient | None = None,
    config_obj: Config | None = None,
) -> Any:
    """
    Upload a local file as a multipart file field (see post_form)

    The path is also used as the part's filename.

    Raises:
        FileNotFoundError: If filename does not exist; nothing is sent
        UploadIOError: If the file cannot be read
    """
    try:
        f = open(filename, "rb")
    except FileNotFoundError:
        logger.error(f"Upload file not found: {filename}")
        raise

    with f:
        return post_form(
            url, field, filename, f, response, http_client=http_client, config_obj=config_obj
        )
