"""
httphelper - convenience helpers for JSON and multipart HTTP requests
"""

from .config import Config, config
from .exceptions import (
    ConfigurationError,
    DeserializationError,
    HttpHelperError,
    MalformedURLError,
    SerializationError,
    TransportError,
    UploadIOError,
)
from .forms import post_form, post_form_by_file
from .http_client import HttpClient, default_http_client
from .json_requests import (
    get_json,
    post_json,
    post_json_with_body,
    post_json_with_body2,
)
from .logging_config import get_module_logger, setup_logging
from .random_string import random_string
from .urls import encode_url, get_query, token_api

__version__ = "0.1.0"

__all__ = [
    "Config",
    "ConfigurationError",
    "DeserializationError",
    "HttpClient",
    "HttpHelperError",
    "MalformedURLError",
    "SerializationError",
    "TransportError",
    "UploadIOError",
    "config",
    "default_http_client",
    "encode_url",
    "get_json",
    "get_module_logger",
    "get_query",
    "post_form",
    "post_form_by_file",
    "post_json",
    "post_json_with_body",
    "post_json_with_body2",
    "random_string",
    "setup_logging",
    "token_api",
]
