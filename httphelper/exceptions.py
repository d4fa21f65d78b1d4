"""
Custom exceptions for httphelper
"""


class HttpHelperError(Exception):
    """Base exception for all httphelper errors"""

    pass


class MalformedURLError(HttpHelperError):
    """Raised when a URL cannot be parsed"""

    def __init__(self, url: str, reason: str | None = None):
        self.url = url
        self.reason = reason
        if reason:
            super().__init__(f"Malformed URL {url!r}: {reason}")
        else:
            super().__init__(f"Malformed URL {url!r}")


class SerializationError(HttpHelperError):
    """Raised when a request payload cannot be encoded as JSON"""

    def __init__(self, message: str, payload_type: str | None = None):
        self.payload_type = payload_type
        super().__init__(message)


class DeserializationError(HttpHelperError):
    """
    Raised when a response body cannot be decoded.

    This includes:
    - Bodies that are not valid JSON
    - JSON values that do not fit the caller's response target
    """

    def __init__(self, message: str, body: bytes | None = None):
        self.body = body
        super().__init__(message)


class TransportError(HttpHelperError):
    """
    Raised when a request cannot be completed.

    Covers connection failures, timeouts and URLs the transport refuses.
    """

    def __init__(self, message: str, url: str | None = None):
        self.url = url
        super().__init__(message)


class UploadIOError(HttpHelperError, OSError):
    """Raised when reading upload content or building a multipart body fails"""

    def __init__(self, message: str, filename: str | None = None):
        self.filename_hint = filename
        super().__init__(message)


class ConfigurationError(HttpHelperError):
    """
    Raised when configuration values are missing or invalid.
    """

    def __init__(self, message: str, config_key: str | None = None):
        self.config_key = config_key
        if config_key:
            super().__init__(f"Configuration error for '{config_key}': {message}")
        else:
            super().__init__(f"Configuration error: {message}")
