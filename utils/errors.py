"""
Error types for the chat proxy.
Each request error carries the HTTP status and the plain-text body returned to the client.
"""
from fastapi import status


class ConfigError(Exception):
    """Raised at startup when the configuration cannot be loaded."""


class ChatProxyError(Exception):
    """Base class for errors that end a chat request."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class BadRequest(ChatProxyError):
    """Inbound body is not a valid chat request."""

    status_code = status.HTTP_400_BAD_REQUEST

    def __init__(self, message: str = "Invalid request payload"):
        super().__init__(message)


class UpstreamRequestError(ChatProxyError):
    """The upstream request could not be built, sent, or read."""


class UpstreamDecodeError(ChatProxyError):
    """The upstream body is not the expected JSON shape."""

    def __init__(self, message: str = "Failed to unmarshal response data"):
        super().__init__(message)


class NoChoicesError(ChatProxyError):
    """The upstream returned an empty choices list."""

    def __init__(self, message: str = "No response choices returned"):
        super().__init__(message)
