"""Exceptions raised by the WxWork webhook client."""

from __future__ import annotations


class WxWorkBotError(Exception):
    """Base exception for all WxWork bot errors."""

    pass


class UnsupportedMessageError(WxWorkBotError, TypeError):
    """Raised when a value is not one of the supported message shapes.

    This is detected before any network I/O happens.
    """

    def __init__(self, message_type: type) -> None:
        """Initialize the exception.

        Args:
            message_type: Type of the rejected value
        """
        self.message_type = message_type
        super().__init__(f"Unsupported message type: {message_type.__qualname__}")


class TransportError(WxWorkBotError):
    """Raised when the HTTP request fails below the application layer.

    Covers DNS, connection, TLS and timeout failures. When the failure is a
    timeout the message may or may not have been delivered.
    """

    def __init__(self, message: str, original_error: Exception | None = None) -> None:
        """Initialize the exception.

        Args:
            message: Error message
            original_error: Underlying transport exception
        """
        self.original_error = original_error
        super().__init__(message)


class ProtocolError(WxWorkBotError):
    """Raised when the webhook response body is not the expected JSON shape."""

    def __init__(self, message: str, status_code: int | None = None, body: str = "") -> None:
        """Initialize the exception.

        Args:
            message: Error message
            status_code: HTTP status code of the response
            body: Raw response body text
        """
        self.status_code = status_code
        self.body = body
        super().__init__(message)


class APIError(WxWorkBotError):
    """Raised when the webhook returns a non-zero ``errcode``.

    Attributes:
        code: Provider error code, passed through unchanged.
        message: Provider error message.
    """

    def __init__(self, code: int, message: str) -> None:
        self.code = code
        self.message = message
        super().__init__(f"WxWork API error {code}: {message}")
