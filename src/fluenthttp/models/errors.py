from typing import Any, Optional


class FluentHttpError(Exception):
    """Base class for every error raised by fluenthttp."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(self.message)


class TransportError(FluentHttpError):
    """Raised when an exchange could not be completed.

    Covers refused connections, timeouts, I/O failures while sending the body
    or draining the response, and targets the transport cannot dispatch to.
    The execution entry points capture it as the failure side of an
    :class:`~fluenthttp.models.either.Either`; it only surfaces as raised
    control flow through ``success_or_propagate()`` or a stream error signal.
    """

    def __init__(
        self,
        message: str,
        method: Optional[str] = None,
        url: Optional[str] = None,
    ):
        self.method = method
        self.url = url
        if method and url:
            message = f"{method} {url} failed: {message}"
        super().__init__(message)


class MalformedTargetError(FluentHttpError):
    """Raised when a target or a parameter mutation yields an unparsable URL."""

    def __init__(
        self,
        target: Any,
        reason: str = "URI parsing exited via a critical error",
    ):
        self.target = target
        super().__init__(f"{reason}: {target!r}")


class InvalidStateError(FluentHttpError):
    """Raised when the wrong side of an Either is inspected."""


class ParseError(FluentHttpError):
    """Raised when a response body cannot be parsed into the requested shape."""

    def __init__(self, message: str, content: Optional[str] = None):
        self.content = content
        super().__init__(message)
