from contextlib import contextmanager
from typing import Generator

import httpx

from ..models.errors import TransportError


@contextmanager
def handle_transport_errors(method: str, url: str) -> Generator[None, None, None]:
    """Context manager for translating transport failures into TransportError.

    Wraps one exchange and converts the ways it can fail to complete (httpx
    connection, timeout, protocol and stream errors, URLs httpx cannot
    dispatch, and OS errors while opening a file payload) into a
    :class:`TransportError` chained to the original exception.

    Args:
        method: The HTTP method of the exchange, for the error message.
        url: The target of the exchange, for the error message.

    Yields:
        None: The context manager yields control to the wrapped exchange.

    Raises:
        TransportError: For any failure that prevented the exchange from
            completing.
    """
    try:
        yield
    except TransportError:
        raise
    except (httpx.HTTPError, httpx.InvalidURL, httpx.StreamError, OSError) as e:
        raise TransportError(str(e) or type(e).__name__, method, url) from e
