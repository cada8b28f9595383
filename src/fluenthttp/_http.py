import threading
from concurrent.futures import Executor, ThreadPoolExecutor, as_completed
from logging import getLogger
from types import TracebackType
from typing import Any, ClassVar, Iterator, Optional, Union

from httpx import URL

from ._config import HttpConfig
from ._methods import Delete, Get, Patch, Post, Put, Request
from ._transport import HttpxTransport, Transport
from ._utils._serialization import DEFAULT_SERIALIZER, Serializer
from .models.either import Either
from .models.errors import TransportError
from .models.response import Response
from .models.stream import Producer

logger = getLogger(__name__)

Target = Union[str, URL]


class Http:
    """Builds requests bound to one transport, worker pool and serializer.

    Most code uses the process-wide default instance through the module-level
    shortcuts (:func:`get`, :func:`post`, ..., :func:`gather`). Create an
    instance explicitly to give a group of requests their own transport or
    configuration.

    Examples:
        ```python
        from fluenthttp import Http

        with Http() as http:
            request = http.get("https://example.com/people")
            result = request.add_parameter("page", "2").execute()
        ```
    """

    _default: ClassVar[Optional["Http"]] = None
    _default_lock: ClassVar[threading.Lock] = threading.Lock()

    def __init__(
        self,
        transport: Optional[Transport] = None,
        *,
        config: Optional[HttpConfig] = None,
        serializer: Optional[Serializer] = None,
    ) -> None:
        self._config = config or HttpConfig.from_env()
        self._transport: Transport = transport or HttpxTransport(config=self._config)
        self._serializer = serializer or DEFAULT_SERIALIZER
        self._executor = ThreadPoolExecutor(
            max_workers=self._config.max_workers, thread_name_prefix="fluenthttp"
        )

        logger.debug(f"CONFIG: {self._config}")

    @property
    def config(self) -> HttpConfig:
        return self._config

    @property
    def transport(self) -> Transport:
        return self._transport

    @property
    def executor(self) -> Executor:
        return self._executor

    @property
    def serializer(self) -> Serializer:
        return self._serializer

    def set_transport(self, transport: Transport) -> "Http":
        """Use ``transport`` for requests built from now on.

        Requests already built keep the transport they were bound to; use
        ``Request.set_transport`` to change one of them.
        """
        self._transport = transport
        return self

    def get(self, target: Target) -> Get:
        """A GET request to ``target``.

        Args:
            target: The absolute URL of the remote resource.

        Raises:
            MalformedTargetError: If ``target`` is not a parsable URL.
        """
        return Get(target, **self._bindings())

    def post(self, target: Target) -> Post:
        """A POST request to ``target``."""
        return Post(target, **self._bindings())

    def put(self, target: Target) -> Put:
        """A PUT request to ``target``."""
        return Put(target, **self._bindings())

    def patch(self, target: Target) -> Patch:
        """A PATCH request to ``target``."""
        return Patch(target, **self._bindings())

    def delete(self, target: Target) -> Delete:
        """A DELETE request to ``target``."""
        return Delete(target, **self._bindings())

    def all(self, *requests: Request) -> Producer[Either[TransportError, Response]]:
        """Run requests concurrently and stream their results as they complete.

        On subscription every request is started through
        ``execute_deferred()``. Results are emitted in completion order, not
        submission order. A failed exchange is emitted as a ``Failure`` value;
        the stream itself completes normally once all results are out.

        Args:
            *requests: Requests of any method, from any ``Http`` instance.

        Returns:
            Producer[Either[TransportError, Response]]: One result per request.
        """

        def _source() -> Iterator[Either[TransportError, Response]]:
            futures = [request.execute_deferred() for request in requests]
            for future in as_completed(futures):
                yield future.result()

        return Producer(_source)

    def close(self) -> None:
        """Wait for scheduled exchanges, then release the pool and transport."""
        self._executor.shutdown(wait=True)
        close = getattr(self._transport, "close", None)
        if callable(close):
            close()

    def __enter__(self) -> "Http":
        return self

    def __exit__(
        self,
        exc_type: Optional[type[BaseException]],
        exc_value: Optional[BaseException],
        traceback: Optional[TracebackType],
    ) -> None:
        self.close()

    def _bindings(self) -> dict[str, Any]:
        return {
            "transport": self._transport,
            "executor": self._executor,
            "serializer": self._serializer,
        }

    @classmethod
    def default(cls) -> "Http":
        """The process-wide instance, created from the environment on first use."""
        with cls._default_lock:
            if cls._default is None:
                cls._default = cls()
            return cls._default

    @classmethod
    def set_default(cls, http: Optional["Http"]) -> None:
        """Replace the process-wide instance.

        ``None`` resets it; the next use builds a fresh one from the
        environment. The replaced instance is not closed.
        """
        with cls._default_lock:
            cls._default = http


def get(target: Target) -> Get:
    return Http.default().get(target)


def post(target: Target) -> Post:
    return Http.default().post(target)


def put(target: Target) -> Put:
    return Http.default().put(target)


def patch(target: Target) -> Patch:
    return Http.default().patch(target)


def delete(target: Target) -> Delete:
    return Http.default().delete(target)


def gather(*requests: Request) -> Producer[Either[TransportError, Response]]:
    """Fan-out shortcut for ``Http.default().all(*requests)``."""
    return Http.default().all(*requests)


def set_default_transport(transport: Transport) -> None:
    """Bind requests built by the module-level shortcuts to ``transport``."""
    Http.default().set_transport(transport)
