import asyncio
import threading
from concurrent.futures import Future
from logging import getLogger
from typing import (
    Any,
    AsyncIterator,
    Callable,
    Generic,
    Iterator,
    Optional,
    TypeVar,
)

logger = getLogger(__name__)

T = TypeVar("T")

_DONE = object()


class Producer(Generic[T]):
    """A cold push stream of values.

    Nothing runs until a consumer subscribes. Every subscription (and every
    iteration) calls the source again, so each one performs its own exchanges;
    results are never cached or shared between consumers.

    A producer can be consumed three ways:

    - ``subscribe(on_next, on_error, on_complete)`` pushes values to callbacks
      from a background thread and returns a future that resolves once the
      stream has terminated.
    - ``for value in producer`` pulls values on the calling thread.
    - ``async for value in producer`` awaits values without blocking the
      event loop.

    An error raised by the source terminates the stream: ``on_error`` is
    called (or the exception is raised from the loop) and no further values
    follow.
    """

    def __init__(self, source: Callable[[], Iterator[T]]) -> None:
        self._source = source

    def subscribe(
        self,
        on_next: Callable[[T], Any],
        on_error: Optional[Callable[[Exception], Any]] = None,
        on_complete: Optional[Callable[[], Any]] = None,
    ) -> "Future[None]":
        """Start the stream and push its values to the given callbacks.

        Args:
            on_next: Called with each value, in emission order.
            on_error: Called with the error that terminated the stream. When
                omitted, the error is set on the returned future instead.
            on_complete: Called once after the last value, unless the stream
                terminated with an error.

        Returns:
            Future[None]: Resolves when the stream has terminated.
        """
        terminated: Future[None] = Future()
        terminated.set_running_or_notify_cancel()

        def _run() -> None:
            try:
                self._drain(on_next, on_error, on_complete)
            except Exception as e:
                logger.debug(f"Stream terminated with an unhandled error: {e}")
                terminated.set_exception(e)
            else:
                terminated.set_result(None)

        threading.Thread(
            target=_run, name="fluenthttp-subscriber", daemon=True
        ).start()
        return terminated

    def _drain(
        self,
        on_next: Callable[[T], Any],
        on_error: Optional[Callable[[Exception], Any]],
        on_complete: Optional[Callable[[], Any]],
    ) -> None:
        try:
            for value in self._source():
                on_next(value)
        except Exception as e:
            if on_error is None:
                raise
            on_error(e)
            return
        if on_complete is not None:
            on_complete()

    def __iter__(self) -> Iterator[T]:
        return self._source()

    async def __aiter__(self) -> AsyncIterator[T]:
        iterator = self._source()
        while True:
            value = await asyncio.to_thread(next, iterator, _DONE)
            if value is _DONE:
                return
            yield value

    def to_list(self) -> list[T]:
        """Consume the stream on the calling thread and collect its values."""
        return list(self)
