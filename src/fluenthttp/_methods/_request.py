import abc
from concurrent.futures import Executor, Future
from logging import getLogger
from typing import ClassVar, Iterator, Optional, TypeVar, Union

from httpx import URL, InvalidURL

from .._transport._base import Transport
from .._utils._request_spec import Body, RequestSpec
from .._utils._serialization import Serializer
from ..models.either import Either, Failure, Success
from ..models.errors import MalformedTargetError, TransportError
from ..models.response import Response
from ..models.stream import Producer

logger = getLogger(__name__)

R = TypeVar("R", bound="Request")


def _parse_target(target: Union[str, URL]) -> URL:
    try:
        return URL(target)
    except (InvalidURL, TypeError) as e:
        raise MalformedTargetError(target) from e


class Request(abc.ABC):
    """One HTTP call, built fluently and executed any number of times.

    A request is a reusable template: headers and parameters stay mutable and
    every execution performs a fresh exchange with the state current at that
    moment. The method and the target's scheme and host are fixed at
    construction.

    Requests are normally created through an :class:`~fluenthttp.Http`
    factory, which binds them to its transport, worker pool and serializer.
    A request constructed directly falls back to the process-wide default
    :class:`~fluenthttp.Http` for whatever it was not given.
    """

    METHOD: ClassVar[str]

    def __init__(
        self,
        target: Union[str, URL],
        *,
        transport: Optional[Transport] = None,
        executor: Optional[Executor] = None,
        serializer: Optional[Serializer] = None,
    ) -> None:
        self._url = _parse_target(target)
        self._headers: list[tuple[str, str]] = []
        self._transport = transport
        self._executor = executor
        self._serializer = serializer

    @property
    def method(self) -> str:
        return self.METHOD

    @property
    def url(self) -> URL:
        return self._url

    @property
    def parameters(self) -> list[tuple[str, str]]:
        return self._url.params.multi_items()

    @property
    def headers(self) -> list[tuple[str, str]]:
        return list(self._headers)

    def add_parameter(self: R, key: str, value: str) -> R:
        """Append a query parameter to the target.

        Raises:
            MalformedTargetError: If the target cannot be rebuilt with the new
                parameter.
        """
        try:
            self._url = self._url.copy_add_param(key, value)
        except (InvalidURL, TypeError) as e:
            raise MalformedTargetError(self._url) from e
        return self

    def add_header(self: R, key: str, value: str) -> R:
        """Append a header. Earlier headers with the same name are kept."""
        self._headers.append((key, value))
        return self

    def set_transport(self: R, transport: Transport) -> R:
        """Use ``transport`` for every later execution of this request."""
        self._transport = transport
        return self

    # Execution

    def execute_optional(self) -> Optional[Response]:
        """Execute the call, discarding failure details.

        Returns:
            Optional[Response]: The response, or ``None`` if the exchange
                could not be completed.
        """
        return self.execute().success_or_none()

    def execute(self) -> Either[TransportError, Response]:
        """Execute the call on the current thread.

        Returns:
            Either[TransportError, Response]: ``Success`` holding the response
                whatever its status code, or ``Failure`` holding the
                transport error.
        """
        return self._execute_spec(self._build_spec())

    def execute_deferred(self) -> "Future[Either[TransportError, Response]]":
        """Schedule the call on the worker pool and return immediately.

        The request's state is captured now; later mutations do not affect
        the scheduled exchange.

        Returns:
            Future[Either[TransportError, Response]]: ``done()`` reports
                completion and ``result()`` blocks until the exchange ends.
        """
        spec = self._build_spec()
        return self._resolve_executor().submit(self._execute_spec, spec)

    def execute_stream(self) -> Producer[Response]:
        """Expose the call as a single-value push stream.

        Each subscription performs its own exchange, emits the response and
        completes; a transport failure terminates the stream with the
        :class:`TransportError` and emits nothing.
        """

        def _source() -> Iterator[Response]:
            yield self.execute().success_or_propagate()

        return Producer(_source)

    def _execute_spec(self, spec: RequestSpec) -> Either[TransportError, Response]:
        try:
            return Success(self._exchange(spec))
        except TransportError as e:
            logger.debug(f"Exchange failed: {e}")
            return Failure(e)

    def _exchange(self, spec: RequestSpec) -> Response:
        raw = self._resolve_transport().exchange(spec)
        return Response.from_raw(raw, serializer=self._resolve_serializer())

    def _build_spec(self) -> RequestSpec:
        return RequestSpec(
            method=self.METHOD,
            url=str(self._url),
            headers=list(self._headers),
            body=self._body(),
        )

    def _body(self) -> Optional[Body]:
        return None

    def _resolve_transport(self) -> Transport:
        if self._transport is not None:
            return self._transport
        from .._http import Http

        return Http.default().transport

    def _resolve_executor(self) -> Executor:
        if self._executor is not None:
            return self._executor
        from .._http import Http

        return Http.default().executor

    def _resolve_serializer(self) -> Serializer:
        if self._serializer is not None:
            return self._serializer
        from .._http import Http

        return Http.default().serializer

    def __repr__(self) -> str:
        return f"{type(self).__name__}({str(self._url)!r})"
