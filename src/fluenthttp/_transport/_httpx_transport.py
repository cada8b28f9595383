import os
from contextlib import ExitStack
from logging import getLogger
from typing import Any, Optional

from httpx import Client

from .._config import HttpConfig
from .._utils._errors import handle_transport_errors
from .._utils._request_spec import Body, RequestSpec
from ._base import RawResponse

logger = getLogger(__name__)


class HttpxTransport:
    """Transport backed by a synchronous ``httpx.Client``.

    The client is thread-safe and pools connections, so one instance serves
    every request built by an :class:`~fluenthttp.Http` factory. Each exchange
    streams the response inside ``client.stream(...)``, reads the body to the
    end and leaves the block, which hands the connection back to the pool
    whether the read succeeded or not.
    """

    def __init__(
        self,
        client: Optional[Client] = None,
        *,
        config: Optional[HttpConfig] = None,
    ) -> None:
        if client is None:
            config = config or HttpConfig.from_env()
            client = Client(**config.client_kwargs())
            self._owns_client = True
        else:
            self._owns_client = False
        self._client = client

    @property
    def client(self) -> Client:
        return self._client

    def exchange(self, spec: RequestSpec) -> RawResponse:
        logger.debug(f"Request: {spec.method} {spec.url}")
        logger.debug(f"HEADERS: {spec.headers}")

        with handle_transport_errors(spec.method, spec.url), ExitStack() as stack:
            body_kwargs = self._body_kwargs(spec.body, stack)
            with self._client.stream(
                spec.method, spec.url, headers=spec.wire_headers(), **body_kwargs
            ) as response:
                content = response.read()
                encoding = response.headers.encoding
                return RawResponse(
                    status_code=response.status_code,
                    headers=[
                        (key.decode(encoding), value.decode(encoding))
                        for key, value in response.headers.raw
                    ],
                    content=content,
                    encoding=response.charset_encoding,
                )

    def close(self) -> None:
        if self._owns_client:
            self._client.close()

    @staticmethod
    def _body_kwargs(body: Optional[Body], stack: ExitStack) -> dict[str, Any]:
        """Translate a body into ``httpx`` arguments, opening file references."""
        if body is None:
            return {}
        if body.files is not None:
            files = []
            for name, (filename, content, content_type) in body.files:
                if isinstance(content, os.PathLike):
                    content = stack.enter_context(open(content, "rb"))
                files.append((name, (filename, content, content_type)))
            return {"files": files}
        content = body.content
        if isinstance(content, os.PathLike):
            content = stack.enter_context(open(content, "rb"))
        return {"content": content}
