import json
from logging import getLogger
from typing import TYPE_CHECKING, Any, Callable, Optional, TypeVar

from pydantic import BaseModel, ConfigDict, Field, PrivateAttr

from .._utils._serialization import DEFAULT_SERIALIZER, Serializer
from .._utils.constants import NO_HEADER_TEMPLATE
from .errors import ParseError

if TYPE_CHECKING:
    from .._transport._base import RawResponse

logger = getLogger(__name__)

T = TypeVar("T")


class Response(BaseModel):
    """Immutable snapshot of a completed exchange.

    Holds the status code, the headers in the order the server sent them and
    the body decoded to text. A response is built whatever its status: a 404
    is a successful exchange, so ``execute()`` returns it on the success side
    and the status predicates tell the caller what happened.

    Examples:
        ```python
        from fluenthttp import get

        response = get("https://example.com/people/1").execute().unwrap_success()
        if response.is_successful():
            person = response.parse_as(Person)
        ```
    """

    model_config = ConfigDict(frozen=True)

    status_code: int
    headers: list[tuple[str, str]] = Field(default_factory=list)
    content: str = ""

    _serializer: Serializer = PrivateAttr(default=DEFAULT_SERIALIZER)

    @classmethod
    def from_raw(
        cls, raw: "RawResponse", serializer: Optional[Serializer] = None
    ) -> "Response":
        """Materialize a response from a drained transport exchange.

        The body is decoded with the charset the server declared, UTF-8
        otherwise; undecodable bytes are replaced rather than rejected.
        """
        try:
            content = raw.content.decode(raw.encoding or "utf-8", errors="replace")
        except LookupError:
            content = raw.content.decode("utf-8", errors="replace")

        response = cls(
            status_code=raw.status_code, headers=list(raw.headers), content=content
        )
        if serializer is not None:
            response._serializer = serializer

        logger.debug(f"{response}")
        return response

    def get_status_code(self) -> int:
        return self.status_code

    def get_content(self) -> str:
        return self.content

    def get_header(self, key: str) -> str:
        """Get the value of the first header named exactly ``key``.

        The lookup is case-sensitive and scans headers in stored order.

        Args:
            key: The header name.

        Returns:
            str: The header value, or the text ``"No Header with key <key>"``
                when no header has that name.
        """
        for name, value in self.headers:
            if name == key:
                return value
        return NO_HEADER_TEMPLATE.format(key=key)

    def parse_json(self) -> Any:
        """Parse the body into plain JSON values (dicts, lists, scalars).

        Raises:
            ParseError: If the body is not valid JSON.
        """
        try:
            return json.loads(self.content)
        except json.JSONDecodeError as e:
            raise ParseError(f"Content is not valid JSON: {e}", self.content) from e

    def parse_as(self, shape: type[T]) -> T:
        """Parse the body into an instance of ``shape``.

        Args:
            shape: Any type the serializer can validate into, e.g. a pydantic
                model, a dataclass or a TypedDict.

        Raises:
            ParseError: If the body does not match ``shape``.
        """
        return self._serializer.deserialize(self.content, shape)

    def parse_as_list_of(self, shape: type[T]) -> list[T]:
        """Parse a JSON array body into a list of ``shape`` instances.

        Raises:
            ParseError: If the body is not an array of ``shape``.
        """
        return self._serializer.deserialize_list(self.content, shape)

    def log_response(
        self, formatter: Optional[Callable[["Response"], str]] = None
    ) -> "Response":
        """Log the response at INFO level and return it unchanged.

        Args:
            formatter: Renders the logged message; ``str(response)`` by
                default.
        """
        logger.info(formatter(self) if formatter is not None else f"{self}")
        return self

    # Both round boundaries of a class are excluded from it (100 and 199 are
    # not informational). Success is the exception: 200 and 299 are included.
    def is_informational(self) -> bool:
        return 100 < self.status_code < 199

    def is_successful(self) -> bool:
        return 200 <= self.status_code <= 299

    def is_redirection(self) -> bool:
        return 300 < self.status_code < 399

    def is_client_error(self) -> bool:
        return 400 < self.status_code < 499

    def is_server_error(self) -> bool:
        return 500 < self.status_code < 599

    def __str__(self) -> str:
        return f"Response [status={self.status_code}, content={self.content}]"
