from dataclasses import dataclass, field
from typing import Optional, Protocol, runtime_checkable

from .._utils._request_spec import RequestSpec


@dataclass(frozen=True)
class RawResponse:
    """Status, headers and fully drained body of one completed exchange."""

    status_code: int
    headers: list[tuple[str, str]] = field(default_factory=list)
    content: bytes = b""
    encoding: Optional[str] = None


@runtime_checkable
class Transport(Protocol):
    """The capability that performs the actual network exchange.

    Implementations must be safe for concurrent use: deferred executions and
    the fan-out combinator call ``exchange`` from several worker threads at
    once. An implementation acquires whatever connection resource it needs
    for one call and releases it before returning, on success and on failure.
    """

    def exchange(self, spec: RequestSpec) -> RawResponse:
        """Perform one exchange.

        Raises:
            TransportError: If the exchange could not be completed.
        """
        ...
