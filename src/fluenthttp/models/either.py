"""A two-case result type: a failure or a success, never both.

Every execution mode of a request reports its outcome as an ``Either``, so a
caller handles transport failures the same way whether the call was blocking,
deferred or streamed. ``Failure`` and ``Success`` are the only two cases; a
value holding both sides, or neither, cannot be built.

Examples:
    ```python
    from fluenthttp import Failure, Success, get

    match get("https://example.com").execute():
        case Success(response):
            print(response.status_code)
        case Failure(error):
            print(f"exchange failed: {error}")
    ```
"""

from __future__ import annotations

import abc
from dataclasses import dataclass
from typing import Any, Callable, Generic, NoReturn, Optional, TypeVar

from .errors import InvalidStateError

F = TypeVar("F", bound=BaseException)
S = TypeVar("S")
T = TypeVar("T")
G = TypeVar("G", bound=BaseException)


class Either(abc.ABC, Generic[F, S]):
    """Base of the :class:`Failure` and :class:`Success` cases."""

    __slots__ = ()

    @staticmethod
    def failure(value: G) -> Either[G, Any]:
        """Build the failure case holding ``value``."""
        return Failure(value)

    @staticmethod
    def success(value: T) -> Either[Any, T]:
        """Build the success case holding ``value``."""
        return Success(value)

    @abc.abstractmethod
    def is_failure(self) -> bool: ...

    @abc.abstractmethod
    def is_success(self) -> bool: ...

    @abc.abstractmethod
    def peek_failure(self) -> F:
        """Return the failure value.

        Raises:
            InvalidStateError: If this is the success case.
        """

    @abc.abstractmethod
    def unwrap_success(self) -> S:
        """Return the success value.

        Raises:
            InvalidStateError: If this is the failure case.
        """

    @abc.abstractmethod
    def map(self, on_failure: Callable[[F], T], on_success: Callable[[S], T]) -> T:
        """Apply the transform matching this case and return its result."""

    @abc.abstractmethod
    def map_failure(self, func: Callable[[F], G]) -> Either[G, S]: ...

    @abc.abstractmethod
    def map_success(self, func: Callable[[S], T]) -> Either[F, T]: ...

    def apply_failure(self, func: Callable[[F], Any]) -> None:
        """Call ``func`` with the failure value, if any."""
        self.apply_both(func, _ignore)

    def apply_success(self, func: Callable[[S], Any]) -> None:
        """Call ``func`` with the success value, if any."""
        self.apply_both(_ignore, func)

    @abc.abstractmethod
    def apply_both(
        self, on_failure: Callable[[F], Any], on_success: Callable[[S], Any]
    ) -> None:
        """Call whichever of the two visitors matches this case."""

    @abc.abstractmethod
    def success_or_propagate(self) -> S:
        """Return the success value or raise the failure value.

        Bridges a disjoint result into an ordinary fail-fast call site.
        """

    def failure_or_none(self) -> Optional[F]:
        return self.map(lambda failure: failure, _none)

    def success_or_none(self) -> Optional[S]:
        return self.map(_none, lambda success: success)


@dataclass(frozen=True, slots=True)
class Failure(Either[F, S]):
    value: F

    def is_failure(self) -> bool:
        return True

    def is_success(self) -> bool:
        return False

    def peek_failure(self) -> F:
        return self.value

    def unwrap_success(self) -> NoReturn:
        raise InvalidStateError("Either was not in the success state")

    def map(self, on_failure: Callable[[F], T], on_success: Callable[[S], T]) -> T:
        return on_failure(self.value)

    def map_failure(self, func: Callable[[F], G]) -> Either[G, S]:
        return Failure(func(self.value))

    def map_success(self, func: Callable[[S], T]) -> Either[F, T]:
        return Failure(self.value)

    def apply_both(
        self, on_failure: Callable[[F], Any], on_success: Callable[[S], Any]
    ) -> None:
        on_failure(self.value)

    def success_or_propagate(self) -> NoReturn:
        if not isinstance(self.value, BaseException):
            raise InvalidStateError(
                f"Failure value {self.value!r} is not an exception "
                "and cannot be raised"
            )
        raise self.value


@dataclass(frozen=True, slots=True)
class Success(Either[F, S]):
    value: S

    def is_failure(self) -> bool:
        return False

    def is_success(self) -> bool:
        return True

    def peek_failure(self) -> NoReturn:
        raise InvalidStateError("Either was not in the failure state")

    def unwrap_success(self) -> S:
        return self.value

    def map(self, on_failure: Callable[[F], T], on_success: Callable[[S], T]) -> T:
        return on_success(self.value)

    def map_failure(self, func: Callable[[F], G]) -> Either[G, S]:
        return Success(self.value)

    def map_success(self, func: Callable[[S], T]) -> Either[F, T]:
        return Success(func(self.value))

    def apply_both(
        self, on_failure: Callable[[F], Any], on_success: Callable[[S], Any]
    ) -> None:
        on_success(self.value)

    def success_or_propagate(self) -> S:
        return self.value


def _ignore(_: Any) -> None:
    return None


def _none(_: Any) -> None:
    return None
