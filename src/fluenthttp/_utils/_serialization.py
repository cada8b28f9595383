from functools import lru_cache
from typing import Any, Mapping, Optional, Protocol, TypeVar

from pydantic import TypeAdapter, ValidationError

from ..models.errors import ParseError

T = TypeVar("T")


class Serializer(Protocol):
    """JSON marshalling used for request bodies and typed response parsing."""

    def serialize(self, obj: Any) -> str: ...

    def deserialize(self, text: str, shape: type[T]) -> T: ...

    def deserialize_list(self, text: str, shape: type[T]) -> list[T]: ...


@lru_cache(maxsize=128)
def _adapter(shape: Any) -> TypeAdapter[Any]:
    return TypeAdapter(shape)


class PydanticSerializer:
    """Serializer backed by pydantic.

    Accepts anything pydantic knows how to dump (models, dataclasses,
    TypedDicts, plain containers) and validates into any type a
    ``TypeAdapter`` accepts.
    """

    def serialize(self, obj: Any) -> str:
        return _adapter(Any).dump_json(obj).decode("utf-8")

    def deserialize(self, text: str, shape: type[T]) -> T:
        return self._validate(text, shape)

    def deserialize_list(self, text: str, shape: type[T]) -> list[T]:
        return self._validate(text, list[shape])  # type: ignore[valid-type]

    def _validate(self, text: str, shape: Any) -> Any:
        try:
            return _adapter(shape).validate_json(text)
        except ValidationError as e:
            shape_name = getattr(shape, "__name__", repr(shape))
            raise ParseError(
                f"Could not parse content as {shape_name}: {e}", content=text
            ) from e


DEFAULT_SERIALIZER: Serializer = PydanticSerializer()


def json_wrap(member: str, obj: Any) -> str:
    """Serialize ``obj`` as the single member of a JSON object.

    ``json_wrap("person", person)`` gives ``{"person": {...}}``.
    """
    return DEFAULT_SERIALIZER.serialize({member: obj})


def empty_object() -> str:
    return DEFAULT_SERIALIZER.serialize({})


def get_member(obj: Optional[Mapping[str, Any]], name: str) -> Optional[str]:
    """Read a member of a decoded JSON object as text.

    Returns ``None`` when ``obj`` is missing, the member is absent or the
    member is JSON ``null``. Non-string members come back as their JSON text.
    """
    if obj is None:
        return None
    value = obj.get(name)
    if value is None:
        return None
    if isinstance(value, str):
        return value
    return DEFAULT_SERIALIZER.serialize(value)
