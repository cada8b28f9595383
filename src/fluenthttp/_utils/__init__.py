from ._errors import handle_transport_errors
from ._request_spec import Body, BodyContent, MultipartPart, RequestSpec
from ._serialization import (
    DEFAULT_SERIALIZER,
    PydanticSerializer,
    Serializer,
    empty_object,
    get_member,
    json_wrap,
)

__all__ = [
    "Body",
    "BodyContent",
    "DEFAULT_SERIALIZER",
    "MultipartPart",
    "PydanticSerializer",
    "RequestSpec",
    "Serializer",
    "empty_object",
    "get_member",
    "handle_transport_errors",
    "json_wrap",
]
