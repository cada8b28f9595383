"""fluenthttp: fluent HTTP requests with a uniform success/failure result.

Build a request, then pick how to run it:

```python
from fluenthttp import Failure, Success, get

request = get("https://example.com/people").add_header("Accept", "application/json")

request.execute()           # Either[TransportError, Response]
request.execute_optional()  # Response | None
request.execute_deferred()  # Future[Either[TransportError, Response]]
request.execute_stream()    # Producer[Response]
```
"""

from ._config import HttpConfig
from ._http import (
    Http,
    delete,
    gather,
    get,
    patch,
    post,
    put,
    set_default_transport,
)
from ._methods import Delete, Get, Patch, PayloadRequest, Post, Put, Request
from ._transport import HttpxTransport, RawResponse, Transport
from ._utils import (
    Body,
    PydanticSerializer,
    RequestSpec,
    Serializer,
    empty_object,
    get_member,
    json_wrap,
)
from ._version import __version__
from .models import (
    Either,
    Failure,
    FluentHttpError,
    Form,
    InvalidStateError,
    MalformedTargetError,
    ParseError,
    Producer,
    Response,
    Success,
    TransportError,
    UrlEncodedForm,
)

__all__ = [
    "Body",
    "Delete",
    "Either",
    "Failure",
    "FluentHttpError",
    "Form",
    "Get",
    "Http",
    "HttpConfig",
    "HttpxTransport",
    "InvalidStateError",
    "MalformedTargetError",
    "ParseError",
    "Patch",
    "PayloadRequest",
    "Post",
    "Producer",
    "Put",
    "PydanticSerializer",
    "RawResponse",
    "Request",
    "RequestSpec",
    "Response",
    "Serializer",
    "Success",
    "Transport",
    "TransportError",
    "UrlEncodedForm",
    "__version__",
    "delete",
    "empty_object",
    "gather",
    "get",
    "get_member",
    "json_wrap",
    "patch",
    "post",
    "put",
    "set_default_transport",
]
