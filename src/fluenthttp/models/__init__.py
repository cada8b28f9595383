from .either import Either, Failure, Success
from .errors import (
    FluentHttpError,
    InvalidStateError,
    MalformedTargetError,
    ParseError,
    TransportError,
)
from .forms import Form, UrlEncodedForm
from .response import Response
from .stream import Producer

__all__ = [
    "Either",
    "Failure",
    "FluentHttpError",
    "Form",
    "InvalidStateError",
    "MalformedTargetError",
    "ParseError",
    "Producer",
    "Response",
    "Success",
    "TransportError",
    "UrlEncodedForm",
]
