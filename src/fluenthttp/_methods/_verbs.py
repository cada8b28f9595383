from ._payload_request import PayloadRequest
from ._request import Request


class Get(Request):
    """A GET request: retrieves a resource without side effects."""

    METHOD = "GET"


class Delete(Request):
    """A DELETE request: removes a resource."""

    METHOD = "DELETE"


class Post(PayloadRequest):
    """A POST request: sends data to alter state or trigger an effect."""

    METHOD = "POST"


class Put(PayloadRequest):
    """A PUT request: replaces (or upserts) a resource as a whole."""

    METHOD = "PUT"


class Patch(PayloadRequest):
    """A PATCH request: partially modifies a resource."""

    METHOD = "PATCH"
