import os
from pathlib import Path
from typing import IO, Any, Optional, TypeVar, Union

from .._utils._request_spec import Body
from .._utils.constants import CONTENT_TYPE_JSON, CONTENT_TYPE_OCTET_STREAM
from ..models.forms import Form, UrlEncodedForm
from ._request import Request

P = TypeVar("P", bound="PayloadRequest")

BodyLike = Union[str, bytes, bytearray, IO[bytes], os.PathLike, Form, UrlEncodedForm]


class PayloadRequest(Request):
    """A request that carries a body (POST, PUT and PATCH).

    It owns at most one body at a time: every ``set_body`` or
    ``set_json_body`` call replaces whatever was attached before.
    """

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self._payload: Optional[Body] = None

    @property
    def body(self) -> Optional[Body]:
        return self._payload

    def set_body(
        self: P, content: BodyLike, content_type: Optional[str] = None
    ) -> P:
        """Attach the request body.

        Args:
            content: The payload. ``str`` is sent UTF-8 encoded; ``bytes`` as
                is; a binary stream is read while the request is sent (once:
                a consumed stream is not rewound for a later execution); an
                ``os.PathLike`` names a file opened for each exchange; a
                :class:`Form` or :class:`UrlEncodedForm` brings its own
                content type.
            content_type: The declared content type. Defaults to
                ``application/json`` for text and
                ``application/octet-stream`` for the other raw payloads.

        Raises:
            ValueError: If a content type is given together with a form, or
                if a multipart :class:`Form` has no parts.
            TypeError: If ``content`` is none of the supported payloads.
        """
        if isinstance(content, (Form, UrlEncodedForm)):
            if content_type is not None:
                raise ValueError("A form body sets its own content type")
            if isinstance(content, Form) and not content.parts:
                raise ValueError("A multipart form needs at least one part")
            self._payload = content.to_body()
            return self

        if isinstance(content, str):
            self._payload = Body(content, content_type or CONTENT_TYPE_JSON)
            return self

        binary_type = content_type or CONTENT_TYPE_OCTET_STREAM
        if isinstance(content, (bytes, bytearray)):
            self._payload = Body(bytes(content), binary_type)
        elif isinstance(content, os.PathLike):
            self._payload = Body(Path(content), binary_type)
        elif hasattr(content, "read"):
            self._payload = Body(content, binary_type)
        else:
            raise TypeError(f"Unsupported body type: {type(content).__name__}")
        return self

    def set_json_body(self: P, payload: Any) -> P:
        """Serialize ``payload`` to JSON and attach it as ``application/json``."""
        text = self._resolve_serializer().serialize(payload)
        return self.set_body(text, CONTENT_TYPE_JSON)

    def _body(self) -> Optional[Body]:
        return self._payload
