import os
from pathlib import Path
from typing import IO, Optional, Union
from urllib.parse import urlencode

from .._utils._request_spec import Body, MultipartPart
from .._utils.constants import (
    CONTENT_TYPE_FORM_URLENCODED,
    CONTENT_TYPE_OCTET_STREAM,
    CONTENT_TYPE_TEXT_PLAIN,
)


class Form:
    """A multipart/form-data body built part by part.

    Text parts default to ``text/plain``; binary, stream and file parts to
    ``application/octet-stream``. File parts take the file's name unless a
    ``filename`` is given and are read only while the request is sent.

    Examples:
        ```python
        form = (
            Form()
            .add_part("name", "Ada")
            .add_part("avatar", Path("ada.png"), content_type="image/png")
        )
        post("https://example.com/people").set_body(form).execute()
        ```
    """

    def __init__(self) -> None:
        self._parts: list[tuple[str, MultipartPart]] = []

    def add_part(
        self,
        key: str,
        value: Union[str, bytes, IO[bytes], os.PathLike],
        content_type: Optional[str] = None,
        filename: Optional[str] = None,
    ) -> "Form":
        if isinstance(value, str):
            part: MultipartPart = (
                filename,
                value,
                content_type or CONTENT_TYPE_TEXT_PLAIN,
            )
        elif isinstance(value, os.PathLike):
            path = Path(value)
            part = (
                filename or path.name,
                path,
                content_type or CONTENT_TYPE_OCTET_STREAM,
            )
        else:
            part = (filename, value, content_type or CONTENT_TYPE_OCTET_STREAM)
        self._parts.append((key, part))
        return self

    @property
    def parts(self) -> list[tuple[str, MultipartPart]]:
        return list(self._parts)

    def to_body(self) -> Body:
        return Body(files=list(self._parts))


class UrlEncodedForm:
    """An ``application/x-www-form-urlencoded`` body: ``key=value`` pairs.

    Pairs keep their insertion order and repeated keys are sent repeatedly.
    """

    def __init__(self) -> None:
        self._params: list[tuple[str, str]] = []

    def add_part(self, key: str, value: str) -> "UrlEncodedForm":
        self._params.append((key, value))
        return self

    @property
    def parts(self) -> list[tuple[str, str]]:
        return list(self._params)

    def encode(self) -> str:
        return urlencode(self._params)

    def to_body(self) -> Body:
        return Body(content=self.encode(), content_type=CONTENT_TYPE_FORM_URLENCODED)
