from ._base import RawResponse, Transport
from ._httpx_transport import HttpxTransport

__all__ = ["HttpxTransport", "RawResponse", "Transport"]
