from ._payload_request import PayloadRequest
from ._request import Request
from ._verbs import Delete, Get, Patch, Post, Put

__all__ = ["Delete", "Get", "Patch", "PayloadRequest", "Post", "Put", "Request"]
