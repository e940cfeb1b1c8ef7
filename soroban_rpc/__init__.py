"""Async client for the Soroban JSON-RPC node API."""
__version__ = "0.1.0"

from .client import SorobanServer
from .errors import (
    InvalidResponseShape,
    MalformedPayload,
    SorobanRpcError,
    TransportError,
    UnknownStatus,
    UnsupportedMetaVersion,
)
from .events import EventFilter, GetEventsRequest, PaginationOptions, TopicFilter
from .footprint import Footprint
from .models import ErrorInfo, RpcResponse

__all__ = [
    "SorobanServer",
    "RpcResponse",
    "ErrorInfo",
    "Footprint",
    "EventFilter",
    "TopicFilter",
    "PaginationOptions",
    "GetEventsRequest",
    "SorobanRpcError",
    "InvalidResponseShape",
    "MalformedPayload",
    "UnsupportedMetaVersion",
    "UnknownStatus",
    "TransportError",
]
