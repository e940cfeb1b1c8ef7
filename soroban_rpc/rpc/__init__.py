"""JSON-RPC envelope and HTTP transport."""
from .jsonrpc import JsonRpcRequest
from .transport import AiohttpTransport

__all__ = ["JsonRpcRequest", "AiohttpTransport"]
