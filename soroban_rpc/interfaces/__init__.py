"""Protocol interfaces for the Soroban RPC client."""
from .transport import JsonRpcTransport

__all__ = ["JsonRpcTransport"]
