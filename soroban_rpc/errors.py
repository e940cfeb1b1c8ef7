"""Exceptions raised while talking to or decoding replies from a Soroban RPC node.

Server-reported errors are *not* exceptions: they come back as an
``RpcResponse`` with ``is_error`` set. Everything here signals a reply the
caller cannot make sense of by inspecting the response.
"""
from __future__ import annotations


class SorobanRpcError(Exception):
    """Base class for all client-side failures."""


class InvalidResponseShape(SorobanRpcError):
    """The JSON-RPC reply carries neither ``result`` nor ``error``."""


class MalformedPayload(SorobanRpcError):
    """A base64 or XDR field could not be decoded."""


class UnsupportedMetaVersion(SorobanRpcError):
    """Transaction metadata is not in the supported ``v3`` shape."""

    def __init__(self, version: int) -> None:
        super().__init__(f"Unsupported TransactionMeta version: {version}")
        self.version = version


class UnknownStatus(SorobanRpcError):
    """A status string outside the closed set defined for a response."""

    def __init__(self, status: str | None, allowed: tuple[str, ...]) -> None:
        super().__init__(
            f"Unknown status {status!r}, expected one of {', '.join(allowed)}"
        )
        self.status = status


class TransportError(SorobanRpcError):
    """No valid reply was available from the transport."""
