"""Transport protocol — HTTP exchange abstraction."""
from typing import Any, Protocol


class JsonRpcTransport(Protocol):
    """Abstract interface for posting a JSON-RPC payload and reading the reply."""

    async def post_json(
        self, url: str, payload: dict[str, Any], headers: dict[str, str]
    ) -> dict[str, Any]: ...
