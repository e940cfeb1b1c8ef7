"""JSON-RPC 2.0 request envelope."""
from __future__ import annotations

import itertools
from typing import Any

JSONRPC_VERSION = "2.0"

# next() on itertools.count is atomic under the GIL, so concurrent requests
# never share an id.
_REQUEST_IDS = itertools.count(1)


def _next_request_id() -> int:
    return next(_REQUEST_IDS)


class JsonRpcRequest:
    """Method name and arguments of a single JSON-RPC call.

    Args:
        method: Name of the remote method.
        args: A scalar, list or mapping. Scalars are sent as a one-element
            positional list.
        notify: If True the request is a notification: no id is sent and
            no correlated reply is expected.
    """

    def __init__(self, method: str, args: Any = None, notify: bool = False) -> None:
        self.method = method
        self.args = args
        self.notify = notify
        self._id: int | None = None

    @property
    def id(self) -> int | None:
        """Request id, assigned on first access and stable afterwards."""
        if self.notify:
            return None
        if self._id is None:
            self._id = _next_request_id()
        return self._id

    def to_json(self) -> dict[str, Any]:
        payload: dict[str, Any] = {"jsonrpc": JSONRPC_VERSION, "method": self.method}
        if self.args is not None:
            if isinstance(self.args, (list, tuple, dict)):
                payload["params"] = (
                    list(self.args) if isinstance(self.args, tuple) else self.args
                )
            else:
                payload["params"] = [self.args]
        if not self.notify:
            payload["id"] = self.id
        return payload

    def __repr__(self) -> str:
        return f"JsonRpcRequest({self.to_json()})"
