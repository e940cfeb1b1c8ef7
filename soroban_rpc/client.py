"""Soroban RPC client — one coroutine per JSON-RPC method."""
from __future__ import annotations

import logging
from typing import Any

from stellar_sdk import xdr as stellar_xdr

from . import xdr_codec
from .config import ServerConfig
from .errors import InvalidResponseShape
from .events import GetEventsRequest
from .interfaces.transport import JsonRpcTransport
from .models import (
    EXPERIMENTAL_ERROR,
    GetEventsResponse,
    GetEventsResult,
    GetHealthResponse,
    GetLatestLedgerResponse,
    GetLedgerEntryResponse,
    GetNetworkResponse,
    GetTransactionResponse,
    GetTransactionResult,
    HealthResult,
    LatestLedgerResult,
    LedgerEntryResult,
    NetworkResult,
    RpcResponse,
    SendTransactionResponse,
    SendTransactionResult,
    SimulateTransactionResponse,
    SimulateTransactionResult,
    T,
)
from .rpc.jsonrpc import JsonRpcRequest
from .rpc.transport import AiohttpTransport

logger = logging.getLogger(__name__)


def _envelope_xdr(transaction: Any) -> str:
    """Accept a base64 envelope or anything exposing ``to_xdr()``."""
    if isinstance(transaction, str):
        return transaction
    return transaction.to_xdr()


class SorobanServer:
    """Client for a local or remote Soroban RPC server.

    Every call is refused with a canned error response until
    ``config.acknowledge_experimental`` is set.

    Args:
        config: Server URL, timeout, headers and the experimental flag.
        transport: Injectable transport. Defaults to ``AiohttpTransport``.
    """

    def __init__(
        self, config: ServerConfig, transport: JsonRpcTransport | None = None
    ) -> None:
        self.url = config.url
        self.acknowledge_experimental = config.acknowledge_experimental
        self.headers = dict(config.headers)
        self.headers.setdefault("Content-Type", "application/json")
        self._transport = transport or AiohttpTransport(timeout=config.timeout)

    async def _call(
        self, method: str, payload_type: type[T], args: Any = None
    ) -> RpcResponse[T]:
        if not self.acknowledge_experimental:
            logger.error("Error: acknowledgeExperimental flag not set")
            return RpcResponse.from_raw_json(EXPERIMENTAL_ERROR, payload_type)

        request = JsonRpcRequest(method, args=args)
        raw = await self._transport.post_json(self.url, request.to_json(), self.headers)
        logger.debug("%s response: %s", method, raw)

        try:
            return RpcResponse.from_raw_json(raw, payload_type)
        except InvalidResponseShape:
            logger.error("%s returned an invalid JSON-RPC reply: %s", method, raw)
            raise

    async def get_health(self) -> GetHealthResponse:
        """General node health check."""
        return await self._call("getHealth", HealthResult)

    async def get_latest_ledger(self) -> GetLatestLedgerResponse:
        return await self._call("getLatestLedger", LatestLedgerResult)

    async def get_ledger_entry(self, base64_encoded_key: str) -> GetLedgerEntryResponse:
        """Read the current value of a ledger entry by its base64 ``LedgerKey``.

        Useful for inspecting contract state or fetching contract code when
        the data is not available through events or simulation.
        """
        return await self._call(
            "getLedgerEntry", LedgerEntryResult, {"key": base64_encoded_key}
        )

    async def get_network(self) -> GetNetworkResponse:
        """General info about the currently configured network."""
        return await self._call("getNetwork", NetworkResult)

    async def simulate_transaction(self, transaction: Any) -> SimulateTransactionResponse:
        """Dry-run a contract invocation.

        Returns the expected return values, ledger footprint and cost. The
        transaction may be a base64 envelope or an object with ``to_xdr()``.
        """
        return await self._call(
            "simulateTransaction", SimulateTransactionResult, _envelope_xdr(transaction)
        )

    async def send_transaction(self, transaction: Any) -> SendTransactionResponse:
        """Submit a transaction; the node validates and enqueues it.

        Poll :meth:`get_transaction` for the outcome.
        """
        return await self._call(
            "sendTransaction", SendTransactionResult, _envelope_xdr(transaction)
        )

    async def get_transaction(self, transaction_hash: str) -> GetTransactionResponse:
        return await self._call("getTransaction", GetTransactionResult, transaction_hash)

    async def get_events(self, request: GetEventsRequest) -> GetEventsResponse:
        """Fetch events emitted within the node's retention window.

        Callers paginating over several requests should deduplicate by
        event ``id``.
        """
        return await self._call("getEvents", GetEventsResult, request.to_request_args())

    async def get_contract_data_entry(
        self, ledger_key: stellar_xdr.LedgerKey
    ) -> stellar_xdr.LedgerEntryData | None:
        """Current data of a contract data ledger key, or None if unavailable."""
        response = await self.get_ledger_entry(xdr_codec.encode(ledger_key))
        if response.is_error or response.result is None:
            if response.error is not None:
                logger.info(
                    "getLedgerEntry failed: %s %s",
                    response.error.code,
                    response.error.message,
                )
            return None
        data = response.result.ledger_entry_data
        if data is None or data.contract_data is None:
            return None
        return data
