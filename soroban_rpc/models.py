"""Response models for the Soroban RPC methods — all frozen (immutable).

Every reply is an ``RpcResponse[T]`` holding either a method-specific result
payload ``T`` or an ``ErrorInfo``. Payloads keep base64 XDR fields as the raw
strings received; the decoded records are exposed as properties and decoded
on every access.
"""
from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Any, ClassVar, Generic, Protocol, TypeVar

from stellar_sdk import xdr as stellar_xdr

from . import xdr_codec
from .errors import InvalidResponseShape, MalformedPayload, UnknownStatus
from .footprint import Footprint

GATE_CLOSED_CODE = "-1"
GATE_CLOSED_MESSAGE = "acknowledgeExperimental flag not set"

# Canned reply returned by the client while the experimental API has not
# been acknowledged.
EXPERIMENTAL_ERROR: dict[str, Any] = {
    "error": {"code": -1, "message": GATE_CLOSED_MESSAGE}
}


class _Payload(Protocol):
    @classmethod
    def from_json(cls, result: dict[str, Any]) -> Any: ...


T = TypeVar("T", bound=_Payload)


# ---------------------------------------------------------------------------
# Generic response
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class ErrorInfo:
    """A JSON-RPC ``error`` object, copied verbatim."""

    code: str | None = None
    message: str | None = None
    data: dict[str, Any] | None = None

    @classmethod
    def from_json(cls, error: dict[str, Any]) -> ErrorInfo:
        code = error.get("code")
        return cls(
            code=str(code) if code is not None else None,
            message=error.get("message"),
            data=error.get("data"),
        )

    @property
    def is_gate_closed(self) -> bool:
        return self.code == GATE_CLOSED_CODE and self.message == GATE_CLOSED_MESSAGE


@dataclass(frozen=True)
class RpcResponse(Generic[T]):
    """Either a successful ``result`` or an ``error``, never both."""

    result: T | None = None
    error: ErrorInfo | None = None
    raw: dict[str, Any] = field(default_factory=dict, repr=False, compare=False)

    @property
    def is_error(self) -> bool:
        return self.error is not None

    @classmethod
    def from_raw_json(
        cls, raw: dict[str, Any], payload_type: type[T]
    ) -> RpcResponse[T]:
        """Build a response from a JSON-RPC reply object.

        Raises:
            InvalidResponseShape: if the reply has neither ``result`` nor
                ``error``, or either of them is not a JSON object.
        """
        if not isinstance(raw, dict):
            raise InvalidResponseShape(f"Expected a JSON object, got {type(raw).__name__}")
        if raw.get("result") is not None:
            if not isinstance(raw["result"], dict):
                raise InvalidResponseShape("JSON-RPC 'result' is not an object")
            return cls(result=payload_type.from_json(raw["result"]), raw=raw)
        if raw.get("error") is not None:
            if not isinstance(raw["error"], dict):
                raise InvalidResponseShape("JSON-RPC 'error' is not an object")
            return cls(error=ErrorInfo.from_json(raw["error"]), raw=raw)
        raise InvalidResponseShape("JSON-RPC reply has neither 'result' nor 'error'")


def _parse_status(enum_type: type[enum.Enum], status: str | None) -> Any:
    if status is None:
        return None
    try:
        return enum_type(status)
    except ValueError:
        raise UnknownStatus(status, tuple(m.value for m in enum_type)) from None


def _to_int(value: Any) -> int | None:
    if value is None:
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        try:
            return int(value)
        except ValueError as e:
            raise MalformedPayload(f"Not an integer: {value!r}") from e
    raise MalformedPayload(f"Not an integer: {value!r}")


def _str_tuple(value: Any) -> tuple[str, ...] | None:
    if value is None:
        return None
    if not isinstance(value, list):
        raise MalformedPayload(f"Expected a list of base64 strings, got {value!r}")
    return tuple(value)


# ---------------------------------------------------------------------------
# getHealth / getLatestLedger / getNetwork
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class HealthResult:
    HEALTHY: ClassVar[str] = "healthy"

    status: str | None = None

    @classmethod
    def from_json(cls, result: dict[str, Any]) -> HealthResult:
        return cls(status=result.get("status"))

    @property
    def is_healthy(self) -> bool:
        return self.status == self.HEALTHY


@dataclass(frozen=True)
class LatestLedgerResult:
    """Hex hash, protocol version and sequence of the latest ledger."""

    id: str | None = None
    protocol_version: str | None = None
    sequence: str | None = None

    @classmethod
    def from_json(cls, result: dict[str, Any]) -> LatestLedgerResult:
        return cls(
            id=result.get("id"),
            protocol_version=result.get("protocolVersion"),
            sequence=result.get("sequence"),
        )


@dataclass(frozen=True)
class NetworkResult:
    friendbot_url: str | None = None
    passphrase: str | None = None
    protocol_version: str | None = None

    @classmethod
    def from_json(cls, result: dict[str, Any]) -> NetworkResult:
        return cls(
            friendbot_url=result.get("friendbotUrl"),
            passphrase=result.get("passphrase"),
            protocol_version=result.get("protocolVersion"),
        )


# ---------------------------------------------------------------------------
# getLedgerEntry
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class LedgerEntryResult:
    """Current value of a single ledger entry.

    ``xdr`` is the base64 ``LedgerEntryData``; ``last_modified_ledger_seq``
    is the ledger that last updated it.
    """

    xdr: str | None = None
    last_modified_ledger_seq: str | None = None
    latest_ledger: str | None = None

    @classmethod
    def from_json(cls, result: dict[str, Any]) -> LedgerEntryResult:
        return cls(
            xdr=result.get("xdr"),
            last_modified_ledger_seq=result.get("lastModifiedLedgerSeq"),
            latest_ledger=result.get("latestLedger"),
        )

    @property
    def ledger_entry_data(self) -> stellar_xdr.LedgerEntryData | None:
        return xdr_codec.decode_optional(stellar_xdr.LedgerEntryData, self.xdr)


# ---------------------------------------------------------------------------
# simulateTransaction
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class SimulationCost:
    """Stringified CPU instruction and memory byte counts."""

    cpu_insns: str | None = None
    mem_bytes: str | None = None

    @classmethod
    def from_json(cls, cost: dict[str, Any]) -> SimulationCost:
        return cls(cpu_insns=cost.get("cpuInsns"), mem_bytes=cost.get("memBytes"))


@dataclass(frozen=True)
class SimulationResult:
    """Outcome of simulating one operation.

    Attributes:
        xdr: Base64 ``SCVal`` return value, only present on success.
        footprint_xdr: Base64 ``LedgerFootprint`` of the keys touched.
        auth: Base64 ``SorobanAuthorizationEntry`` blobs, one per address.
        events: Base64 ``DiagnosticEvent`` blobs emitted during the call.
    """

    xdr: str | None = None
    footprint_xdr: str | None = None
    auth: tuple[str, ...] | None = None
    events: tuple[str, ...] | None = None

    @classmethod
    def from_json(cls, result: dict[str, Any]) -> SimulationResult:
        return cls(
            xdr=result.get("xdr"),
            footprint_xdr=result.get("footprint"),
            auth=_str_tuple(result.get("auth")),
            events=_str_tuple(result.get("events")),
        )

    @property
    def value(self) -> stellar_xdr.SCVal | None:
        return xdr_codec.decode_optional(stellar_xdr.SCVal, self.xdr)

    @property
    def footprint(self) -> Footprint | None:
        xdr_footprint = xdr_codec.decode_optional(
            stellar_xdr.LedgerFootprint, self.footprint_xdr
        )
        return Footprint(xdr_footprint) if xdr_footprint is not None else None

    @property
    def auth_entries(self) -> list[stellar_xdr.SorobanAuthorizationEntry] | None:
        if self.auth is None:
            return None
        return [
            xdr_codec.decode(stellar_xdr.SorobanAuthorizationEntry, a)
            for a in self.auth
        ]

    @property
    def diagnostic_events(self) -> list[stellar_xdr.DiagnosticEvent] | None:
        if self.events is None:
            return None
        return [xdr_codec.decode(stellar_xdr.DiagnosticEvent, e) for e in self.events]


@dataclass(frozen=True)
class SimulateTransactionResult:
    """Reply to ``simulateTransaction``: one ``SimulationResult`` per operation.

    ``result_error`` carries the node's explanation when the invocation
    failed; ``results`` is then absent.
    """

    latest_ledger: str | None = None
    results: tuple[SimulationResult, ...] | None = None
    cost: SimulationCost | None = None
    result_error: str | None = None

    @classmethod
    def from_json(cls, result: dict[str, Any]) -> SimulateTransactionResult:
        raw_results = result.get("results")
        raw_cost = result.get("cost")
        return cls(
            latest_ledger=result.get("latestLedger"),
            results=(
                tuple(SimulationResult.from_json(r) for r in raw_results)
                if raw_results is not None
                else None
            ),
            cost=SimulationCost.from_json(raw_cost) if raw_cost is not None else None,
            result_error=result.get("error"),
        )

    def _first(self) -> SimulationResult | None:
        if self.results:
            return self.results[0]
        return None

    @property
    def footprint(self) -> Footprint | None:
        first = self._first()
        return first.footprint if first is not None else None

    @property
    def contract_auth(self) -> list[stellar_xdr.SorobanAuthorizationEntry] | None:
        first = self._first()
        return first.auth_entries if first is not None else None


# ---------------------------------------------------------------------------
# sendTransaction
# ---------------------------------------------------------------------------


class SendTransactionStatus(str, enum.Enum):
    ERROR = "ERROR"
    PENDING = "PENDING"
    DUPLICATE = "DUPLICATE"
    # Not included in the previous 4 ledgers; banned for the next few.
    TRY_AGAIN_LATER = "TRY_AGAIN_LATER"


@dataclass(frozen=True)
class SendTransactionResult:
    """Reply to ``sendTransaction``.

    The node only validates and enqueues; poll ``getTransaction`` with
    ``hash`` to learn the outcome.
    """

    hash: str | None = None
    status: str | None = None
    latest_ledger: str | None = None
    latest_ledger_close_time: str | None = None
    error_result_xdr: str | None = None

    @classmethod
    def from_json(cls, result: dict[str, Any]) -> SendTransactionResult:
        return cls(
            hash=result.get("hash"),
            status=result.get("status"),
            latest_ledger=result.get("latestLedger"),
            latest_ledger_close_time=result.get("latestLedgerCloseTime"),
            error_result_xdr=result.get("errorResultXdr"),
        )

    @property
    def status_value(self) -> SendTransactionStatus | None:
        return _parse_status(SendTransactionStatus, self.status)

    @property
    def error_result(self) -> stellar_xdr.TransactionResult | None:
        """Why stellar-core rejected the transaction, when status is ERROR."""
        return xdr_codec.decode_optional(
            stellar_xdr.TransactionResult, self.error_result_xdr
        )


# ---------------------------------------------------------------------------
# getTransaction
# ---------------------------------------------------------------------------


class GetTransactionStatus(str, enum.Enum):
    SUCCESS = "SUCCESS"
    NOT_FOUND = "NOT_FOUND"
    FAILED = "FAILED"


@dataclass(frozen=True)
class GetTransactionResult:
    """Reply to ``getTransaction``.

    ``ledger``, ``created_at``, ``application_order``, ``fee_bump`` and
    ``result_xdr`` are only present once the transaction is SUCCESS or
    FAILED.
    """

    status: str | None = None
    latest_ledger: str | None = None
    latest_ledger_close_time: str | None = None
    oldest_ledger: str | None = None
    oldest_ledger_close_time: str | None = None
    ledger: str | None = None
    created_at: str | None = None
    application_order: int | None = None
    fee_bump: bool | None = None
    envelope_xdr: str | None = None
    result_xdr: str | None = None
    result_meta_xdr: str | None = None

    @classmethod
    def from_json(cls, result: dict[str, Any]) -> GetTransactionResult:
        return cls(
            status=result.get("status"),
            latest_ledger=result.get("latestLedger"),
            latest_ledger_close_time=result.get("latestLedgerCloseTime"),
            oldest_ledger=result.get("oldestLedger"),
            oldest_ledger_close_time=result.get("oldestLedgerCloseTime"),
            ledger=result.get("ledger"),
            created_at=result.get("createdAt"),
            application_order=_to_int(result.get("applicationOrder")),
            fee_bump=result.get("feeBump"),
            envelope_xdr=result.get("envelopeXdr"),
            result_xdr=result.get("resultXdr"),
            result_meta_xdr=result.get("resultMetaXdr"),
        )

    @property
    def status_value(self) -> GetTransactionStatus | None:
        return _parse_status(GetTransactionStatus, self.status)

    @property
    def envelope(self) -> stellar_xdr.TransactionEnvelope | None:
        return xdr_codec.decode_optional(
            stellar_xdr.TransactionEnvelope, self.envelope_xdr
        )

    @property
    def transaction_result(self) -> stellar_xdr.TransactionResult | None:
        return xdr_codec.decode_optional(stellar_xdr.TransactionResult, self.result_xdr)

    @property
    def result_meta(self) -> stellar_xdr.TransactionMeta | None:
        return xdr_codec.decode_optional(
            stellar_xdr.TransactionMeta, self.result_meta_xdr
        )


# ---------------------------------------------------------------------------
# getEvents
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class EventInfo:
    """A single contract event with its topics and value as base64 ``SCVal``."""

    type: str | None = None
    ledger: str | None = None
    ledger_closed_at: str | None = None
    contract_id: str | None = None
    id: str | None = None
    paging_token: str | None = None
    topic: tuple[str, ...] | None = None
    value_xdr: str | None = None

    @classmethod
    def from_json(cls, event: dict[str, Any]) -> EventInfo:
        value = event.get("value")
        # Older nodes wrap the value as {"xdr": "..."}.
        if isinstance(value, dict):
            value = value.get("xdr")
        return cls(
            type=event.get("type"),
            ledger=event.get("ledger"),
            ledger_closed_at=event.get("ledgerClosedAt"),
            contract_id=event.get("contractId"),
            id=event.get("id"),
            paging_token=event.get("pagingToken"),
            topic=_str_tuple(event.get("topic")),
            value_xdr=value,
        )

    @property
    def topic_values(self) -> list[stellar_xdr.SCVal] | None:
        if self.topic is None:
            return None
        return [xdr_codec.decode(stellar_xdr.SCVal, t) for t in self.topic]

    @property
    def value(self) -> stellar_xdr.SCVal | None:
        return xdr_codec.decode_optional(stellar_xdr.SCVal, self.value_xdr)


@dataclass(frozen=True)
class GetEventsResult:
    latest_ledger: str | None = None
    events: tuple[EventInfo, ...] | None = None

    @classmethod
    def from_json(cls, result: dict[str, Any]) -> GetEventsResult:
        raw_events = result.get("events")
        return cls(
            latest_ledger=result.get("latestLedger"),
            events=(
                tuple(EventInfo.from_json(e) for e in raw_events)
                if raw_events is not None
                else None
            ),
        )


GetHealthResponse = RpcResponse[HealthResult]
GetLatestLedgerResponse = RpcResponse[LatestLedgerResult]
GetNetworkResponse = RpcResponse[NetworkResult]
GetLedgerEntryResponse = RpcResponse[LedgerEntryResult]
SimulateTransactionResponse = RpcResponse[SimulateTransactionResult]
SendTransactionResponse = RpcResponse[SendTransactionResult]
GetTransactionResponse = RpcResponse[GetTransactionResult]
GetEventsResponse = RpcResponse[GetEventsResult]
