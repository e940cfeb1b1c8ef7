"""Request argument builders for ``getEvents`` — pure, no I/O.

Each builder emits only the keys that are set; nothing is sent as ``null``.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from stellar_sdk import xdr as stellar_xdr

from . import xdr_codec

WILDCARD = "*"


@dataclass(frozen=True)
class TopicFilter:
    """One topic filter: either a wildcard marker or a list of contract values."""

    wildcard: str | None = None
    sc_val: tuple[stellar_xdr.SCVal, ...] | None = None

    def to_request_args(self) -> dict[str, Any]:
        args: dict[str, Any] = {}
        if self.wildcard is not None:
            args["wildcard"] = self.wildcard
        if self.sc_val is not None:
            args["scval"] = [xdr_codec.encode(v) for v in self.sc_val]
        return args


@dataclass(frozen=True)
class EventFilter:
    """Filter for ``getEvents``.

    ``type`` is a comma separated list of ``system``, ``contract`` or
    ``diagnostic``. The node accepts at most 5 contract ids; that limit is
    enforced server-side only.
    """

    type: str | None = None
    contract_ids: tuple[str, ...] | None = None
    topics: tuple[TopicFilter, ...] | None = None

    def to_request_args(self) -> dict[str, Any]:
        args: dict[str, Any] = {}
        if self.type is not None:
            args["type"] = self.type
        if self.contract_ids is not None:
            args["contractIds"] = list(self.contract_ids)
        if self.topics is not None:
            args["topics"] = [t.to_request_args() for t in self.topics]
        return args


@dataclass(frozen=True)
class PaginationOptions:
    cursor: str | None = None
    limit: int | None = None

    def to_request_args(self) -> dict[str, Any]:
        args: dict[str, Any] = {}
        if self.cursor is not None:
            args["cursor"] = self.cursor
        if self.limit is not None:
            args["limit"] = self.limit
        return args


@dataclass(frozen=True)
class GetEventsRequest:
    """Parameters for ``getEvents``.

    ``start_ledger`` must be omitted when paginating with a cursor.
    """

    start_ledger: str | None = None
    filters: tuple[EventFilter, ...] | None = None
    pagination: PaginationOptions | None = None

    def to_request_args(self) -> dict[str, Any]:
        args: dict[str, Any] = {}
        if self.start_ledger is not None:
            args["startLedger"] = self.start_ledger
        if self.filters is not None:
            args["filters"] = [f.to_request_args() for f in self.filters]
        if self.pagination is not None:
            args["pagination"] = self.pagination.to_request_args()
        return args
