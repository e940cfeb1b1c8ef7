"""Ledger footprint helpers — locate contract keys in a simulated footprint."""
from __future__ import annotations

from stellar_sdk import xdr as stellar_xdr

from . import xdr_codec


def find_first_key_of_type(
    footprint: stellar_xdr.LedgerFootprint,
    entry_type: stellar_xdr.LedgerEntryType,
) -> stellar_xdr.LedgerKey | None:
    """Return the first key of ``entry_type``, read-only keys before read-write."""
    for key in footprint.read_only:
        if key.type == entry_type:
            return key
    for key in footprint.read_write:
        if key.type == entry_type:
            return key
    return None


class Footprint:
    """The ledger keys a transaction reads and writes, as reported by simulation."""

    def __init__(self, xdr_footprint: stellar_xdr.LedgerFootprint) -> None:
        self.xdr_footprint = xdr_footprint

    @classmethod
    def from_xdr(cls, value: str) -> Footprint:
        return cls(xdr_codec.decode(stellar_xdr.LedgerFootprint, value))

    def to_xdr(self) -> str:
        return xdr_codec.encode(self.xdr_footprint)

    @property
    def read_only(self) -> list[stellar_xdr.LedgerKey]:
        return self.xdr_footprint.read_only

    @property
    def read_write(self) -> list[stellar_xdr.LedgerKey]:
        return self.xdr_footprint.read_write

    def find_first_key_of_type(
        self, entry_type: stellar_xdr.LedgerEntryType
    ) -> stellar_xdr.LedgerKey | None:
        return find_first_key_of_type(self.xdr_footprint, entry_type)

    def contract_code_xdr_ledger_key(self) -> stellar_xdr.LedgerKey | None:
        """The contract code ledger key, if the footprint touches one."""
        return self.find_first_key_of_type(stellar_xdr.LedgerEntryType.CONTRACT_CODE)

    def contract_code_ledger_key(self) -> str | None:
        """The contract code ledger key as a base64 XDR string."""
        key = self.contract_code_xdr_ledger_key()
        return xdr_codec.encode(key) if key is not None else None

    def contract_data_xdr_ledger_key(self) -> stellar_xdr.LedgerKey | None:
        """The contract data ledger key, if the footprint touches one."""
        return self.find_first_key_of_type(stellar_xdr.LedgerEntryType.CONTRACT_DATA)

    def contract_data_ledger_key(self) -> str | None:
        """The contract data ledger key as a base64 XDR string."""
        key = self.contract_data_xdr_ledger_key()
        return xdr_codec.encode(key) if key is not None else None

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Footprint):
            return NotImplemented
        return self.xdr_footprint == other.xdr_footprint

    def __repr__(self) -> str:
        return (
            f"Footprint(read_only={len(self.read_only)}, "
            f"read_write={len(self.read_write)})"
        )
