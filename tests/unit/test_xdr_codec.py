"""Unit tests for the base64 XDR adapter."""
from __future__ import annotations

import pytest
from stellar_sdk import scval
from stellar_sdk import xdr as stellar_xdr

from soroban_rpc import xdr_codec
from soroban_rpc.errors import MalformedPayload
from tests.xdr_samples import contract_code_key, contract_data_key, footprint


class TestDecode:
    def test_decodes_scval(self) -> None:
        encoded = scval.to_uint32(12).to_xdr()
        assert xdr_codec.decode(stellar_xdr.SCVal, encoded) == scval.to_uint32(12)

    def test_round_trip_is_byte_stable(self) -> None:
        encoded = footprint([contract_code_key()], [contract_data_key()]).to_xdr()
        decoded = xdr_codec.decode(stellar_xdr.LedgerFootprint, encoded)
        assert xdr_codec.encode(decoded) == encoded

    def test_invalid_base64(self) -> None:
        with pytest.raises(MalformedPayload):
            xdr_codec.decode(stellar_xdr.SCVal, "not base64!!")

    def test_truncated_record(self) -> None:
        with pytest.raises(MalformedPayload, match="LedgerKey"):
            xdr_codec.decode(stellar_xdr.LedgerKey, "AAAA")


class TestDecodeOptional:
    @pytest.mark.parametrize("value", [None, "", "   "])
    def test_blank_is_none(self, value: str | None) -> None:
        assert xdr_codec.decode_optional(stellar_xdr.SCVal, value) is None

    def test_present(self) -> None:
        encoded = scval.to_bytes(b"\x01\x02").to_xdr()
        assert xdr_codec.decode_optional(stellar_xdr.SCVal, encoded) == scval.to_bytes(
            b"\x01\x02"
        )
