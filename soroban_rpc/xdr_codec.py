"""Base64 <-> XDR record adapter — no I/O."""
from __future__ import annotations

from typing import Any, TypeVar

from .errors import MalformedPayload

T = TypeVar("T")


def decode(record_type: type[T], value: str) -> T:
    """Decode a base64 XDR string into an instance of ``record_type``.

    Raises:
        MalformedPayload: if ``value`` is not valid base64 or the bytes do
            not parse as ``record_type``.
    """
    try:
        return record_type.from_xdr(value)  # type: ignore[attr-defined]
    except Exception as e:
        raise MalformedPayload(
            f"Cannot decode {record_type.__name__} from {value!r}: {e}"
        ) from e


def encode(record: Any) -> str:
    """Encode an XDR record as a base64 string."""
    return record.to_xdr()


def decode_optional(record_type: type[T], value: str | None) -> T | None:
    """Like :func:`decode`, but ``None`` and blank strings yield ``None``."""
    if value is None or not value.strip():
        return None
    return decode(record_type, value)
