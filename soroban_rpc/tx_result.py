"""Pull the contract invocation's return value out of a ``getTransaction`` reply.

The operation results come from ``resultXdr`` and the returned ``SCVal`` from
the ``v3`` Soroban section of ``resultMetaXdr``. Absence of either yields
``None``; a metadata version other than 3 raises ``UnsupportedMetaVersion``.
"""
from __future__ import annotations

import logging

from stellar_sdk import xdr as stellar_xdr

from .errors import UnsupportedMetaVersion
from .models import GetTransactionResponse, GetTransactionStatus

logger = logging.getLogger(__name__)

SUPPORTED_META_VERSION = 3


def _operation_results(
    tx_result: stellar_xdr.TransactionResult,
) -> list[stellar_xdr.OperationResult] | None:
    results = tx_result.result.results
    inner_pair = tx_result.result.inner_result_pair
    if results is None and inner_pair is not None:
        # Fee bump: the operations live in the wrapped inner transaction.
        results = inner_pair.result.result.results
    return results


def _is_invoke_success(op_result: stellar_xdr.OperationResult) -> bool:
    tr = op_result.tr
    if tr is None or tr.invoke_host_function_result is None:
        return False
    return (
        tr.invoke_host_function_result.code
        == stellar_xdr.InvokeHostFunctionResultCode.INVOKE_HOST_FUNCTION_SUCCESS
    )


def extract_success_value(
    response: GetTransactionResponse,
) -> stellar_xdr.SCVal | None:
    """Return value of the first operation of a successful invocation.

    Returns ``None`` for error responses, any status other than SUCCESS,
    missing result or metadata XDR, or a first operation that is not a
    successful host function invocation.

    Raises:
        UnsupportedMetaVersion: if the metadata is not ``TransactionMeta`` v3.
        MalformedPayload: if the XDR fields cannot be decoded.
    """
    result = response.result
    if response.is_error or result is None:
        return None
    if result.status != GetTransactionStatus.SUCCESS.value:
        return None
    meta = result.result_meta
    if meta is None:
        return None
    if meta.v != SUPPORTED_META_VERSION:
        raise UnsupportedMetaVersion(meta.v)

    tx_result = result.transaction_result
    if tx_result is None:
        logger.debug("No resultXdr in SUCCESS response, cannot locate operation")
        return None

    op_results = _operation_results(tx_result)
    if not op_results:
        return None
    if not _is_invoke_success(op_results[0]):
        return None

    soroban_meta = meta.v3.soroban_meta
    if soroban_meta is None:
        return None
    return soroban_meta.return_value


def extract_binary_id(response: GetTransactionResponse) -> str | None:
    """Hex of the success value when it is an ``SCV_BYTES`` value, else ``None``.

    Uploading contract code and creating a contract both end up here: the
    value alone does not say which of the two produced it.
    """
    value = extract_success_value(response)
    if value is None or value.type != stellar_xdr.SCValType.SCV_BYTES:
        return None
    if value.bytes is None:
        return None
    return value.bytes.sc_bytes.hex()


def wasm_id(response: GetTransactionResponse) -> str | None:
    """Wasm id of a contract code upload. Same extraction as ``contract_id``."""
    return extract_binary_id(response)


def contract_id(response: GetTransactionResponse) -> str | None:
    """Id of a created contract. Same extraction as ``wasm_id``."""
    return extract_binary_id(response)
