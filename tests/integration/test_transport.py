"""Integration tests for the aiohttp transport — mocked session."""
from __future__ import annotations

from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from soroban_rpc.errors import TransportError
from soroban_rpc.rpc.transport import AiohttpTransport

URL = "https://soroban-testnet.example.com"
HEADERS = {"Content-Type": "application/json"}


def _mock_session(response_data: object = None, error: Exception | None = None):
    """Create a mock aiohttp session that returns given data or raises error."""
    mock_response = AsyncMock()
    mock_response.json = AsyncMock(return_value=response_data)
    mock_response.__aenter__ = AsyncMock(return_value=mock_response)
    mock_response.__aexit__ = AsyncMock(return_value=None)

    mock_session = AsyncMock()
    if error:
        mock_session.post = MagicMock(side_effect=error)
    else:
        mock_session.post = MagicMock(return_value=mock_response)
    mock_session.__aenter__ = AsyncMock(return_value=mock_session)
    mock_session.__aexit__ = AsyncMock(return_value=None)

    return mock_session


class TestPostJson:
    @pytest.mark.asyncio
    async def test_successful_call(self) -> None:
        mock_session = _mock_session({"jsonrpc": "2.0", "result": {"status": "healthy"}})
        payload = {"jsonrpc": "2.0", "method": "getHealth", "id": 1}

        with patch("soroban_rpc.rpc.transport.aiohttp.ClientSession", return_value=mock_session):
            with patch("soroban_rpc.rpc.transport.aiohttp.TCPConnector"):
                result = await AiohttpTransport(timeout=5).post_json(URL, payload, HEADERS)

        assert result == {"jsonrpc": "2.0", "result": {"status": "healthy"}}
        _, kwargs = mock_session.post.call_args
        assert kwargs["json"] == payload
        assert kwargs["headers"] == HEADERS

    @pytest.mark.asyncio
    async def test_error_body_is_returned_untouched(self) -> None:
        body = {"jsonrpc": "2.0", "error": {"code": -32000, "message": "bad"}}
        mock_session = _mock_session(body)

        with patch("soroban_rpc.rpc.transport.aiohttp.ClientSession", return_value=mock_session):
            with patch("soroban_rpc.rpc.transport.aiohttp.TCPConnector"):
                result = await AiohttpTransport().post_json(URL, {}, HEADERS)

        assert result == body

    @pytest.mark.asyncio
    async def test_connection_error_raises_transport_error(self) -> None:
        mock_session = _mock_session(error=ConnectionError("down"))

        with patch("soroban_rpc.rpc.transport.aiohttp.ClientSession", return_value=mock_session):
            with patch("soroban_rpc.rpc.transport.aiohttp.TCPConnector"):
                with pytest.raises(TransportError, match="down") as exc_info:
                    await AiohttpTransport().post_json(URL, {}, HEADERS)

        assert isinstance(exc_info.value.__cause__, ConnectionError)

    @pytest.mark.asyncio
    async def test_non_object_json(self) -> None:
        mock_session = _mock_session([1, 2])

        with patch("soroban_rpc.rpc.transport.aiohttp.ClientSession", return_value=mock_session):
            with patch("soroban_rpc.rpc.transport.aiohttp.TCPConnector"):
                with pytest.raises(TransportError, match="non-object"):
                    await AiohttpTransport().post_json(URL, {}, HEADERS)
