"""aiohttp transport for JSON-RPC POST requests."""
import logging
import ssl
from typing import Any

import aiohttp
import certifi

from ..errors import TransportError

logger = logging.getLogger(__name__)


class AiohttpTransport:
    """POSTs JSON-RPC payloads over HTTPS using certifi's CA bundle.

    No retries: a failed exchange is reported once as ``TransportError``.
    """

    def __init__(self, timeout: int = 30) -> None:
        self.timeout = timeout

    async def post_json(
        self, url: str, payload: dict[str, Any], headers: dict[str, str]
    ) -> dict[str, Any]:
        """Send ``payload`` to ``url`` and return the decoded JSON reply."""
        ssl_context = ssl.create_default_context(cafile=certifi.where())

        try:
            connector = aiohttp.TCPConnector(ssl=ssl_context)
            async with aiohttp.ClientSession(connector=connector) as session:
                async with session.post(
                    url,
                    json=payload,
                    headers=headers,
                    timeout=aiohttp.ClientTimeout(total=self.timeout),
                ) as response:
                    result = await response.json(content_type=None)
        except Exception as e:
            logger.warning("RPC endpoint %s failed: %s", url, e)
            raise TransportError(f"RPC request to {url} failed: {e}") from e

        if not isinstance(result, dict):
            raise TransportError(f"RPC endpoint {url} returned non-object JSON")
        return result
