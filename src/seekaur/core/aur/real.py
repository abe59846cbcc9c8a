"""Production implementation of AUR operations."""

import logging

import httpx

from seekaur.core.aur.abc import Aur
from seekaur.core.aur.errors import NetworkError
from seekaur.core.aur.parsing import parse_rpc_response
from seekaur.core.aur.types import RpcResponse, TextResponse

logger = logging.getLogger(__name__)


class RealAur(Aur):
    """Production implementation using httpx.

    Every call opens and closes its own client; nothing is pooled between
    calls and no retries are attempted.
    """

    def __init__(self, base_url: str, transport: httpx.BaseTransport | None = None) -> None:
        """Initialize RealAur.

        Args:
            base_url: AUR origin that request paths are resolved against
            transport: Optional httpx transport (tests pass httpx.MockTransport)
        """
        self._base_url = httpx.URL(base_url)
        self._transport = transport

    def _get(self, url: httpx.URL | str) -> httpx.Response:
        logger.debug("GET %s", url)
        try:
            with httpx.Client(transport=self._transport) as client:
                response = client.get(url)
        except httpx.TransportError as e:
            raise NetworkError(f"Failed to reach {url}: {e}") from e
        logger.debug("GET %s -> %d (%d bytes)", url, response.status_code, len(response.content))
        return response

    def rpc(self, request_path: str) -> RpcResponse:
        """Perform an RPC request against the configured origin.

        The HTTP status is not inspected; the body must decode as an RPC
        envelope either way.
        """
        response = self._get(self._base_url.join(request_path))
        result = parse_rpc_response(response.text)
        logger.debug("RPC %s returned %d result(s)", result.type, len(result.results))
        return result

    def get_text(self, url: str) -> TextResponse:
        response = self._get(url)
        if not response.is_success:
            logger.warning("GET %s returned HTTP %d", url, response.status_code)
        return TextResponse(url=url, status_code=response.status_code, text=response.text)
