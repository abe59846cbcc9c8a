"""In-memory fake implementation of AUR operations for testing."""

from seekaur.core.aur.abc import Aur
from seekaur.core.aur.errors import NetworkError
from seekaur.core.aur.types import RpcResponse, TextResponse


class FakeAur(Aur):
    """In-memory fake implementation for testing.

    All state is provided via constructor using keyword arguments. Requests
    with no canned answer raise NetworkError, so a test that forgets to
    configure a response fails loudly.
    """

    def __init__(
        self,
        *,
        rpc_responses: dict[str, RpcResponse] | None = None,
        texts: dict[str, TextResponse] | None = None,
        unreachable: bool = False,
    ) -> None:
        """Create FakeAur with pre-configured responses.

        Args:
            rpc_responses: Mapping of request path -> RpcResponse
            texts: Mapping of absolute URL -> TextResponse
            unreachable: If True, every call raises NetworkError
        """
        self._rpc_responses = rpc_responses or {}
        self._texts = texts or {}
        self._unreachable = unreachable
        self._rpc_calls: list[str] = []
        self._text_calls: list[str] = []

    @property
    def rpc_calls(self) -> list[str]:
        """Read-only access to requested RPC paths for test assertions."""
        return self._rpc_calls

    @property
    def text_calls(self) -> list[str]:
        """Read-only access to fetched URLs for test assertions."""
        return self._text_calls

    def rpc(self, request_path: str) -> RpcResponse:
        self._rpc_calls.append(request_path)
        if self._unreachable:
            raise NetworkError(f"Failed to reach {request_path}: connection refused")
        if request_path not in self._rpc_responses:
            raise NetworkError(f"No canned RPC response for {request_path}")
        return self._rpc_responses[request_path]

    def get_text(self, url: str) -> TextResponse:
        self._text_calls.append(url)
        if self._unreachable:
            raise NetworkError(f"Failed to reach {url}: connection refused")
        if url not in self._texts:
            raise NetworkError(f"No canned response for {url}")
        return self._texts[url]
