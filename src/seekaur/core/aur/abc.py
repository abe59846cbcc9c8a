"""Abstract base class for AUR operations."""

from abc import ABC, abstractmethod

from seekaur.core.aur.types import RpcResponse, TextResponse


class Aur(ABC):
    """Abstract interface for AUR operations.

    All implementations (real and fake) must implement this interface.
    """

    @abstractmethod
    def rpc(self, request_path: str) -> RpcResponse:
        """Perform an RPC request and decode its envelope.

        Args:
            request_path: Path plus query string relative to the AUR origin,
                with every dynamic segment already escaped
                (e.g. "/rpc.php?type=search&arg=jquery")

        Returns:
            RpcResponse with records in the order the server sent them

        Raises:
            NetworkError: If the server could not be reached
            DecodeError: If the body is not a valid RPC envelope
            RpcError: If the server answered with an error envelope
        """
        ...

    @abstractmethod
    def get_text(self, url: str) -> TextResponse:
        """Fetch an absolute URL and return its body unchanged.

        The HTTP status is reported but never raised on.

        Raises:
            NetworkError: If the server could not be reached
        """
        ...
