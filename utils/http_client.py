"""
HTTP client utilities with connection pooling.
Provides the reusable httpx client used for Azure OpenAI calls.
"""
import httpx
from config import Config


class HTTPClientManager:
    """Manages the shared httpx client with connection pooling."""

    _azure_client: httpx.AsyncClient | None = None

    @classmethod
    def get_azure_client(cls) -> httpx.AsyncClient:
        """
        Get or create the shared httpx client for the completion endpoint.

        Features:
        - Connection pooling (reuses TCP connections)
        - No request deadline, completions can take a long time

        Returns:
            Configured httpx.AsyncClient for upstream calls
        """
        if cls._azure_client is None:
            limits = httpx.Limits(
                max_connections=100,
                max_keepalive_connections=10,
                keepalive_expiry=60.0
            )

            cls._azure_client = httpx.AsyncClient(
                timeout=Config.UPSTREAM_TIMEOUT,
                limits=limits,
                http2=True
            )

        return cls._azure_client

    @classmethod
    async def close_all(cls) -> None:
        """
        Close the managed client and clean up connections.
        """
        if cls._azure_client is not None:
            await cls._azure_client.aclose()
            cls._azure_client = None
