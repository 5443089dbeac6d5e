"""HTTP client factory for connection pooling."""
import httpx
import logging
from typing import Optional

logger = logging.getLogger(__name__)


def create_http_client(
    timeout: float = 10.0,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> httpx.AsyncClient:
    """
    Create a pooled async HTTP client.

    One client is created per process by the DI container and reused by
    every outbound call so keep-alive connections are shared. The owner is
    responsible for closing it with close_http_client().

    Args:
        timeout: Per-request timeout in seconds
        transport: Optional transport override (used by tests)

    Returns:
        AsyncClient instance
    """
    client = httpx.AsyncClient(
        timeout=timeout,
        limits=httpx.Limits(
            max_keepalive_connections=20,
            max_connections=100,
            keepalive_expiry=30.0,
        ),
        transport=transport,
    )
    logger.info("Created shared HTTP client for connection pooling")
    return client


async def close_http_client(client: Optional[httpx.AsyncClient]) -> None:
    """
    Close an HTTP client created by create_http_client (call on shutdown).
    """
    if client is not None and not client.is_closed:
        await client.aclose()
        logger.info("Closed shared HTTP client")
