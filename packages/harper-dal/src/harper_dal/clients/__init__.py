"""HTTP client implementations.

Each client module exports a `Client` alias for its main class.

Available clients:
- httpx_client: synchronous client over `httpx.Client`
"""

from harper_dal.clients import httpx_client

__all__ = [
    "httpx_client",
]
