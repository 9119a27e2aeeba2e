"""
Unified Square client that owns the configuration and HTTP transport.

Resource clients share the same configuration and session by reference.
"""

import logging
from typing import Optional

import aiohttp

from square_customers.core.config import Configuration, get_settings

from .base_client import HttpClient
from .customers_client import CustomersApi

logger = logging.getLogger(__name__)


class SquareClient:
    """
    Entry point for the Square API.

    Usage:
        async with SquareClient() as client:
            response = await client.customers.retrieve_customer("abc")
    """

    def __init__(
        self,
        config: Optional[Configuration] = None,
        session: Optional[aiohttp.ClientSession] = None,
    ):
        """
        Initialize the client.

        Args:
            config: Client configuration (defaults to one built from environment settings)
            session: Optional externally managed aiohttp session
        """
        self.config = config or Configuration.from_settings(get_settings())
        self.http_client = HttpClient(self.config, session=session)
        self.customers = CustomersApi(self.config, self.http_client)

    async def initialize(self):
        """Open the shared HTTP session."""
        await self.http_client.initialize()
        logger.info(f"✅ Square client ready ({self.config.environment.value})")

    async def close(self):
        """Close the shared HTTP session."""
        await self.http_client.close()

    async def __aenter__(self) -> "SquareClient":
        await self.initialize()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.close()

    def __repr__(self):
        return (
            f"SquareClient("
            f"environment='{self.config.environment.value}', "
            f"base_url='{self.config.get_base_url()}')"
        )
