"""
Base HTTP transport for the Square REST API.

This module provides the foundation for all Square resource clients:
session management, the per-verb request helpers and typed deserialization
of responses. Every call performs exactly one round trip; nothing is retried.
"""

import asyncio
import logging
import time
from dataclasses import dataclass, field
from typing import Dict, Optional, Type, TypeVar

import aiohttp
from aiohttp import ClientTimeout
from pydantic import BaseModel, ValidationError

from square_customers.core.config import Configuration
from square_customers.core.logging_config import log_api_call
from square_customers.schemas.common import ErrorResponse, SquareModel
from square_customers.utils.error_handler import (
    DeserializationException,
    SquareAPIException,
    SquareConnectionException,
    log_error,
)

logger = logging.getLogger(__name__)

ResponseT = TypeVar("ResponseT", bound=BaseModel)


@dataclass(frozen=True)
class HttpResponse:
    """Status, headers and raw body of one completed request."""

    method: str
    url: str
    status: int
    body: str
    headers: Dict[str, str] = field(default_factory=dict)

    def is_success(self) -> bool:
        return 200 <= self.status < 300

    def deserialize(self, model: Type[ResponseT]) -> ResponseT:
        """
        Turn the response into the expected model.

        Args:
            model: Pydantic model of the success payload

        Returns:
            The parsed success payload

        Raises:
            SquareAPIException: If the status is not 2xx
            DeserializationException: If a 2xx body does not match the model
        """
        if not self.is_success():
            raise self._to_api_exception()

        try:
            return model.model_validate_json(self.body or "{}")
        except ValidationError as e:
            raise DeserializationException(
                f"Failed to deserialize {model.__name__} from {self.method} {self.url}: {e}",
                model_name=model.__name__,
                raw_body=self.body,
            ) from e

    def _to_api_exception(self) -> SquareAPIException:
        try:
            errors = ErrorResponse.model_validate_json(self.body or "{}").errors
        except ValidationError:
            # Not a Square error body (proxy page, empty reply...)
            errors = []

        if errors:
            summary = "; ".join(
                f"{error.code}: {error.detail}" if error.detail else error.code for error in errors
            )
        else:
            summary = self.body[:200] if self.body else "no response body"

        return SquareAPIException(
            f"HTTP {self.status} from {self.method} {self.url}: {summary}",
            api_response_code=self.status,
            endpoint=self.url,
            method=self.method,
            errors=errors,
        )


class HttpClient:
    """
    Thin asynchronous HTTP transport shared by all resource clients.

    One aiohttp session is shared by reference; the caller controls
    concurrency by awaiting calls sequentially or concurrently.
    """

    def __init__(self, config: Configuration, session: Optional[aiohttp.ClientSession] = None):
        """
        Initialize the transport.

        Args:
            config: Client configuration
            session: Externally managed session; when given, close() leaves it open
        """
        self.config = config
        self.session = session
        self._owns_session = session is None

    async def initialize(self):
        """
        Create the HTTP session if one was not injected.

        Raises:
            SquareConnectionException: If the session cannot be created
        """
        if self.session is not None:
            return

        try:
            timeout = ClientTimeout(total=self.config.timeout, connect=self.config.connect_timeout)
            self.session = aiohttp.ClientSession(timeout=timeout)
            self._owns_session = True
            logger.info(f"Initialized Square HTTP client for {self.config.get_base_url()}")
        except Exception as e:
            logger.error(f"❌ Failed to initialize Square HTTP client: {e}")
            raise SquareConnectionException(f"Client initialization failed: {str(e)}") from e

    async def close(self):
        """Close the HTTP session if this client created it."""
        if self.session and self._owns_session:
            await self.session.close()
            logger.info("Square HTTP client closed")
        self.session = None

    async def get(self, url: str) -> HttpResponse:
        return await self._request("GET", url)

    async def post(self, url: str, body: SquareModel) -> HttpResponse:
        return await self._request("POST", url, body)

    async def put(self, url: str, body: SquareModel) -> HttpResponse:
        return await self._request("PUT", url, body)

    async def delete(self, url: str) -> HttpResponse:
        return await self._request("DELETE", url)

    async def empty_put(self, url: str) -> HttpResponse:
        """PUT without a request body."""
        return await self._request("PUT", url)

    async def _request(self, method: str, url: str, body: Optional[SquareModel] = None) -> HttpResponse:
        """
        Perform a single request.

        Args:
            method: HTTP verb
            url: Absolute URL
            body: Optional model serialized as the JSON body

        Returns:
            HttpResponse: The completed response, whatever its status

        Raises:
            SquareConnectionException: On network errors, timeouts, or if not initialized
            DeserializationException: If a 2xx body cannot be decoded as text
        """
        if not self.session:
            raise SquareConnectionException(
                "Client not initialized. Call initialize() first.", endpoint=url, method=method
            )

        payload = body.to_payload() if body is not None else None
        start_time = time.monotonic()

        try:
            async with self.session.request(
                method, url, json=payload, headers=self.config.get_headers()
            ) as response:
                raw = await response.read()
                status = response.status
                headers = dict(response.headers)
                charset = response.charset or "utf-8"

        except asyncio.TimeoutError as e:
            exc = SquareConnectionException(f"Request timed out: {method} {url}", endpoint=url, method=method)
            log_error(exc)
            raise exc from e

        except aiohttp.ClientError as e:
            exc = SquareConnectionException(f"Network error: {str(e)}", endpoint=url, method=method)
            log_error(exc)
            raise exc from e

        log_api_call(method, url, status, time.monotonic() - start_time)

        try:
            text = raw.decode(charset)
        except (UnicodeDecodeError, LookupError) as e:
            lossy = raw.decode("utf-8", "replace")
            if 200 <= status < 300:
                raise DeserializationException(
                    f"Response body from {method} {url} is not valid {charset}: {e}",
                    raw_body=lossy,
                ) from e
            # Error bodies are kept so the status still surfaces as SquareAPIException
            text = lossy

        return HttpResponse(method=method, url=url, status=status, body=text, headers=headers)

    def __repr__(self):
        return (
            f"HttpClient("
            f"base_url='{self.config.get_base_url()}', "
            f"initialized={self.session is not None})"
        )
