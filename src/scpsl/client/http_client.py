"""Async HTTP client for the SCP: Secret Laboratory web API.

This module wraps ``httpx.AsyncClient`` with typed requests and responses
for the ``serverinfo`` and ``ip`` endpoints. Every operation issues exactly
one GET. Nothing is retried: the API enforces a per-account cooldown, and a
blind retry would only burn it.
"""

from __future__ import annotations

import ipaddress
import logging
from typing import TYPE_CHECKING

from httpx import (
    URL,
    AsyncBaseTransport,
    AsyncClient,
    HTTPError,
    Response,
    TimeoutException,
)

from scpsl.constants import DEFAULT_IP_URL, DEFAULT_TIMEOUT, DEFAULT_USER_AGENT
from scpsl.exceptions import (
    AddressParseError,
    ScpslConnectionError,
    ScpslHTTPStatusError,
    ScpslTimeoutError,
)
from scpsl.models import (
    RawResponse,
    RequestParameters,
    decode_raw_response,
    response_from_raw,
)
from scpsl.models import Response as ServerInfoResponse

if TYPE_CHECKING:
    from scpsl.config import ClientConfig

logger = logging.getLogger(__name__)

IPAddress = ipaddress.IPv4Address | ipaddress.IPv6Address


class ScpslHTTPClient:
    """Async client for the SCP: Secret Laboratory API.

    The client keeps one ``httpx.AsyncClient`` for connection pooling. It
    can be reused for any number of calls; each call is independent.

    Example:
        parameters = (
            RequestParameters.builder()
            .url(DEFAULT_SERVER_INFO_URL)
            .id(12345)
            .key("abc")
            .players()
            .build()
        )
        async with ScpslHTTPClient() as client:
            response = await client.get_server_info(parameters)
    """

    def __init__(
        self,
        timeout: float = DEFAULT_TIMEOUT,
        user_agent: str = DEFAULT_USER_AGENT,
        transport: AsyncBaseTransport | None = None,
    ):
        """Initialize the HTTP client.

        Args:
            timeout: Request timeout in seconds (default: 10.0)
            user_agent: Value of the User-Agent header
            transport: Optional httpx transport, mainly for tests
        """
        self.timeout = timeout
        self.user_agent = user_agent
        self._transport = transport
        self._client: AsyncClient | None = None

    @classmethod
    def from_config(
        cls,
        config: ClientConfig,
        transport: AsyncBaseTransport | None = None,
    ) -> ScpslHTTPClient:
        return cls(timeout=config.timeout, transport=transport)

    async def __aenter__(self) -> ScpslHTTPClient:
        """Async context manager entry."""
        await self.connect()
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: object,
    ) -> None:
        """Async context manager exit."""
        await self.close()

    async def connect(self) -> None:
        """Create the underlying httpx.AsyncClient if it does not exist yet."""
        if self._client is None:
            self._client = AsyncClient(
                timeout=self.timeout,
                headers={"User-Agent": self.user_agent},
                transport=self._transport,
            )
            logger.debug("HTTP client opened (timeout=%.1fs)", self.timeout)

    async def close(self) -> None:
        """Close the HTTP client and release resources."""
        if self._client is not None:
            await self._client.aclose()
            self._client = None
            logger.debug("HTTP client closed")

    # =========================================================================
    # Public API Methods
    # =========================================================================

    async def get_raw_server_info(self, parameters: RequestParameters) -> RawResponse:
        """Fetch ``serverinfo`` and return it in wire form.

        Args:
            parameters: Validated request descriptor.

        Returns:
            The response exactly as the API shaped it.

        Raises:
            ScpslConnectionError: If the request fails or times out.
            ScpslHTTPStatusError: If the API answers with a non-2xx status.
            ResponseDecodeError: If the body does not match the schema.
        """
        logger.debug(
            "Requesting server info from %s with %s",
            parameters.url,
            parameters.redacted_query_params(),
        )
        response = await self._get(parameters.url, parameters.to_query_params())
        return decode_raw_response(response.content)

    async def get_server_info(self, parameters: RequestParameters) -> ServerInfoResponse:
        """Fetch info about the account's servers.

        Args:
            parameters: Validated request descriptor.

        Returns:
            ``SuccessResponse`` with the servers, or ``ErrorResponse`` when
            the API reports an error (bad key, cooldown, ...).

        Raises:
            ScpslConnectionError: If the request fails or times out.
            ScpslHTTPStatusError: If the API answers with a non-2xx status.
            ResponseDecodeError: If the body does not match the schema.
        """
        raw = await self.get_raw_server_info(parameters)
        response = response_from_raw(raw)
        if response.is_success:
            logger.debug("Received %d server(s)", len(response.servers))
        else:
            logger.info("API returned error: %s", response.error)
        return response

    async def get_ip(self, url: str = DEFAULT_IP_URL) -> IPAddress:
        """Return the caller's public IP address as seen by the API.

        Raises:
            ScpslConnectionError: If the request fails or times out.
            ScpslHTTPStatusError: If the API answers with a non-2xx status.
            AddressParseError: If the body is not an IP address.
        """
        response = await self._get(url)
        text = response.text.strip()
        try:
            return ipaddress.ip_address(text)
        except ValueError as e:
            raise AddressParseError(
                f"Could not parse IP address from response: {text!r}"
            ) from e

    # =========================================================================
    # Internal HTTP Methods
    # =========================================================================

    async def _get(self, url: str, params: dict[str, str] | None = None) -> Response:
        """Execute a single GET request.

        ``params`` are appended to any query string already on ``url``.

        Raises:
            ScpslConnectionError: If the client is not connected or the
                request fails.
            ScpslTimeoutError: If the request times out.
            ScpslHTTPStatusError: If the status code is not 2xx.
        """
        if self._client is None:
            raise ScpslConnectionError("Client not connected. Call connect() first.")

        target = URL(url)
        if params:
            target = target.copy_merge_params(params)

        logger.debug("GET %s", url)
        try:
            response = await self._client.request("GET", target)
        except TimeoutException as e:
            logger.warning("Request timeout for %s: %s", url, e)
            raise ScpslTimeoutError(f"Request timeout: {e}") from e
        except HTTPError as e:
            logger.warning("HTTP error for %s: %s", url, e)
            raise ScpslConnectionError(f"HTTP error: {e}") from e

        if not 200 <= response.status_code < 300:
            body = response.text
            logger.warning("API error %d: %s", response.status_code, body)
            raise ScpslHTTPStatusError(
                f"API returned HTTP {response.status_code}",
                status_code=response.status_code,
                body=body,
            )

        return response


async def get_server_info(
    parameters: RequestParameters,
    *,
    timeout: float = DEFAULT_TIMEOUT,
    transport: AsyncBaseTransport | None = None,
) -> ServerInfoResponse:
    """Fetch server info with a short-lived client."""
    async with ScpslHTTPClient(timeout=timeout, transport=transport) as client:
        return await client.get_server_info(parameters)


async def get_ip(
    url: str = DEFAULT_IP_URL,
    *,
    timeout: float = DEFAULT_TIMEOUT,
    transport: AsyncBaseTransport | None = None,
) -> IPAddress:
    """Fetch the caller's public IP with a short-lived client."""
    async with ScpslHTTPClient(timeout=timeout, transport=transport) as client:
        return await client.get_ip(url)
