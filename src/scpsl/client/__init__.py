"""HTTP client module for the SCP: Secret Laboratory API.

Usage:
    from scpsl.client import ScpslHTTPClient

    async with ScpslHTTPClient() as client:
        response = await client.get_server_info(parameters)
        ip = await client.get_ip()
"""

from scpsl.client.http_client import (
    IPAddress,
    ScpslHTTPClient,
    get_ip,
    get_server_info,
)
from scpsl.exceptions import (
    AddressParseError,
    InvalidRequestError,
    ResponseDecodeError,
    ScpslConnectionError,
    ScpslError,
    ScpslHTTPStatusError,
    ScpslTimeoutError,
)

__all__ = [
    "ScpslHTTPClient",
    "IPAddress",
    "get_server_info",
    "get_ip",
    "ScpslError",
    "InvalidRequestError",
    "ScpslConnectionError",
    "ScpslTimeoutError",
    "ScpslHTTPStatusError",
    "ResponseDecodeError",
    "AddressParseError",
]
