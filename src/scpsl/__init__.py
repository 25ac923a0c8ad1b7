"""Async client for the SCP: Secret Laboratory web API.

Official API reference: https://api.scpslgame.com

Usage:
    from scpsl import RequestParameters, ScpslHTTPClient, DEFAULT_SERVER_INFO_URL

    parameters = (
        RequestParameters.builder()
        .url(DEFAULT_SERVER_INFO_URL)
        .id(account_id)
        .key(api_key)
        .players()
        .build()
    )
    async with ScpslHTTPClient() as client:
        response = await client.get_server_info(parameters)
"""

from scpsl.client import ScpslHTTPClient, get_ip, get_server_info
from scpsl.config import ClientConfig
from scpsl.constants import DEFAULT_IP_URL, DEFAULT_SERVER_INFO_URL
from scpsl.exceptions import (
    AddressParseError,
    InvalidRequestError,
    ResponseDecodeError,
    ScpslConnectionError,
    ScpslError,
    ScpslHTTPStatusError,
    ScpslTimeoutError,
)
from scpsl.models import (
    ErrorResponse,
    Player,
    PlayersCount,
    RequestParameters,
    RequestParametersBuilder,
    Response,
    ServerInfo,
    SuccessResponse,
    parse_response,
)

__version__ = "0.1.0"

__all__ = [
    "ClientConfig",
    "DEFAULT_IP_URL",
    "DEFAULT_SERVER_INFO_URL",
    "ScpslHTTPClient",
    "get_ip",
    "get_server_info",
    "RequestParameters",
    "RequestParametersBuilder",
    "Response",
    "SuccessResponse",
    "ErrorResponse",
    "ServerInfo",
    "PlayersCount",
    "Player",
    "parse_response",
    "ScpslError",
    "InvalidRequestError",
    "ScpslConnectionError",
    "ScpslTimeoutError",
    "ScpslHTTPStatusError",
    "ResponseDecodeError",
    "AddressParseError",
]
